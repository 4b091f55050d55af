"""Model for encoded form values"""

from urllib.parse import urlencode


class FormValues(dict):
    """
    Form keys mapped to their values. A key may carry several values,
    so each entry is a list of strings.
    """

    def add(self, key: str, value: str) -> None:
        """Append value to the values already stored under key"""
        self.setdefault(key, []).append(value)

    def get_first(self, key: str, default: str = "") -> str:
        """
        Parameters:
            key: the form key
            default: returned when the key has no values

        Returns: the first value stored under key
        """
        values = self.get(key)
        if not values:
            return default
        return values[0]

    def encode(self) -> str:
        """
        Encode the values in application/x-www-form-urlencoded form,
        sorted by key: key1=val1&key1=val2&key2=val3

        Returns: the string of encoded data
        """
        return urlencode(sorted(self.items()), doseq=True)
