"""Registry of user supplied conversions for specific types"""

from typing import Any, Callable, Optional, Sequence, Union

EncodeFunc = Callable[[Any], Union[str, Sequence[str]]]


class CustomTypeFuncs:
    """
    Maps an exact runtime type to the function that encodes it.

    An encode function takes the value and returns its form string, or a
    list of strings when the key should repeat. Raising marks the field as
    failed.
    """

    def __init__(self, funcs: Optional[dict] = None) -> None:
        self._funcs: dict[type, EncodeFunc] = dict(funcs or {})

    def __len__(self) -> int:
        return len(self._funcs)

    def __contains__(self, typ: object) -> bool:
        return typ in self._funcs

    def register(self, fn: EncodeFunc, *types: type) -> None:
        """
        Register fn against a number of types

        Parameters:
            fn: the encode function
            types: the exact types fn handles, or sample values of them.
                Subclasses are not matched.
        """
        for typ in types:
            if not isinstance(typ, type):
                typ = type(typ)
            self._funcs[typ] = fn

    def lookup(self, typ: type) -> Optional[EncodeFunc]:
        """Returns: the function registered for typ, or None"""
        return self._funcs.get(typ)

    def copy(self) -> "CustomTypeFuncs":
        return CustomTypeFuncs(self._funcs)
