"""Incremental construction of form key paths such as a.b[2].c"""

NAMESPACE_SEPARATOR = "."
LEFT_BRACKET = "["
RIGHT_BRACKET = "]"


class Namespace:
    """
    A reusable path buffer.

    Children are appended as segments and removed again with truncate(),
    so one buffer serves a whole traversal:

        mark = namespace.mark()
        namespace.push_field("name")
        ...
        namespace.truncate(mark)
    """

    def __init__(self) -> None:
        self._segments: list[str] = []

    def __str__(self) -> str:
        return "".join(self._segments)

    def __repr__(self) -> str:
        return f"Namespace({str(self)!r})"

    def __bool__(self) -> bool:
        return bool(self._segments)

    def mark(self) -> int:
        """Returns: the current length, to be passed to truncate()"""
        return len(self._segments)

    def truncate(self, mark: int = 0) -> None:
        """Drop every segment pushed since mark was taken"""
        del self._segments[mark:]

    def push_field(self, name: str) -> None:
        """Append a named field, parent.name, with no separator at the root"""
        if self._segments:
            self._segments.append(NAMESPACE_SEPARATOR)
        self._segments.append(name)

    def push_index(self, idx: int) -> None:
        """Append a sequence element, parent[idx]"""
        self._segments.append(LEFT_BRACKET)
        self._segments.append(str(idx))
        self._segments.append(RIGHT_BRACKET)

    def push_key(self, key: str) -> None:
        """Append a mapping entry, parent[key], or the bare key at the root"""
        if not self._segments:
            self._segments.append(key)
            return
        self._segments.append(LEFT_BRACKET)
        self._segments.append(key)
        self._segments.append(RIGHT_BRACKET)
