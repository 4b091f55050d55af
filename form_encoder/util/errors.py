"""Exceptions raised while encoding form data"""

from typing import Iterator, Optional

FIELD_NAMESPACE = "Field Namespace:"
ERROR_TEXT = " ERROR:"


class FormEncoderError(Exception):
    """Base class for every error raised by form_encoder"""


class ConfigurationError(FormEncoderError):
    """An encoder was reconfigured after it started encoding"""


class InvalidEncodeError(FormEncoderError):
    """
    An invalid argument was passed to Encoder.encode.

    Parameters:
        type_: the rejected type, or None when the value itself was None
    """

    def __init__(self, type_: Optional[type] = None) -> None:
        self.type = type_
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.type is None:
            return "form: Encode(nil)"
        return f"form: Encode(nil {self.type.__qualname__})"


class UnsupportedTypeError(FormEncoderError):
    """A value of this type has no form representation"""

    def __init__(self, type_: type, what: str = "value") -> None:
        self.type = type_
        super().__init__(f"unsupported {what} type {type_.__qualname__}")


class MaxDepthError(FormEncoderError):
    """The value is nested deeper than the encoder allows"""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"maximum nesting depth of {max_depth} exceeded")


class EncodeErrors(FormEncoderError):
    """
    Every per-field error found while encoding a value, keyed by the
    namespace path that produced it. A path can hold several errors, e.g.
    one per unsupported key of the same mapping.

    The fields that did encode are still available on the exception:
        values: the partial FormValues output
        columns: the partial column order, when it was requested
    """

    def __init__(self, errors: dict, values=None, columns=None) -> None:
        self.errors: dict[str, list] = {
            path: [errs] if isinstance(errs, BaseException) else list(errs)
            for path, errs in errors.items()
        }
        self.values = values
        self.columns = columns
        super().__init__(str(self))

    def __getitem__(self, path: str) -> Exception:
        """Returns: the first error recorded for path"""
        return self.errors[path][0]

    def __contains__(self, path: object) -> bool:
        return path in self.errors

    def __iter__(self) -> Iterator[str]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def get_all(self, path: str) -> list:
        """Returns: every error recorded for path, in the order found"""
        return list(self.errors.get(path, []))

    def items(self) -> list[tuple[str, Exception]]:
        """Returns: (path, error) pairs, one per error, in the order they were found"""
        return [(path, err) for path, errs in self.errors.items() for err in errs]

    def __str__(self) -> str:
        lines = [f"{FIELD_NAMESPACE}{path}{ERROR_TEXT}{err}" for path, err in self.items()]
        return "\n".join(lines).strip()
