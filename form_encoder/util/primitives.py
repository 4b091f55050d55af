"""String forms of leaf values"""

import datetime
import enum
import math
from decimal import Decimal
from typing import Any


def format_float(value: float) -> str:
    """
    Shortest positional representation of a float, without exponent
    notation or a trailing ".0"

    Parameters:
        value: the float to format

    Returns: e.g. "30", "0.1", "0.0000001", "NaN", "+Inf"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def format_primitive(value: Any) -> str:
    """
    Convert a primitive leaf to its form string

    Parameters:
        value: a value classified as Kind.PRIMITIVE

    Returns: the string to put on the wire
    """
    # bool and enum checks come first: both can also be ints
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return format_primitive(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-Inf" if value.is_signed() else "+Inf"
        return format(value, "f")
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, datetime.timedelta):
        return format_float(value.total_seconds())
    return str(value)


def has_value(value: Any) -> bool:
    """False for the values an omitempty field leaves out"""
    if value is None:
        return False
    if isinstance(value, (bool, int, float, Decimal)):
        return value != 0
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) > 0
    return True
