"""Coarse classification of values for the traversal engine"""

import dataclasses
import datetime
import enum
import uuid
from collections.abc import Mapping, Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any

from pydantic import BaseModel

PRIMITIVE_TYPES = (
    str,
    bool,
    int,
    float,
    Decimal,
    Fraction,
    enum.Enum,
    uuid.UUID,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
)

# Sequences that are leaves (or unsupported) rather than indexed collections
NON_SLICE_SEQUENCES = (str, bytes, bytearray, memoryview)


class Kind(enum.Enum):
    """What the traversal engine should do with a value"""

    INVALID = "invalid"
    PTR = "ptr"
    STRUCT = "struct"
    SLICE = "slice"
    MAP = "map"
    PRIMITIVE = "primitive"
    UNSUPPORTED = "unsupported"


def is_struct_type(typ: type) -> bool:
    """True for types whose declared fields the encoder can walk"""
    if dataclasses.is_dataclass(typ):
        return True
    if issubclass(typ, BaseModel):
        return True
    return issubclass(typ, tuple) and hasattr(typ, "_fields")


def extract_type(value: Any) -> tuple[Any, Kind]:
    """
    Classify a value.

    A class object stands in for a typed nil: it names a type but carries
    no value, so it is reported as PTR.

    Parameters:
        value: any python value

    Returns: the value and its Kind
    """
    if value is None:
        return value, Kind.INVALID
    if isinstance(value, type):
        return value, Kind.PTR
    if isinstance(value, PRIMITIVE_TYPES):
        return value, Kind.PRIMITIVE
    if is_struct_type(type(value)):
        return value, Kind.STRUCT
    if isinstance(value, Mapping):
        return value, Kind.MAP
    if isinstance(value, Sequence) and not isinstance(value, NON_SLICE_SEQUENCES):
        return value, Kind.SLICE
    return value, Kind.UNSUPPORTED
