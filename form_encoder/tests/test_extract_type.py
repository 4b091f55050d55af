"""Tests for extract_type"""

import dataclasses
import datetime
from collections import OrderedDict
from typing import NamedTuple

import pytest
from pydantic import BaseModel

from form_encoder.util.extract_type import Kind, extract_type


@dataclasses.dataclass
class Pet:
    name: str


class Owner(BaseModel):
    name: str


class Pair(NamedTuple):
    left: int
    right: int


@pytest.mark.parametrize("value, kind", [
    (None, Kind.INVALID),
    (Pet, Kind.PTR),
    (Owner, Kind.PTR),
    (Pet("rex"), Kind.STRUCT),
    (Owner(name="al"), Kind.STRUCT),
    (Pair(1, 2), Kind.STRUCT),
    ({"a": 1}, Kind.MAP),
    (OrderedDict(a=1), Kind.MAP),
    ([1, 2], Kind.SLICE),
    ((1, 2), Kind.SLICE),
    (range(3), Kind.SLICE),
    ("a", Kind.PRIMITIVE),
    (1.5, Kind.PRIMITIVE),
    (datetime.datetime(2024, 1, 1), Kind.PRIMITIVE),
    (b"a", Kind.UNSUPPORTED),
    ({1, 2}, Kind.UNSUPPORTED),
    (object(), Kind.UNSUPPORTED),
])
def test_extract_type(value, kind):
    extracted, extracted_kind = extract_type(value)

    assert extracted is value
    assert extracted_kind is kind
