"""Per-type field metadata, built once and shared by every encode call"""

import dataclasses
import logging
import threading
from typing import Any, Callable, NamedTuple, Optional

from pydantic import BaseModel

from form_encoder.models.config import EncoderConfig, Mode

logger = logging.getLogger(__name__)

IGNORE = "-"
OMIT_EMPTY = "omitempty"
ANONYMOUS = "anonymous"


class StructField(NamedTuple):
    """A declared field, as seen by a tag name function"""

    name: str
    annotation: Any
    metadata: dict
    anonymous: bool


class CachedField(NamedTuple):
    """How one field of a struct type is encoded"""

    idx: int
    attr: str
    name: str
    annotation: Any
    anonymous: bool
    omit_empty: bool
    custom_func: Optional[Callable]


class CachedStruct(NamedTuple):
    fields: tuple


def struct_fields(typ: type) -> list:
    """
    List the declared fields of a struct type in declaration order

    Parameters:
        typ: a dataclass, pydantic model or NamedTuple type

    Returns: a list of StructField
    """
    if dataclasses.is_dataclass(typ):
        return [
            StructField(
                name=fld.name,
                annotation=fld.type,
                metadata=dict(fld.metadata),
                anonymous=bool(fld.metadata.get(ANONYMOUS, False)),
            )
            for fld in dataclasses.fields(typ)
        ]
    if issubclass(typ, BaseModel):
        fields = []
        for name, info in typ.model_fields.items():
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            fields.append(StructField(
                name=name,
                annotation=info.annotation,
                metadata=dict(extra),
                anonymous=bool(extra.get(ANONYMOUS, False)),
            ))
        return fields
    annotations = getattr(typ, "__annotations__", {})
    return [
        StructField(name=name, annotation=annotations.get(name), metadata={}, anonymous=False)
        for name in typ._fields
    ]


class StructCache:
    """
    Maps struct types to their CachedStruct.

    Lookups read an immutable snapshot of the cache without locking. A miss
    takes the lock, checks again and publishes a new snapshot, so each type
    is parsed once even when several threads meet it at the same time.
    """

    def __init__(self, config: EncoderConfig) -> None:
        self.config = config
        self._cache: dict[type, CachedStruct] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, typ: type) -> CachedStruct:
        """
        Parameters:
            typ: the struct type

        Returns: the CachedStruct for typ, parsing it on first use
        """
        cached = self._cache.get(typ)
        if cached is not None:
            return cached
        with self._lock:
            cached = self._cache.get(typ)
            if cached is None:
                cached = self.parse_struct(typ)
                cache = dict(self._cache)
                cache[typ] = cached
                self._cache = cache
        return cached

    def parse_struct(self, typ: type) -> CachedStruct:
        """
        Resolve the form name of every field of typ

        Parameters:
            typ: the struct type

        Returns: the CachedStruct, holding only the fields that are encoded
        """
        config = self.config
        fields = []
        for idx, fld in enumerate(struct_fields(typ)):
            if fld.name.startswith("_") and not fld.anonymous:
                continue

            if config.tag_name_func is not None:
                tag = config.tag_name_func(fld)
            else:
                tag = fld.metadata.get(config.tag_name, "")

            if tag == IGNORE:
                continue
            if config.mode is Mode.EXPLICIT and not tag:
                continue

            name, _, options = tag.partition(",")
            if not name:
                name = fld.name

            custom_func = None
            if isinstance(fld.annotation, type):
                custom_func = config.custom_type_funcs.lookup(fld.annotation)

            fields.append(CachedField(
                idx=idx,
                attr=fld.name,
                name=name,
                annotation=fld.annotation,
                anonymous=fld.anonymous,
                omit_empty=OMIT_EMPTY in options.split(","),
                custom_func=custom_func,
            ))

        logger.debug("Parsed %d form fields for %s", len(fields), typ.__qualname__)
        return CachedStruct(fields=tuple(fields))
