"""Shortcuts for declaring form tags on dataclass fields"""

import dataclasses
from typing import Optional

from form_encoder.models.config import DEFAULT_TAG_NAME
from form_encoder.util.struct_cache import ANONYMOUS, IGNORE, OMIT_EMPTY


def form_field(name: Optional[str] = None, *, omit_empty: bool = False, skip: bool = False,
               tag_name: str = DEFAULT_TAG_NAME, **kwargs):
    """
    dataclasses.field() with a form tag in its metadata

    Parameters:
        name: the form name of the field
        omit_empty: leave the field out when its value is empty
        skip: never encode the field
        tag_name: the metadata key, matching the encoder's tag name
        kwargs: passed through to dataclasses.field()

    Returns: the dataclass field
    """
    if skip:
        tag = IGNORE
    else:
        tag = name or ""
        if omit_empty:
            tag += "," + OMIT_EMPTY

    metadata = dict(kwargs.pop("metadata", None) or {})
    if tag:
        metadata[tag_name] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def embedded(name: Optional[str] = None, *, tag_name: str = DEFAULT_TAG_NAME, **kwargs):
    """
    dataclasses.field() for an embedded struct. With AnonymousMode.EMBED its
    fields are encoded as if declared on the parent.

    Parameters:
        name: the form name used with AnonymousMode.SEPARATE
        tag_name: the metadata key, matching the encoder's tag name
        kwargs: passed through to dataclasses.field()
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[ANONYMOUS] = True
    if name:
        metadata[tag_name] = name
    return dataclasses.field(metadata=metadata, **kwargs)
