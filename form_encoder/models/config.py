"""Model for encoder configuration"""

import enum
import os
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from form_encoder.util.custom_funcs import CustomTypeFuncs

DEFAULT_TAG_NAME = "form"
DEFAULT_MAX_DEPTH = 100


class Mode(str, enum.Enum):
    """Whether fields without a tag are encoded"""

    IMPLICIT = "implicit"
    EXPLICIT = "explicit"


class AnonymousMode(str, enum.Enum):
    """How the fields of an embedded struct are named"""

    EMBED = "embed"
    SEPARATE = "separate"


class EncoderConfig(BaseModel):
    """
    An immutable snapshot of everything that controls encoding.

    Parameters:
        tag_name: the metadata key holding a field's form name
        mode: IMPLICIT encodes untagged fields under their declared name,
            EXPLICIT leaves them out
        anonymous_mode: EMBED puts an embedded struct's fields at the
            parent's level, SEPARATE nests them under the field's name
        tag_name_func: replaces tag lookup entirely when set. Its result
            is cached per type, so it must always return the same name
            for the same field.
        custom_type_funcs: encode functions for specific types
        max_depth: how deep values may nest before a field fails
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag_name: str = Field(default=DEFAULT_TAG_NAME, min_length=1)
    mode: Mode = Mode.IMPLICIT
    anonymous_mode: AnonymousMode = AnonymousMode.EMBED
    tag_name_func: Optional[Callable[[Any], str]] = None
    custom_type_funcs: CustomTypeFuncs = Field(default_factory=CustomTypeFuncs)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    @property
    def embed_anonymous(self) -> bool:
        return self.anonymous_mode is AnonymousMode.EMBED

    def replace(self, **changes) -> "EncoderConfig":
        """
        Build a new, validated snapshot with some settings changed

        Returns: the new EncoderConfig
        """
        settings = dict(self)
        settings.update(changes)
        return type(self)(**settings)

    @classmethod
    def from_env(cls) -> "EncoderConfig":
        """
        Read settings from FORM_ENCODER_* environment variables,
        using the defaults for anything unset

        Returns: the EncoderConfig
        """
        settings = {
            "tag_name": os.getenv("FORM_ENCODER_TAG_NAME"),
            "mode": os.getenv("FORM_ENCODER_MODE"),
            "anonymous_mode": os.getenv("FORM_ENCODER_ANONYMOUS_MODE"),
            "max_depth": os.getenv("FORM_ENCODER_MAX_DEPTH"),
        }
        return cls(**{key: val for key, val in settings.items() if val})
