"""Encode python values as application/x-www-form-urlencoded form values"""

import logging
from typing import Any, Callable, Optional

from form_encoder.models.config import AnonymousMode, EncoderConfig, Mode
from form_encoder.models.form_values import FormValues
from form_encoder.models.worker import EncodeWorker
from form_encoder.util.custom_funcs import EncodeFunc
from form_encoder.util.errors import ConfigurationError, EncodeErrors, InvalidEncodeError
from form_encoder.util.extract_type import Kind, extract_type
from form_encoder.util.struct_cache import StructCache
from form_encoder.util.worker_pool import WorkerPool

logger = logging.getLogger(__name__)


class Encoder:
    """
    The main encode instance.

    Configure it with the set_* and register_* methods before the first
    encode call; afterwards the configuration is fixed and the encoder can
    be shared between threads.

    Parameters:
        config: the starting configuration, EncoderConfig() by default
        max_idle_workers: how many idle workers to keep for reuse
    """

    def __init__(self, config: Optional[EncoderConfig] = None,
                 max_idle_workers: Optional[int] = None) -> None:
        self._config = config or EncoderConfig()
        self._struct_cache = StructCache(self._config)
        self._in_use = False
        self._pool = WorkerPool(lambda: EncodeWorker(self), max_idle=max_idle_workers)

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def struct_cache(self) -> StructCache:
        return self._struct_cache

    def _update(self, **changes) -> None:
        if self._in_use:
            raise ConfigurationError(
                "encoder configuration cannot change once encoding has started"
            )
        self._config = self._config.replace(**changes)
        self._struct_cache = StructCache(self._config)

    def set_tag_name(self, tag_name: str) -> None:
        """
        Set the metadata key holding each field's form name.

        Default is "form".
        """
        self._update(tag_name=tag_name)

    def set_mode(self, mode: Mode) -> None:
        """
        Set whether untagged fields are encoded.

        Default is Mode.IMPLICIT.
        """
        self._update(mode=mode)

    def set_anonymous_mode(self, mode: AnonymousMode) -> None:
        """
        Set how embedded struct fields are named.

        Default is AnonymousMode.EMBED.
        """
        self._update(anonymous_mode=mode)

    def set_max_depth(self, max_depth: int) -> None:
        """Set how deeply values may nest. Default is 100."""
        self._update(max_depth=max_depth)

    def register_tag_name_func(self, fn: Callable[[Any], str]) -> None:
        """
        Register a function that names fields in place of tag lookup.

        Once registered the tag name is ignored and the function alone
        decides each name. Its return value is cached per type, so it
        must be consistent.
        """
        self._update(tag_name_func=fn)

    def register_func(self, fn: EncodeFunc, *types: type) -> None:
        """
        Register an encode function against a number of types

        Parameters:
            fn: takes the value, returns its string (or list of strings)
            types: the exact types fn handles
        """
        custom_type_funcs = self._config.custom_type_funcs.copy()
        custom_type_funcs.register(fn, *types)
        self._update(custom_type_funcs=custom_type_funcs)

    def encode(self, value: Any, collect_values: Optional[dict] = None) -> FormValues:
        """
        Encode a value as form values

        Parameters:
            value: a struct, mapping, sequence or primitive
            collect_values: if given, receives the native value of every
                encoded field under the same key

        Returns: the FormValues

        Raises:
            InvalidEncodeError: value is None or a class
            EncodeErrors: one or more fields failed; the fields that did
                encode are available on the exception
        """
        values, _ = self._encode(value, False, collect_values)
        return values

    def encode_with_columns(self, value: Any,
                            collect_values: Optional[dict] = None) -> tuple[FormValues, list]:
        """
        Encode a value as form values, also returning the keys in the order
        they were first produced

        Returns: (FormValues, list of keys)

        Raises: the same exceptions as encode()
        """
        return self._encode(value, True, collect_values)

    def _encode(self, value: Any, with_columns: bool, collect_values: Optional[dict]) -> tuple:
        value, kind = extract_type(value)
        if kind is Kind.INVALID:
            raise InvalidEncodeError(None)
        if kind is Kind.PTR:
            raise InvalidEncodeError(value)

        self._in_use = True
        with self._pool.acquire() as worker:
            values, columns, errors = worker.run(value, with_columns, collect_values)

        if errors:
            logger.debug("Encoded %s with %d failed fields", type(value).__qualname__, len(errors))
            raise EncodeErrors(errors, values=values, columns=columns)
        return values, columns
