"""Module containing EncodeWorker, the traversal engine behind Encoder"""

import logging
from typing import Any, Callable, Optional

from form_encoder.models.form_values import FormValues
from form_encoder.util.errors import MaxDepthError, UnsupportedTypeError
from form_encoder.util.extract_type import Kind, extract_type
from form_encoder.util.namespace import Namespace
from form_encoder.util.primitives import format_primitive, has_value
from form_encoder.util.struct_cache import CachedField

logger = logging.getLogger(__name__)


class EncodeWorker:
    """
    Scratch state for a single encode call.

    Workers are recycled through a WorkerPool; everything a call produces
    is handed back by run() and dropped again by reset().
    """

    def __init__(self, encoder) -> None:
        self.encoder = encoder
        self.config = None
        self.struct_cache = None
        self.namespace = Namespace()
        self.values = FormValues()
        self.columns: Optional[list] = None
        self.collected: Optional[dict] = None
        self.errors: dict = {}

    def reset(self) -> None:
        """Forget everything from the previous call"""
        self.namespace.truncate()
        self.values = FormValues()
        self.columns = None
        self.collected = None
        self.errors = {}

    def run(self, value: Any, with_columns: bool = False,
            collect_values: Optional[dict] = None) -> tuple:
        """
        Walk value from the root namespace

        Parameters:
            value: the value to encode, already checked by the Encoder
            with_columns: whether to record the first-seen order of keys
            collect_values: receives the native value of every leaf

        Returns: (FormValues, column list or None, lists of errors by path)
        """
        self.config = self.encoder.config
        self.struct_cache = self.encoder.struct_cache
        if with_columns:
            self.columns = []
        self.collected = collect_values

        self.set_field_by_type(value, 0)

        return self.values, self.columns, self.errors

    def set_field_by_type(self, current: Any, depth: int,
                          field: Optional[CachedField] = None) -> None:
        """Encode current at the namespace as it stands"""
        if field is not None and field.omit_empty and not has_value(current):
            return

        value, kind = extract_type(current)
        if kind is Kind.INVALID:
            return

        custom_func = self.custom_func_for(value, field)
        if custom_func is not None:
            self.set_custom(custom_func, value)
            return

        if kind is Kind.PRIMITIVE:
            self.set_values([format_primitive(value)], value)
            return

        if kind in (Kind.STRUCT, Kind.SLICE, Kind.MAP):
            if depth >= self.config.max_depth:
                self.set_error(MaxDepthError(self.config.max_depth))
            elif kind is Kind.STRUCT:
                self.traverse_struct(value, depth)
            elif kind is Kind.SLICE:
                self.traverse_slice(value, depth)
            else:
                self.traverse_map(value, depth)
            return

        self.set_error(UnsupportedTypeError(type(value)))

    def traverse_struct(self, value: Any, depth: int) -> None:
        namespace = self.namespace
        mark = namespace.mark()
        embed_anonymous = self.config.embed_anonymous

        for field in self.struct_cache.get(type(value)).fields:
            namespace.truncate(mark)

            # embedded fields share the parent's namespace
            if not (field.anonymous and embed_anonymous):
                namespace.push_field(field.name)

            try:
                current = getattr(value, field.attr)
            except AttributeError as err:
                self.set_error(err)
                continue
            self.set_field_by_type(current, depth + 1, field)

        namespace.truncate(mark)

    def traverse_slice(self, value: Any, depth: int) -> None:
        namespace = self.namespace
        mark = namespace.mark()

        for idx, item in enumerate(value):
            namespace.truncate(mark)
            namespace.push_index(idx)
            self.set_field_by_type(item, depth + 1)

        namespace.truncate(mark)

    def traverse_map(self, value: Any, depth: int) -> None:
        """Entries are visited in the mapping's own iteration order"""
        namespace = self.namespace
        mark = namespace.mark()

        for key, item in value.items():
            namespace.truncate(mark)
            try:
                key_str = self.map_key(key)
            except Exception as err:  # pylint: disable=broad-except
                self.set_error(err)
                continue
            namespace.push_key(key_str)
            self.set_field_by_type(item, depth + 1)

        namespace.truncate(mark)

    def map_key(self, key: Any) -> str:
        """
        Parameters:
            key: a mapping key

        Returns: the key's form string
        """
        custom_func = self.config.custom_type_funcs.lookup(type(key))
        if custom_func is not None:
            strings = self.as_strings(custom_func(key))
            return strings[0] if strings else ""

        key, kind = extract_type(key)
        if kind is not Kind.PRIMITIVE:
            raise UnsupportedTypeError(type(key), "map key")
        return format_primitive(key)

    def custom_func_for(self, value: Any, field: Optional[CachedField]) -> Optional[Callable]:
        typ = type(value)
        if field is not None and field.custom_func is not None and typ is field.annotation:
            return field.custom_func
        return self.config.custom_type_funcs.lookup(typ)

    def set_custom(self, custom_func: Callable, value: Any) -> None:
        try:
            result = custom_func(value)
        except Exception as err:  # pylint: disable=broad-except
            self.set_error(err)
            return
        self.set_values(self.as_strings(result), value)

    @staticmethod
    def as_strings(result: Any) -> list:
        if isinstance(result, (list, tuple)):
            return [str(item) for item in result]
        return [str(result)]

    def set_values(self, strings: list, native: Any) -> None:
        if not strings:
            return
        key = str(self.namespace)
        if self.columns is not None and key not in self.values:
            self.columns.append(key)
        self.values.setdefault(key, []).extend(strings)
        if self.collected is not None:
            self.collected[key] = native

    def set_error(self, err: Exception) -> None:
        key = str(self.namespace)
        self.errors.setdefault(key, []).append(err)
        logger.debug("Failed to encode form field %r: %s", key, err)
