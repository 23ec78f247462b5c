"""Schema registry: register schema references and look up their fields."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from recordview.errors import SchemaError
from recordview.schemas.base import SchemaDescriptor

logger = logging.getLogger(__name__)

S = TypeVar("S")


class SchemaRegistry:
    """FieldProvider backed by explicit registrations.

    Schemas that are not registered but implement SchemaDescriptor
    (a ``schema_fields()`` callable) are asked directly.
    """

    def __init__(self) -> None:
        self._fields: dict[Any, tuple[str, ...]] = {}

    def register(self, schema: Any, fields: Iterable[str]) -> None:
        """Register (or replace) the ordered field list of ``schema``."""
        if isinstance(fields, str):
            fields = (fields,)
        self._fields[schema] = tuple(fields)

    def schema(self, *fields: str) -> Callable[[S], S]:
        """Class decorator form of register().

        Usage:
            @registry.schema("id", "username", "email")
            class User: ...
        """

        def decorator(cls: S) -> S:
            self.register(cls, fields)
            return cls

        return decorator

    def unregister(self, schema: Any) -> bool:
        """Remove a schema. Returns True if it was registered."""
        return self._fields.pop(schema, None) is not None

    def registered(self) -> list[Any]:
        return list(self._fields)

    def clear(self) -> None:
        self._fields.clear()

    def __contains__(self, schema: Any) -> bool:
        try:
            return schema in self._fields
        except TypeError:
            return False

    def fields(self, schema: Any) -> list[str]:
        try:
            registered = self._fields.get(schema)
        except TypeError:
            # Unhashable references can only describe themselves
            registered = None
            hashable = False
        else:
            hashable = True
        if registered is not None:
            return list(registered)

        if isinstance(schema, SchemaDescriptor):
            declared = schema.schema_fields()
            if declared is None:
                raise SchemaError(schema, "schema_fields() returned None")
            return list(declared)

        logger.debug("schema.unknown", extra={"schema": repr(schema)})
        if not hashable:
            raise SchemaError(schema, "schema reference is not hashable")
        raise SchemaError(schema, "not registered and declares no schema_fields()")


# Default registry used by the module-level helpers and the default projector
_default = SchemaRegistry()


def default_registry() -> SchemaRegistry:
    return _default


def register_schema(schema: Any, fields: Iterable[str]) -> None:
    _default.register(schema, fields)


def schema(*fields: str) -> Callable[[S], S]:
    return _default.schema(*fields)


def fields_for(schema_ref: Any) -> list[str]:
    return _default.fields(schema_ref)


def reset() -> None:
    """Clear the default registry. Use in test fixtures for isolation."""
    _default.clear()
