"""Schemas - ordered field enumeration for schema references.

Core abstractions:
- FieldProvider: schema -> ordered field names
- SchemaDescriptor: a schema that lists its own fields
- SchemaRegistry: explicit registrations, falling back to SchemaDescriptor
"""

from recordview.schemas.base import FieldProvider, SchemaDescriptor
from recordview.schemas.registry import (
    SchemaRegistry,
    default_registry,
    fields_for,
    register_schema,
    reset,
    schema,
)

__all__ = [
    "FieldProvider",
    "SchemaDescriptor",
    "SchemaRegistry",
    "default_registry",
    "fields_for",
    "register_schema",
    "reset",
    "schema",
]
