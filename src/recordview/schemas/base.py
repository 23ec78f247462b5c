"""Field enumeration protocols.

FieldProvider: answers "which fields does this schema declare, in order?"
SchemaDescriptor: a schema that can answer that question about itself.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FieldProvider(Protocol):
    """Enumerates the ordered base fields of a schema reference."""

    def fields(self, schema: Any) -> list[str]:
        """Return the schema's field names. Raises SchemaError if unknown."""
        ...


@runtime_checkable
class SchemaDescriptor(Protocol):
    """A schema type that declares its own field list."""

    def schema_fields(self) -> list[str] | tuple[str, ...]:
        ...
