"""Error types raised while rendering records.

Everything derives from RecordViewError so callers can catch the whole family.
Absent record fields are never an error; they render as None.
"""

from __future__ import annotations

from typing import Any


class RecordViewError(Exception):
    """Base class for all recordview errors."""


class SchemaError(RecordViewError):
    """No field list could be enumerated for a schema reference."""

    def __init__(self, schema: Any, reason: str | None = None) -> None:
        self.schema = schema
        name = getattr(schema, "__qualname__", None) or repr(schema)
        message = f"Cannot enumerate fields for schema {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ComputedFieldError(RecordViewError):
    """A caller-supplied computed field function raised.

    Raised ``from`` the original exception; ``cause`` holds it as well.
    """

    def __init__(self, key: Any, cause: BaseException) -> None:
        self.key = key
        self.cause = cause
        super().__init__(
            f"Computed field {key!r} failed: {type(cause).__name__}: {cause}"
        )


class OptionsError(RecordViewError, ValueError):
    """Malformed render options (unknown key, bad add bucket, ...)."""


class DepthLimitError(RecordViewError):
    """Nested rendering went past the configured max_depth."""

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Nested render depth {depth} exceeds max_depth={max_depth}"
        )
