"""Null-safe field access on records and pagination sources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_value(record: Any, name: Any) -> Any:
    """Read ``name`` from a record, returning None when it is absent.

    Mappings are read with ``.get``; any other object through its attributes.
    A None record yields None for every name.
    """
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    if not isinstance(name, str):
        return None
    return getattr(record, name, None)


def get_values(record: Any, names: list[Any] | tuple[Any, ...]) -> dict[Any, Any]:
    """Read several fields at once, preserving the order of ``names``."""
    return {name: get_value(record, name) for name in names}
