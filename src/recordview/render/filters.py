"""Base field filters: only/except selection and timestamp dropping.

Filters apply to base schema fields only. Add fields are overlaid later and
are never filtered.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from recordview.config import DEFAULT_TIMESTAMP_FIELDS
from recordview.render.options import RenderOptions


def select_fields(
    fields: Mapping[Any, Any],
    only: Iterable[Any] | None = None,
    exclude: Iterable[Any] | None = None,
) -> dict[Any, Any]:
    """Apply only/except. ``only`` wins when both are given.

    Output keeps the order of ``fields``.
    """
    if only is not None:
        keep = set(only)
        return {k: v for k, v in fields.items() if k in keep}
    if exclude is not None:
        drop = set(exclude)
        return {k: v for k, v in fields.items() if k not in drop}
    return dict(fields)


def drop_timestamps(
    fields: Mapping[Any, Any],
    timestamp_fields: Iterable[Any] = DEFAULT_TIMESTAMP_FIELDS,
) -> dict[Any, Any]:
    drop = set(timestamp_fields)
    return {k: v for k, v in fields.items() if k not in drop}


def filter_fields(
    base: Mapping[Any, Any],
    options: RenderOptions,
    timestamp_fields: Iterable[Any] = DEFAULT_TIMESTAMP_FIELDS,
) -> dict[Any, Any]:
    """Trim base fields by only/except, then by timestamp policy."""
    selected = select_fields(base, only=options.only, exclude=options.exclude)
    if options.include_timestamps:
        return selected
    return drop_timestamps(selected, timestamp_fields)
