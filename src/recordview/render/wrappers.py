"""Response envelopes: ``{"data": ...}`` and the paginated variant."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from recordview.accessors import get_values
from recordview.errors import OptionsError
from recordview.render.filters import select_fields
from recordview.render.options import RenderOptions, coerce_options

PAGINATION_FIELDS: tuple[str, ...] = (
    "page_number",
    "page_size",
    "total_entries",
    "total_pages",
)


def wrap(data: Any) -> dict[str, Any]:
    return {"data": data}


def wrap_paginated(
    data: Any,
    page: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Wrap rendered data with page metadata read from ``page``.

    ``page`` is a mapping or any object exposing the pagination attributes;
    missing ones become None. Only ``only``/``except`` apply to the envelope;
    any other render option raises OptionsError.
    """
    opts = coerce_options(options, **overrides)
    unsupported = [
        name
        for name, is_set in (
            ("add", bool(opts.add)),
            ("many", opts.many),
            ("include_timestamps", opts.include_timestamps),
            ("timestamp_fields", opts.timestamp_fields is not None),
        )
        if is_set
    ]
    if unsupported:
        raise OptionsError(
            f"wrap_paginated only accepts 'only' and 'except', got {unsupported}"
        )
    envelope = {"data": data, **get_values(page, PAGINATION_FIELDS)}
    return select_fields(envelope, only=opts.only, exclude=opts.exclude)
