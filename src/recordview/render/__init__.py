"""Render - the field-selection and option-merging engine.

Core abstractions:
- RenderOptions: normalized only/except/many/include_timestamps/add
- NestedRender, Computed, Literal: add directives
- resolve_options: evaluates add directives against one record
- filter_fields / merge_fields: trim base fields, overlay additions
- Projector: composes the above per record or per collection element
"""

from recordview.render.directives import (
    AddDirective,
    Computed,
    Literal,
    NestedRender,
    to_directive,
)
from recordview.render.filters import drop_timestamps, filter_fields, select_fields
from recordview.render.merger import merge_add, merge_fields, merge_options
from recordview.render.options import RenderOptions, coerce_options
from recordview.render.projector import Projector, render
from recordview.render.resolver import resolve_options
from recordview.render.wrappers import PAGINATION_FIELDS, wrap, wrap_paginated

__all__ = [
    "AddDirective",
    "Computed",
    "Literal",
    "NestedRender",
    "PAGINATION_FIELDS",
    "Projector",
    "RenderOptions",
    "coerce_options",
    "drop_timestamps",
    "filter_fields",
    "merge_add",
    "merge_fields",
    "merge_options",
    "render",
    "resolve_options",
    "select_fields",
    "to_directive",
    "wrap",
    "wrap_paginated",
]
