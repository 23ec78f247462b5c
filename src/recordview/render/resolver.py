"""Option resolution: evaluate add directives against one record.

Every directive in ``options.add`` is replaced by the Literal it evaluates
to, in declared order, before any filtering happens:

    NestedRender -> render_nested(schema, record[source], inner options)
    Computed     -> fn(record)
    Literal      -> unchanged

Resolution runs once per record, so a collection render resolves once per
element.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from recordview.accessors import get_value
from recordview.errors import ComputedFieldError, RecordViewError
from recordview.render.directives import AddDirective, Computed, Literal, NestedRender
from recordview.render.merger import merge_options
from recordview.render.options import RenderOptions, coerce_options

logger = logging.getLogger(__name__)

NestedRenderer = Callable[[Any, Any, RenderOptions], Any]


def _evaluate(
    key: Any,
    directive: AddDirective,
    record: Any,
    render_nested: NestedRenderer,
) -> Literal:
    if isinstance(directive, NestedRender):
        sub_record = get_value(record, directive.source)
        inner = coerce_options(directive.options)
        return Literal(render_nested(directive.schema, sub_record, inner))

    if isinstance(directive, Computed):
        try:
            return Literal(directive.fn(record))
        except RecordViewError:
            # Errors from nested renders inside the function keep their identity
            raise
        except Exception as err:
            logger.debug("render.computed_failed", extra={"field": key}, exc_info=True)
            raise ComputedFieldError(key, err) from err

    # Literal
    return directive


def resolve_options(
    record: Any,
    options: RenderOptions,
    render_nested: NestedRenderer,
) -> RenderOptions:
    """Return ``options`` with every add directive evaluated to a Literal."""
    if not options.add:
        return options

    resolved = options
    for key, directive in options.add.items():
        literal = _evaluate(key, directive, record, render_nested)
        resolved = merge_options(resolved, RenderOptions(add={key: literal}))
    return resolved
