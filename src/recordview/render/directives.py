"""Add directives: what to inject under an extra output key.

NestedRender: render a related record found on the current record
Computed: call a function with the current record
Literal: inline a value as is

The resolver replaces every directive with the Literal it evaluates to.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from recordview.render.options import RenderOptions


@dataclass(frozen=True)
class NestedRender:
    """Render ``record[source]`` with ``schema`` and inner options.

    ``options`` accepts anything coerce_options() does; None means defaults.
    Pass ``many=True`` in the inner options when ``source`` holds a list.
    """

    schema: Any
    source: Any
    options: RenderOptions | Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Computed:
    """Value computed from the current record, inlined unfiltered."""

    fn: Callable[[Any], Any]


@dataclass(frozen=True)
class Literal:
    """An inert value inlined directly."""

    value: Any


AddDirective = Union[NestedRender, Computed, Literal]

_DIRECTIVE_TYPES = (NestedRender, Computed, Literal)


def is_directive(value: Any) -> bool:
    return isinstance(value, _DIRECTIVE_TYPES)


def to_directive(value: Any) -> AddDirective:
    """Coerce a raw add value.

    Directives pass through, plain callables become Computed and anything
    else becomes a Literal. Tuples are not inspected; build NestedRender
    explicitly.
    """
    if is_directive(value):
        return value
    if callable(value) and not isinstance(value, type):
        return Computed(value)
    return Literal(value)
