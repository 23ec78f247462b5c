"""Right-biased merges: add buckets, option sets, and the final overlay."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from recordview.render.directives import AddDirective, Literal
from recordview.render.options import RenderOptions


def merge_add(
    left: Mapping[Any, AddDirective], right: Mapping[Any, AddDirective]
) -> dict[Any, AddDirective]:
    """Union of two add buckets. Right wins on collision, left keeps position.

    Neither input is modified.
    """
    merged = dict(left)
    merged.update(right)
    return merged


def merge_options(left: RenderOptions, right: RenderOptions) -> RenderOptions:
    """Combine two option sets.

    Everything but ``add`` comes from ``left``; ``right`` only contributes
    its add bucket.
    """
    if not right.add:
        return left
    return left.with_add(merge_add(left.add, right.add))


def merge_fields(
    filtered: Mapping[Any, Any], resolved_add: Mapping[Any, Literal]
) -> dict[Any, Any]:
    """Overlay resolved add values onto filtered base fields.

    Each resolved Literal is unwrapped. Add keys always survive, whatever
    the base field filters dropped.
    """
    projected = dict(filtered)
    for key, directive in resolved_add.items():
        projected[key] = directive.value
    return projected
