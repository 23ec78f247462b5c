"""Projector - renders records into plain dicts.

Pipeline per record:
    resolve add directives -> enumerate base fields -> filter -> overlay adds

Usage:
    registry = SchemaRegistry()
    registry.register(User, ["id", "username", "email", "inserted_at", "updated_at"])
    projector = Projector(registry)
    projector.render(User, user, only=["id", "username"],
                     add={"initials": lambda u: u["username"][:2]})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from recordview.accessors import get_values
from recordview.config import RenderConfig, get_config
from recordview.errors import DepthLimitError
from recordview.render.filters import filter_fields
from recordview.render.merger import merge_fields
from recordview.render.options import RenderOptions, coerce_options
from recordview.render.resolver import resolve_options
from recordview.schemas.base import FieldProvider
from recordview.schemas.registry import default_registry

logger = logging.getLogger(__name__)


class Projector:
    """Render records of registered schemas.

    ``provider`` defaults to the module-level schema registry and ``config``
    to the loaded RenderConfig, both looked up at render time.
    """

    def __init__(
        self,
        provider: FieldProvider | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self._provider = provider
        self._config = config

    @property
    def provider(self) -> FieldProvider:
        return self._provider if self._provider is not None else default_registry()

    @property
    def config(self) -> RenderConfig:
        return self._config if self._config is not None else get_config()

    def render(
        self,
        schema: Any,
        data: Any,
        options: RenderOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> dict[Any, Any] | list[dict[Any, Any]]:
        """Render one record, or a list of records when ``many=True``."""
        opts = coerce_options(options, **overrides)
        return self._render(schema, data, opts, depth=0)

    def _render(
        self, schema: Any, data: Any, options: RenderOptions, depth: int
    ) -> dict[Any, Any] | list[dict[Any, Any]]:
        if options.many:
            if data is None:
                return []
            element_options = options.for_element()
            return [
                self._render_one(schema, record, element_options, depth)
                for record in data
            ]
        return self._render_one(schema, data, options, depth)

    def _render_one(
        self, schema: Any, record: Any, options: RenderOptions, depth: int
    ) -> dict[Any, Any]:
        def render_nested(inner_schema: Any, sub_record: Any, inner: RenderOptions):
            nested_depth = depth + 1
            max_depth = self.config.max_depth
            if max_depth is not None and nested_depth > max_depth:
                logger.debug(
                    "render.depth_exceeded",
                    extra={"schema": repr(inner_schema), "depth": nested_depth, "max_depth": max_depth},
                )
                raise DepthLimitError(nested_depth, max_depth)
            return self._render(inner_schema, sub_record, inner, nested_depth)

        resolved = resolve_options(record, options, render_nested)
        base = get_values(record, self.provider.fields(schema))
        timestamp_fields = (
            resolved.timestamp_fields
            if resolved.timestamp_fields is not None
            else self.config.timestamp_fields
        )
        filtered = filter_fields(base, resolved, timestamp_fields)
        return merge_fields(filtered, resolved.add)


_default_projector = Projector()


def render(
    schema: Any,
    data: Any,
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[Any, Any] | list[dict[Any, Any]]:
    """Render with the default registry and configuration."""
    return _default_projector.render(schema, data, options, **overrides)
