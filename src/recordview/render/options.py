"""Render options and their normalization.

Options arrive as None, a RenderOptions, a mapping with string keys, and/or
keyword overrides. They are normalized into one frozen RenderOptions:

    coerce_options({"only": "id"}, include_timestamps=True)
    -> RenderOptions(only=("id",), include_timestamps=True)

Python reserves ``except``; it is accepted as a mapping key, and as the
keywords ``exclude`` / ``except_``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from recordview.errors import OptionsError
from recordview.render.directives import AddDirective, to_directive

_KEY_ALIASES = {
    "except": "exclude",
    "except_": "exclude",
    "exclude": "exclude",
    "only": "only",
    "many": "many",
    "include_timestamps": "include_timestamps",
    "add": "add",
    "timestamp_fields": "timestamp_fields",
}


@dataclass(frozen=True)
class RenderOptions:
    """Normalized options for one render level.

    ``only`` / ``exclude`` are None when absent. An empty ``only`` is present
    and retains no base field. ``add`` keeps declaration order.
    """

    only: tuple[Any, ...] | None = None
    exclude: tuple[Any, ...] | None = None
    many: bool = False
    include_timestamps: bool = False
    add: dict[Any, AddDirective] = field(default_factory=dict)
    # None defers to RenderConfig.timestamp_fields
    timestamp_fields: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        # Raw values and plain functions get the same wrapping as mapping input
        object.__setattr__(
            self, "add", {key: to_directive(value) for key, value in self.add.items()}
        )

    def with_add(self, add: dict[Any, AddDirective]) -> RenderOptions:
        return replace(self, add=add)

    def for_element(self) -> RenderOptions:
        """Options for one element of a collection render."""
        return replace(self, many=False)


def _names(value: Any, key: str) -> tuple[Any, ...] | None:
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (value,)
    if isinstance(value, Mapping):
        raise OptionsError(f"{key!r} must be a field name or a collection of names")
    return tuple(value)


def _add_bucket(value: Any) -> dict[Any, AddDirective]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        items = []
        for entry in value:
            if not isinstance(entry, tuple) or len(entry) != 2:
                raise OptionsError(
                    f"'add' entries must be (key, value) pairs, got {entry!r}"
                )
            items.append(entry)
    else:
        raise OptionsError(f"'add' must be a mapping or (key, value) pairs, got {value!r}")
    return dict(items)


def _normalize(raw: Mapping[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in raw.items():
        name = _KEY_ALIASES.get(key)
        if name is None:
            raise OptionsError(
                f"Unknown render option: {key!r}. Available: {sorted(set(_KEY_ALIASES))}"
            )
        if name in ("only", "exclude", "timestamp_fields"):
            normalized[name] = _names(value, key)
        elif name == "add":
            normalized[name] = _add_bucket(value)
        else:
            normalized[name] = value is True
    return normalized


def coerce_options(
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RenderOptions:
    """Build a RenderOptions from any accepted option shape.

    Keyword overrides win over values in ``options``.
    """
    if options is None:
        base = RenderOptions()
    elif isinstance(options, RenderOptions):
        base = options
    elif isinstance(options, Mapping):
        base = RenderOptions(**_normalize(options))
    else:
        raise OptionsError(f"Render options must be a mapping, got {type(options).__name__}")

    if not overrides:
        return base
    return replace(base, **_normalize(overrides))
