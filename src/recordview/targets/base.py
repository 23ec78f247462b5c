"""Serialization target protocol for projected maps."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class ProjectionTarget(Protocol[T]):
    """Serializes a projected map, a list of them, or a wrapped envelope."""

    def serialize(self, projected: Any) -> T:
        ...
