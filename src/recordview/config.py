"""Render configuration: YAML config + env var overrides.

Priority: env var > YAML file > default.
Env vars use RECORDVIEW_{SETTING} convention (e.g. RECORDVIEW_MAX_DEPTH=8).
YAML file default: ~/.recordview/config.yaml (or $RECORDVIEW_CONFIG)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_TIMESTAMP_FIELDS: tuple[str, ...] = ("inserted_at", "updated_at")

_DEFAULT_PATH = Path("~/.recordview/config.yaml").expanduser()
_NONE_VALUES = {"", "none", "null", "off"}


def _split_names(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_max_depth(raw: Any, source: str) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, str) and raw.strip().lower() in _NONE_VALUES:
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError) as err:
        raise ValueError(f"{source}={raw!r} is not a valid integer") from err
    if value < 0:
        raise ValueError(f"{source}={raw!r} must be non-negative")
    return value


@dataclass
class RenderConfig:
    # Base fields dropped unless a render asks for include_timestamps=True.
    timestamp_fields: tuple[str, ...] = DEFAULT_TIMESTAMP_FIELDS
    # Nested render depth guard. None means unguarded.
    max_depth: int | None = None
    source_path: Path | None = field(default=None, compare=False)

    @classmethod
    def load(cls, path: Path | None = None) -> RenderConfig:
        """Load config from a YAML file, then override with env vars."""
        if path is None and os.environ.get("RECORDVIEW_CONFIG"):
            path = Path(os.environ["RECORDVIEW_CONFIG"]).expanduser()
        file_path = path or _DEFAULT_PATH
        kwargs: dict[str, Any] = {}

        if file_path.exists():
            raw = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(raw, dict):
                ts = raw.get("timestamp_fields")
                if isinstance(ts, str):
                    kwargs["timestamp_fields"] = _split_names(ts)
                elif isinstance(ts, list):
                    kwargs["timestamp_fields"] = tuple(str(t) for t in ts)
                if "max_depth" in raw:
                    kwargs["max_depth"] = _parse_max_depth(
                        raw["max_depth"], f"{file_path}:max_depth"
                    )
            kwargs["source_path"] = file_path

        if "RECORDVIEW_TIMESTAMP_FIELDS" in os.environ:
            kwargs["timestamp_fields"] = _split_names(
                os.environ["RECORDVIEW_TIMESTAMP_FIELDS"]
            )
        if "RECORDVIEW_MAX_DEPTH" in os.environ:
            kwargs["max_depth"] = _parse_max_depth(
                os.environ["RECORDVIEW_MAX_DEPTH"], "RECORDVIEW_MAX_DEPTH"
            )

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp_fields": list(self.timestamp_fields),
            "max_depth": self.max_depth,
        }


# Singleton
_config: RenderConfig | None = None


def get_config(path: Path | None = None) -> RenderConfig:
    """Get the singleton RenderConfig instance."""
    global _config
    if _config is None:
        _config = RenderConfig.load(path)
    return _config


def reset_config() -> None:
    """Reset for testing."""
    global _config
    _config = None
