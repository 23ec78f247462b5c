"""Logging configuration, env-var driven.

The library configures nothing on import; applications call
setup_logging(LoggingConfig()) once at startup.

    Destination: RECORDVIEW_LOG_DESTINATION=stderr (default) | jsonl
    Renderer: RECORDVIEW_LOG_FORMAT=json (default) | console
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class LoggingConfig:
    """Logging configuration, env-var driven."""

    log_destination: str = field(
        default_factory=lambda: os.environ.get("RECORDVIEW_LOG_DESTINATION", "stderr")
    )  # "stderr" | "jsonl"

    log_level: str = field(
        default_factory=lambda: os.environ.get("RECORDVIEW_LOG_LEVEL", "INFO")
    )

    log_format: str = field(
        default_factory=lambda: os.environ.get("RECORDVIEW_LOG_FORMAT", "json")
    )  # "json" | "console"

    # JSONL file destination
    jsonl_path: str | None = field(
        default_factory=lambda: os.environ.get("RECORDVIEW_LOG_PATH")
    )
