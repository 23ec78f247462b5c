"""Opt-in structured logging for the ``recordview`` logger tree.

Library modules log through ``logging.getLogger(__name__)`` with dotted
event names and structured fields passed as ``extra``:

    logger.debug("render.computed_failed", extra={"field": key}, exc_info=True)

setup_logging() attaches one handler to the ``recordview`` logger whose
formatter is a structlog ProcessorFormatter. ExtraAdder lifts the ``extra``
fields into the event dict, so a JSON line looks like:

    {"event": "render.computed_failed", "field": "avg", "level": "debug", ...}

Destinations:
    RECORDVIEW_LOG_DESTINATION=stderr   (default)
    RECORDVIEW_LOG_DESTINATION=jsonl    (appends to RECORDVIEW_LOG_PATH)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from recordview.observability.config import LoggingConfig

LOGGER_NAME = "recordview"

# Structured fields the library attaches to its records
EVENT_FIELDS = ("field", "schema", "depth", "max_depth")

_DESTINATIONS = ("stderr", "jsonl")

_handler: logging.Handler | None = None


def build_formatter(config: LoggingConfig) -> structlog.stdlib.ProcessorFormatter:
    """ProcessorFormatter rendering stdlib records as JSON or console lines."""
    if config.log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(allow=EVENT_FIELDS),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def _create_handler(config: LoggingConfig) -> logging.Handler:
    if config.log_destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if config.log_destination == "jsonl":
        path = Path(config.jsonl_path or "recordview.jsonl")
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(str(path), mode="a", encoding="utf-8")
    raise ValueError(
        f"Unknown log destination: {config.log_destination!r}. "
        f"Available: {list(_DESTINATIONS)}."
    )


def setup_logging(config: LoggingConfig) -> logging.Handler:
    """Attach a structured handler to the ``recordview`` logger.

    Calling it again replaces the previous handler. Handlers added by the
    application (or pytest's caplog) are left alone.
    """
    global _handler

    handler = _create_handler(config)
    handler.setFormatter(build_formatter(config))

    shutdown_logging()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    _handler = handler
    return handler


def shutdown_logging() -> None:
    """Detach and close the handler installed by setup_logging()."""
    global _handler
    if _handler is None:
        return
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.removeHandler(_handler)
    package_logger.setLevel(logging.NOTSET)
    _handler.close()
    _handler = None
