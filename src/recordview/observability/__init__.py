"""recordview observability: opt-in structured logging.

    setup_logging(cfg)   - Attach a structlog-formatted handler to the recordview logger
    shutdown_logging()   - Detach and close it
"""

from recordview.observability.config import LoggingConfig
from recordview.observability.logging import (
    build_formatter,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "LoggingConfig",
    "build_formatter",
    "setup_logging",
    "shutdown_logging",
]
