"""Structured logging for htoprc.

Usage:
    from htoprc.logging import get_logger, configure_logging

    logger = get_logger(__name__)
    configure_logging(level="DEBUG")
    logger.debug("Scanned htoprc", extra={"lines": 42})
"""

from htoprc.logging.config import (
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "set_log_level",
    "LogLevel",
]
