"""Logging configuration for htoprc.

The engine only emits records through loggers obtained from ``get_logger``;
it never installs handlers. Applications (and the ``htoprc`` CLI) call
``configure_logging`` once at startup to decide where records go.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path

# Package-wide logger name prefix
LOGGER_PREFIX = "htoprc"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(Enum):
    """Logging levels supported by htoprc."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Convert a level name (case-insensitive) to LogLevel.

        Raises
        ------
        ValueError
            If level name is not recognized.
        """
        try:
            return cls[level.upper()]
        except KeyError:
            valid = ", ".join(m.name for m in cls)
            raise ValueError(f"Invalid log level '{level}'. Valid levels: {valid}") from None


class StructuredFormatter(logging.Formatter):
    """Formatter that appends ``extra=`` fields as ``key=value`` pairs."""

    # Attributes every LogRecord carries
    STANDARD_FIELDS = frozenset(
        {
            "name",
            "msg",
            "args",
            "created",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "module",
            "msecs",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "stack_info",
            "exc_info",
            "exc_text",
            "thread",
            "threadName",
            "taskName",
            "message",
            "asctime",
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then append its extra fields in sorted order."""
        message = super().format(record)
        extra_fields = {
            k: v for k, v in record.__dict__.items() if k not in self.STANDARD_FIELDS
        }
        if extra_fields:
            extras = " ".join(f"{k}={v!r}" for k, v in sorted(extra_fields.items()))
            message = f"{message} [{extras}]"
        return message


def _level_to_int(level: str | LogLevel | int) -> int:
    if isinstance(level, str):
        return LogLevel.from_string(level).value
    if isinstance(level, LogLevel):
        return level.value
    return level


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger grouped under the ``htoprc`` namespace.

    Parameters
    ----------
    name
        Module name (typically ``__name__``). If None, returns the
        root package logger.

    Examples
    --------
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanned htoprc", extra={"lines": 42})
    """
    if name is None:
        return logging.getLogger(LOGGER_PREFIX)
    if name == LOGGER_PREFIX or name.startswith(f"{LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def set_log_level(level: str | LogLevel | int) -> None:
    """Set the level of the root ``htoprc`` logger.

    Examples
    --------
    >>> set_log_level("DEBUG")
    >>> set_log_level(LogLevel.WARNING)
    """
    logging.getLogger(LOGGER_PREFIX).setLevel(_level_to_int(level))


def configure_logging(
    level: str | LogLevel | int = LogLevel.WARNING,
    log_file: str | Path | None = None,
    log_format: str | None = None,
    date_format: str | None = None,
    use_structured: bool = True,
    propagate: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers on the htoprc logger.

    Calling this again replaces previously installed handlers.

    Parameters
    ----------
    level
        Minimum level to emit, as name, LogLevel or integer.
    log_file
        Optional path; records are also appended to this file.
    log_format
        Format string. Defaults to ``DEFAULT_FORMAT``.
    date_format
        Date format string. Defaults to ``DEFAULT_DATE_FORMAT``.
    use_structured
        Append ``extra=`` fields to each message.
    propagate
        Whether records also propagate to the Python root logger.

    Returns
    -------
    logging.Logger
        The configured root package logger.
    """
    level_int = _level_to_int(level)
    log_format = log_format or DEFAULT_FORMAT
    date_format = date_format or DEFAULT_DATE_FORMAT

    formatter_cls = StructuredFormatter if use_structured else logging.Formatter

    root_logger = logging.getLogger(LOGGER_PREFIX)
    root_logger.setLevel(level_int)
    root_logger.propagate = propagate
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level_int)
    console_handler.setFormatter(formatter_cls(log_format, date_format))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        file_handler.setLevel(level_int)
        file_handler.setFormatter(formatter_cls(log_format, date_format))
        root_logger.addHandler(file_handler)

    return root_logger
