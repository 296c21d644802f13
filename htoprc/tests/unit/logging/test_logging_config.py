"""Tests for the logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from htoprc.logging import LogLevel, configure_logging, get_logger, set_log_level
from htoprc.logging.config import LOGGER_PREFIX, StructuredFormatter


class TestLogLevel:
    """Tests for LogLevel."""

    def test_from_string(self) -> None:
        """Test case-insensitive lookup."""
        assert LogLevel.from_string("debug") is LogLevel.DEBUG
        assert LogLevel.from_string("WARNING") is LogLevel.WARNING

    def test_invalid(self) -> None:
        """Test an unknown level name."""
        with pytest.raises(ValueError, match="Invalid log level"):
            LogLevel.from_string("loud")


class TestGetLogger:
    """Tests for get_logger."""

    def test_root(self) -> None:
        """Test the package logger."""
        assert get_logger().name == LOGGER_PREFIX

    def test_package_module_names_unchanged(self) -> None:
        """Test that htoprc module names are not prefixed twice."""
        assert get_logger("htoprc.config.parser").name == "htoprc.config.parser"

    def test_other_names_prefixed(self) -> None:
        """Test that foreign names are placed under the package logger."""
        assert get_logger("myapp").name == "htoprc.myapp"


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("htoprc", logging.INFO, __file__, 1, "Parsed", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_appends_extras_sorted(self) -> None:
        """Test that extra fields are appended in sorted order."""
        formatter = StructuredFormatter("%(message)s")
        assert formatter.format(self._record(score=31, lines=4)) == "Parsed [lines=4 score=31]"

    def test_no_extras(self) -> None:
        """Test a record without extra fields."""
        assert StructuredFormatter("%(message)s").format(self._record()) == "Parsed"


class TestConfigureLogging:
    """Tests for configure_logging and set_log_level."""

    def test_console_handler(self, reset_htoprc_logger: logging.Logger) -> None:
        """Test the default console handler."""
        logger = configure_logging(level="DEBUG")
        assert logger is reset_htoprc_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
        assert logger.propagate is False

    def test_reconfigure_replaces_handlers(self, reset_htoprc_logger: logging.Logger) -> None:
        """Test that repeated calls do not stack handlers."""
        configure_logging()
        configure_logging()
        assert len(reset_htoprc_logger.handlers) == 1

    def test_file_handler(self, tmp_path: Path, reset_htoprc_logger: logging.Logger) -> None:
        """Test logging to a file."""
        log_file = tmp_path / "htoprc.log"
        configure_logging(level=LogLevel.INFO, log_file=log_file, use_structured=False)
        get_logger("htoprc.test").info("hello")
        for handler in reset_htoprc_logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
        for handler in reset_htoprc_logger.handlers:
            handler.close()

    def test_set_log_level(self, reset_htoprc_logger: logging.Logger) -> None:
        """Test changing only the level."""
        set_log_level(logging.ERROR)
        assert reset_htoprc_logger.level == logging.ERROR
