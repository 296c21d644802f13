"""Tests for the htoprc exception hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from htoprc.core.exceptions import (
    ConfigurationError,
    HtoprcDecodeError,
    HtoprcError,
    HtoprcFileError,
    HtoprcFileNotFoundError,
)


class TestHtoprcError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        """Test a plain message."""
        error = HtoprcError("Something failed")
        assert str(error) == "Something failed"
        assert error.details == {}

    def test_with_details(self) -> None:
        """Test that details are appended to the message."""
        error = HtoprcError("Something failed", {"key": "value"})
        assert str(error) == "Something failed (key='value')"


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_setting_and_value(self) -> None:
        """Test that setting and value become details."""
        error = ConfigurationError("Bad format", setting="output_format", value="toml")
        assert error.setting == "output_format"
        assert error.value == "toml"
        assert "setting='output_format'" in str(error)
        assert isinstance(error, HtoprcError)


class TestFileErrors:
    """Tests for file errors."""

    def test_path_detail(self) -> None:
        """Test that the path is stored and reported."""
        error = HtoprcFileError("Cannot read", path="/tmp/htoprc")
        assert error.path == Path("/tmp/htoprc")
        assert "path='/tmp/htoprc'" in str(error)

    def test_without_path(self) -> None:
        """Test a file error without a path."""
        assert HtoprcFileError("Cannot read").path is None

    def test_decode_error_encoding(self) -> None:
        """Test the encoding detail."""
        error = HtoprcDecodeError("Not text", path="x", encoding="utf-8")
        assert error.encoding == "utf-8"
        assert error.details == {"path": "x", "encoding": "utf-8"}

    @pytest.mark.parametrize("exc_cls", [HtoprcFileNotFoundError, HtoprcDecodeError])
    def test_hierarchy(self, exc_cls: type[HtoprcFileError]) -> None:
        """Test that file errors can be caught by their bases."""
        with pytest.raises(HtoprcFileError):
            raise exc_cls("failed")
        assert issubclass(exc_cls, HtoprcError)
