"""Tests for the file helpers and structured dumps."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from htoprc import parse
from htoprc.config.export import config_to_dict, config_to_json, config_to_yaml, dump
from htoprc.config.files import load_htoprc, read_htoprc, write_htoprc
from htoprc.core.exceptions import (
    ConfigurationError,
    HtoprcDecodeError,
    HtoprcFileError,
    HtoprcFileNotFoundError,
)


class TestReadHtoprc:
    """Tests for read_htoprc and load_htoprc."""

    def test_read(self, htoprc_file: Path, sample_text: str) -> None:
        """Test reading a file."""
        assert read_htoprc(htoprc_file) == sample_text + "\n"

    def test_keeps_crlf(self, tmp_path: Path) -> None:
        """Test that line endings are not translated."""
        path = tmp_path / "htoprc"
        path.write_bytes(b"color_scheme=5\r\ntree_view=1\r\n")
        assert read_htoprc(path) == "color_scheme=5\r\ntree_view=1\r\n"
        assert load_htoprc(path).config.color_scheme == 5

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test reading a missing file."""
        missing = tmp_path / "nope"
        with pytest.raises(HtoprcFileNotFoundError) as exc_info:
            read_htoprc(missing)
        assert exc_info.value.path == missing

    def test_not_text(self, tmp_path: Path) -> None:
        """Test reading undecodable bytes."""
        path = tmp_path / "htoprc"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(HtoprcDecodeError) as exc_info:
            read_htoprc(path)
        assert exc_info.value.encoding == "utf-8"

    def test_directory(self, tmp_path: Path) -> None:
        """Test that other OS errors become HtoprcFileError."""
        with pytest.raises(HtoprcFileError):
            read_htoprc(tmp_path)

    def test_load(self, htoprc_file: Path) -> None:
        """Test load_htoprc parses the file."""
        result = load_htoprc(htoprc_file)
        assert result.config.color_scheme == 5
        assert result.config.unknown_options == {"future_option": "enabled"}


class TestWriteHtoprc:
    """Tests for write_htoprc."""

    def test_adds_trailing_newline(self, tmp_path: Path) -> None:
        """Test the default trailing newline."""
        path = write_htoprc("delay=10", tmp_path / "htoprc")
        assert path.read_text(encoding="utf-8") == "delay=10\n"

    def test_without_trailing_newline(self, tmp_path: Path) -> None:
        """Test writing the text unchanged."""
        path = write_htoprc("delay=10", tmp_path / "htoprc", trailing_newline=False)
        assert path.read_text(encoding="utf-8") == "delay=10"

    def test_missing_parent(self, tmp_path: Path) -> None:
        """Test that a missing parent directory raises HtoprcFileError."""
        with pytest.raises(HtoprcFileError):
            write_htoprc("delay=10", tmp_path / "missing" / "htoprc")


class TestExport:
    """Tests for JSON and YAML dumps."""

    def test_dict_uses_camel_case(self, sample_text: str) -> None:
        """Test alias keys and enum values."""
        data = config_to_dict(parse(sample_text).config)
        assert data["colorScheme"] == 5
        assert data["leftMeters"][0] == {"type": "AllCPUs", "mode": "bar"}
        assert data["sortDirection"] == "desc"
        assert data["unknownOptions"] == {"future_option": "enabled"}
        assert data["screens"][0]["sortKey"] == "PERCENT_CPU"
        assert data["screens"][0]["treeView"] is None

    def test_parse_result_dump(self, sample_text: str) -> None:
        """Test dumping a whole parse result."""
        data = json.loads(config_to_json(parse(sample_text)))
        assert data["version"] == "v3"
        assert data["score"] == 31
        assert data["warnings"][0]["kind"] == "unknown_option"

    def test_yaml(self, sample_text: str) -> None:
        """Test that YAML output loads back to the same data."""
        config = parse(sample_text).config
        assert yaml.safe_load(config_to_yaml(config)) == config_to_dict(config)

    def test_dump_formats(self) -> None:
        """Test format selection."""
        config = parse("delay=10").config
        assert json.loads(dump(config, "JSON"))["delay"] == 10
        assert yaml.safe_load(dump(config, "yaml"))["delay"] == 10

    def test_dump_unknown_format(self) -> None:
        """Test an unsupported format."""
        with pytest.raises(ConfigurationError) as exc_info:
            dump(parse("").config, "toml")
        assert exc_info.value.setting == "output_format"
