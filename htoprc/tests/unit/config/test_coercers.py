"""Tests for value coercion and formatting."""

from __future__ import annotations

import pytest

from htoprc.config.coercers import (
    coerce_bool,
    coerce_field_ids,
    coerce_int,
    coerce_int_list,
    coerce_sort_direction,
    format_bool,
    format_int_list,
    format_sort_direction,
    split_tokens,
)
from htoprc.core.types import SortDirection


class TestCoerceBool:
    """Tests for coerce_bool."""

    def test_one_is_true(self) -> None:
        """Test that '1' is true."""
        assert coerce_bool("1") is True

    @pytest.mark.parametrize("value", ["0", "true", "yes", "", "01", " 1"])
    def test_anything_else_is_false(self, value: str) -> None:
        """Test that only the exact value '1' is true."""
        assert coerce_bool(value) is False


class TestCoerceInt:
    """Tests for coerce_int."""

    def test_positive(self) -> None:
        """Test a plain integer."""
        assert coerce_int("15") == 15

    def test_negative(self) -> None:
        """Test a negative integer."""
        assert coerce_int("-1") == -1

    @pytest.mark.parametrize(
        "value", ["", "fast", "1.5", "0x10", "1_0", "\uff13", " 7", "+"]
    )
    def test_non_numeric_returns_none(self, value: str) -> None:
        """Test that non-numeric input yields the None sentinel."""
        assert coerce_int(value) is None


class TestListCoercion:
    """Tests for space-separated lists."""

    def test_split_tokens_drops_empty(self) -> None:
        """Test that repeated spaces do not produce empty tokens."""
        assert split_tokens(" CPU  Memory ") == ["CPU", "Memory"]

    def test_int_list_keeps_positions(self) -> None:
        """Test that bad tokens keep their position as None."""
        assert coerce_int_list("1 x 3") == [1, None, 3]

    def test_int_list_empty_tokens_keep_positions(self) -> None:
        """Test that doubled spaces leave a None slot."""
        assert coerce_int_list("2  3") == [2, None, 3]

    def test_field_ids_ignore_doubled_spaces(self) -> None:
        """Test that empty slots are dropped from field IDs."""
        assert coerce_field_ids("0  48") == [0, 48]

    def test_empty_int_list(self) -> None:
        """Test that an empty value is an empty list."""
        assert coerce_int_list("") == []

    def test_field_ids_drop_bad_tokens(self) -> None:
        """Test that non-numeric field IDs are dropped."""
        assert coerce_field_ids("0 48 abc 17") == [0, 48, 17]

    def test_empty_fields(self) -> None:
        """Test that an empty fields value is an empty list."""
        assert coerce_field_ids("") == []


class TestSortDirection:
    """Tests for sort direction coercion."""

    def test_one_is_ascending(self) -> None:
        """Test that '1' is ascending."""
        assert coerce_sort_direction("1") is SortDirection.ASC

    @pytest.mark.parametrize("value", ["-1", "0", "asc", ""])
    def test_other_values_descending(self, value: str) -> None:
        """Test that anything but '1' is descending."""
        assert coerce_sort_direction(value) is SortDirection.DESC

    def test_format(self) -> None:
        """Test formatting directions back to numbers."""
        assert format_sort_direction(SortDirection.ASC) == "1"
        assert format_sort_direction(SortDirection.DESC) == "-1"


class TestFormatters:
    """Tests for the remaining formatters."""

    def test_format_bool(self) -> None:
        """Test that booleans are written as 1 and 0."""
        assert format_bool(True) == "1"
        assert format_bool(False) == "0"

    def test_format_int_list(self) -> None:
        """Test joining integers with single spaces."""
        assert format_int_list([0, 48, 17]) == "0 48 17"
