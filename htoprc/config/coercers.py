"""Conversions between raw htoprc value strings and typed field values.

Every coercer accepts any string and never raises. Integer coercion uses
``None`` as its "no value" sentinel; callers decide what ``None`` means for
the field being set.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from htoprc.core.types import SortDirection

# Optional sign and ASCII digits only
_INTEGER = re.compile(r"[+-]?[0-9]+")


def split_tokens(value: str) -> list[str]:
    """Split a value on single spaces, dropping empty tokens.

    >>> split_tokens("CPU  Memory Swap")
    ['CPU', 'Memory', 'Swap']
    """
    return [token for token in value.split(" ") if token]


# =============================================================================
# Coercers (text -> value)
# =============================================================================


def coerce_bool(value: str) -> bool:
    """Only the exact value ``"1"`` is true."""
    return value == "1"


def coerce_int(value: str) -> int | None:
    """Parse a base-10 integer, returning ``None`` for non-numeric input.

    >>> coerce_int("42")
    42
    >>> coerce_int("-1")
    -1
    >>> coerce_int("fast") is None
    True
    >>> coerce_int("1_0") is None
    True
    """
    if _INTEGER.fullmatch(value) is None:
        return None
    return int(value, 10)


def coerce_str(value: str) -> str:
    """Pass the value through unchanged; htoprc has no inline comments."""
    return value


def coerce_int_list(value: str) -> list[int | None]:
    """Split on single spaces and coerce each token with ``coerce_int``.

    Non-numeric and empty tokens keep their position as ``None``, so a doubled
    space still counts as a slot. An empty value is an empty list.

    >>> coerce_int_list("1 2 x 4")
    [1, 2, None, 4]
    >>> coerce_int_list("2  3")
    [2, None, 3]
    >>> coerce_int_list("")
    []
    """
    if not value:
        return []
    return [coerce_int(token) for token in value.split(" ")]


def coerce_field_ids(value: str) -> list[int]:
    """Coerce a ``fields=`` value, keeping only numeric field IDs."""
    return [field_id for field_id in coerce_int_list(value) if field_id is not None]


def coerce_sort_direction(value: str) -> SortDirection:
    """``"1"`` is ascending, anything else is descending."""
    return SortDirection.ASC if value == "1" else SortDirection.DESC


# =============================================================================
# Formatters (value -> text)
# =============================================================================


def format_bool(value: bool) -> str:
    return "1" if value else "0"


def format_int(value: int) -> str:
    return str(value)


def format_str(value: str) -> str:
    return value


def format_int_list(values: Iterable[int]) -> str:
    return " ".join(str(v) for v in values)


def format_sort_direction(value: SortDirection) -> str:
    return "1" if value == SortDirection.ASC else "-1"
