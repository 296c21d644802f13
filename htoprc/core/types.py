"""Enumerations and type aliases shared across htoprc.

Usage:
    from htoprc.core.types import MeterMode, SortDirection, FormatVersion
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

# =============================================================================
# Raw Text Types
# =============================================================================

OptionKey: TypeAlias = str
"""Key text before the first ``=`` of an htoprc line."""

RawValue: TypeAlias = str
"""Value text after the first ``=`` of an htoprc line, uninterpreted."""

FieldId: TypeAlias = int
"""Numeric process-list field identifier as written in ``fields=``."""


# =============================================================================
# Enumerations
# =============================================================================


class MeterMode(str, Enum):
    """Display mode of a header meter."""

    BAR = "bar"
    TEXT = "text"
    GRAPH = "graph"
    LED = "led"

    @classmethod
    def from_number(cls, number: int | None) -> "MeterMode":
        """Convert an htoprc mode number (1-4) to a MeterMode.

        Anything outside 1-4, including ``None``, falls back to ``BAR``.
        """
        if number is None:
            return cls.BAR
        return _MODE_BY_NUMBER.get(number, cls.BAR)

    def to_number(self) -> int:
        """Return the htoprc mode number for this mode."""
        return _NUMBER_BY_MODE[self]


_MODE_BY_NUMBER = {
    1: MeterMode.BAR,
    2: MeterMode.TEXT,
    3: MeterMode.GRAPH,
    4: MeterMode.LED,
}
_NUMBER_BY_MODE = {mode: number for number, mode in _MODE_BY_NUMBER.items()}


class SortDirection(str, Enum):
    """Process list sort direction."""

    ASC = "asc"
    DESC = "desc"


class HeaderLayout(str, Enum):
    """Header layouts understood by htop 3.x.

    The ``header_layout`` option is stored as a plain string so that layouts
    introduced by newer htop releases pass through unchanged; this enum only
    names the known ones.
    """

    TWO_50_50 = "two_50_50"
    TWO_33_67 = "two_33_67"
    TWO_67_33 = "two_67_33"
    THREE_33_34_33 = "three_33_34_33"
    THREE_25_25_50 = "three_25_25_50"
    THREE_25_50_25 = "three_25_50_25"
    THREE_50_25_25 = "three_50_25_25"
    FOUR_25_25_25_25 = "four_25_25_25_25"


class FormatVersion(str, Enum):
    """Detected htoprc format generation."""

    V2 = "v2"
    V3 = "v3"
    UNKNOWN = "unknown"


class WarningKind(str, Enum):
    """Category of a non-fatal parse warning."""

    UNKNOWN_OPTION = "unknown_option"
    INVALID_VALUE = "invalid_value"
    DEPRECATED = "deprecated"
