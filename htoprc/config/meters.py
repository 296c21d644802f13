"""Header meter assembly.

Meter names and meter modes arrive on separate lines
(``column_meters_0=CPU Memory`` / ``column_meter_modes_0=1 2``). The scan
collects the raw values per column in a ``MeterColumns`` buffer; once the
whole file has been read, ``assemble`` zips names with modes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from htoprc.config.coercers import coerce_int_list, format_int_list, split_tokens
from htoprc.config.schema import Meter
from htoprc.core.types import MeterMode

LEFT_COLUMN = 0
RIGHT_COLUMN = 1


def build_meters(names_value: str, modes_value: str | None = None) -> list[Meter]:
    """Zip a meter-name value with a mode-number value.

    The result has one meter per name. Missing, non-numeric or out-of-range
    modes become ``bar``; surplus modes are ignored.

    >>> build_meters("CPU Memory", "1 2")
    [Meter(type='CPU', mode=<MeterMode.BAR: 'bar'>), Meter(type='Memory', mode=<MeterMode.TEXT: 'text'>)]
    """
    names = split_tokens(names_value)
    modes = coerce_int_list(modes_value) if modes_value is not None else []
    return [
        Meter(type=name, mode=MeterMode.from_number(modes[i] if i < len(modes) else None))
        for i, name in enumerate(names)
    ]


def meter_values(meters: list[Meter]) -> tuple[str, str]:
    """Return the ``(names, modes)`` value strings for a meter list."""
    names = " ".join(meter.type for meter in meters)
    modes = format_int_list(meter.mode.to_number() for meter in meters)
    return names, modes


@dataclass
class MeterColumns:
    """Raw meter values collected during a scan, per header column.

    Later lines for the same column replace earlier ones, whichever spelling
    (``column_meters_0`` or htop 2.x ``left_meters``) they use.
    """

    names: dict[int, str] = field(default_factory=dict)
    modes: dict[int, str] = field(default_factory=dict)

    def set_names(self, column: int, value: str) -> None:
        self.names[column] = value

    def set_modes(self, column: int, value: str) -> None:
        self.modes[column] = value

    def assemble(self) -> tuple[list[Meter], list[Meter]]:
        """Build the left and right meter lists."""
        return self._column_meters(LEFT_COLUMN), self._column_meters(RIGHT_COLUMN)

    def extra_columns(self) -> dict[str, str]:
        """Raw values of columns beyond left/right, keyed by htoprc key.

        These columns are not promoted to meter lists but are kept so they
        can be written back unchanged.
        """
        extra: dict[str, str] = {}
        for column in sorted(set(self.names) | set(self.modes)):
            if column in (LEFT_COLUMN, RIGHT_COLUMN):
                continue
            if column in self.names:
                extra[f"column_meters_{column}"] = self.names[column]
            if column in self.modes:
                extra[f"column_meter_modes_{column}"] = self.modes[column]
        return extra

    def _column_meters(self, column: int) -> list[Meter]:
        if column not in self.names:
            return []
        return build_meters(self.names[column], self.modes.get(column))
