"""Option catalog and key classifier for the htoprc format.

The catalog is a single ordered table of every static scalar option: its
htoprc key, the ``HtopConfig`` field it sets, how its value is coerced and
formatted, and a short description. The parser looks keys up here, the
serializer walks it in order, and the CLI prints it.

``classify`` resolves any key to an ``OptionMatch`` tagged with an
``OptionKind``; dynamic patterns (screens, scoped screen options, meter
columns, legacy meter keys) are recognized after the static table.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from htoprc.config.coercers import (
    coerce_bool,
    coerce_field_ids,
    coerce_int,
    coerce_sort_direction,
    coerce_str,
    format_bool,
    format_int,
    format_int_list,
    format_sort_direction,
    format_str,
)

SCREEN_PREFIX = "screen:"
SCOPED_PREFIX = "."

# Header layouts go up to four columns
MAX_METER_COLUMNS = 4

_METER_NAMES_KEY = re.compile(r"column_meters_(0|[1-9]\d*)")
_METER_MODES_KEY = re.compile(r"column_meter_modes_(0|[1-9]\d*)")

# (prefix, column) pairs for htop 2.x header keys
_LEGACY_NAME_PREFIXES = (("left_meters", 0), ("right_meters", 1))
_LEGACY_MODE_PREFIXES = (("left_meter_modes", 0), ("right_meter_modes", 1))


class ValueKind(str, Enum):
    """How an option value is written in the file."""

    BOOL = "boolean"
    INT = "number"
    STRING = "string"
    LIST = "list"
    SORT_DIRECTION = "direction"


class OptionGroup(str, Enum):
    """Serialization groups, in file order."""

    VERSION = "version"
    PROCESS_LIST = "process list"
    SORT = "sorting"
    THREADING = "threading"
    DISPLAY = "display"
    COLOR_LAYOUT = "color and layout"
    TREE_VIEW = "tree view"
    COMMAND = "command display"
    HEADER = "header"
    CPU = "cpu and meters"
    FUNCTION_BAR = "function bar"


@dataclass(frozen=True)
class OptionSpec:
    """A static scalar htoprc option.

    Parameters
    ----------
    key
        Option name as written in the file.
    field
        ``HtopConfig`` attribute it sets.
    kind
        Value kind.
    group
        Serialization group.
    description
        One-line human description.
    nullable
        Whether the field may hold ``None`` (coercion failures store
        ``None`` instead of being ignored).
    """

    key: str
    field: str
    kind: ValueKind
    group: OptionGroup
    description: str
    nullable: bool = False

    @property
    def coerce(self) -> Callable[[str], Any]:
        return _COERCERS[self.kind]

    @property
    def format(self) -> Callable[[Any], str]:
        return _FORMATTERS[self.kind]


_COERCERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.BOOL: coerce_bool,
    ValueKind.INT: coerce_int,
    ValueKind.STRING: coerce_str,
    ValueKind.LIST: coerce_field_ids,
    ValueKind.SORT_DIRECTION: coerce_sort_direction,
}

_FORMATTERS: dict[ValueKind, Callable[[Any], str]] = {
    ValueKind.BOOL: format_bool,
    ValueKind.INT: format_int,
    ValueKind.STRING: format_str,
    ValueKind.LIST: format_int_list,
    ValueKind.SORT_DIRECTION: format_sort_direction,
}


def _opt(
    key: str,
    kind: ValueKind,
    group: OptionGroup,
    description: str,
    field: str | None = None,
    nullable: bool = False,
) -> OptionSpec:
    return OptionSpec(
        key=key,
        field=field or key,
        kind=kind,
        group=group,
        description=description,
        nullable=nullable,
    )


_B, _I, _S = ValueKind.BOOL, ValueKind.INT, ValueKind.STRING
_G = OptionGroup

# Order here is the serialization order.
_OPTION_TABLE: tuple[OptionSpec, ...] = (
    # Version
    _opt("htop_version", _S, _G.VERSION,
         "htop version that wrote the file", nullable=True),
    _opt("config_reader_min_version", _I, _G.VERSION,
         "Minimum config reader version needed to read the file", nullable=True),
    # Process list
    _opt("fields", ValueKind.LIST, _G.PROCESS_LIST,
         "Process list columns (space-separated field IDs)", field="columns"),
    # Sorting
    _opt("sort_key", _I, _G.SORT, "Field ID to sort by"),
    _opt("sort_direction", ValueKind.SORT_DIRECTION, _G.SORT,
         "Sort direction (1=ascending, -1=descending)"),
    _opt("tree_sort_key", _I, _G.SORT, "Field ID to sort by in tree view"),
    _opt("tree_sort_direction", ValueKind.SORT_DIRECTION, _G.SORT,
         "Tree view sort direction (1=ascending, -1=descending)"),
    # Threading
    _opt("hide_kernel_threads", _B, _G.THREADING, "Hide kernel threads"),
    _opt("hide_userland_threads", _B, _G.THREADING, "Hide userland threads"),
    # Display
    _opt("shadow_other_users", _B, _G.DISPLAY, "Shadow other users' processes"),
    _opt("show_thread_names", _B, _G.DISPLAY, "Show custom thread names"),
    _opt("show_program_path", _B, _G.DISPLAY, "Show full program path"),
    _opt("highlight_base_name", _B, _G.DISPLAY, "Highlight program basename"),
    _opt("highlight_deleted_exe", _B, _G.DISPLAY,
         "Highlight deleted or replaced executables"),
    _opt("highlight_megabytes", _B, _G.DISPLAY, "Highlight large memory numbers"),
    _opt("highlight_threads", _B, _G.DISPLAY, "Display threads in a different color"),
    _opt("highlight_changes", _B, _G.DISPLAY, "Highlight new and old processes"),
    _opt("highlight_changes_delay_secs", _I, _G.DISPLAY,
         "Seconds a changed process stays highlighted"),
    # Color and layout
    _opt("color_scheme", _I, _G.COLOR_LAYOUT,
         "Color scheme (0=default, 1=monochrome, 2=black on white, "
         "3=light terminal, 4=MC, 5=black night, 6=broken gray)"),
    _opt("enable_mouse", _B, _G.COLOR_LAYOUT, "Enable mouse support"),
    _opt("delay", _I, _G.COLOR_LAYOUT, "Update interval in tenths of a second"),
    _opt("header_layout", _S, _G.COLOR_LAYOUT, "Header column layout"),
    # Tree view
    _opt("tree_view", _B, _G.TREE_VIEW, "Show processes as a tree"),
    _opt("tree_view_always_by_pid", _B, _G.TREE_VIEW, "Always sort the tree by PID"),
    _opt("all_branches_collapsed", _B, _G.TREE_VIEW,
         "Start with all tree branches collapsed"),
    # Command display
    _opt("find_comm_in_cmdline", _B, _G.COMMAND,
         "Find the process name in the command line"),
    _opt("strip_exe_from_cmdline", _B, _G.COMMAND,
         "Strip the executable path from the command line"),
    _opt("show_merged_command", _B, _G.COMMAND,
         "Merge exe, comm and cmdline in the Command column"),
    # Header
    _opt("header_margin", _B, _G.HEADER, "Leave a margin around the header"),
    _opt("screen_tabs", _B, _G.HEADER, "Show screen tabs"),
    _opt("detailed_cpu_time", _B, _G.HEADER,
         "Detailed CPU time (System/IO-Wait/Hard-IRQ/Soft-IRQ/Steal/Guest)"),
    _opt("cpu_count_from_one", _B, _G.HEADER, "Number CPUs from 1 instead of 0"),
    # CPU and meters
    _opt("show_cpu_usage", _B, _G.CPU, "Show CPU usage percentage in meters"),
    _opt("show_cpu_frequency", _B, _G.CPU, "Show CPU frequency in meters"),
    _opt("show_cpu_temperature", _B, _G.CPU, "Show CPU temperature in meters"),
    _opt("degree_fahrenheit", _B, _G.CPU, "Show temperatures in Fahrenheit"),
    _opt("update_process_names", _B, _G.CPU, "Update process names on every refresh"),
    _opt("account_guest_in_cpu_meter", _B, _G.CPU,
         "Add guest time to the CPU meter percentage"),
    _opt("hide_running_in_container", _B, _G.CPU,
         "Hide processes running in containers"),
    _opt("shadow_distribution_path_prefix", _B, _G.CPU,
         "Shadow distribution path prefixes in commands"),
    _opt("show_cached_memory", _B, _G.CPU, "Show cached memory in the memory meter"),
    _opt("topology_affinity", _B, _G.CPU, "Show topology when selecting affinity"),
    # Function bar
    _opt("hide_function_bar", _I, _G.FUNCTION_BAR,
         "Hide the function bar (0=show, 1=hide on ESC, 2=always hide)"),
)

SCALAR_OPTIONS: MappingProxyType[str, OptionSpec] = MappingProxyType(
    {spec.key: spec for spec in _OPTION_TABLE}
)
"""Static scalar options keyed by htoprc key, in serialization order."""

DYNAMIC_OPTIONS: tuple[tuple[str, str], ...] = (
    ("column_meters_<N>", "Meter types in header column N (0-3)"),
    ("column_meter_modes_<N>", "Meter modes for column N (1=bar, 2=text, 3=graph, 4=led)"),
    ("left_meters, right_meters", "htop 2.x header meters (read as columns 0 and 1)"),
    ("left_meter_modes, right_meter_modes", "htop 2.x header meter modes"),
    ("screen:<name>", "Screen with the listed columns (htop 3.x)"),
    (".sort_key", "Sort column of the preceding screen"),
    (".sort_direction", "Sort direction of the preceding screen (1=ascending)"),
    (".tree_view", "Tree view for the preceding screen"),
)

METER_TYPES: tuple[str, ...] = (
    # CPU
    "CPU", "AllCPUs", "AllCPUs2", "AllCPUs4", "AllCPUs8",
    "LeftCPUs", "LeftCPUs2", "LeftCPUs4", "LeftCPUs8",
    "RightCPUs", "RightCPUs2", "RightCPUs4", "RightCPUs8",
    "CPUFrequency", "CPUTemperature",
    # Memory
    "Memory", "Swap", "Zram", "ZFSARC", "ZFSCARC",
    # System
    "Tasks", "LoadAverage", "Uptime", "Clock", "Date", "DateTime",
    "Hostname", "SysArch", "Battery",
    # I/O
    "DiskIO", "NetworkIO", "FileDescriptors",
    # Pressure stall
    "Pressure",
    "PressureStallCPUSome", "PressureStallIOSome", "PressureStallMemorySome",
    "PressureStallCPUFull", "PressureStallIOFull", "PressureStallMemoryFull",
    # Other
    "SELinux", "Systemd", "GPU", "Blank",
)
"""Meter type names known to current htop releases."""


# =============================================================================
# Classifier
# =============================================================================


class OptionKind(str, Enum):
    """What a key refers to."""

    SCALAR = "scalar"
    SCREEN = "screen"
    SCREEN_OPTION = "screen_option"
    METER_NAMES = "meter_names"
    METER_MODES = "meter_modes"
    LEGACY_METER_NAMES = "legacy_meter_names"
    LEGACY_METER_MODES = "legacy_meter_modes"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class OptionMatch:
    """Classification of a single key.

    Parameters
    ----------
    kind
        What the key refers to.
    key
        The classified key.
    spec
        Catalog entry, for ``SCALAR`` keys.
    column
        Header column index, for meter keys.
    name
        Screen name for ``SCREEN`` keys, option suffix for
        ``SCREEN_OPTION`` keys.
    """

    kind: OptionKind
    key: str
    spec: OptionSpec | None = None
    column: int | None = None
    name: str | None = None

    @property
    def is_known(self) -> bool:
        return self.kind is not OptionKind.UNKNOWN


def classify(key: str) -> OptionMatch:
    """Classify an htoprc key.

    Static options win over patterns; the patterns are tried in order:
    ``screen:``, leading ``.``, ``column_meters_<N>`` and
    ``column_meter_modes_<N>`` for N below ``MAX_METER_COLUMNS``, then the
    htop 2.x ``left_*``/``right_*`` meter prefixes.

    Examples
    --------
    >>> classify("color_scheme").kind
    <OptionKind.SCALAR: 'scalar'>
    >>> classify("screen:I/O").name
    'I/O'
    >>> classify("column_meter_modes_1").column
    1
    >>> classify("column_meters_9").kind
    <OptionKind.UNKNOWN: 'unknown'>
    """
    spec = SCALAR_OPTIONS.get(key)
    if spec is not None:
        return OptionMatch(OptionKind.SCALAR, key, spec=spec)

    if key.startswith(SCREEN_PREFIX):
        return OptionMatch(OptionKind.SCREEN, key, name=key[len(SCREEN_PREFIX):])

    if key.startswith(SCOPED_PREFIX):
        return OptionMatch(OptionKind.SCREEN_OPTION, key, name=key[len(SCOPED_PREFIX):])

    for pattern, kind in (
        (_METER_NAMES_KEY, OptionKind.METER_NAMES),
        (_METER_MODES_KEY, OptionKind.METER_MODES),
    ):
        match = pattern.fullmatch(key)
        if match is not None:
            column = int(match.group(1))
            if column < MAX_METER_COLUMNS:
                return OptionMatch(kind, key, column=column)
            return OptionMatch(OptionKind.UNKNOWN, key)

    for prefixes, kind in (
        (_LEGACY_MODE_PREFIXES, OptionKind.LEGACY_METER_MODES),
        (_LEGACY_NAME_PREFIXES, OptionKind.LEGACY_METER_NAMES),
    ):
        for prefix, column in prefixes:
            if key.startswith(prefix):
                return OptionMatch(kind, key, column=column)

    return OptionMatch(OptionKind.UNKNOWN, key)


def is_known_option(key: str) -> bool:
    """Whether ``classify`` recognizes ``key``."""
    return classify(key).is_known
