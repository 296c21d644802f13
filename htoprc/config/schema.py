"""Pydantic models for parsed htoprc configurations.

Field names are snake_case; every model dumps camelCase aliases with
``model_dump(by_alias=True)`` for consumers that expect the JSON shape
(``leftMeters``, ``unknownOptions``, ...).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from htoprc.core.types import (
    FieldId,
    FormatVersion,
    MeterMode,
    OptionKey,
    RawValue,
    SortDirection,
    WarningKind,
)


# =============================================================================
# Base Models
# =============================================================================


class HtoprcModel(BaseModel):
    """Base model: camelCase aliases, population by field name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FrozenModel(HtoprcModel):
    """Immutable value type."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Header Meters and Screens
# =============================================================================


class Meter(FrozenModel):
    """A meter in the htop header.

    Parameters
    ----------
    type
        Meter type label such as ``CPU`` or ``Memory``.
    mode
        Display mode.
    """

    type: str
    mode: MeterMode = MeterMode.BAR


class ScreenDefinition(HtoprcModel):
    """A named htop 3.x screen (``screen:Main=...``).

    The optional fields stay ``None`` unless a scoped ``.sort_key``,
    ``.sort_direction`` or ``.tree_view`` line set them; ``None`` means the
    screen does not override the setting.
    """

    name: str
    columns: list[str] = Field(default_factory=list)
    sort_key: str | None = None
    sort_direction: SortDirection | None = None
    tree_view: bool | None = None


# =============================================================================
# Configuration
# =============================================================================


class HtopConfig(HtoprcModel):
    """Parsed htoprc configuration.

    The field defaults are the documented htop defaults. Build a fresh
    default with ``default_config()``; every container field uses a
    ``default_factory`` so instances never share lists or dicts.
    """

    # Version
    htop_version: str | None = None
    config_reader_min_version: int | None = None

    # Display
    color_scheme: int = 0
    header_layout: str = "two_50_50"
    show_program_path: bool = True
    highlight_base_name: bool = False
    highlight_deleted_exe: bool = True
    highlight_megabytes: bool = True
    highlight_threads: bool = True
    highlight_changes: bool = False
    highlight_changes_delay_secs: int = 5
    shadow_other_users: bool = False
    show_thread_names: bool = False
    show_cpu_usage: bool = True
    show_cpu_frequency: bool = False
    show_cpu_temperature: bool = False
    degree_fahrenheit: bool = False
    update_process_names: bool = False
    account_guest_in_cpu_meter: bool = False
    hide_running_in_container: bool = False
    shadow_distribution_path_prefix: bool = False
    show_cached_memory: bool = False
    topology_affinity: bool = False
    enable_mouse: bool = True
    delay: int = 15
    hide_function_bar: int = 0
    header_margin: bool = True
    screen_tabs: bool = True
    detailed_cpu_time: bool = False
    cpu_count_from_one: bool = False

    # Header meters
    left_meters: list[Meter] = Field(default_factory=list)
    right_meters: list[Meter] = Field(default_factory=list)
    extra_meter_columns: dict[str, str] = Field(default_factory=dict)

    # Process list
    columns: list[FieldId] = Field(default_factory=list)
    sort_key: int = 46
    sort_direction: SortDirection = SortDirection.DESC
    tree_view: bool = False
    tree_sort_key: int = 0
    tree_sort_direction: SortDirection = SortDirection.ASC
    tree_view_always_by_pid: bool = False
    all_branches_collapsed: bool = False

    # Threading
    hide_kernel_threads: bool = True
    hide_userland_threads: bool = False

    # Command display
    find_comm_in_cmdline: bool = True
    strip_exe_from_cmdline: bool = True
    show_merged_command: bool = False

    # Screen definitions (htop 3.x)
    screens: list[ScreenDefinition] = Field(default_factory=list)

    # Unknown options, preserved verbatim for forward compatibility
    unknown_options: dict[OptionKey, RawValue] = Field(default_factory=dict)


def default_config() -> HtopConfig:
    """Return a new configuration holding the documented defaults."""
    return HtopConfig()


def field_default(name: str) -> Any:
    """Return the documented default for an ``HtopConfig`` field."""
    return HtopConfig.model_fields[name].get_default(call_default_factory=True)


# =============================================================================
# Parse Results
# =============================================================================


class ParseWarning(FrozenModel):
    """Non-fatal issue found while parsing.

    Parameters
    ----------
    line
        1-based line number in the original input.
    message
        Human-readable description.
    kind
        Warning category.
    """

    line: int = Field(ge=1)
    message: str
    kind: WarningKind


class ParseError(FrozenModel):
    """Fatal parse issue.

    Reserved: ``parse`` never produces one, ``ParseResult.errors`` is always
    empty.
    """

    line: int = Field(ge=1)
    message: str


class ParseResult(HtoprcModel):
    """Result of parsing an htoprc file."""

    config: HtopConfig
    warnings: list[ParseWarning] = Field(default_factory=list)
    errors: list[ParseError] = Field(default_factory=list)
    version: FormatVersion = FormatVersion.UNKNOWN
    score: int = 0


# =============================================================================
# Serializer Options
# =============================================================================


class SerializeOptions(FrozenModel):
    """Options controlling ``serialize``.

    Parameters
    ----------
    include_version
        Emit ``htop_version`` and ``config_reader_min_version`` when set.
    only_non_defaults
        Skip scalar options equal to their documented default.
    include_unknown
        Re-emit preserved unknown options at the end.
    """

    include_version: bool = True
    only_non_defaults: bool = False
    include_unknown: bool = True
