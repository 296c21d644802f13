"""Core module containing shared enums, type aliases and exceptions."""

from htoprc.core.exceptions import (
    ConfigurationError,
    HtoprcDecodeError,
    HtoprcError,
    HtoprcFileError,
    HtoprcFileNotFoundError,
)
from htoprc.core.types import (
    FieldId,
    FormatVersion,
    HeaderLayout,
    MeterMode,
    OptionKey,
    RawValue,
    SortDirection,
    WarningKind,
)

__all__ = [
    # Exceptions
    "HtoprcError",
    "ConfigurationError",
    "HtoprcFileError",
    "HtoprcFileNotFoundError",
    "HtoprcDecodeError",
    # Types
    "FieldId",
    "FormatVersion",
    "HeaderLayout",
    "MeterMode",
    "OptionKey",
    "RawValue",
    "SortDirection",
    "WarningKind",
]
