"""Exception hierarchy for htoprc.

Parsing and serialization never raise; these exceptions belong to the file
helpers and the command-line interface that wrap the engine.

Exception Hierarchy:
    HtoprcError (base)
    ├── ConfigurationError
    └── HtoprcFileError
        ├── HtoprcFileNotFoundError
        └── HtoprcDecodeError
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class HtoprcError(Exception):
    """Base exception for all htoprc errors.

    Parameters
    ----------
    message
        Human-readable error description.
    details
        Optional additional context about the error.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(HtoprcError):
    """Raised when htoprc itself is configured with an invalid setting.

    Parameters
    ----------
    message
        Description of the problem.
    setting
        Name of the offending setting.
    value
        The rejected value.
    """

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        value: Any = None,
    ) -> None:
        details: dict[str, Any] = {}
        if setting is not None:
            details["setting"] = setting
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.setting = setting
        self.value = value


# =============================================================================
# File Errors
# =============================================================================


class HtoprcFileError(HtoprcError):
    """Base exception for reading or writing htoprc files.

    Parameters
    ----------
    message
        Description of the failure.
    path
        File that could not be read or written.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        details: dict[str, Any] = {}
        if path is not None:
            details["path"] = str(path)
        super().__init__(message, details)
        self.path = Path(path) if path is not None else None


class HtoprcFileNotFoundError(HtoprcFileError):
    """Raised when an htoprc file does not exist."""


class HtoprcDecodeError(HtoprcFileError):
    """Raised when an htoprc file is not valid text in the expected encoding.

    Parameters
    ----------
    message
        Description of the failure.
    path
        File that could not be decoded.
    encoding
        Encoding that was attempted.
    """

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        encoding: str | None = None,
    ) -> None:
        super().__init__(message, path)
        if encoding is not None:
            self.details["encoding"] = encoding
        self.encoding = encoding
