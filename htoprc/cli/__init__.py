"""Command-line interface for htoprc.

Quick Start
-----------
>>> # From command line:
>>> htoprc validate ~/.config/htop/htoprc
>>> htoprc format ~/.config/htop/htoprc --only-non-defaults
>>> htoprc show ~/.config/htop/htoprc --format yaml
"""

from htoprc.cli.app import (
    ERROR_COLOR,
    INFO_COLOR,
    SUCCESS_COLOR,
    WARNING_COLOR,
    app,
    cli,
    handle_errors,
)

__all__ = [
    "app",
    "cli",
    "handle_errors",
    "INFO_COLOR",
    "ERROR_COLOR",
    "SUCCESS_COLOR",
    "WARNING_COLOR",
]
