"""CLI command modules for htoprc."""

from htoprc.cli.commands import format, options, score, show, validate

__all__ = [
    "format",
    "options",
    "score",
    "show",
    "validate",
]
