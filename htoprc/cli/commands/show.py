"""Show command for the htoprc CLI."""

from __future__ import annotations

import typer

from htoprc.config import dump, load_htoprc


def show_command(htoprc_path: str, output_format: str = "json") -> None:
    """Print the parsed configuration of ``htoprc_path``.

    Raises ``ConfigurationError`` for an unknown ``output_format``.
    """
    result = load_htoprc(htoprc_path)
    typer.echo(dump(result.config, output_format))
