"""Format command for the htoprc CLI.

Re-serializes a file in canonical option order, optionally writing only the
options that differ from htop's defaults.
"""

from __future__ import annotations

from typing import Optional

import typer

from htoprc.cli.app import SUCCESS_COLOR
from htoprc.config import SerializeOptions, load_htoprc, serialize, write_htoprc


def format_command(
    htoprc_path: str,
    only_non_defaults: bool = False,
    include_unknown: bool = True,
    include_version: bool = True,
    output: Optional[str] = None,
) -> None:
    """Parse ``htoprc_path`` and write it back out.

    Parameters
    ----------
    htoprc_path
        Input file.
    only_non_defaults
        Skip options equal to their defaults.
    include_unknown
        Keep options the engine does not recognize.
    include_version
        Keep the version header lines.
    output
        Destination file; stdout when None.
    """
    result = load_htoprc(htoprc_path)
    text = serialize(
        result.config,
        SerializeOptions(
            include_version=include_version,
            only_non_defaults=only_non_defaults,
            include_unknown=include_unknown,
        ),
    )

    if output is None:
        typer.echo(text)
        return

    path = write_htoprc(text, output)
    typer.secho(f"Wrote {path}", fg=SUCCESS_COLOR, err=True)
