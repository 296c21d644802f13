"""Main CLI application for htoprc.

This module provides the command-line interface using Typer.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

import typer

from htoprc.core.exceptions import HtoprcError, HtoprcFileNotFoundError

# Global debug flag
DEBUG = False

# Color scheme
INFO_COLOR = typer.colors.CYAN
ERROR_COLOR = typer.colors.BRIGHT_RED
SUCCESS_COLOR = typer.colors.GREEN
WARNING_COLOR = typer.colors.YELLOW


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Turn htoprc errors into colored messages and exit codes.

    A missing file exits with 2, any other ``HtoprcError`` with 1. With the
    ``--debug`` flag the original exception propagates instead.
    """
    try:
        yield
    except HtoprcError as e:
        if DEBUG:
            raise
        typer.secho(f"Error: {e}", fg=ERROR_COLOR, err=True)
        raise typer.Exit(2 if isinstance(e, HtoprcFileNotFoundError) else 1)


def _version_callback(value: bool) -> None:
    """Display version information."""
    from htoprc import __version__

    if value:
        typer.echo(f"htoprc {__version__}")
        raise typer.Exit()


# Create the main application
app = typer.Typer(
    name="htoprc",
    help="htoprc: parse, score and rewrite htop configuration files.",
    add_completion=False,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log engine debug messages to stderr.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show full tracebacks on errors.",
    ),
) -> None:
    """htoprc: parse, score and rewrite htop configuration files."""
    from htoprc.logging import configure_logging

    global DEBUG
    DEBUG = debug

    if verbose:
        configure_logging(level="DEBUG")


@app.command()
def validate(
    htoprc_file: str = typer.Argument(..., help="Path to the htoprc file to validate."),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Fail if any warning is reported.",
    ),
    show_config: bool = typer.Option(
        False,
        "--show",
        help="Print the parsed configuration as JSON.",
    ),
) -> None:
    """Parse an htoprc file and report warnings, version and score."""
    from htoprc.cli.commands.validate import validate_command

    with handle_errors():
        validate_command(htoprc_file, strict=strict, show_config=show_config)


@app.command()
def show(
    htoprc_file: str = typer.Argument(..., help="Path to the htoprc file."),
    output_format: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Output format: json or yaml.",
    ),
) -> None:
    """Print the parsed configuration as JSON or YAML."""
    from htoprc.cli.commands.show import show_command

    with handle_errors():
        show_command(htoprc_file, output_format=output_format)


@app.command(name="format")
def format_(
    htoprc_file: str = typer.Argument(..., help="Path to the htoprc file."),
    only_non_defaults: bool = typer.Option(
        False,
        "--only-non-defaults",
        help="Only write options that differ from htop's defaults.",
    ),
    no_unknown: bool = typer.Option(
        False,
        "--no-unknown",
        help="Drop options this tool does not recognize.",
    ),
    no_version: bool = typer.Option(
        False,
        "--no-version",
        help="Drop htop_version and config_reader_min_version.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to this file instead of stdout.",
    ),
) -> None:
    """Re-serialize an htoprc file in canonical order."""
    from htoprc.cli.commands.format import format_command

    with handle_errors():
        format_command(
            htoprc_file,
            only_non_defaults=only_non_defaults,
            include_unknown=not no_unknown,
            include_version=not no_version,
            output=output,
        )


@app.command()
def score(
    htoprc_file: str = typer.Argument(..., help="Path to the htoprc file."),
) -> None:
    """Show the customization score and the rules that contributed."""
    from htoprc.cli.commands.score import score_command

    with handle_errors():
        score_command(htoprc_file)


@app.command()
def options() -> None:
    """List the htoprc options this tool understands."""
    from htoprc.cli.commands.options import options_command

    options_command()


# CLI entry point
cli = app


if __name__ == "__main__":
    cli()
