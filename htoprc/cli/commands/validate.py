"""Validate command for the htoprc CLI.

Parses a file and reports what the engine found: format version, score,
warnings and htop 2.x options that have a modern replacement.
"""

from __future__ import annotations

import typer

from htoprc.cli.app import ERROR_COLOR, INFO_COLOR, SUCCESS_COLOR, WARNING_COLOR
from htoprc.config import (
    METER_TYPES,
    check_deprecated_options,
    config_to_json,
    parse,
    read_htoprc,
)
from htoprc.core.types import HeaderLayout


def validate_command(
    htoprc_path: str, strict: bool = False, show_config: bool = False
) -> None:
    """Validate an htoprc file.

    Parameters
    ----------
    htoprc_path
        Path to the htoprc file.
    strict
        If True, exit with status 1 when any warning was reported.
    show_config
        If True, print the parsed configuration as JSON.
    """
    text = read_htoprc(htoprc_path)
    typer.secho(f"Validating: {htoprc_path!r}", fg=INFO_COLOR)

    result = parse(text)
    config = result.config
    deprecations = check_deprecated_options(text)

    typer.secho(f"Detected format version: {result.version.value}", fg=INFO_COLOR)
    if config.htop_version is not None:
        typer.echo(f"  Written by htop {config.htop_version}")
    typer.echo(f"  Customization score: {result.score}")
    typer.echo(f"  Left meters: {len(config.left_meters)}")
    typer.echo(f"  Right meters: {len(config.right_meters)}")
    typer.echo(f"  Process columns: {len(config.columns)}")
    typer.echo(f"  Screens: {len(config.screens)}")

    unrecognized_meters = sorted(
        {
            meter.type
            for meter in (*config.left_meters, *config.right_meters)
            if meter.type not in METER_TYPES
        }
    )
    if unrecognized_meters:
        typer.echo(f"  Meters not known to this tool: {', '.join(unrecognized_meters)}")
    if config.header_layout not in {layout.value for layout in HeaderLayout}:
        typer.echo(f"  Header layout not known to this tool: {config.header_layout}")

    if result.warnings:
        typer.echo()
        typer.secho("Warnings:", fg=WARNING_COLOR)
        for warning in result.warnings:
            typer.echo(f"  line {warning.line}: {warning.message}")

    if deprecations:
        typer.echo()
        typer.secho("Deprecation notices:", fg=WARNING_COLOR)
        for notice in deprecations:
            typer.echo(f"  line {notice.line}: {notice.message}")

    if show_config:
        typer.echo()
        typer.secho("Parsed configuration:", fg=INFO_COLOR)
        typer.echo("-" * 40)
        typer.echo(config_to_json(config))

    typer.echo()
    if strict and (result.warnings or deprecations):
        typer.secho("Validation failed (strict mode).", fg=ERROR_COLOR)
        raise typer.Exit(1)
    typer.secho("Validation passed!", fg=SUCCESS_COLOR)
