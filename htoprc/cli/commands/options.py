"""Options command for the htoprc CLI."""

from __future__ import annotations

import typer

from htoprc.cli.app import INFO_COLOR
from htoprc.config.options import DYNAMIC_OPTIONS, SCALAR_OPTIONS
from htoprc.config.schema import field_default


def options_command() -> None:
    """Print the option catalog grouped as it is serialized."""
    group = None
    for spec in SCALAR_OPTIONS.values():
        if spec.group is not group:
            group = spec.group
            typer.echo()
            typer.secho(f"[{group.value}]", fg=INFO_COLOR)
        default = field_default(spec.field)
        default_text = "" if default in (None, []) else f" (default: {spec.format(default)})"
        typer.echo(f"  {spec.key:<34} {spec.description}{default_text}")

    typer.echo()
    typer.secho("[patterns]", fg=INFO_COLOR)
    for pattern, description in DYNAMIC_OPTIONS:
        typer.echo(f"  {pattern:<34} {description}")
