"""Score command for the htoprc CLI."""

from __future__ import annotations

import typer

from htoprc.cli.app import INFO_COLOR, SUCCESS_COLOR
from htoprc.config import explain_score, load_htoprc


def score_command(htoprc_path: str) -> None:
    """Print each scoring rule that applies to the file, then the total."""
    result = load_htoprc(htoprc_path)
    components = explain_score(result.config)

    typer.secho(f"Scoring: {htoprc_path!r}", fg=INFO_COLOR)
    for component in components:
        typer.echo(f"  +{component.points:<3} {component.description}")
    if not components:
        typer.echo("  (no customizations detected)")
    typer.secho(f"Total: {result.score}", fg=SUCCESS_COLOR)
