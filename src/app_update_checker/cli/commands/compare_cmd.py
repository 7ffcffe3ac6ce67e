"""appcheck compare <a> <b> - Compare two version strings."""

from __future__ import annotations

import typer
from rich.console import Console

from app_update_checker.core.errors import VersionParseError
from app_update_checker.output.themes import styled_ordering
from app_update_checker.utils.version_compare import compare

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def compare_versions(
    first: str = typer.Argument(help="First version"),
    second: str = typer.Argument(help="Second version"),
) -> None:
    """Print LESS, EQUAL or GREATER for FIRST compared with SECOND."""
    try:
        ordering = compare(first, second)
    except VersionParseError as e:
        typer.echo(f"Invalid version: {e}", err=True)
        raise typer.Exit(code=2)
    console.print(styled_ordering(ordering))
