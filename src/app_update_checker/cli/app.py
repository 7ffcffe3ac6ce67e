"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

app = typer.Typer(
    name="appcheck",
    help="App Update Checker - Compare an installed app against its store listing.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookups and diagnostics"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from app_update_checker.cli.commands.check_cmd import app as check_app
    from app_update_checker.cli.commands.lookup_cmd import app as lookup_app
    from app_update_checker.cli.commands.compare_cmd import app as compare_app

    app.add_typer(check_app, name="check", help="Check whether a store update is available")
    app.add_typer(lookup_app, name="lookup", help="Show an app's store listing")
    app.add_typer(compare_app, name="compare", help="Compare two version strings")


_register_commands()


def main() -> None:
    app()
