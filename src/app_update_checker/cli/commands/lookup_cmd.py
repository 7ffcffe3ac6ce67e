"""appcheck lookup <platform> <identifier> - Show an app's store listing."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from app_update_checker.cli.commands.check_cmd import make_resolver
from app_update_checker.cli.options import OutputOption, TimeoutOption
from app_update_checker.core.errors import MalformedResponseError, StoreTransportError
from app_update_checker.models import Platform
from app_update_checker.output.formatters import output_store_listing

app = typer.Typer()


@app.callback(invoke_without_command=True)
def lookup(
    platform: str = typer.Argument(help="Target platform: android, ios"),
    identifier: str = typer.Argument(help="Bundle id / package name"),
    output: str = OutputOption,
    timeout: Optional[float] = TimeoutOption,
) -> None:
    """Fetch the version currently published in the store."""
    plat = Platform.from_str(platform)
    resolver = make_resolver(timeout)
    if not resolver.supports(plat):
        typer.echo(f"Platform '{platform}' is not yet supported.", err=True)
        raise typer.Exit(code=1)

    try:
        listing = asyncio.run(resolver.lookup(plat, identifier))
    except MalformedResponseError as e:
        typer.echo(f"Malformed response from the {e.store} store: {e}", err=True)
        raise typer.Exit(code=4)
    except StoreTransportError as e:
        typer.echo(f"Store unreachable: {e}", err=True)
        raise typer.Exit(code=3)

    output_store_listing(listing, plat, identifier, output)
