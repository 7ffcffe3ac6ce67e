"""appcheck check - Check whether a store update is available."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from app_update_checker.cli.options import OutputOption, PlatformOption, TimeoutOption
from app_update_checker.core.errors import (
    PackageInfoError,
    StoreLaunchError,
    StoreTransportError,
    VersionParseError,
)
from app_update_checker.core.local_source import load_package_info, resolve_identifier
from app_update_checker.core.notifier import launch_store, should_alert
from app_update_checker.core.resolver import VersionStatusResolver
from app_update_checker.models import Platform
from app_update_checker.models.status import LocalPackageInfo
from app_update_checker.output.formatters import output_version_status

app = typer.Typer()


def make_resolver(timeout: float | None) -> VersionStatusResolver:
    return VersionStatusResolver(timeout=timeout)


@app.callback(invoke_without_command=True)
def check(
    platform: str = PlatformOption,
    version: Optional[str] = typer.Option(None, "--version", help="Installed version"),
    metadata: Optional[Path] = typer.Option(
        None, "--metadata", "-m", help="YAML/JSON file with version and packageIdentifier"
    ),
    identifier: Optional[str] = typer.Option(None, "--id", help="Bundle id / package name"),
    android_id: Optional[str] = typer.Option(None, "--android-id", help="Play store id override"),
    ios_id: Optional[str] = typer.Option(None, "--ios-id", help="App Store id override"),
    output: str = OutputOption,
    timeout: Optional[float] = TimeoutOption,
    open_store: bool = typer.Option(False, "--open", help="Open the store page if an update is available"),
) -> None:
    """Compare the installed version with the version published in the store."""
    if metadata is not None:
        try:
            package = load_package_info(metadata)
        except PackageInfoError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1)
        if version:
            package = LocalPackageInfo(version=version, package_identifier=package.package_identifier)
        if identifier:
            package = LocalPackageInfo(version=package.version, package_identifier=identifier)
    else:
        package = LocalPackageInfo(version=version or "", package_identifier=identifier or "")

    plat = Platform.from_str(platform)
    resolver = make_resolver(timeout)
    supported = resolver.supports(plat)
    store_id = resolve_identifier(plat, package, android_id=android_id, ios_id=ios_id)

    if supported:
        if not package.version:
            typer.echo("An installed version is required (--version or --metadata).", err=True)
            raise typer.Exit(code=1)
        if not store_id:
            typer.echo("A store identifier is required (--id, --android-id/--ios-id or --metadata).", err=True)
            raise typer.Exit(code=1)

    try:
        status = asyncio.run(
            resolver.get_version_status(plat, package, android_id=android_id, ios_id=ios_id)
        )
    except VersionParseError as e:
        typer.echo(f"Invalid version: {e}", err=True)
        raise typer.Exit(code=2)
    except StoreTransportError as e:
        typer.echo(f"Store unreachable: {e}", err=True)
        raise typer.Exit(code=3)

    output_version_status(status, plat, store_id, output, supported=supported)

    if open_store and should_alert(status):
        try:
            launch_store(status.store_link)
        except StoreLaunchError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1)
