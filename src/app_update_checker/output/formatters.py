"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from app_update_checker.models import Platform
from app_update_checker.models.status import StoreListing, VersionStatus

console = Console()


def _status_to_dict(
    status: VersionStatus | None, platform: Platform, identifier: str
) -> dict[str, Any]:
    data: dict[str, Any] = {"platform": platform.value, "identifier": identifier}
    if status is None:
        data["status"] = None
    else:
        data["status"] = status.to_dict()
    return data


def output_version_status(
    status: VersionStatus | None,
    platform: Platform,
    identifier: str,
    fmt: str,
    supported: bool = True,
) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_status_to_dict(status, platform, identifier), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_status_to_dict(status, platform, identifier), default_flow_style=False))
    elif status is None:
        if not supported:
            console.print(f"[yellow]Platform '{platform.value}' is not yet supported.[/yellow]")
        else:
            console.print(f"[yellow]No store information available for {identifier}.[/yellow]")
    else:
        from app_update_checker.output.tables import update_alert_panel, version_status_panel
        console.print(version_status_panel(status, platform, identifier))
        if status.can_update:
            console.print(update_alert_panel(status))


def output_store_listing(
    listing: StoreListing | None, platform: Platform, identifier: str, fmt: str
) -> None:
    data = {
        "platform": platform.value,
        "identifier": identifier,
        "listing": None if listing is None else {
            "store_version": listing.store_version,
            "store_link": listing.store_link,
        },
    }
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False))
    elif listing is None:
        console.print(f"[yellow]{identifier} was not found in the {platform.value} store.[/yellow]")
    else:
        from app_update_checker.output.tables import store_listing_table
        console.print(store_listing_table(listing, platform, identifier))
