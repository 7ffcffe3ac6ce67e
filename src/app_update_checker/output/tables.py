"""Rich renderables for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from app_update_checker.core.notifier import UPDATE_BUTTON, UPDATE_TITLE, update_message
from app_update_checker.models import Platform
from app_update_checker.models.status import StoreListing, VersionStatus
from app_update_checker.output.themes import styled_update


def version_status_panel(status: VersionStatus, platform: Platform, identifier: str) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("App", identifier)
    table.add_row("Platform", platform.value)
    table.add_row("Installed", status.local_version)
    table.add_row("Store", status.store_version)
    table.add_row("Status", styled_update(status))
    table.add_row("Store Link", status.store_link or "-")

    border = "yellow" if status.can_update else "green"
    return Panel(table, title="[bold]Version Status[/bold]", border_style=border)


def store_listing_table(listing: StoreListing, platform: Platform, identifier: str) -> Table:
    table = Table(title="Store Listing", expand=False)
    table.add_column("App", style="magenta", no_wrap=True)
    table.add_column("Platform", style="blue")
    table.add_column("Version", style="bold")
    table.add_column("Link", style="dim")
    table.add_row(identifier, platform.value, listing.store_version, listing.store_link)
    return table


def update_alert_panel(status: VersionStatus) -> Panel:
    body = f"{update_message(status)}\n\n[bold]{UPDATE_BUTTON}:[/bold] {status.store_link}"
    return Panel(body, title=f"[bold]{UPDATE_TITLE}[/bold]", border_style="yellow bold")
