"""Update and comparison color maps."""

from app_update_checker.models.status import VersionStatus
from app_update_checker.utils.version_compare import Ordering

ORDERING_COLORS: dict[Ordering, str] = {
    Ordering.LESS: "yellow",
    Ordering.EQUAL: "green",
    Ordering.GREATER: "cyan",
}


def styled_update(status: VersionStatus) -> str:
    if status.can_update:
        return "[yellow bold]update available[/yellow bold]"
    return "[green]up to date[/green]"


def styled_ordering(ordering: Ordering) -> str:
    color = ORDERING_COLORS.get(ordering, "white")
    return f"[{color}]{ordering.name}[/{color}]"
