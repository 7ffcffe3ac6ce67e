"""Decide whether to alert about an update, and open the store page."""

from __future__ import annotations

import logging
import webbrowser
from typing import Awaitable, Callable

from app_update_checker.core.errors import StoreLaunchError
from app_update_checker.core.resolver import VersionStatusResolver
from app_update_checker.models import Platform
from app_update_checker.models.status import LocalPackageInfo, VersionStatus

logger = logging.getLogger(__name__)

UPDATE_TITLE = "Update Required"
UPDATE_BUTTON = "Update"

Notify = Callable[[VersionStatus], None]


def should_alert(status: VersionStatus | None) -> bool:
    return status is not None and status.can_update


def update_message(status: VersionStatus) -> str:
    return (
        f"New app version (v{status.store_version}) available on store, "
        "please update to continue."
    )


def launch_store(link: str, opener: Callable[[str], bool] = webbrowser.open) -> None:
    """Open the store page, raising StoreLaunchError if nothing could open it."""
    if not link:
        raise StoreLaunchError("No store link to open")
    logger.debug("Opening store page %s", link)
    if not opener(link):
        raise StoreLaunchError(f"Could not launch {link}")


async def alert_if_necessary(
    resolver: VersionStatusResolver,
    platform: Platform,
    package: LocalPackageInfo,
    notify: Notify | Callable[[VersionStatus], Awaitable[None]],
    android_id: str | None = None,
    ios_id: str | None = None,
) -> VersionStatus | None:
    """Check the store and call ``notify`` only when an update is available."""
    status = await resolver.get_version_status(platform, package, android_id=android_id, ios_id=ios_id)
    if should_alert(status):
        result = notify(status)
        if result is not None:
            await result
    return status
