"""Resolve the installed version against the store's published version."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

import httpx

from app_update_checker.config.settings import settings
from app_update_checker.core.errors import MalformedResponseError
from app_update_checker.core.local_source import resolve_identifier
from app_update_checker.core.store_clients import AppStoreClient, PlayStoreClient, StoreLookupClient
from app_update_checker.models import Platform
from app_update_checker.models.status import LocalPackageInfo, StoreListing, VersionStatus
from app_update_checker.utils.version_compare import Ordering, compare, parse_version

logger = logging.getLogger(__name__)

DEBUG_SUFFIX = ".debug"

ClientFactory = Callable[[httpx.AsyncClient], StoreLookupClient]

DEFAULT_CLIENTS: dict[Platform, ClientFactory] = {
    Platform.ANDROID: PlayStoreClient,
    Platform.IOS: AppStoreClient,
}


def normalize_local_version(platform: Platform, raw: str) -> str:
    """Strip the debug build marker Android appends to its version name."""
    value = raw.strip()
    if platform is Platform.ANDROID and value.endswith(DEBUG_SUFFIX):
        return value[: -len(DEBUG_SUFFIX)].strip()
    return value


class VersionStatusResolver:
    """Looks up an app in its platform's store and compares versions.

    Each platform is bound to a store client factory once, here; a
    platform without one is unsupported. When no ``http_client`` is given,
    every call opens and closes its own ``httpx.AsyncClient`` with
    ``timeout``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        clients: dict[Platform, ClientFactory] | None = None,
    ):
        self.http_client = http_client
        self.timeout = settings.timeout if timeout is None else timeout
        factories = DEFAULT_CLIENTS if clients is None else clients
        self._clients = {p: f for p, f in factories.items() if p is not Platform.UNSUPPORTED}

    def supports(self, platform: Platform) -> bool:
        return platform in self._clients

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.http_client is not None:
            yield self.http_client
            return
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": settings.user_agent},
            follow_redirects=True,
        ) as http:
            yield http

    async def lookup(self, platform: Platform, identifier: str) -> StoreListing | None:
        """Fetch the store listing without comparing versions.

        Returns None for an unsupported platform or an app missing from the
        store. MalformedResponseError and StoreTransportError propagate.
        """
        if not self.supports(platform):
            logger.info("Platform %s is not yet supported", platform.value)
            return None
        async with self._session() as http:
            client = self._clients[platform](http)
            listing = await client.lookup(identifier)
        if listing is None:
            logger.info("No %s store listing found for %s", client.store, identifier)
        return listing

    async def resolve(
        self, platform: Platform, local_version_raw: str, identifier: str
    ) -> VersionStatus | None:
        """Return the version status, or None when no store information is available.

        Raises VersionParseError if either version is malformed and
        StoreTransportError if the store could not be reached.
        """
        try:
            listing = await self.lookup(platform, identifier)
        except MalformedResponseError as e:
            logger.warning("Malformed response from the %s store for %s: %s", e.store, identifier, e)
            return None
        if listing is None:
            return None

        installed = parse_version(normalize_local_version(platform, local_version_raw))
        published = parse_version(listing.store_version)

        return VersionStatus(
            local_version=local_version_raw,
            store_version=listing.store_version,
            can_update=compare(published, installed) is Ordering.GREATER,
            store_link=listing.store_link,
        )

    async def get_version_status(
        self,
        platform: Platform,
        package: LocalPackageInfo,
        android_id: str | None = None,
        ios_id: str | None = None,
    ) -> VersionStatus | None:
        """Resolve using the package metadata, honouring per-store id overrides."""
        identifier = resolve_identifier(platform, package, android_id=android_id, ios_id=ios_id)
        return await self.resolve(platform, package.version, identifier)
