"""Store lookup clients for the Apple App Store and Google Play."""

from __future__ import annotations

import json
import logging
from typing import Protocol

import httpx

from app_update_checker.config.settings import settings
from app_update_checker.core.errors import MalformedResponseError, StoreTransportError
from app_update_checker.core.extractors import LabelValueExtractor, VersionExtractor
from app_update_checker.models.status import StoreListing

logger = logging.getLogger(__name__)


class StoreLookupClient(Protocol):
    store: str

    async def lookup(self, identifier: str) -> StoreListing | None:
        """Return the store's listing, or None when the app is not in the catalog."""
        ...


async def _fetch(
    http: httpx.AsyncClient, url: str, params: dict[str, str], store: str, identifier: str
) -> httpx.Response:
    try:
        return await http.get(url, params=params)
    except httpx.RequestError as e:
        raise StoreTransportError(
            f"Could not reach the {store} store for {identifier!r}: {e}",
            store=store,
            identifier=identifier,
        ) from e


class AppStoreClient:
    """Reads the iTunes lookup API, which answers with a JSON document."""

    store = "apple"

    def __init__(
        self,
        http: httpx.AsyncClient,
        lookup_url: str | None = None,
        country: str | None = None,
    ):
        self.http = http
        self.lookup_url = lookup_url or settings.apple_lookup_url
        self.country = settings.country if country is None else country

    async def lookup(self, identifier: str) -> StoreListing | None:
        params = {"bundleId": identifier}
        if self.country:
            params["country"] = self.country
        response = await _fetch(self.http, self.lookup_url, params, self.store, identifier)

        if not response.is_success:
            logger.info(
                "Can't find an app in the App Store with the id %s (HTTP %d)",
                identifier,
                response.status_code,
            )
            return None

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponseError(
                f"App Store lookup for {identifier!r} did not return JSON",
                store=self.store,
                identifier=identifier,
            ) from e

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise MalformedResponseError(
                f"App Store lookup for {identifier!r} has no 'results' list",
                store=self.store,
                identifier=identifier,
            )
        if not results:
            logger.info("Can't find an app in the App Store with the id %s", identifier)
            return None

        first = results[0] if isinstance(results[0], dict) else {}
        store_version = first.get("version")
        track_url = first.get("trackViewUrl")
        if not store_version or not track_url:
            missing = [k for k, v in (("version", store_version), ("trackViewUrl", track_url)) if not v]
            raise MalformedResponseError(
                f"App Store result for {identifier!r} is missing {', '.join(missing)}",
                store=self.store,
                identifier=identifier,
            )
        return StoreListing(store_version=str(store_version), store_link=str(track_url))


class PlayStoreClient:
    """Scrapes the public Play store page; the version rule is an extractor."""

    store = "play"

    def __init__(
        self,
        http: httpx.AsyncClient,
        page_url: str | None = None,
        extractor: VersionExtractor | None = None,
    ):
        self.http = http
        self.page_url = page_url or settings.play_store_url
        self.extractor = extractor or LabelValueExtractor(label=settings.play_version_label)

    def page_link(self, identifier: str) -> str:
        return str(httpx.URL(self.page_url, params={"id": identifier}))

    async def lookup(self, identifier: str) -> StoreListing | None:
        url = self.page_link(identifier)
        response = await _fetch(self.http, self.page_url, {"id": identifier}, self.store, identifier)

        if not response.is_success:
            logger.info(
                "Can't find an app in the Play Store with the id %s (HTTP %d)",
                identifier,
                response.status_code,
            )
            return None

        try:
            store_version = self.extractor.extract(response.text)
        except MalformedResponseError as e:
            e.identifier = identifier
            raise
        return StoreListing(store_version=store_version, store_link=url)
