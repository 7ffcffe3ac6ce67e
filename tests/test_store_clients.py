"""
Tests for the App Store and Play store lookup clients.
"""

import asyncio

import httpx
import pytest

from conftest import apple_payload, play_page
from app_update_checker.core.errors import MalformedResponseError, StoreTransportError
from app_update_checker.core.extractors import LabelValueExtractor
from app_update_checker.core.store_clients import AppStoreClient, PlayStoreClient
from app_update_checker.models.status import StoreListing


class TestAppStoreClient:
    def test_lookup_extracts_version_and_link(self, make_http):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=apple_payload("2.3.1", "https://apps.apple.com/app/id9"))

        client = AppStoreClient(make_http(handler), lookup_url="https://itunes.apple.com/lookup", country="")
        listing = asyncio.run(client.lookup("com.example.app"))

        assert listing == StoreListing(store_version="2.3.1", store_link="https://apps.apple.com/app/id9")
        assert len(seen) == 1
        assert str(seen[0].url) == "https://itunes.apple.com/lookup?bundleId=com.example.app"

    def test_country_is_sent_when_set(self, make_http):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=apple_payload())

        client = AppStoreClient(make_http(handler), country="de")
        asyncio.run(client.lookup("com.example.app"))
        assert seen[0].url.params["country"] == "de"

    def test_non_success_status_is_not_found(self, make_http):
        client = AppStoreClient(make_http(lambda r: httpx.Response(404)))
        assert asyncio.run(client.lookup("com.missing")) is None

    def test_empty_results_is_not_found(self, make_http):
        client = AppStoreClient(make_http(lambda r: httpx.Response(200, json={"resultCount": 0, "results": []})))
        assert asyncio.run(client.lookup("com.missing")) is None

    @pytest.mark.parametrize("payload", [
        {"resultCount": 1, "results": [{"trackViewUrl": "https://apps.apple.com/app/id1"}]},
        {"resultCount": 1, "results": [{"version": "1.0.0"}]},
        {"unexpected": True},
        {"resultCount": 1, "results": {"version": "1.0.0", "trackViewUrl": "https://apps.apple.com/app/id1"}},
        {"resultCount": 0, "results": ""},
        ["not", "an", "object"],
    ])
    def test_missing_fields_are_malformed(self, make_http, payload):
        client = AppStoreClient(make_http(lambda r: httpx.Response(200, json=payload)))
        with pytest.raises(MalformedResponseError) as exc_info:
            asyncio.run(client.lookup("com.example.app"))
        assert exc_info.value.store == "apple"
        assert exc_info.value.identifier == "com.example.app"

    def test_non_json_body_is_malformed(self, make_http):
        client = AppStoreClient(make_http(lambda r: httpx.Response(200, text="<html>oops</html>")))
        with pytest.raises(MalformedResponseError):
            asyncio.run(client.lookup("com.example.app"))

    def test_transport_failure_is_distinct(self, make_http):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = AppStoreClient(make_http(handler))
        with pytest.raises(StoreTransportError) as exc_info:
            asyncio.run(client.lookup("com.example.app"))
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_is_a_transport_failure(self, make_http):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = AppStoreClient(make_http(handler))
        with pytest.raises(StoreTransportError):
            asyncio.run(client.lookup("com.example.app"))

    def test_redirect_loop_is_a_transport_failure(self):
        def handler(request):
            return httpx.Response(302, headers={"Location": str(request.url)})

        http = httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
        client = AppStoreClient(http)
        with pytest.raises(StoreTransportError) as exc_info:
            asyncio.run(client.lookup("com.example.app"))
        assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)


class TestPlayStoreClient:
    def test_lookup_scrapes_current_version(self, make_http):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text=play_page("4.5.6"))

        client = PlayStoreClient(make_http(handler), page_url="https://play.google.com/store/apps/details")
        listing = asyncio.run(client.lookup("com.example.app"))

        assert listing.store_version == "4.5.6"
        assert listing.store_link == "https://play.google.com/store/apps/details?id=com.example.app"
        assert str(seen[0].url) == listing.store_link

    def test_non_success_status_is_not_found(self, make_http):
        client = PlayStoreClient(make_http(lambda r: httpx.Response(404, text="Not Found")))
        assert asyncio.run(client.lookup("com.missing")) is None

    def test_page_without_version_row_is_malformed(self, make_http):
        client = PlayStoreClient(make_http(lambda r: httpx.Response(200, text="<html><body>new layout</body></html>")))
        with pytest.raises(MalformedResponseError) as exc_info:
            asyncio.run(client.lookup("com.example.app"))
        assert exc_info.value.store == "play"
        assert exc_info.value.identifier == "com.example.app"

    def test_custom_extractor(self, make_http):
        class FixedExtractor:
            def extract(self, markup):
                return "9.9.9"

        client = PlayStoreClient(make_http(lambda r: httpx.Response(200, text="")), extractor=FixedExtractor())
        assert asyncio.run(client.lookup("com.example.app")).store_version == "9.9.9"

    def test_transport_failure_is_distinct(self, make_http):
        def handler(request):
            raise httpx.ConnectError("name resolution failed", request=request)

        client = PlayStoreClient(make_http(handler))
        with pytest.raises(StoreTransportError):
            asyncio.run(client.lookup("com.example.app"))


class TestLabelValueExtractor:
    def test_finds_row_by_caption(self):
        assert LabelValueExtractor().extract(play_page("1.2.3")) == "1.2.3"

    def test_value_text_is_stripped(self):
        assert LabelValueExtractor().extract(play_page("  7.0.1 \n")) == "7.0.1"

    def test_caption_must_match_exactly(self):
        markup = play_page().replace("Current Version", "Current version")
        with pytest.raises(MalformedResponseError):
            LabelValueExtractor().extract(markup)

    def test_row_without_value_is_malformed(self):
        markup = '<div class="hAyfc"><div class="BgcNfc">Current Version</div></div>'
        with pytest.raises(MalformedResponseError):
            LabelValueExtractor().extract(markup)

    def test_selectors_are_configurable(self):
        markup = "<dl><div class='row'><dt>Version</dt><dd>3.1.4</dd></div></dl>"
        extractor = LabelValueExtractor(
            label="Version", row_selector="div.row", label_selector="dt", value_selector="dd"
        )
        assert extractor.extract(markup) == "3.1.4"
