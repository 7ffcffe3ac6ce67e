"""
Pytest configuration and shared fixtures for app update checker tests.
"""

import json

import httpx
import pytest


PLAY_PAGE = """
<html><body>
<div class="IxB2fe">
  <div class="hAyfc"><div class="BgcNfc">Updated</div>
    <span class="htlgb"><div class="IQ1z0d"><span class="htlgb">March 3, 2021</span></div></span></div>
  <div class="hAyfc"><div class="BgcNfc">Current Version</div>
    <span class="htlgb"><div class="IQ1z0d"><span class="htlgb">{version}</span></div></span></div>
  <div class="hAyfc"><div class="BgcNfc">Requires Android</div>
    <span class="htlgb"><div class="IQ1z0d"><span class="htlgb">5.0 and up</span></div></span></div>
</div>
</body></html>
"""


def play_page(version="1.1.0"):
    return PLAY_PAGE.format(version=version)


def apple_payload(version="1.1.0", link="https://apps.apple.com/app/id123"):
    return {
        "resultCount": 1,
        "results": [{"bundleId": "com.example.app", "version": version, "trackViewUrl": link}],
    }


@pytest.fixture
def make_http():
    """Build an AsyncClient whose requests are answered by ``handler``."""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def apple_ok(make_http):
    return make_http(lambda request: httpx.Response(200, json=apple_payload()))


@pytest.fixture
def play_ok(make_http):
    return make_http(lambda request: httpx.Response(200, text=play_page()))


@pytest.fixture
def metadata_file(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"version": "1.0.0", "packageIdentifier": "com.example.app"}), encoding="utf-8")
    return path
