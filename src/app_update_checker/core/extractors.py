"""Version extraction rules for store pages that only publish HTML.

The Play store has no lookup API, so the version is scraped from the app
page. Its markup is unversioned and changes without notice; everything that
depends on its shape lives here.
"""

from __future__ import annotations

import logging
from typing import Protocol

from bs4 import BeautifulSoup

from app_update_checker.core.errors import MalformedResponseError

logger = logging.getLogger(__name__)


class VersionExtractor(Protocol):
    def extract(self, markup: str) -> str:
        """Return the published version string, or raise MalformedResponseError."""
        ...


class LabelValueExtractor:
    """Find the row captioned ``label`` and return the text next to it.

    The page lays out app details as rows of ``<caption><value>`` pairs;
    ``row_selector``, ``label_selector`` and ``value_selector`` are CSS
    selectors for those three parts.
    """

    def __init__(
        self,
        label: str = "Current Version",
        row_selector: str = "div.hAyfc",
        label_selector: str = ".BgcNfc",
        value_selector: str = ".htlgb",
    ):
        self.label = label
        self.row_selector = row_selector
        self.label_selector = label_selector
        self.value_selector = value_selector

    def extract(self, markup: str) -> str:
        soup = BeautifulSoup(markup, "html.parser")
        rows = soup.select(self.row_selector)
        if not rows:
            raise MalformedResponseError(
                f"No detail rows matching {self.row_selector!r} in store page",
                store="play",
            )

        for row in rows:
            caption = row.select_one(self.label_selector)
            if caption is None or caption.get_text(strip=True) != self.label:
                continue
            value = row.select_one(self.value_selector)
            text = value.get_text(strip=True) if value is not None else ""
            if not text:
                raise MalformedResponseError(
                    f"Row {self.label!r} has no value matching {self.value_selector!r}",
                    store="play",
                )
            return text

        logger.debug("Checked %d detail rows, none captioned %r", len(rows), self.label)
        raise MalformedResponseError(f"No row captioned {self.label!r} in store page", store="play")
