"""Application configuration and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _default_timeout() -> float:
    """Return the HTTP timeout in seconds, honouring APPCHECK_TIMEOUT."""
    raw = os.environ.get("APPCHECK_TIMEOUT", "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.debug("Ignoring invalid APPCHECK_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def _default_user_agent() -> str:
    try:
        pkg_version = version("app-update-checker")
    except PackageNotFoundError:
        pkg_version = "0.0.0"
    return f"app-update-checker/{pkg_version}"


def _env(name: str, default: str) -> str:
    return os.environ.get(name, "") or default


@dataclass
class Settings:
    apple_lookup_url: str = field(
        default_factory=lambda: _env("APPCHECK_APPLE_LOOKUP_URL", "https://itunes.apple.com/lookup")
    )
    play_store_url: str = field(
        default_factory=lambda: _env("APPCHECK_PLAY_STORE_URL", "https://play.google.com/store/apps/details")
    )
    timeout: float = field(default_factory=_default_timeout)
    country: str = field(default_factory=lambda: _env("APPCHECK_COUNTRY", ""))
    user_agent: str = field(default_factory=_default_user_agent)
    play_version_label: str = "Current Version"
    default_output: str = "table"  # "table", "json" or "yaml"


# Global singleton
settings = Settings()
