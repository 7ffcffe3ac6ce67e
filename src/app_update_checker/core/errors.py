"""Exception hierarchy for app update checks."""

from __future__ import annotations


class AppCheckError(Exception):
    """Base class for all app update checker errors."""


class VersionParseError(AppCheckError, ValueError):
    """A version string does not have the expected numeric structure."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class StoreLookupError(AppCheckError):
    """A store lookup failed for a reason other than "app not found"."""

    def __init__(self, message: str, store: str = "", identifier: str = ""):
        super().__init__(message)
        self.store = store
        self.identifier = identifier


class MalformedResponseError(StoreLookupError):
    """The store answered, but without the fields or markup we extract from."""


class StoreTransportError(StoreLookupError):
    """Network-level failure: DNS, connect, timeout, reset."""


class StoreLaunchError(AppCheckError):
    """The store page could not be opened."""


class PackageInfoError(AppCheckError):
    """Local package metadata is missing or unreadable."""
