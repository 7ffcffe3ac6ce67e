"""Store listing and version status models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoreListing:
    store_version: str
    store_link: str


@dataclass(frozen=True)
class VersionStatus:
    """Installed version versus the most recent version in the store."""

    local_version: str
    store_version: str
    can_update: bool
    store_link: str

    def to_dict(self) -> dict[str, object]:
        return {
            "local_version": self.local_version,
            "store_version": self.store_version,
            "can_update": self.can_update,
            "store_link": self.store_link,
        }


@dataclass(frozen=True)
class LocalPackageInfo:
    version: str
    package_identifier: str

    @classmethod
    def from_dict(cls, d: dict) -> LocalPackageInfo:
        return cls(
            version=str(d.get("version", "")),
            package_identifier=str(d.get("packageIdentifier", d.get("package_identifier", ""))),
        )
