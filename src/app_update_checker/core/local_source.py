"""Local package metadata and store identifier resolution."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from app_update_checker.core.errors import PackageInfoError
from app_update_checker.models import Platform
from app_update_checker.models.status import LocalPackageInfo

logger = logging.getLogger(__name__)


def load_package_info(path: Path) -> LocalPackageInfo:
    """Read ``version`` and ``packageIdentifier`` from a YAML or JSON file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PackageInfoError(f"Cannot read package metadata {path}: {e}") from e
    except yaml.YAMLError as e:
        raise PackageInfoError(f"Cannot parse package metadata {path}: {e}") from e

    if not isinstance(data, dict):
        raise PackageInfoError(f"Package metadata {path} is not a mapping")

    info = LocalPackageInfo.from_dict(data)
    if not info.version:
        raise PackageInfoError(f"Package metadata {path} has no 'version'")
    logger.debug("Loaded package metadata from %s: %s", path, info)
    return info


def resolve_identifier(
    platform: Platform,
    package: LocalPackageInfo,
    android_id: str | None = None,
    ios_id: str | None = None,
) -> str:
    """Pick the store identifier: a per-store override, else the package id.

    Overrides exist for apps published under a different id in one store.
    """
    if platform is Platform.ANDROID and android_id:
        return android_id
    if platform is Platform.IOS and ios_id:
        return ios_id
    return package.package_identifier
