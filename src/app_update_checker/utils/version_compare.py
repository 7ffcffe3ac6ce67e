"""Semver parsing and comparison utilities."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import total_ordering

import semver

from app_update_checker.core.errors import VersionParseError


class Ordering(enum.Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def from_semver(cls, v: semver.Version) -> SemanticVersion:
        return cls(
            major=v.major,
            minor=v.minor,
            patch=v.patch,
            prerelease=tuple(v.prerelease.split(".")) if v.prerelease else (),
            build=tuple(v.build.split(".")) if v.build else (),
        )

    def to_semver(self) -> semver.Version:
        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            prerelease=".".join(self.prerelease) or None,
            build=".".join(self.build) or None,
        )

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        return str(self.to_semver())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is Ordering.LESS


def parse_version(text: str) -> SemanticVersion:
    """Parse ``MAJOR[.MINOR[.PATCH]][-prerelease][+build]``.

    Missing minor/patch components default to 0. Raises
    :class:`VersionParseError` on anything else.
    """
    raw = (text or "").strip()
    if not raw:
        raise VersionParseError("Version string is empty", text=text or "")
    try:
        parsed = semver.Version.parse(raw, optional_minor_and_patch=True)
    except ValueError as e:
        raise VersionParseError(f"Invalid version {text!r}: {e}", text=text) from e
    return SemanticVersion.from_semver(parsed)


def _coerce(v: SemanticVersion | str) -> SemanticVersion:
    return v if isinstance(v, SemanticVersion) else parse_version(v)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_build(a: tuple[str, ...], b: tuple[str, ...]) -> int:
    # Identifier rules match pre-release precedence; leading zeros are legal in
    # build metadata, so numerically equal ids fall back to their spelling.
    for x, y in zip(a, b):
        if x.isdigit() and y.isdigit():
            result = _cmp(int(x), int(y)) or _cmp(x, y)
        elif x.isdigit() or y.isdigit():
            result = -1 if x.isdigit() else 1
        else:
            result = _cmp(x, y)
        if result:
            return result
    return _cmp(len(a), len(b))


def compare(a: SemanticVersion | str, b: SemanticVersion | str) -> Ordering:
    """Compare two versions with semver precedence.

    Build metadata, which semver ignores, is used as a final tie-breaker so
    that only identical versions compare EQUAL.
    """
    va, vb = _coerce(a), _coerce(b)
    result = va.to_semver().compare(vb.to_semver())
    if not result:
        result = _compare_build(va.build, vb.build)
    return Ordering(result)


def is_newer(current: str, candidate: str) -> bool:
    """Return True if candidate is newer than current."""
    return compare(candidate, current) is Ordering.GREATER
