"""Data models for the app update checker."""

from __future__ import annotations

import enum


class Platform(enum.Enum):
    ANDROID = "android"
    IOS = "ios"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_str(cls, s: str) -> Platform:
        value = (s or "").strip().lower()
        for member in cls:
            if member.value == value:
                return member
        return cls.UNSUPPORTED
