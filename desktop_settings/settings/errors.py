from __future__ import annotations

from pathlib import Path
from typing import Optional


class SettingsError(Exception):
    """Base class for settings store errors."""


class SettingsValidationError(SettingsError, ValueError):
    """Raised when an update carries a value of the wrong shape for a known field."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class CorruptionError(SettingsError):
    """The settings file exists but does not hold a JSON object.

    Carries the location and the original bytes so the caller can move the file
    aside. ``load`` always recovers from this; it never reaches callers of the
    store.
    """

    def __init__(self, path: Optional[Path], raw: bytes, reason: str) -> None:
        where = str(path) if path is not None else "<memory>"
        super().__init__(f"corrupt settings in {where}: {reason}")
        self.path = path
        self.raw = raw
        self.reason = reason


__all__ = ["SettingsError", "SettingsValidationError", "CorruptionError"]
