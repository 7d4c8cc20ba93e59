"""Persistent application settings.

The settings live in a single JSON file. Loading is resilient (a corrupt file
is moved to ``.bak`` and defaults are used), writes are atomic, and partial
updates are deep-merged into the canonical document.
"""

from .codec import DecodeResult, decode, encode
from .errors import CorruptionError, SettingsError, SettingsValidationError
from .file_store import FileStore, backup_path
from .merge import merge, merge_deep, merge_into
from .migrations import MIGRATIONS, MigrationStep, RenameField, migrate
from .model import FIELDS, THEMES, PartialSettings, Settings, normalize_partial
from .store import LoadResult, SettingsStore

__all__ = [
    "CorruptionError",
    "DecodeResult",
    "FIELDS",
    "FileStore",
    "LoadResult",
    "MIGRATIONS",
    "MigrationStep",
    "PartialSettings",
    "RenameField",
    "Settings",
    "SettingsError",
    "SettingsStore",
    "SettingsValidationError",
    "THEMES",
    "backup_path",
    "decode",
    "encode",
    "merge",
    "merge_deep",
    "merge_into",
    "migrate",
    "normalize_partial",
]
