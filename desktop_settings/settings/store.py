from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Literal, Mapping, Optional, Union

from ..theme import Theme, detect_theme
from .codec import decode, encode
from .errors import SettingsError, SettingsValidationError
from .file_store import FileStore
from .merge import merge, merge_into
from .migrations import migrate
from .model import Settings, normalize_partial

logger = logging.getLogger(__name__)


LoadStatus = Literal["ok", "missing", "recovered"]
StoreState = Literal["uninitialized", "loaded", "recovered"]


@dataclass
class LoadResult:
    """Outcome of reading the settings file once."""

    settings: Settings
    status: LoadStatus
    backup_path: Optional[Path] = None


class SettingsStore:
    """Owns the in-memory settings document and its backing file.

    ``load`` rebuilds the document from fresh defaults plus the file.
    ``reload`` merges the file onto the live document instead, so mapping
    entries that only exist in memory survive a refresh.

    A corrupt file is moved to ``<file>.bak`` and replaced by defaults; this is
    logged and never raised. Other I/O errors propagate.
    """

    def __init__(
        self,
        path: Union[str, Path],
        file_store: Optional[FileStore] = None,
        theme_detector: Optional[Callable[[], Theme]] = None,
    ) -> None:
        self.path = Path(path)
        self.files = file_store or FileStore()
        self.theme_detector = theme_detector or detect_theme
        self.state: StoreState = "uninitialized"
        self.last_load: Optional[LoadResult] = None
        self._current: Optional[Settings] = None

    @property
    def current(self) -> Settings:
        if self._current is None:
            raise SettingsError("settings have not been loaded yet")
        return self._current

    def defaults(self) -> Settings:
        return Settings(file=str(self.path), theme=self.theme_detector())

    def _read(self) -> LoadResult:
        path = self.path
        raw = self.files.read(path)
        if raw is None:
            logger.info("No settings file at %s, using defaults", path)
            return LoadResult(self.defaults(), "missing")

        decoded = decode(raw, path)
        if not decoded.ok:
            bak = self.files.backup(path)
            logger.warning("Settings file has been corrupted (%s), renamed to %s", decoded.error.reason, bak)
            return LoadResult(self.defaults(), "recovered", bak)

        partial = normalize_partial(migrate(decoded.document or {}), strict=False)
        # The document is pinned to the file it was read from.
        partial.pop("file", None)
        return LoadResult(merge(self.defaults(), partial), "ok")

    def _record(self, result: LoadResult) -> None:
        self.last_load = result
        self.state = "recovered" if result.status == "recovered" else "loaded"

    def load(self, path: Union[str, Path, None] = None) -> Settings:
        """Build the current document from defaults plus the file at ``path``."""
        if path is not None:
            self.path = Path(path)
        result = self._read()
        self._current = result.settings
        self._record(result)
        logger.info("Loaded settings from %s (%s)", self.path, result.status)
        return self._current

    def save(self) -> None:
        """Write every serialized field, ``file`` included. Errors propagate."""
        self.files.write(self.path, encode(self.current.to_dict()))
        logger.info("Saved settings to %s", self.path)

    def apply_update(self, partial: Mapping[str, Any]) -> None:
        """Merge a partial document into the current one and save it.

        Raises :class:`SettingsValidationError` for malformed updates, leaving
        the document untouched.
        """

        if not isinstance(partial, Mapping):
            raise SettingsValidationError("<root>", "update must be a mapping")
        patch = normalize_partial(migrate(partial), strict=True)
        if patch.pop("file", None) is not None:
            logger.debug("Ignoring 'file' in settings update; the backing file is fixed")
        merge_into(self.current, patch)
        return self.save()

    def reload(self) -> Settings:
        """Pick up on-disk changes without discarding in-memory mapping entries."""
        result = self._read()
        if self._current is None:
            self._current = result.settings
        else:
            merge_into(self._current, result.settings.to_dict())
        self._record(result)
        return self._current


__all__ = ["LoadResult", "LoadStatus", "SettingsStore", "StoreState"]
