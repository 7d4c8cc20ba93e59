"""Byte-level persistence for the settings file and its backup."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

BACKUP_SUFFIX = ".bak"


def backup_path(path: PathLike) -> Path:
    path = Path(path)
    return path.with_name(path.name + BACKUP_SUFFIX)


class FileStore:
    """Reads and writes raw settings bytes.

    A missing file is a normal first-run state and reads as ``None``. Any other
    ``OSError`` (permissions, path is a directory, ...) propagates.
    """

    def read(self, path: PathLike) -> Optional[bytes]:
        try:
            return Path(path).read_bytes()
        except FileNotFoundError:
            return None

    def write(self, path: PathLike, data: bytes) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")

        # Atomic replace; readers never see a half-written file.
        try:
            tmp.write_bytes(data)
            os.replace(tmp, path)
        except OSError:
            if tmp.exists():
                tmp.unlink()
            raise

    def backup(self, path: PathLike) -> Path:
        """Move ``path`` aside to ``<path>.bak``, replacing an older backup."""
        bak = backup_path(path)
        os.replace(Path(path), bak)
        return bak


__all__ = ["BACKUP_SUFFIX", "FileStore", "backup_path"]
