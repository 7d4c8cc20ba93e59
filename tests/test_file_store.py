from __future__ import annotations

from pathlib import Path

import pytest

from desktop_settings.settings import FileStore, backup_path


def test_read_missing_file_is_none(tmp_path: Path) -> None:
    assert FileStore().read(tmp_path / "nope") is None


def test_write_replaces_contents_and_creates_parents(tmp_path: Path) -> None:
    p = tmp_path / "nested" / "dir" / ".settings"
    fs = FileStore()

    fs.write(p, b"a much longer first payload")
    fs.write(p, b"short")

    assert fs.read(p) == b"short"
    assert not p.with_name(p.name + ".tmp").exists()


def test_backup_moves_file_and_overwrites_previous(tmp_path: Path) -> None:
    p = tmp_path / ".settings"
    fs = FileStore()

    p.write_bytes(b"old")
    assert fs.backup(p) == tmp_path / ".settings.bak"
    p.write_bytes(b"new")
    fs.backup(p)

    assert not p.exists()
    assert backup_path(p).read_bytes() == b"new"


def test_read_directory_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        FileStore().read(tmp_path)
