from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

DEFAULT_SETTINGS_NAME = ".settings"


def tool_home() -> Path:
    # Log files and other tool state live here; the settings file does not.
    return Path.home() / ".desktop_settings"


def ensure_settings_file(
    name: Union[str, Path, None] = None,
    base_dir: Union[str, Path, None] = None,
) -> Path:
    """Resolve the settings file path and make sure its folder exists.

    Relative names are resolved against ``base_dir`` (default: the current
    working directory). The file itself is not created; a missing file just
    means first run.
    """

    p = Path(name or DEFAULT_SETTINGS_NAME).expanduser()
    if not p.is_absolute():
        base = Path(base_dir).expanduser() if base_dir is not None else Path.cwd()
        p = base / p
    p = p.resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


__all__ = ["DEFAULT_SETTINGS_NAME", "ensure_settings_file", "tool_home"]
