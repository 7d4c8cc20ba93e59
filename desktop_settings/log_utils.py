"""Logging setup shared by the CLI and embedding applications."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .paths import tool_home

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Union[str, Path, None] = None,
) -> Optional[str]:
    """Configure root logging to stderr and a persistent log file.

    stdout is left to command output (the CLI prints JSON there).

    An existing logging configuration (e.g. when embedded, or under pytest) is
    left alone. Returns the log file path, or ``None`` if
    the file could not be opened.
    """

    root = logging.getLogger()
    if root.handlers:
        return None

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_path: Optional[Path] = None
    try:
        log_path = Path(log_file) if log_file is not None else tool_home() / "settings.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path), mode="a", encoding="utf-8"))
    except OSError:
        # Read-only home; keep console logging only.
        log_path = None

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return str(log_path) if log_path is not None else None


__all__ = ["LOG_FORMAT", "setup_logging"]
