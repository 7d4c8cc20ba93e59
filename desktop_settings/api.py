"""Composition-root helpers.

The process creates one store at startup and hands it to whatever registers
the RPC handlers; there is no module-level settings singleton.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Union

from .paths import ensure_settings_file
from .rpc import HandlerRegistry, register_settings_handlers
from .settings import SettingsStore
from .theme import Theme


def open_settings(
    settings_file: Union[str, Path, None] = None,
    base_dir: Union[str, Path, None] = None,
    theme_detector: Optional[Callable[[], Theme]] = None,
) -> SettingsStore:
    """Resolve the settings path, load it and return the live store."""
    path = ensure_settings_file(settings_file, base_dir=base_dir)
    store = SettingsStore(path, theme_detector=theme_detector)
    store.load()
    return store


def build_registry(store: SettingsStore) -> HandlerRegistry:
    registry = HandlerRegistry()
    register_settings_handlers(registry, store)
    return registry


__all__ = ["build_registry", "open_settings"]
