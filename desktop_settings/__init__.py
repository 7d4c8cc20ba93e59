"""Desktop settings store: a JSON settings file reconciled with an in-memory document."""

from .api import build_registry, open_settings
from .settings import Settings, SettingsStore

__version__ = "0.1.0"

__all__ = ["Settings", "SettingsStore", "build_registry", "open_settings", "__version__"]
