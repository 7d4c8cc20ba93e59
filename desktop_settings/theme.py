"""Theme values and default theme selection.

Real OS dark-mode detection belongs to the hosting application; it can pass its
own detector to the store. This fallback only looks at an environment override.
"""

from __future__ import annotations

import os
from typing import Literal, Tuple

Theme = Literal["dark", "light"]
THEMES: Tuple[str, ...] = ("dark", "light")
DEFAULT_THEME: Theme = "light"

THEME_ENV_VAR = "DESKTOP_SETTINGS_THEME"


def detect_theme() -> Theme:
    value = os.environ.get(THEME_ENV_VAR, "").strip().lower()
    if value in THEMES:
        return value  # type: ignore[return-value]
    return DEFAULT_THEME


__all__ = ["Theme", "THEMES", "DEFAULT_THEME", "THEME_ENV_VAR", "detect_theme"]
