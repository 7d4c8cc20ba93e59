"""Canonical settings document and field table."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..languages import LanguageSettings, SUPPORTED_LANGUAGES, is_supported_language
from ..theme import DEFAULT_THEME, THEMES, Theme
from .errors import SettingsValidationError

logger = logging.getLogger(__name__)

DEFAULT_STDOUT_MAX_SIZE = 5000

# Serialized key -> attribute name. Only these keys are ever written.
FIELDS: Dict[str, str] = {
    "file": "file",
    "theme": "theme",
    "id": "id",
    "lastProject": "last_project",
    "languages": "languages",
    "stdoutMaxSize": "stdout_max_size",
}

# Fields whose values are mappings and merge recursively.
MAPPING_FIELDS = frozenset({"languages"})

# A subset of FIELDS as read from disk or pushed by an update.
PartialSettings = Dict[str, Any]


@dataclass
class Settings:
    """Fully populated settings document.

    A default-constructed instance is valid and can be saved as is.
    """

    file: str = ""
    theme: Theme = DEFAULT_THEME
    id: Optional[str] = None
    last_project: Optional[str] = None
    languages: Dict[str, LanguageSettings] = field(default_factory=dict)
    stdout_max_size: Optional[int] = DEFAULT_STDOUT_MAX_SIZE

    def to_dict(self) -> Dict[str, Any]:
        """Serialized form, keyed by the on-disk field names."""
        return {key: copy.deepcopy(getattr(self, attr)) for key, attr in FIELDS.items()}

    def get(self, key: str) -> Any:
        try:
            return getattr(self, FIELDS[key])
        except KeyError:
            raise KeyError(f"Unknown setting: {key}") from None


def _check_optional_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return None
    return "expected a string or null"


def _check_theme(value: Any) -> Optional[str]:
    if value in THEMES:
        return None
    return f"expected one of {', '.join(THEMES)}"


def _check_file(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return None
    return "expected a path string"


def _check_stdout_max_size(value: Any) -> Optional[str]:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        return "expected a non-negative integer"
    if value < 0:
        return "expected a non-negative integer"
    return None


def _check_language_entry(lang: Any, record: Any) -> Optional[str]:
    if not is_supported_language(lang):
        return f"unsupported language {lang!r} (supported: {', '.join(SUPPORTED_LANGUAGES)})"
    if not isinstance(record, Mapping):
        return f"settings for {lang!r} must be a mapping"
    return None


def _check_languages(value: Any) -> Optional[str]:
    if not isinstance(value, Mapping):
        return "expected a mapping of language settings"
    for lang, record in value.items():
        problem = _check_language_entry(lang, record)
        if problem is not None:
            return problem
    return None


def _lenient_languages(value: Mapping[str, Any]) -> Dict[str, Any]:
    # Keep the valid entries; only the bad ones are dropped.
    kept: Dict[str, Any] = {}
    for lang, record in value.items():
        problem = _check_language_entry(lang, record)
        if problem is not None:
            logger.warning("Dropping invalid language settings: %s", problem)
            continue
        kept[lang] = record
    return kept


_CHECKS = {
    "file": _check_file,
    "theme": _check_theme,
    "id": _check_optional_str,
    "lastProject": _check_optional_str,
    "languages": _check_languages,
    "stdoutMaxSize": _check_stdout_max_size,
}


def normalize_partial(partial: Mapping[str, Any], *, strict: bool) -> PartialSettings:
    """Keep the known, well-typed fields of ``partial``.

    Unknown keys are dropped. A known key with a bad value raises
    :class:`SettingsValidationError` when ``strict``; otherwise it is dropped
    with a warning so the default survives. In that lenient mode a
    ``languages`` mapping only loses its bad entries.
    """

    out: PartialSettings = {}
    for key, value in partial.items():
        check = _CHECKS.get(key)
        if check is None:
            logger.debug("Ignoring unknown settings key %r", key)
            continue
        if key == "languages" and not strict and isinstance(value, Mapping):
            out[key] = _lenient_languages(value)
            continue
        problem = check(value)
        if problem is not None:
            if strict:
                raise SettingsValidationError(key, problem)
            logger.warning("Dropping invalid settings value for %r: %s", key, problem)
            continue
        out[key] = value
    return out


__all__ = [
    "Theme",
    "THEMES",
    "DEFAULT_THEME",
    "DEFAULT_STDOUT_MAX_SIZE",
    "FIELDS",
    "MAPPING_FIELDS",
    "PartialSettings",
    "Settings",
    "normalize_partial",
]
