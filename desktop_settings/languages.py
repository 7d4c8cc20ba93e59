"""Language keys accepted in the ``languages`` settings field."""

from __future__ import annotations

from typing import Any, Dict, Literal, Tuple, get_args


SupportedLanguage = Literal["javascript", "python", "ruby", "julia", "r", "php", "deno", "sql"]

SUPPORTED_LANGUAGES: Tuple[str, ...] = get_args(SupportedLanguage)

# Per-language records are free-form; the UI conventionally stores {"path": ...}.
LanguageSettings = Dict[str, Any]


def is_supported_language(key: object) -> bool:
    return isinstance(key, str) and key in SUPPORTED_LANGUAGES


__all__ = ["SupportedLanguage", "SUPPORTED_LANGUAGES", "LanguageSettings", "is_supported_language"]
