"""JSON codec for the settings file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import CorruptionError


@dataclass(frozen=True)
class DecodeResult:
    """Either a parsed partial document or the corruption that prevented it."""

    document: Optional[Dict[str, Any]] = None
    error: Optional[CorruptionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode(raw: bytes, path: Optional[Path] = None) -> DecodeResult:
    """Parse settings bytes.

    Empty (or whitespace-only) input is an empty document, not corruption.
    """

    if not raw:
        return DecodeResult(document={})

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        return DecodeResult(error=CorruptionError(path, raw, f"not UTF-8 ({e.reason})"))

    if not text.strip():
        return DecodeResult(document={})

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; deeply nested input overflows the parser.
        return DecodeResult(error=CorruptionError(path, raw, f"{type(e).__name__}: {e}"))

    if not isinstance(data, dict):
        return DecodeResult(error=CorruptionError(path, raw, "root is not an object"))
    return DecodeResult(document=data)


def encode(data: Mapping[str, Any]) -> bytes:
    txt = json.dumps(dict(data), indent=2, sort_keys=True)
    return (txt + "\n").encode("utf-8")


__all__ = ["DecodeResult", "decode", "encode"]
