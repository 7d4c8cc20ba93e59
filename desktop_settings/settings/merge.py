"""Deep merge of partial settings onto a canonical document.

Rules, for every key present in the partial document:
  * both sides are mappings -> merge recursively
  * anything else (scalars, lists, None) -> the partial value replaces the base

Keys that only exist in the base are never removed.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping

from .model import FIELDS, MAPPING_FIELDS, Settings

logger = logging.getLogger(__name__)


def merge_deep(base: Mapping[str, Any], patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge two plain mappings into a new dict.

    Neither argument is modified; the result shares no nested containers with
    them.
    """

    out: Dict[str, Any] = {k: copy.deepcopy(v) for k, v in base.items()}
    for key, value in patch.items():
        current = out.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            out[key] = merge_deep(current, value)
        else:
            out[key] = copy.deepcopy(value)
    return out


def merge_into(target: Settings, partial: Mapping[str, Any]) -> Settings:
    """Merge ``partial`` onto ``target`` in place and return ``target``."""
    for key, value in partial.items():
        attr = FIELDS.get(key)
        if attr is None:
            logger.debug("merge: ignoring unknown key %r", key)
            continue
        current = getattr(target, attr)
        if key in MAPPING_FIELDS and isinstance(current, Mapping) and isinstance(value, Mapping):
            setattr(target, attr, merge_deep(current, value))
        else:
            setattr(target, attr, copy.deepcopy(value))
    return target


def merge(base: Settings, partial: Mapping[str, Any]) -> Settings:
    """Return a new document: ``partial`` merged onto a copy of ``base``."""
    return merge_into(copy.deepcopy(base), partial)


__all__ = ["merge", "merge_deep", "merge_into"]
