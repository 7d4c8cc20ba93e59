"""Forward migrations for legacy settings keys.

Each step owns exactly one legacy key and leaves every other key alone, so
steps can be appended in any order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)


class MigrationStep(ABC):
    """A rewrite keyed on a single legacy field."""

    legacy_key: str

    @abstractmethod
    def apply(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class RenameField(MigrationStep):
    """Move ``legacy_key``'s value to ``key`` and drop ``legacy_key``.

    A null legacy value is dropped without touching ``key``.
    """

    legacy_key: str
    key: str

    def apply(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        if self.legacy_key not in doc:
            return doc
        out = dict(doc)
        value = out.pop(self.legacy_key)
        if value is not None:
            out[self.key] = value
        logger.debug("Migrated settings key %r -> %r", self.legacy_key, self.key)
        return out


MIGRATIONS: Tuple[MigrationStep, ...] = (
    # Older files stored the installation identifier as "uid".
    RenameField("uid", "id"),
)


def migrate(partial: Mapping[str, Any], steps: Sequence[MigrationStep] = MIGRATIONS) -> Dict[str, Any]:
    """Return a migrated copy of ``partial``; the input is not modified."""
    doc = dict(partial)
    for step in steps:
        doc = step.apply(doc)
    return doc


__all__ = ["MigrationStep", "RenameField", "MIGRATIONS", "migrate"]
