"""Old -> new identifier mapping for a single reconciliation."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from rehash.models.substitutions import Substitution, SubstitutionKey

logger = logging.getLogger(__name__)


class SubstitutionMap:
    """Insert-only mapping from ``SubstitutionKey`` to new token.

    Entries are never overwritten or removed; iteration follows insertion
    order. One map lives for exactly one reconciliation.
    """

    def __init__(self) -> None:
        self._entries: dict[SubstitutionKey, str] = {}

    def record(self, key: SubstitutionKey, new_token: str) -> bool:
        """Record ``key -> new_token``; return False if the key was taken."""
        existing = self._entries.get(key)
        if existing is not None:
            if existing != new_token:
                logger.warning(
                    "Substitution for %s already recorded as %s; ignoring %s",
                    key, existing, new_token,
                )
            return False
        self._entries[key] = new_token
        return True

    def get(self, key: SubstitutionKey) -> str | None:
        return self._entries.get(key)

    def items(self) -> Iterator[tuple[SubstitutionKey, str]]:
        return iter(list(self._entries.items()))

    def to_substitutions(self) -> list[Substitution]:
        return [Substitution(key=k, new_token=v) for k, v in self._entries.items()]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
