"""Duplicate delivery detection.

SMS backups frequently hold the same notification more than once (re-sent
messages, merged backups). Two messages with the same timestamp, sender and
body are one event; only the first occurrence is processed.

The seen-set is owned by one run and is not safe for concurrent mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import RawMessage, dedupe_key


@dataclass(slots=True)
class Deduplicator:
    _seen: set[str] = field(default_factory=set)

    def seen(self, message: RawMessage) -> bool:
        """Return ``True`` if ``message`` was already processed; else record it."""

        key = dedupe_key(message)
        if key in self._seen:
            return True
        self._seen.add(key)
        return False

    def __len__(self) -> int:
        return len(self._seen)


__all__ = ["Deduplicator"]
