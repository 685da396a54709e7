"""Abstract repository for the append-only KOT log."""

from __future__ import annotations

from abc import ABC, abstractmethod

from restopos.domain.model.kot_log import KotLogEntry


class KotLogRepository(ABC):

    @abstractmethod
    def append(self, entry: KotLogEntry) -> KotLogEntry:
        """Append an entry, assigning id = count + 1.  Returns the stored entry."""

    @abstractmethod
    def list_all(self) -> list[KotLogEntry]:
        """Return every entry in chronological order."""
