"""JSON-store-backed implementation of KotLogRepository."""

from __future__ import annotations

from dataclasses import replace

from restopos.domain.model.kot_log import KotLogEntry
from restopos.domain.repository.kot_log_repository import KotLogRepository
from restopos.infrastructure.persistence.json_database import JsonDatabase


class JsonKotLogRepository(KotLogRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db

    def append(self, entry: KotLogEntry) -> KotLogEntry:
        with self._db.lock:
            # count + 1: the log is never pruned, so this stays unique.
            stored = replace(entry, id=len(self._db.kot_logs) + 1)
            self._db.kot_logs.append(stored)
            try:
                self._db.persist()
            except Exception:
                self._db.kot_logs.pop()
                raise
        return stored

    def list_all(self) -> list[KotLogEntry]:
        return list(self._db.kot_logs)
