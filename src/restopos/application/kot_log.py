"""KOT log recorder: latency telemetry for kitchen tickets.

Recording is best-effort.  The recorder is called after the triggering
operation is already durable, so a failing log store is reported in the
application log and otherwise ignored.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from restopos.domain.model.kot_log import KotEventType, KotLogEntry, KotStats
from restopos.domain.repository.kot_log_repository import KotLogRepository

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 100


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class KotLogRecorder:

    def __init__(self, kot_repo: KotLogRepository, window: int = DEFAULT_WINDOW) -> None:
        self._kot_repo = kot_repo
        self._window = window

    def record(
        self,
        order_id: int,
        event_type: KotEventType,
        success: bool,
        latency_ms: int,
    ) -> KotLogEntry | None:
        """Append a log entry; returns None if the store refused it."""
        entry = KotLogEntry(
            id=None,
            order_id=order_id,
            event_type=event_type,
            success=success,
            latency_ms=latency_ms,
        )
        try:
            return self._kot_repo.append(entry)
        except Exception:
            logger.exception(
                "Could not record %s KOT entry for order #%s",
                event_type.value, order_id,
            )
            return None

    def query_recent(self, limit: int | None = None) -> list[KotLogEntry]:
        """Return the last ``limit`` entries, oldest first."""
        if limit is None:
            limit = self._window
        if limit <= 0:
            return []
        return self._kot_repo.list_all()[-limit:]

    def stats(self) -> KotStats:
        entries = self._kot_repo.list_all()
        if not entries:
            return KotStats(avg_latency=0, total_kots=0, success_rate=100)

        total = len(entries)
        latency_sum = sum(e.latency_ms for e in entries)
        successes = sum(1 for e in entries if e.success)
        return KotStats(
            avg_latency=_round_half_up(Decimal(latency_sum) / total),
            total_kots=total,
            success_rate=_round_half_up(Decimal(successes) * 100 / total),
        )
