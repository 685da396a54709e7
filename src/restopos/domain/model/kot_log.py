"""Kitchen Order Ticket (KOT) log entries.

One entry per kitchen-ticket affecting action.  Entries are immutable and
the log only ever grows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class KotEventType(Enum):
    NEW_ORDER = "new_order"
    REPRINT_KOT = "reprint_kot"


@dataclass(frozen=True)
class KotLogEntry:
    id: int | None
    order_id: int
    event_type: KotEventType
    success: bool
    latency_ms: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class KotStats:
    """Read-side summary of the log, recomputed on every request."""

    avg_latency: int
    total_kots: int
    success_rate: int
