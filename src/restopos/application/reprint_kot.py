"""Application service: Reprint KOT use case.

A reprint is advisory: the kitchen terminal re-renders the ticket itself.
The server only checks the order exists, echoes the request to every
session and logs the fan-out time in the KOT log.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from restopos.application.kot_log import KotLogRecorder
from restopos.domain.events import EventPublisher, KotReprintRequested
from restopos.domain.exceptions import EntityNotFoundError
from restopos.domain.model.kot_log import KotEventType
from restopos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ReprintKotHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        publisher: EventPublisher,
        kot_log: KotLogRecorder,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher
        self._kot_log = kot_log
        self._clock = clock

    def handle(self, order_id: int, data: dict[str, Any] | None = None) -> int:
        """Broadcast the reprint; returns the number of sessions reached."""
        started = self._clock()
        if self._order_repo.get_by_id(order_id) is None:
            raise EntityNotFoundError("Order not found")

        payload = dict(data) if data else {"orderId": order_id}
        reached = self._publisher.publish(KotReprintRequested(order_id=order_id, data=payload))
        latency_ms = round((self._clock() - started) * 1000)

        self._kot_log.record(order_id, KotEventType.REPRINT_KOT, True, latency_ms)
        logger.info("KOT #%d reprint sent to %d session(s)", order_id, reached)
        return reached
