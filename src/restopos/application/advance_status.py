"""Application service: Advance Order Status use case (kitchen)."""

from __future__ import annotations

import logging

from restopos.domain.events import EventPublisher, OrderStatusChanged
from restopos.domain.exceptions import EntityNotFoundError
from restopos.domain.model.order import Order, OrderStatus
from restopos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AdvanceStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        publisher: EventPublisher,
        enforce_transitions: bool = True,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher
        self._enforce_transitions = enforce_transitions

    def handle(self, order_id: int, new_status: OrderStatus | str) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        status = new_status if isinstance(new_status, OrderStatus) else OrderStatus.parse(new_status)
        previous = order.status
        order.advance_to(status, enforce=self._enforce_transitions)
        self._order_repo.save(order)

        self._publisher.publish(OrderStatusChanged(order_id=order.id, status=order.status))  # type: ignore[arg-type]
        logger.info("Order #%d: %s -> %s", order.id, previous.value, order.status.value)
        return order
