"""Application service: Cancel Order Item use case.

Cancelling is idempotent.  The ``item_cancelled`` event goes out on every
call, repeated ones included, so a display that missed the first one
still converges.
"""

from __future__ import annotations

import logging

from restopos.domain.events import EventPublisher, ItemCancelled
from restopos.domain.exceptions import EntityNotFoundError
from restopos.domain.model.order import Order
from restopos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CancelItemHandler:

    def __init__(self, order_repo: OrderRepository, publisher: EventPublisher) -> None:
        self._order_repo = order_repo
        self._publisher = publisher

    def handle(self, order_id: int, item_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        item = order.cancel_item(item_id)
        self._order_repo.save(order)

        self._publisher.publish(ItemCancelled(order_id=order.id, item_id=item.id))  # type: ignore[arg-type]
        logger.info("Order #%d: item #%d cancelled", order.id, item.id)
        return order
