"""Application service: Show Order use case (query)."""

from __future__ import annotations

from restopos.domain.exceptions import EntityNotFoundError
from restopos.domain.model.order import Order
from restopos.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return order
