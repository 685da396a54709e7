"""Application service: List Orders use case (query)."""

from __future__ import annotations

from restopos.domain.model.order import Order, OrderStatus
from restopos.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: OrderStatus | str | None = None) -> list[Order]:
        """Return orders in insertion order, optionally for one status.

        Reversal and paging are left to the caller.
        """
        orders = self._order_repo.list_all()
        if status is None or status == "":
            return orders
        wanted = status if isinstance(status, OrderStatus) else OrderStatus.parse(status)
        return [o for o in orders if o.status == wanted]
