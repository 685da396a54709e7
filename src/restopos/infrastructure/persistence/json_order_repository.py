"""JSON-store-backed implementation of OrderRepository."""

from __future__ import annotations

from restopos.domain.model.order import Order
from restopos.domain.repository.order_repository import OrderRepository
from restopos.infrastructure.persistence.json_database import JsonDatabase


class JsonOrderRepository(OrderRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        with self._db.lock:
            if not self._db.orders:
                return 1
            return max(o.id for o in self._db.orders) + 1  # type: ignore[type-var]

    def get_by_id(self, order_id: int) -> Order | None:
        for order in self._db.orders:
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return list(self._db.orders)

    def save(self, order: Order) -> None:
        with self._db.lock:
            if order.id is None:
                order.id = self.next_id()
                self._db.orders.append(order)
            else:
                # Upsert: replace if exists, otherwise append
                for i, existing in enumerate(self._db.orders):
                    if existing.id == order.id:
                        self._db.orders[i] = order
                        break
                else:
                    self._db.orders.append(order)
            self._db.persist()
