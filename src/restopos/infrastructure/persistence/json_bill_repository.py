"""JSON-store-backed implementation of BillRepository."""

from __future__ import annotations

from dataclasses import replace

from restopos.domain.model.bill import Bill
from restopos.domain.model.order import Order
from restopos.domain.repository.bill_repository import BillRepository
from restopos.infrastructure.persistence.json_database import JsonDatabase
from restopos.infrastructure.persistence.json_order_repository import JsonOrderRepository


class JsonBillRepository(BillRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db
        self._orders = JsonOrderRepository(db)

    def add(self, bill: Bill, order: Order) -> Bill:
        with self._db.lock:
            next_id = max((b.id for b in self._db.bills), default=0) + 1  # type: ignore[type-var]
            stored = replace(bill, id=next_id)
            self._db.bills.append(stored)
            try:
                # Writes the order and the bill in one persist.
                self._orders.save(order)
            except Exception:
                self._db.bills.pop()
                raise
        return stored

    def list_all(self) -> list[Bill]:
        return list(self._db.bills)
