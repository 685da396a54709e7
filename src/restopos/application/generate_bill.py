"""Application service: Generate Bill use case.

The billing finalizer is the only path to ``completed``.  It reads the
order, freezes a Bill from the active items and closes the order out.
No realtime event is published.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from restopos.domain.exceptions import EntityNotFoundError, ValidationError
from restopos.domain.model.bill import DEFAULT_TAX_RATE, Bill
from restopos.domain.model.order import OrderStatus
from restopos.domain.repository.bill_repository import BillRepository
from restopos.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class GenerateBillHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        bill_repo: BillRepository,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
    ) -> None:
        self._order_repo = order_repo
        self._bill_repo = bill_repo
        self._tax_rate = tax_rate

    def handle(self, order_id: int) -> Bill:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        if order.status == OrderStatus.COMPLETED:
            raise ValidationError(f"Order #{order.id} is already billed")

        # Settle first: the order is only closed once a bill exists for it.
        bill = Bill.for_order(order, self._tax_rate)
        previous = order.status
        order.mark_completed()
        try:
            bill = self._bill_repo.add(bill, order)
        except Exception:
            order.status = previous
            raise

        logger.info("Bill #%d for order #%d: total %s", bill.id, order.id, bill.total)
        return bill
