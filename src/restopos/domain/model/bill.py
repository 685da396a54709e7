"""Bill: the frozen settlement of an order.

A Bill copies everything it needs out of the order at billing time, so
later changes to the order (or to the menu) can never alter it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from restopos.domain.model.order import Order, OrderKind
from restopos.domain.model.value_objects import Money

DEFAULT_TAX_RATE = Decimal("0.05")


@dataclass(frozen=True)
class BillLine:
    item_id: int
    name: str
    unit_price: Money
    quantity: int
    category: str | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Bill:
    id: int | None
    order_id: int
    table_number: str
    kind: OrderKind
    lines: tuple[BillLine, ...]
    subtotal: Money
    tax: Money
    total: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def for_order(order: Order, tax_rate: Decimal = DEFAULT_TAX_RATE) -> Bill:
        """Settle the order's active items.

        Cancelled items are left out entirely; tax is the exact product
        ``subtotal * rate``, with no rounding.
        """
        lines = tuple(
            BillLine(
                item_id=item.id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity.value,
                category=item.category,
            )
            for item in order.active_items
        )
        subtotal = Money.zero()
        for line in lines:
            subtotal = subtotal + line.line_total
        tax = subtotal.at_rate(tax_rate)
        return Bill(
            id=None,
            order_id=order.id,  # type: ignore[arg-type]
            table_number=order.table_number,
            kind=order.kind,
            lines=lines,
            subtotal=subtotal,
            tax=tax,
            total=subtotal + tax,
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
