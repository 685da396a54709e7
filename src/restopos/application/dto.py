"""Data Transfer Objects: plain containers that cross layer boundaries.

Inputs arrive from the web and CLI layers as these specs; outputs that
are not plain domain objects are returned as these results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from restopos.domain.model.bill import Bill
from restopos.domain.model.order import Order


@dataclass(frozen=True)
class ItemSpec:
    """Input: one cart line.

    ``item_id`` is the menu item id.  ``name`` and ``price`` are the
    terminal's view of the menu; when either is missing the snapshot is
    taken from the menu catalogue instead.
    """

    item_id: int
    quantity: int
    name: str | None = None
    price: Decimal | str | float | None = None
    category: str | None = None


@dataclass(frozen=True)
class SubmitResult:
    """Output: the stored order and how long it took to commit."""

    order: Order
    latency_ms: int


@dataclass(frozen=True)
class ItemSales:
    name: str
    quantity: int
    revenue: Decimal


@dataclass(frozen=True)
class DailyReport:
    date: str
    total_revenue: Decimal
    total_orders: int
    total_items: int
    avg_order_value: Decimal | None
    item_sales: list[ItemSales] = field(default_factory=list)
    bills: list[Bill] = field(default_factory=list)
