"""Application service: Daily Report use case (query).

Read-only rollup over the bills created on the current UTC date.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Callable

from restopos.application.dto import DailyReport, ItemSales
from restopos.domain.repository.bill_repository import BillRepository


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


class DailyReportHandler:

    def __init__(
        self,
        bill_repo: BillRepository,
        today: Callable[[], date] = _today_utc,
    ) -> None:
        self._bill_repo = bill_repo
        self._today = today

    def handle(self) -> DailyReport:
        day = self._today()
        bills = [
            b for b in self._bill_repo.list_all()
            if b.created_at.astimezone(timezone.utc).date() == day
        ]

        revenue = sum((b.total.amount for b in bills), Decimal("0"))
        sales: dict[str, tuple[int, Decimal]] = {}
        for bill in bills:
            for line in bill.lines:
                qty, rev = sales.get(line.name, (0, Decimal("0")))
                sales[line.name] = (qty + line.quantity, rev + line.line_total.amount)

        item_sales = sorted(
            (ItemSales(name=name, quantity=qty, revenue=rev) for name, (qty, rev) in sales.items()),
            key=lambda s: s.revenue,
            reverse=True,
        )
        return DailyReport(
            date=day.isoformat(),
            total_revenue=revenue,
            total_orders=len(bills),
            total_items=sum(b.item_count for b in bills),
            avg_order_value=(revenue / len(bills)) if bills else None,
            item_sales=item_sales,
            bills=bills,
        )
