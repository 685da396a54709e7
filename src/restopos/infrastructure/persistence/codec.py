"""Wire and file serialization.

The same camelCase JSON shapes are used on disk, in HTTP responses and
in realtime frames, which is what the cashier and kitchen terminals
expect.  Amounts travel as floats; inside the domain they stay
Decimal.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from restopos.application.dto import DailyReport
from restopos.domain.events import (
    DomainEvent,
    ItemCancelled,
    KotReprintRequested,
    OrderPlaced,
    OrderStatusChanged,
)
from restopos.domain.model.bill import Bill, BillLine
from restopos.domain.model.kot_log import KotEventType, KotLogEntry, KotStats
from restopos.domain.model.menu import MenuItem
from restopos.domain.model.order import ItemStatus, Order, OrderItem, OrderKind, OrderStatus
from restopos.domain.model.user import User, UserRole
from restopos.domain.model.value_objects import Money, Quantity


# --- Timestamps ---------------------------------------------------------------

def format_timestamp(dt: datetime | None) -> str | None:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if dt is None:
        return None
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_timestamp(raw: str | None) -> datetime | None:
    if not raw:
        return None
    parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _money(raw: Any) -> Money:
    return Money(Decimal(str(raw)))


# --- Orders -------------------------------------------------------------------

def item_to_dict(item: OrderItem) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "id": item.id,
        "name": item.name,
        "price": float(item.unit_price),
        "quantity": item.quantity.value,
        "status": item.status.value,
    }
    if item.category is not None:
        raw["category"] = item.category
    return raw


def item_from_dict(raw: dict[str, Any]) -> OrderItem:
    return OrderItem(
        id=raw["id"],
        name=raw["name"],
        unit_price=_money(raw["price"]),
        quantity=Quantity(raw["quantity"]),
        status=ItemStatus(raw.get("status", "pending")),
        category=raw.get("category"),
    )


def order_to_dict(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "tableNumber": order.table_number,
        "orderType": order.kind.value,
        "items": [item_to_dict(i) for i in order.items],
        "notes": order.notes,
        "status": order.status.value,
        "cashierId": order.cashier_id,
        "timestamp": format_timestamp(order.created_at),
        "kotPrintedAt": format_timestamp(order.kot_printed_at),
    }


def order_from_dict(raw: dict[str, Any]) -> Order:
    return Order(
        id=raw["id"],
        table_number=str(raw.get("tableNumber") or ""),
        kind=OrderKind(raw["orderType"]),
        items=[item_from_dict(i) for i in raw["items"]],
        status=OrderStatus(raw["status"]),
        notes=raw.get("notes"),
        cashier_id=raw.get("cashierId"),
        created_at=parse_timestamp(raw["timestamp"]),  # type: ignore[arg-type]
        kot_printed_at=parse_timestamp(raw.get("kotPrintedAt")),
    )


# --- Bills --------------------------------------------------------------------

def _line_to_dict(line: BillLine) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "id": line.item_id,
        "name": line.name,
        "price": float(line.unit_price),
        "quantity": line.quantity,
        "status": ItemStatus.PENDING.value,
    }
    if line.category is not None:
        raw["category"] = line.category
    return raw


def bill_to_dict(bill: Bill) -> dict[str, Any]:
    return {
        "id": bill.id,
        "orderId": bill.order_id,
        "tableNumber": bill.table_number,
        "orderType": bill.kind.value,
        "items": [_line_to_dict(line) for line in bill.lines],
        "subtotal": float(bill.subtotal),
        "tax": float(bill.tax),
        "total": float(bill.total),
        "timestamp": format_timestamp(bill.created_at),
    }


def bill_from_dict(raw: dict[str, Any]) -> Bill:
    return Bill(
        id=raw["id"],
        order_id=raw["orderId"],
        table_number=str(raw.get("tableNumber") or ""),
        kind=OrderKind(raw["orderType"]),
        lines=tuple(
            BillLine(
                item_id=i["id"],
                name=i["name"],
                unit_price=_money(i["price"]),
                quantity=i["quantity"],
                category=i.get("category"),
            )
            for i in raw["items"]
        ),
        subtotal=_money(raw["subtotal"]),
        tax=_money(raw["tax"]),
        total=_money(raw["total"]),
        created_at=parse_timestamp(raw["timestamp"]),  # type: ignore[arg-type]
    )


# --- KOT log ------------------------------------------------------------------

def kot_entry_to_dict(entry: KotLogEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "orderId": entry.order_id,
        "type": entry.event_type.value,
        "timestamp": format_timestamp(entry.created_at),
        "success": entry.success,
        "latency": entry.latency_ms,
    }


def kot_entry_from_dict(raw: dict[str, Any]) -> KotLogEntry:
    return KotLogEntry(
        id=raw["id"],
        order_id=raw["orderId"],
        event_type=KotEventType(raw["type"]),
        success=bool(raw["success"]),
        latency_ms=int(raw["latency"]),
        created_at=parse_timestamp(raw["timestamp"]),  # type: ignore[arg-type]
    )


def kot_stats_to_dict(stats: KotStats) -> dict[str, Any]:
    return {
        "avgLatency": stats.avg_latency,
        "totalKOTs": stats.total_kots,
        "successRate": stats.success_rate,
    }


# --- Menu and users -----------------------------------------------------------

def menu_item_to_dict(item: MenuItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "category": item.category,
        "price": float(item.price),
        "enabled": item.enabled,
    }


def menu_item_from_dict(raw: dict[str, Any]) -> MenuItem:
    return MenuItem(
        id=raw["id"],
        name=raw["name"],
        category=raw.get("category", ""),
        price=_money(raw["price"]),
        enabled=bool(raw.get("enabled", True)),
    )


def user_to_dict(user: User, include_pin: bool = False) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "id": user.id,
        "name": user.name,
        "role": user.role.value,
        "mobile": user.mobile,
    }
    if include_pin:
        raw["pin"] = user.pin
    return raw


def user_from_dict(raw: dict[str, Any]) -> User:
    return User(
        id=raw["id"],
        mobile=raw["mobile"],
        pin=raw["pin"],
        role=UserRole(raw["role"]),
        name=raw["name"],
    )


# --- Reports ------------------------------------------------------------------

def daily_report_to_dict(report: DailyReport) -> dict[str, Any]:
    return {
        "date": report.date,
        "totalRevenue": f"{report.total_revenue:.2f}",
        "totalOrders": report.total_orders,
        "totalItems": report.total_items,
        "avgOrderValue": f"{report.avg_order_value:.2f}" if report.avg_order_value is not None else 0,
        "itemSales": [
            {"name": s.name, "quantity": s.quantity, "revenue": float(s.revenue)}
            for s in report.item_sales
        ],
        "bills": [bill_to_dict(b) for b in report.bills],
    }


# --- Realtime -----------------------------------------------------------------

def event_payload(event: DomainEvent) -> dict[str, Any]:
    if isinstance(event, OrderPlaced):
        return order_to_dict(event.order)
    if isinstance(event, OrderStatusChanged):
        return {"orderId": event.order_id, "status": event.status.value}
    if isinstance(event, ItemCancelled):
        return {"orderId": event.order_id, "itemId": event.item_id}
    if isinstance(event, KotReprintRequested):
        return dict(event.data)
    raise TypeError(f"Unknown event type: {type(event).__name__}")


def event_to_message(event: DomainEvent) -> dict[str, Any]:
    """Realtime frame: ``{"event": <topic>, "data": <payload>}``."""
    return {"event": event.topic.value, "data": event_payload(event)}
