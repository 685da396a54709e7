"""Order lifecycle endpoints.

Handlers are ``async def``: they run on the event loop, one at
a time, so a request-level operation never interleaves with another one.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from restopos.application.dto import ItemSpec
from restopos.infrastructure.bootstrap import Services
from restopos.infrastructure.persistence.codec import order_to_dict
from restopos.infrastructure.web.deps import get_services
from restopos.infrastructure.web.schemas import CreateOrderIn, StatusIn

router = APIRouter(prefix="/api", tags=["orders"])


@router.get("/orders")
async def list_orders(status: str | None = None, services: Services = Depends(get_services)) -> list[dict[str, Any]]:
    """All orders in submission order; ``?status=`` narrows to one status."""
    return [order_to_dict(o) for o in services.list_orders().handle(status)]


@router.get("/orders/{order_id}")
async def show_order(order_id: int, services: Services = Depends(get_services)) -> dict[str, Any]:
    return order_to_dict(services.show_order().handle(order_id))


@router.post("/orders")
async def create_order(body: CreateOrderIn, services: Services = Depends(get_services)) -> dict[str, Any]:
    result = services.submit_order().handle(
        table_number=str(body.table_number) if body.table_number is not None else None,
        order_kind=body.order_type,
        items=[
            ItemSpec(
                item_id=item.id,
                quantity=item.quantity,
                name=item.name,
                price=item.price,
                category=item.category,
            )
            for item in body.items
        ],
        notes=body.notes,
        cashier_id=body.cashier_id,
    )
    return {"success": True, "order": order_to_dict(result.order), "latency": result.latency_ms}


@router.put("/orders/{order_id}/status")
async def update_status(order_id: int, body: StatusIn, services: Services = Depends(get_services)) -> dict[str, Any]:
    order = services.advance_status().handle(order_id, body.status)
    return {"success": True, "order": order_to_dict(order)}


@router.put("/orders/{order_id}/items/{item_id}/cancel")
async def cancel_item(order_id: int, item_id: int, services: Services = Depends(get_services)) -> dict[str, Any]:
    order = services.cancel_item().handle(order_id, item_id)
    return {"success": True, "order": order_to_dict(order)}
