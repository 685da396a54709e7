from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from restopos.infrastructure.bootstrap import Services
from restopos.infrastructure.persistence.codec import menu_item_to_dict
from restopos.infrastructure.web.deps import get_services
from restopos.infrastructure.web.schemas import MenuItemIn, MenuItemUpdateIn

router = APIRouter(prefix="/api", tags=["menu"])


@router.get("/menu")
async def enabled_menu(services: Services = Depends(get_services)) -> list[dict[str, Any]]:
    """Items the cashier can sell right now."""
    return [menu_item_to_dict(m) for m in services.menu.list_all() if m.enabled]


@router.get("/menu/all")
async def all_menu(services: Services = Depends(get_services)) -> list[dict[str, Any]]:
    return [menu_item_to_dict(m) for m in services.menu.list_all()]


@router.post("/menu")
async def add_item(body: MenuItemIn, services: Services = Depends(get_services)) -> dict[str, Any]:
    item = services.add_menu_item().handle(name=body.name, category=body.category, price=body.price)
    return {"success": True, "item": menu_item_to_dict(item)}


@router.put("/menu/{item_id}")
async def update_item(item_id: int, body: MenuItemUpdateIn, services: Services = Depends(get_services)) -> dict[str, Any]:
    item = services.update_menu_item().handle(
        item_id,
        name=body.name,
        category=body.category,
        price=body.price,
        enabled=body.enabled,
    )
    return {"success": True, "item": menu_item_to_dict(item)}
