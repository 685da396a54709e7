"""Request bodies for the HTTP API.

Field aliases follow the camelCase names the terminals send.  The models
are lenient: business rules such as "cart must not be empty"
are checked by the domain, so every client gets the same messages.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CartItemIn(_Body):
    id: int
    quantity: int
    name: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    # Accepted but ignored: every submitted item starts out pending.
    status: Optional[str] = None


class CreateOrderIn(_Body):
    table_number: Optional[Union[str, int]] = Field(default=None, alias="tableNumber")
    order_type: str = Field(default="dine-in", alias="orderType")
    items: list[CartItemIn] = Field(default_factory=list)
    notes: Optional[str] = None
    cashier_id: Optional[int] = Field(default=None, alias="cashierId")


class StatusIn(_Body):
    status: str


class BillIn(_Body):
    order_id: int = Field(alias="orderId")


class MenuItemIn(_Body):
    name: str
    category: Optional[str] = None
    price: float


class MenuItemUpdateIn(_Body):
    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[float] = None
    enabled: Optional[bool] = None


class LoginIn(_Body):
    mobile: str
    pin: str
