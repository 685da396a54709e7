"""Menu item: the catalogue entry orders take their snapshots from."""

from __future__ import annotations

from dataclasses import dataclass

from restopos.domain.exceptions import ValidationError
from restopos.domain.model.value_objects import Money


@dataclass
class MenuItem:
    """A dish on the menu.

    Price and availability change over time; orders are unaffected
    because each OrderItem keeps its own copy.
    """

    id: int
    name: str
    category: str
    price: Money
    enabled: bool = True

    def update(
        self,
        name: str | None = None,
        category: str | None = None,
        price: Money | None = None,
        enabled: bool | None = None,
    ) -> None:
        if name is not None:
            if not name.strip():
                raise ValidationError("Menu item name cannot be empty")
            self.name = name.strip()
        if category is not None:
            self.category = category
        if price is not None:
            self.price = price
        if enabled is not None:
            self.enabled = enabled
