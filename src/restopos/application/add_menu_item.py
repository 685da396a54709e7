"""Application service: Add Menu Item use case."""

from __future__ import annotations

from restopos.domain.exceptions import ValidationError
from restopos.domain.model.menu import MenuItem
from restopos.domain.model.value_objects import Money
from restopos.domain.repository.menu_repository import MenuRepository


class AddMenuItemHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, name: str, category: str | None, price: str | float) -> MenuItem:
        """Add a new, enabled item to the menu."""
        if not name or not name.strip():
            raise ValidationError("Menu item name is required")

        item = MenuItem(
            id=self._menu_repo.next_id(),
            name=name.strip(),
            category=(category or "").strip(),
            price=Money.of(price),
        )
        self._menu_repo.save(item)
        return item
