"""Application service: Update Menu Item use case."""

from __future__ import annotations

from restopos.domain.exceptions import EntityNotFoundError
from restopos.domain.model.menu import MenuItem
from restopos.domain.model.value_objects import Money
from restopos.domain.repository.menu_repository import MenuRepository


class UpdateMenuItemHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(
        self,
        item_id: int,
        name: str | None = None,
        category: str | None = None,
        price: str | float | None = None,
        enabled: bool | None = None,
    ) -> MenuItem:
        """Update any subset of a menu item's fields.

        This does NOT affect existing orders or bills; they captured a
        price snapshot at submission time.
        """
        item = self._menu_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError("Item not found")

        item.update(
            name=name,
            category=category,
            price=Money.of(price) if price is not None else None,
            enabled=enabled,
        )
        self._menu_repo.save(item)
        return item
