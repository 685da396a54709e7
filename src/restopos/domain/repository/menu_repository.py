"""Abstract repository for the menu catalogue."""

from __future__ import annotations

from abc import ABC, abstractmethod

from restopos.domain.model.menu import MenuItem


class MenuRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the id for the next new menu item (max + 1, or 1)."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> MenuItem | None:
        """Return a menu item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[MenuItem]:
        """Return every menu item, enabled or not."""

    @abstractmethod
    def save(self, item: MenuItem) -> None:
        """Persist a new or updated menu item."""
