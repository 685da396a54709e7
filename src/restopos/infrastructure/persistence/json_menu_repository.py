"""JSON-store-backed implementation of MenuRepository."""

from __future__ import annotations

from restopos.domain.model.menu import MenuItem
from restopos.domain.repository.menu_repository import MenuRepository
from restopos.infrastructure.persistence.json_database import JsonDatabase


class JsonMenuRepository(MenuRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db

    def next_id(self) -> int:
        with self._db.lock:
            return max((m.id for m in self._db.menu), default=0) + 1

    def get_by_id(self, item_id: int) -> MenuItem | None:
        for item in self._db.menu:
            if item.id == item_id:
                return item
        return None

    def list_all(self) -> list[MenuItem]:
        return list(self._db.menu)

    def save(self, item: MenuItem) -> None:
        with self._db.lock:
            for i, existing in enumerate(self._db.menu):
                if existing.id == item.id:
                    self._db.menu[i] = item
                    break
            else:
                self._db.menu.append(item)
            self._db.persist()
