"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
and the realtime hub but keep everything in plain lists and dicts.
No file I/O, no sockets.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from restopos.domain.events import DomainEvent, EventPublisher
from restopos.domain.model.bill import Bill
from restopos.domain.model.kot_log import KotLogEntry
from restopos.domain.model.menu import MenuItem
from restopos.domain.model.order import Order
from restopos.domain.model.user import User
from restopos.domain.repository.bill_repository import BillRepository
from restopos.domain.repository.kot_log_repository import KotLogRepository
from restopos.domain.repository.menu_repository import MenuRepository
from restopos.domain.repository.order_repository import OrderRepository
from restopos.domain.repository.user_repository import UserRepository
from restopos.infrastructure.realtime.hub import Session


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.saves = 0

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order
        self.saves += 1


class FakeBillRepository(BillRepository):

    def __init__(self, orders: FakeOrderRepository | None = None) -> None:
        self._bills: list[Bill] = []
        self._orders = orders

    def add(self, bill: Bill, order: Order) -> Bill:
        stored = replace(bill, id=len(self._bills) + 1)
        self._bills.append(stored)
        if self._orders is not None:
            self._orders.save(order)
        return stored

    def list_all(self) -> list[Bill]:
        return list(self._bills)


class FlakyBillRepository(FakeBillRepository):
    """Fails the first write, then behaves."""

    def __init__(self, orders: FakeOrderRepository | None = None) -> None:
        super().__init__(orders)
        self.failures = 1

    def add(self, bill: Bill, order: Order) -> Bill:
        if self.failures:
            self.failures -= 1
            raise OSError("disk full")
        return super().add(bill, order)


class FakeKotLogRepository(KotLogRepository):

    def __init__(self, entries: list[KotLogEntry] | None = None) -> None:
        self._entries: list[KotLogEntry] = list(entries or [])

    def append(self, entry: KotLogEntry) -> KotLogEntry:
        stored = replace(entry, id=len(self._entries) + 1)
        self._entries.append(stored)
        return stored

    def list_all(self) -> list[KotLogEntry]:
        return list(self._entries)


class BrokenKotLogRepository(FakeKotLogRepository):
    """Refuses every write, like a full disk would."""

    def append(self, entry: KotLogEntry) -> KotLogEntry:
        raise OSError("No space left on device")


class FakeMenuRepository(MenuRepository):

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self._store: dict[int, MenuItem] = {}
        for item in items or []:
            self._store[item.id] = item

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def get_by_id(self, item_id: int) -> MenuItem | None:
        return self._store.get(item_id)

    def list_all(self) -> list[MenuItem]:
        return list(self._store.values())

    def save(self, item: MenuItem) -> None:
        self._store[item.id] = item


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._users = list(users or [])

    def get_by_id(self, user_id: int) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def list_all(self) -> list[User]:
        return list(self._users)


class RecordingPublisher(EventPublisher):
    """Keeps every published event; pretends ``sessions`` are connected."""

    def __init__(self, sessions: int = 0) -> None:
        self.events: list[DomainEvent] = []
        self.sessions = sessions

    def publish(self, event: DomainEvent) -> int:
        self.events.append(event)
        return self.sessions


class FakeSession(Session):
    """A realtime session that just collects the frames offered to it."""

    def __init__(self, session_id: str, connected: bool = True) -> None:
        self.id = session_id
        self.connected = connected
        self.frames: list[dict[str, Any]] = []
        self.closed = False

    def offer(self, message: dict[str, Any]) -> bool:
        if not self.connected:
            return False
        self.frames.append(message)
        return True

    async def close(self) -> None:
        self.closed = True
