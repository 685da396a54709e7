"""Integration tests for the SubmitOrder use case."""

import logging

import pytest

from restopos.application.dto import ItemSpec
from restopos.application.kot_log import KotLogRecorder
from restopos.application.submit_order import SubmitOrderHandler
from restopos.domain.events import OrderPlaced
from restopos.domain.exceptions import EntityNotFoundError, ValidationError
from restopos.domain.model.kot_log import KotEventType
from restopos.domain.model.menu import MenuItem
from restopos.domain.model.order import ItemStatus, OrderKind, OrderStatus
from restopos.domain.model.user import User, UserRole
from restopos.domain.model.value_objects import Money
from tests.fakes import (
    BrokenKotLogRepository,
    FakeKotLogRepository,
    FakeMenuRepository,
    FakeOrderRepository,
    FakeUserRepository,
    RecordingPublisher,
)


class FakeClock:
    """Returns the given readings in order (seconds)."""

    def __init__(self, *readings: float) -> None:
        self._readings = list(readings)

    def __call__(self) -> float:
        return self._readings.pop(0)


def _setup(clock=None, kot_repo=None):
    menu = FakeMenuRepository([
        MenuItem(id=1, name="Butter Chicken", category="Main Course", price=Money.of("350")),
        MenuItem(id=4, name="Naan", category="Breads", price=Money.of("40")),
        MenuItem(id=7, name="Raita", category="Sides", price=Money.of("60"), enabled=False),
    ])
    users = FakeUserRepository([
        User(id=1, mobile="1234567890", pin="1234", role=UserRole.CASHIER, name="John Cashier"),
    ])
    order_repo = FakeOrderRepository()
    publisher = RecordingPublisher()
    kot_repo = kot_repo or FakeKotLogRepository()
    kwargs = {"clock": clock} if clock is not None else {}
    handler = SubmitOrderHandler(
        order_repo, menu, publisher, KotLogRecorder(kot_repo), user_repo=users, **kwargs
    )
    return handler, order_repo, publisher, kot_repo


class TestSubmitOrderHappyPath:

    def test_stores_pending_order_with_all_items(self):
        handler, order_repo, _, _ = _setup()

        result = handler.handle("5", "dine-in", [ItemSpec(1, 1), ItemSpec(4, 2)])

        stored = order_repo.get_by_id(result.order.id)
        assert stored is result.order
        assert stored.status == OrderStatus.PENDING
        assert len(stored.items) == 2
        assert all(i.status == ItemStatus.PENDING for i in stored.items)
        assert stored.subtotal == Money.of("430")

    def test_ids_increase(self):
        handler, _, _, _ = _setup()
        first = handler.handle("1", "dine-in", [ItemSpec(1, 1)])
        second = handler.handle("2", "dine-in", [ItemSpec(1, 1)])
        assert second.order.id > first.order.id

    def test_publishes_new_order_once(self):
        handler, _, publisher, _ = _setup()
        result = handler.handle("5", "dine-in", [ItemSpec(1, 1)])
        assert len(publisher.events) == 1
        event = publisher.events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order is result.order

    def test_records_kot_entry_with_latency(self):
        handler, _, _, kot_repo = _setup(clock=FakeClock(10.0, 10.042))
        result = handler.handle("5", "dine-in", [ItemSpec(1, 1)])

        assert result.latency_ms == 42
        [entry] = kot_repo.list_all()
        assert entry.order_id == result.order.id
        assert entry.event_type == KotEventType.NEW_ORDER
        assert entry.success is True
        assert entry.latency_ms == 42

    def test_slow_order_logs_warning(self, caplog):
        handler, _, _, _ = _setup(clock=FakeClock(0.0, 0.5))
        with caplog.at_level(logging.WARNING):
            result = handler.handle("5", "dine-in", [ItemSpec(1, 1)])
        assert result.latency_ms == 500
        assert "budget" in caplog.text

    def test_takeaway_without_table(self):
        handler, _, _, _ = _setup()
        result = handler.handle(None, OrderKind.TAKEAWAY, [ItemSpec(4, 3)])
        assert result.order.table_number == "Takeaway"
        assert result.order.kind == OrderKind.TAKEAWAY


class TestSubmitOrderSnapshots:

    def test_menu_snapshot_used_when_cart_has_no_price(self):
        handler, _, _, _ = _setup()
        result = handler.handle("5", "dine-in", [ItemSpec(1, 1)])
        item = result.order.items[0]
        assert item.name == "Butter Chicken"
        assert item.unit_price == Money.of("350")
        assert item.category == "Main Course"

    def test_cart_snapshot_wins_over_menu(self):
        handler, _, _, _ = _setup()
        result = handler.handle("5", "dine-in", [ItemSpec(1, 1, name="Butter Chicken", price=300)])
        assert result.order.items[0].unit_price == Money.of("300")

    def test_cart_item_not_on_menu_accepted_with_snapshot(self):
        handler, _, _, _ = _setup()
        result = handler.handle("5", "dine-in", [ItemSpec(99, 1, name="Chef Special", price="199.50")])
        assert result.order.items[0].name == "Chef Special"
        assert result.order.items[0].unit_price == Money.of("199.50")

    def test_unknown_menu_item(self):
        handler, order_repo, publisher, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Menu item #99 not found"):
            handler.handle("5", "dine-in", [ItemSpec(99, 1)])
        assert order_repo.list_all() == []
        assert publisher.events == []

    def test_disabled_menu_item(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="'Raita' is not available"):
            handler.handle("5", "dine-in", [ItemSpec(7, 1)])

    def test_later_menu_change_does_not_touch_order(self):
        handler, _, _, _ = _setup()
        result = handler.handle("5", "dine-in", [ItemSpec(4, 1)])
        handler._menu_repo.get_by_id(4).update(price=Money.of("55"))
        assert result.order.items[0].unit_price == Money.of("40")


class TestSubmitOrderValidation:

    def test_empty_cart_rejected_without_side_effects(self):
        handler, order_repo, publisher, kot_repo = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("5", "dine-in", [])
        assert order_repo.list_all() == []
        assert publisher.events == []
        assert kot_repo.list_all() == []

    def test_dine_in_without_table(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="Table number is required"):
            handler.handle("", "dine-in", [ItemSpec(1, 1)])

    def test_invalid_order_type(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid order type 'delivery'"):
            handler.handle("5", "delivery", [ItemSpec(1, 1)])

    def test_infinite_price_rejected_without_side_effects(self):
        handler, order_repo, publisher, kot_repo = _setup()
        with pytest.raises(ValidationError, match="must be finite"):
            handler.handle("5", "dine-in", [ItemSpec(1, 1, name="Tea", price=float("inf"))])
        assert order_repo.list_all() == []
        assert publisher.events == []
        assert kot_repo.list_all() == []

    def test_zero_quantity(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("5", "dine-in", [ItemSpec(1, 0)])

    def test_unknown_cashier(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown cashier #42"):
            handler.handle("5", "dine-in", [ItemSpec(1, 1)], cashier_id=42)

    def test_known_cashier_recorded(self):
        handler, _, _, _ = _setup()
        result = handler.handle("5", "dine-in", [ItemSpec(1, 1)], cashier_id=1)
        assert result.order.cashier_id == 1


class TestSubmitOrderKotLogFailure:

    def test_broken_log_does_not_fail_the_order(self):
        handler, order_repo, publisher, _ = _setup(kot_repo=BrokenKotLogRepository())
        result = handler.handle("5", "dine-in", [ItemSpec(1, 1)])
        assert order_repo.get_by_id(result.order.id) is not None
        assert len(publisher.events) == 1
