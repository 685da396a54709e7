"""Integration tests for the GenerateBill use case."""

from decimal import Decimal

import pytest

from restopos.application.advance_status import AdvanceStatusHandler
from restopos.application.cancel_item import CancelItemHandler
from restopos.application.dto import ItemSpec
from restopos.application.generate_bill import GenerateBillHandler
from restopos.application.kot_log import KotLogRecorder
from restopos.application.submit_order import SubmitOrderHandler
from restopos.domain.exceptions import EntityNotFoundError, ValidationError
from restopos.domain.model.order import OrderStatus
from restopos.domain.model.value_objects import Money
from tests.fakes import (
    FakeBillRepository,
    FakeKotLogRepository,
    FakeMenuRepository,
    FakeOrderRepository,
    FlakyBillRepository,
    RecordingPublisher,
)


def _setup(tax_rate: Decimal = Decimal("0.05")):
    order_repo = FakeOrderRepository()
    bill_repo = FakeBillRepository(order_repo)
    publisher = RecordingPublisher()
    submit = SubmitOrderHandler(
        order_repo, FakeMenuRepository(), publisher, KotLogRecorder(FakeKotLogRepository())
    )
    billing = GenerateBillHandler(order_repo, bill_repo, tax_rate=tax_rate)
    return submit, billing, order_repo, bill_repo, publisher


class TestGenerateBill:

    def test_tea_and_samosa_with_samosa_cancelled(self):
        submit, billing, order_repo, bill_repo, publisher = _setup()
        order = submit.handle("2", "dine-in", [
            ItemSpec(1, 2, name="Tea", price=20),
            ItemSpec(2, 1, name="Samosa", price=15),
        ]).order
        CancelItemHandler(order_repo, publisher).handle(order.id, 2)

        bill = billing.handle(order.id)

        assert bill.id == 1
        assert bill.subtotal == Money.of("40")
        assert bill.tax == Money.of("2.00")
        assert bill.total == Money.of("42.00")
        assert [line.name for line in bill.lines] == ["Tea"]
        assert order_repo.get_by_id(order.id).status == OrderStatus.COMPLETED
        assert bill_repo.list_all() == [bill]

    def test_paneer_two_at_hundred(self):
        submit, billing, _, _, _ = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(3, 2, name="Paneer", price=100)]).order
        bill = billing.handle(order.id)
        assert (bill.subtotal, bill.tax, bill.total) == (Money.of("200"), Money.of("10"), Money.of("210"))

    def test_billing_publishes_nothing(self):
        submit, billing, _, _, publisher = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order
        before = len(publisher.events)
        billing.handle(order.id)
        assert len(publisher.events) == before

    def test_bill_from_any_kitchen_state(self):
        submit, billing, order_repo, _, publisher = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order
        AdvanceStatusHandler(order_repo, publisher).handle(order.id, "preparing")
        billing.handle(order.id)
        assert order_repo.get_by_id(order.id).status == OrderStatus.COMPLETED

    def test_double_billing_rejected(self):
        submit, billing, _, bill_repo, _ = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order
        billing.handle(order.id)
        with pytest.raises(ValidationError, match="already billed"):
            billing.handle(order.id)
        assert len(bill_repo.list_all()) == 1

    def test_order_not_found(self):
        _, billing, _, bill_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            billing.handle(999)
        assert bill_repo.list_all() == []

    def test_configured_tax_rate(self):
        submit, billing, _, _, _ = _setup(tax_rate=Decimal("0.10"))
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order
        assert billing.handle(order.id).tax == Money.of("10")


class TestTableFiveScenario:

    def test_submit_cook_and_settle(self):
        submit, billing, order_repo, _, publisher = _setup()
        order = submit.handle("5", "dine-in", [ItemSpec(1, 2, name="Tea", price=20)]).order
        assert order.status == OrderStatus.PENDING
        assert order.items[0].status.value == "pending"

        advance = AdvanceStatusHandler(order_repo, publisher)
        advance.handle(order.id, "preparing")
        advance.handle(order.id, "ready")
        bill = billing.handle(order.id)

        assert (str(bill.subtotal), str(bill.tax), str(bill.total)) == ("40.00", "2.00", "42.00")
        assert order_repo.get_by_id(order.id).status == OrderStatus.COMPLETED


class TestGenerateBillFailures:

    def test_settlement_error_leaves_order_billable(self):
        submit, _, order_repo, bill_repo, _ = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order

        broken = GenerateBillHandler(order_repo, bill_repo, tax_rate=Decimal("NaN"))
        with pytest.raises(ValidationError, match="must be finite"):
            broken.handle(order.id)

        assert order_repo.get_by_id(order.id).status == OrderStatus.PENDING
        assert bill_repo.list_all() == []
        assert GenerateBillHandler(order_repo, bill_repo).handle(order.id).total == Money.of("105")

    def test_failed_bill_write_restores_status(self):
        order_repo = FakeOrderRepository()
        bill_repo = FlakyBillRepository(order_repo)
        submit = SubmitOrderHandler(
            order_repo, FakeMenuRepository(), RecordingPublisher(), KotLogRecorder(FakeKotLogRepository())
        )
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order
        billing = GenerateBillHandler(order_repo, bill_repo)

        with pytest.raises(OSError):
            billing.handle(order.id)
        assert order_repo.get_by_id(order.id).status == OrderStatus.PENDING

        bill = billing.handle(order.id)
        assert bill.id == 1
        assert order_repo.get_by_id(order.id).status == OrderStatus.COMPLETED

    def test_completed_order_rejected_without_touching_it(self):
        submit, billing, order_repo, bill_repo, _ = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(3, 1, name="Paneer", price=100)]).order
        billing.handle(order.id)
        saves = order_repo.saves

        with pytest.raises(ValidationError, match=f"Order #{order.id} is already billed"):
            billing.handle(order.id)
        assert order_repo.saves == saves
        assert len(bill_repo.list_all()) == 1

    def test_tax_not_rounded(self):
        submit, billing, _, _, _ = _setup()
        order = submit.handle("4", "dine-in", [ItemSpec(9, 1, name="Chai", price="15.50")]).order
        bill = billing.handle(order.id)
        assert bill.tax == Money.of("0.775")
        assert bill.total == Money.of("16.275")
