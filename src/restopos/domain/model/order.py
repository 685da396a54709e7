"""Order aggregate: the core of the domain.

The Order is an aggregate root that owns its items. The lifecycle
transition table and the item cancellation rules are enforced here; the
application handlers only load, call and save.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from restopos.domain.exceptions import EntityNotFoundError, ValidationError
from restopos.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str) -> OrderStatus:
        try:
            return cls(raw)
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid status '{raw}'. Must be one of: {valid}"
            ) from None


class OrderKind(Enum):
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"

    @classmethod
    def parse(cls, raw: str) -> OrderKind:
        try:
            return cls(raw)
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValidationError(
                f"Invalid order type '{raw}'. Must be one of: {valid}"
            ) from None


class ItemStatus(Enum):
    PENDING = "pending"
    CANCELLED = "cancelled"


# Table label used for takeaway orders when the cashier gives none.
TAKEAWAY_TABLE = "Takeaway"

# Kitchen-facing flow. COMPLETED is absent: only billing
# reaches it (see Order.mark_completed).
KITCHEN_TRANSITIONS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PENDING: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.READY,
}


@dataclass
class OrderItem:
    """One line of an order, holding a snapshot of the menu item.

    ``name`` and ``unit_price`` are copied at submission time and never
    change afterwards, whatever happens to the menu.  The only mutation
    is ``cancel()``.
    """

    id: int
    name: str
    unit_price: Money
    quantity: Quantity
    status: ItemStatus = ItemStatus.PENDING
    category: str | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def is_cancelled(self) -> bool:
        return self.status == ItemStatus.CANCELLED

    def cancel(self) -> bool:
        """Cancel the item; returns False when it was already cancelled."""
        if self.is_cancelled:
            return False
        self.status = ItemStatus.CANCELLED
        return True


@dataclass
class Order:
    """Aggregate root for restaurant orders.

    Use the ``Order.create()`` factory for new orders. It enforces all
    submission rules.  The ``__init__`` stays simple so the store can
    reconstitute persisted orders without re-validating.
    """

    id: int | None
    table_number: str
    kind: OrderKind
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    notes: str | None = None
    cashier_id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    kot_printed_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        table_number: str | None,
        kind: OrderKind,
        items: list[OrderItem],
        notes: str | None = None,
        cashier_id: int | None = None,
    ) -> Order:
        """Create a new order, enforcing all submission invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        table = (table_number or "").strip()
        if kind == OrderKind.DINE_IN and not table:
            raise ValidationError("Table number is required for dine-in orders")
        if kind == OrderKind.TAKEAWAY and not table:
            table = TAKEAWAY_TABLE

        seen: set[int] = set()
        for item in items:
            if item.id in seen:
                raise ValidationError(f"Duplicate item #{item.id} in order")
            seen.add(item.id)
            # Whatever the caller sent, a new ticket starts fully pending.
            item.status = ItemStatus.PENDING

        return Order(
            id=None,
            table_number=table,
            kind=kind,
            items=list(items),
            notes=notes,
            cashier_id=cashier_id,
        )

    # --- State transitions ----------------------------------------------------

    def advance_to(self, new_status: OrderStatus, *, enforce: bool = True) -> None:
        """Move the order along the kitchen flow.

        With ``enforce`` the only accepted move is the next state in
        ``KITCHEN_TRANSITIONS``.  Without it any non-terminal status is
        accepted, regressions included (legacy kitchen clients).
        """
        if new_status == OrderStatus.COMPLETED:
            raise ValidationError(
                "Orders are completed by generating a bill, not by a status update"
            )
        if self.status == OrderStatus.COMPLETED:
            raise ValidationError(f"Order #{self.id} is already completed")

        if enforce and KITCHEN_TRANSITIONS.get(self.status) != new_status:
            raise ValidationError(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {new_status.value}"
            )
        self.status = new_status

    def cancel_item(self, item_id: int) -> OrderItem:
        """Cancel one item.  Re-cancelling is a successful no-op."""
        item = self.find_item(item_id)
        if self.status == OrderStatus.COMPLETED and not item.is_cancelled:
            raise ValidationError(
                f"Cannot cancel items of order #{self.id}: already completed"
            )
        item.cancel()
        return item

    def mark_completed(self) -> None:
        """Terminal transition, reserved for the billing finalizer."""
        if self.status == OrderStatus.COMPLETED:
            raise ValidationError(f"Order #{self.id} is already billed")
        self.status = OrderStatus.COMPLETED

    # --- Computed properties --------------------------------------------------

    @property
    def active_items(self) -> list[OrderItem]:
        return [item for item in self.items if not item.is_cancelled]

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.active_items:
            result = result + item.line_total
        return result

    # --- Lookup ---------------------------------------------------------------

    def find_item(self, item_id: int) -> OrderItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError("Item not found")
