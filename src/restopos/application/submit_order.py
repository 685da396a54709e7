"""Application service: Submit Order use case.

Validates the cart, snapshots prices, stores the order and then tells
the kitchen.  The latency figure returned to the terminal covers call
entry up to the persistence commit; it is measured before the broadcast
so a slow display never inflates it.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from restopos.application.dto import ItemSpec, SubmitResult
from restopos.application.kot_log import KotLogRecorder
from restopos.domain.events import EventPublisher, OrderPlaced
from restopos.domain.exceptions import EntityNotFoundError, ValidationError
from restopos.domain.model.kot_log import KotEventType
from restopos.domain.model.order import Order, OrderItem, OrderKind
from restopos.domain.model.value_objects import Money, Quantity
from restopos.domain.repository.menu_repository import MenuRepository
from restopos.domain.repository.order_repository import OrderRepository
from restopos.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)

KOT_LATENCY_BUDGET_MS = 300


class SubmitOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        menu_repo: MenuRepository,
        publisher: EventPublisher,
        kot_log: KotLogRecorder,
        user_repo: UserRepository | None = None,
        latency_budget_ms: int = KOT_LATENCY_BUDGET_MS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._order_repo = order_repo
        self._menu_repo = menu_repo
        self._publisher = publisher
        self._kot_log = kot_log
        self._user_repo = user_repo
        self._latency_budget_ms = latency_budget_ms
        self._clock = clock

    def handle(
        self,
        table_number: str | None,
        order_kind: OrderKind | str,
        items: list[ItemSpec],
        notes: str | None = None,
        cashier_id: int | None = None,
    ) -> SubmitResult:
        """Submit a new order to the kitchen.

        Steps:
        1. Validate kind and cashier, resolve every item to a snapshot.
        2. Let the Order aggregate validate the submission rules.
        3. Persist (this is where the latency clock stops).
        4. Publish ``new_order`` and record the KOT log entry.
        """
        started = self._clock()

        kind = order_kind if isinstance(order_kind, OrderKind) else OrderKind.parse(order_kind)
        if cashier_id is not None and self._user_repo is not None:
            if self._user_repo.get_by_id(cashier_id) is None:
                raise ValidationError(f"Unknown cashier #{cashier_id}")

        order_items = [self._resolve(spec) for spec in items]
        order = Order.create(
            table_number=table_number,
            kind=kind,
            items=order_items,
            notes=notes,
            cashier_id=cashier_id,
        )
        self._order_repo.save(order)
        latency_ms = round((self._clock() - started) * 1000)

        self._publisher.publish(OrderPlaced(order))
        self._kot_log.record(order.id, KotEventType.NEW_ORDER, True, latency_ms)  # type: ignore[arg-type]

        if latency_ms > self._latency_budget_ms:
            logger.warning(
                "Order #%d processed in %dms (budget %dms)",
                order.id, latency_ms, self._latency_budget_ms,
            )
        else:
            logger.info("Order #%d processed in %dms", order.id, latency_ms)

        return SubmitResult(order=order, latency_ms=latency_ms)

    # --- Snapshot resolution --------------------------------------------------

    def _resolve(self, spec: ItemSpec) -> OrderItem:
        name = spec.name
        price = spec.price
        category = spec.category

        if not name or price is None:
            menu_item = self._menu_repo.get_by_id(spec.item_id)
            if menu_item is None:
                raise EntityNotFoundError(f"Menu item #{spec.item_id} not found")
            if not menu_item.enabled:
                raise ValidationError(f"Menu item '{menu_item.name}' is not available")
            name = name or menu_item.name
            price = menu_item.price.amount if price is None else price
            category = category or menu_item.category

        return OrderItem(
            id=spec.item_id,
            name=name,
            unit_price=Money.of(price),
            quantity=Quantity(spec.quantity),
            category=category,
        )
