"""Lifecycle events and the publisher port.

Each event class names its topic; the topic values double as the event
names clients see on the realtime channel.  The application layer only
talks to ``EventPublisher``; transports live in infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from restopos.domain.model.order import Order, OrderStatus


class Topic(Enum):
    NEW_ORDER = "new_order"
    ORDER_STATUS_UPDATE = "order_status_update"
    ITEM_CANCELLED = "item_cancelled"
    KOT_REPRINT = "kot_reprint"


@dataclass(frozen=True)
class OrderPlaced:
    topic: ClassVar[Topic] = Topic.NEW_ORDER

    order: Order


@dataclass(frozen=True)
class OrderStatusChanged:
    topic: ClassVar[Topic] = Topic.ORDER_STATUS_UPDATE

    order_id: int
    status: OrderStatus


@dataclass(frozen=True)
class ItemCancelled:
    topic: ClassVar[Topic] = Topic.ITEM_CANCELLED

    order_id: int
    item_id: int


@dataclass(frozen=True)
class KotReprintRequested:
    """Advisory only: the ticket is re-rendered client-side."""

    topic: ClassVar[Topic] = Topic.KOT_REPRINT

    order_id: int
    data: dict[str, Any] = field(default_factory=dict)


DomainEvent = Union[OrderPlaced, OrderStatusChanged, ItemCancelled, KotReprintRequested]


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: DomainEvent) -> int:
        """Fan the event out without blocking.

        Returns the number of connected sessions the event was handed to.
        Delivery failures are never raised to the caller.
        """
