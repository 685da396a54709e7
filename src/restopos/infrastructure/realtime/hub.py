"""Process-wide publish/subscribe hub for lifecycle events.

The hub is the only ``EventPublisher`` implementation.  Every event goes
to two kinds of listener:

* in-process subscribers registered per topic (called synchronously), and
* every attached session (kitchen and cashier screens), regardless of
  role or table.  Relevance filtering happens on the client.

Delivery to sessions is at most once: a session that is not connected
when an event fires never sees it and has to re-read the order list.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Callable

from restopos.domain.events import DomainEvent, EventPublisher, Topic
from restopos.infrastructure.persistence.codec import event_to_message

logger = logging.getLogger(__name__)

Subscriber = Callable[[DomainEvent], None]


class Session(ABC):
    """A connected display or terminal."""

    id: str

    @abstractmethod
    def offer(self, message: dict[str, Any]) -> bool:
        """Hand a frame over without blocking.

        Returns False once the session is gone, so the hub can forget it.
        """

    async def close(self) -> None:
        """Release the session's resources."""


class RealtimeHub(EventPublisher):

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._subscribers: dict[Topic, list[Subscriber]] = defaultdict(list)
        self._lock = threading.Lock()

    # --- Sessions -------------------------------------------------------------

    def attach(self, session: Session) -> None:
        with self._lock:
            self._sessions[session.id] = session
        logger.info("Session %s attached (%d connected)", session.id, self.session_count)

    def detach(self, session: Session) -> None:
        with self._lock:
            removed = self._sessions.pop(session.id, None)
        if removed is not None:
            logger.info("Session %s detached (%d connected)", session.id, self.session_count)

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    async def close_all(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            await session.close()

    # --- In-process subscribers -----------------------------------------------

    def subscribe(self, topic: Topic, callback: Subscriber) -> None:
        with self._lock:
            self._subscribers[topic].append(callback)

    def unsubscribe(self, topic: Topic, callback: Subscriber) -> None:
        with self._lock:
            if callback in self._subscribers[topic]:
                self._subscribers[topic].remove(callback)

    # --- EventPublisher -------------------------------------------------------

    def publish(self, event: DomainEvent) -> int:
        message = event_to_message(event)

        with self._lock:
            callbacks = list(self._subscribers[event.topic])
            sessions = list(self._sessions.values())

        for callback in callbacks:
            try:
                callback(event)
            except Exception:
                logger.exception("Subscriber %r failed on %s", callback, event.topic.value)

        delivered = 0
        for session in sessions:
            if session.offer(message):
                delivered += 1
            else:
                self.detach(session)

        logger.debug("Published %s to %d session(s)", event.topic.value, delivered)
        return delivered
