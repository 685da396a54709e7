"""WebSocket-backed realtime session.

Each session owns a bounded queue drained by its own writer task, so a
slow screen only ever delays itself.  ``offer`` may be called from any
thread: frames are handed to the session's event loop with
``call_soon_threadsafe``.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any

from fastapi import WebSocket

from restopos.infrastructure.realtime.hub import Session

logger = logging.getLogger(__name__)


class WebSocketSession(Session):

    def __init__(self, websocket: WebSocket, queue_size: int = 100) -> None:
        self.id = uuid.uuid4().hex[:12]
        self.dropped = 0
        self._websocket = websocket
        self._loop = asyncio.get_running_loop()
        self._queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue(maxsize=queue_size)
        self._writer: asyncio.Task | None = None
        self._closed = False

    def start(self) -> None:
        """Start the writer; call once the socket has been accepted."""
        self._writer = self._loop.create_task(self._pump(), name=f"ws-writer-{self.id}")

    def offer(self, message: dict[str, Any]) -> bool:
        if self._closed:
            return False
        try:
            self._loop.call_soon_threadsafe(self._enqueue, message)
        except RuntimeError:
            # Event loop already shut down.
            self._closed = True
            return False
        return True

    async def close(self) -> None:
        self._closed = True
        if self._writer is not None and not self._writer.done():
            self._writer.cancel()
            try:
                await self._writer
            except asyncio.CancelledError:
                pass

    # --- Internals ------------------------------------------------------------

    def _enqueue(self, message: dict[str, Any]) -> None:
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            self.dropped += 1
            logger.warning(
                "Session %s is not keeping up, dropped %s frame (%d dropped so far)",
                self.id, message.get("event"), self.dropped,
            )

    async def _pump(self) -> None:
        while not self._closed:
            message = await self._queue.get()
            try:
                await self._websocket.send_json(message)
            except Exception as exc:
                # The read loop notices the disconnect and detaches us.
                logger.debug("Session %s send failed: %s", self.id, exc)
                self._closed = True
