"""WebSocket endpoint for kitchen and cashier screens.

Frames in both directions are JSON objects ``{"event": ..., "data": ...}``.
The only client-originated event is ``reprint_kot``; anything the server
cannot act on is answered with an ``error`` frame to that session alone.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from restopos.domain.exceptions import DomainException
from restopos.infrastructure.bootstrap import Services
from restopos.infrastructure.realtime.websocket_session import WebSocketSession
from restopos.infrastructure.web.deps import get_ws_services

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])

REPRINT_KOT = "reprint_kot"


def _error_frame(message: str) -> dict[str, Any]:
    return {"event": "error", "data": {"message": message}}


def dispatch_client_frame(services: Services, session: WebSocketSession, raw: str) -> None:
    try:
        frame = json.loads(raw)
    except ValueError:
        session.offer(_error_frame("Malformed frame"))
        return
    if not isinstance(frame, dict):
        session.offer(_error_frame("Malformed frame"))
        return

    event = frame.get("event")
    data = frame.get("data") or {}
    if event != REPRINT_KOT:
        session.offer(_error_frame(f"Unknown event: {event}"))
        return

    try:
        order_id = int(data.get("orderId"))
    except (TypeError, ValueError, AttributeError):
        session.offer(_error_frame("reprint_kot needs a numeric orderId"))
        return

    try:
        services.reprint_kot().handle(order_id, data)
    except DomainException as exc:
        session.offer(_error_frame(str(exc)))


@router.websocket("/ws")
async def realtime(websocket: WebSocket, role: str | None = None) -> None:
    services = get_ws_services(websocket)
    session = WebSocketSession(websocket, queue_size=services.settings.ws_queue_size)

    try:
        # Attach before accepting so no event is missed once the client
        # considers itself connected.
        services.hub.attach(session)
        await websocket.accept()
        session.start()
        logger.info("Client connected: %s (role=%s)", session.id, role or "-")

        while True:
            raw = await websocket.receive_text()
            dispatch_client_frame(services, session, raw)
    except WebSocketDisconnect:
        pass
    finally:
        services.hub.detach(session)
        await session.close()
        logger.info("Client disconnected: %s", session.id)
