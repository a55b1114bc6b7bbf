"""
WebSocket route for the live dashboard stats channel.

Endpoint:
- WS /ws/dashboard-stats

The route only moves frames; event handling lives in
recruitdash.services.live_channel. Each socket gets a fresh connection id
and a send lock, because replies to concurrent requests are written from
separate tasks.
"""

import asyncio
import logging
from typing import Any, Dict
from uuid import uuid4

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from recruitdash.core.dependencies import LiveChannelDep
from recruitdash.core.exceptions import DeliveryDiscarded


logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket('/ws/dashboard-stats')
async def live_dashboard_stats(websocket: WebSocket, channel: LiveChannelDep) -> None:
    await websocket.accept()
    connection_id = uuid4().hex
    send_lock = asyncio.Lock()

    async def send(frame: Dict[str, Any]) -> None:
        async with send_lock:
            if websocket.application_state != WebSocketState.CONNECTED:
                raise DeliveryDiscarded(connection_id)
            try:
                await websocket.send_json(frame)
            # Starlette raises WebSocketDisconnect for a reset transport and a
            # RuntimeError subclass once the socket is closed
            except (WebSocketDisconnect, RuntimeError) as e:
                raise DeliveryDiscarded(connection_id) from e

    await channel.connect(connection_id)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text")
            if raw is None:
                raw = (message.get("bytes") or b"").decode("utf-8", errors="replace")

            await channel.dispatch(connection_id, raw, send)
    except WebSocketDisconnect:
        pass
    finally:
        await channel.disconnect(connection_id)
