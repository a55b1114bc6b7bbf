"""
Live update channel for dashboard stats.

Clients hold a WebSocket open and send requestStats frames carrying a filter;
each request is answered with a statsUpdate frame sent to that connection
only. Nothing is broadcast and the channel never polls on its own.

Frame envelope (JSON text):
    {"event": "requestStats", "data": {"recruiterId": "...", "date": "YYYY-MM-DD"}, "seq": 7}
    {"event": "statsUpdate", "data": <AggregateResult | {"error": "..."}>, "seq": 7}
    {"event": "error", "data": {"error": "..."}}

seq is echoed from the request; when the client omits it the session's
request counter is used. Every requestStats runs as its own task, so replies
arrive in completion order, not request order. Clients drop stale replies by
comparing seq or the filter echo inside the payload.

A disconnect removes the session. Work already in flight still runs to
completion, and its reply is discarded silently.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Set, Union

from pydantic import ValidationError

from recruitdash.core.exceptions import DeliveryDiscarded, InvalidFilter
from recruitdash.models.enums import LiveEvent
from recruitdash.models.schemas import (
    AggregateResult,
    LiveFrame,
    StatsError,
    StatsRequestPayload,
)
from recruitdash.services.session_registry import LiveSession, SessionRegistry
from recruitdash.services.stats_query import SERVER_ERROR_MESSAGE, get_stats


logger = logging.getLogger(__name__)

# Sends one JSON-ready frame; raises DeliveryDiscarded if the socket is gone
SendFn = Callable[[Dict[str, Any]], Awaitable[None]]

StatsFn = Callable[
    [Optional[str], Optional[str]],
    Awaitable[Union[AggregateResult, StatsError]]
]


def build_frame(event: LiveEvent, data: Any, seq: Optional[int] = None) -> Dict[str, Any]:
    """Build an outbound frame dict."""
    frame: Dict[str, Any] = {"event": event.value, "data": data}
    if seq is not None:
        frame["seq"] = seq
    return frame


class LiveStatsChannel:
    """
    Event dispatcher for live dashboard connections.

    Owns the SessionRegistry; the WebSocket route only calls connect(),
    dispatch() and disconnect().

    Args:
        registry: Session table; a fresh one is created if omitted.
        stats_fn: Stats entry point, get_stats by default.
    """

    def __init__(
        self,
        registry: Optional[SessionRegistry] = None,
        stats_fn: Optional[StatsFn] = None
    ) -> None:
        self.registry = registry if registry is not None else SessionRegistry()
        self._stats_fn: StatsFn = stats_fn if stats_fn is not None else get_stats
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # -------------------------------------------------------------------------
    # Connection lifecycle
    # -------------------------------------------------------------------------

    async def connect(self, connection_id: str) -> LiveSession:
        return await self.registry.register(connection_id)

    async def disconnect(self, connection_id: str) -> None:
        await self.registry.unregister(connection_id)

    async def close(self) -> None:
        """Cancel outstanding requests and drop every session."""
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
        self.registry.clear()

    # -------------------------------------------------------------------------
    # Inbound frames
    # -------------------------------------------------------------------------

    async def dispatch(self, connection_id: str, raw: str, send: SendFn) -> Optional[asyncio.Task]:
        """
        Handle one inbound text frame.

        Returns:
            The task computing the reply for requestStats, otherwise None.
        """
        try:
            frame = LiveFrame.model_validate_json(raw)
        except ValidationError:
            await self._reply_error(connection_id, "Malformed frame", send)
            return None

        if frame.event != LiveEvent.REQUEST_STATS.value:
            await self._reply_error(connection_id, f"Unknown event: {frame.event}", send)
            return None

        task = asyncio.create_task(
            self.handle_request_stats(connection_id, frame.data, frame.seq, send)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def handle_request_stats(
        self,
        connection_id: str,
        data: Any,
        seq: Optional[int],
        send: SendFn
    ) -> None:
        """
        Compute stats for one requestStats event and reply to its sender.

        The payload becomes the session's last_filter before the computation
        starts. Failures become an error statsUpdate; the connection stays open.
        """
        payload = StatsRequestPayload.model_validate(data if isinstance(data, dict) else {})

        request_number = self.registry.record_filter(connection_id, payload)
        if request_number is None:
            logger.debug(f"requestStats from unknown connection {connection_id}; ignored")
            return
        if seq is None:
            seq = request_number

        try:
            result = await self._stats_fn(payload.recruiterId, payload.date)
        except InvalidFilter as e:
            result = StatsError(error=str(e))
        except Exception:
            logger.exception(f"requestStats failed for connection {connection_id}")
            result = StatsError(error=SERVER_ERROR_MESSAGE)

        frame = build_frame(LiveEvent.STATS_UPDATE, result.model_dump(mode='json'), seq)
        await self._deliver(connection_id, frame, send)

    # -------------------------------------------------------------------------
    # Outbound frames
    # -------------------------------------------------------------------------

    async def _reply_error(self, connection_id: str, message: str, send: SendFn) -> None:
        await self._deliver(connection_id, build_frame(LiveEvent.ERROR, {"error": message}), send)

    async def _deliver(self, connection_id: str, frame: Dict[str, Any], send: SendFn) -> None:
        try:
            if not self.registry.is_active(connection_id):
                raise DeliveryDiscarded(connection_id)
            await send(frame)
        except DeliveryDiscarded:
            logger.debug(f"Discarded {frame['event']} for closed connection {connection_id}")
