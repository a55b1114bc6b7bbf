"""
Session registry for live dashboard connections.

Holds one LiveSession per connected WebSocket, keyed by connection id. The
registry is an explicit object owned by the live channel: it is created with
the application and cleared at shutdown. Nothing is persisted; after a
restart clients reconnect and re-request.

Connect and disconnect for the same connection id are serialized by a
per-id asyncio.Lock. Different connections never contend.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from recruitdash.models.schemas import StatsRequestPayload


logger = logging.getLogger(__name__)


@dataclass
class LiveSession:
    """
    State kept for one live connection.

    Attributes:
        connection_id: Unique id assigned when the socket was accepted.
        last_filter: Most recent requestStats payload, None until the first request.
        connected_at: UTC time the session was registered.
        request_count: Number of requestStats received; doubles as the
            server-assigned sequence number.
    """
    connection_id: str
    last_filter: Optional[StatsRequestPayload] = None
    connected_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_count: int = 0


class SessionRegistry:
    """Process-wide table of active LiveSession entries."""

    def __init__(self) -> None:
        self._sessions: Dict[str, LiveSession] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock_for(self, connection_id: str) -> asyncio.Lock:
        return self._locks.setdefault(connection_id, asyncio.Lock())

    async def register(self, connection_id: str) -> LiveSession:
        """
        Create the session for a new connection.

        Raises:
            ValueError: If the id is already registered.
        """
        async with self._lock_for(connection_id):
            if connection_id in self._sessions:
                raise ValueError(f"Connection {connection_id} already registered")
            session = LiveSession(connection_id=connection_id)
            self._sessions[connection_id] = session

        logger.info(f"Live session registered: {connection_id} (active={len(self._sessions)})")
        return session

    async def unregister(self, connection_id: str) -> bool:
        """
        Remove the session for a closed connection.

        Returns:
            True if a session was removed, False if none existed.
        """
        async with self._lock_for(connection_id):
            removed = self._sessions.pop(connection_id, None) is not None
        self._locks.pop(connection_id, None)

        if removed:
            logger.info(f"Live session removed: {connection_id} (active={len(self._sessions)})")
        return removed

    def record_filter(self, connection_id: str, payload: StatsRequestPayload) -> Optional[int]:
        """
        Store the latest filter for a session and bump its request counter.

        Returns:
            The new request count, or None if the session is gone.
        """
        session = self._sessions.get(connection_id)
        if session is None:
            return None
        session.last_filter = payload
        session.request_count += 1
        return session.request_count

    def is_active(self, connection_id: str) -> bool:
        return connection_id in self._sessions

    def get(self, connection_id: str) -> Optional[LiveSession]:
        return self._sessions.get(connection_id)

    def clear(self) -> None:
        """Drop every session (application shutdown)."""
        count = len(self._sessions)
        self._sessions.clear()
        self._locks.clear()
        if count:
            logger.info(f"Session registry cleared ({count} sessions dropped)")

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._sessions
