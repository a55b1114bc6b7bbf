"""
FastAPI dependency injection module for the dashboard backend.

Endpoints receive their collaborators through these dependencies so tests can
swap them with app.dependency_overrides.

Key Dependencies Provided:
- get_settings_dependency / SettingsDep: the cached Settings singleton
- get_store_dependency / CandidateStoreDep: record store adapter
- get_live_channel / LiveChannelDep: the LiveStatsChannel created in the
  application lifespan (works for both HTTP requests and WebSockets)

Usage Examples:
    @router.get("/api/dashboard-stats")
    async def dashboard_stats(store: CandidateStoreDep) -> AggregateResult:
        ...

    @router.websocket("/ws/dashboard-stats")
    async def live_stats(websocket: WebSocket, channel: LiveChannelDep):
        ...
"""

from typing import Annotated

from fastapi import Depends
from starlette.requests import HTTPConnection

from recruitdash.core.config import Settings, get_settings
from recruitdash.services.candidate_store import CandidateStore, get_candidate_store
from recruitdash.services.live_channel import LiveStatsChannel


def get_settings_dependency() -> Settings:
    """
    Return the Settings singleton instance.

    In tests:
        app.dependency_overrides[get_settings_dependency] = lambda: mock_settings
    """
    return get_settings()


def get_store_dependency() -> CandidateStore:
    """Return the record store adapter bound to the application pool."""
    return get_candidate_store()


def get_live_channel(connection: HTTPConnection) -> LiveStatsChannel:
    """
    Return the application's live channel.

    The channel is created in the lifespan handler and kept on app.state; a
    missing channel (lifespan not run) is created lazily so the route still works.
    """
    state = connection.app.state
    channel = getattr(state, 'live_channel', None)
    if channel is None:
        channel = LiveStatsChannel()
        state.live_channel = channel
    return channel


SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]

CandidateStoreDep = Annotated[CandidateStore, Depends(get_store_dependency)]

LiveChannelDep = Annotated[LiveStatsChannel, Depends(get_live_channel)]
