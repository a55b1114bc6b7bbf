"""
Dashboard API package initialization.

Router modules:
- dashboard_stats: GET /api/dashboard-stats and GET /api/recruiters
- admin_dashboard: /admin/dashboard totals
- live_stats: WS /ws/dashboard-stats
"""

from fastapi import APIRouter

from recruitdash.api.dashboard_stats import router as dashboard_stats_router
from recruitdash.api.admin_dashboard import router as admin_dashboard_router
from recruitdash.api.live_stats import router as live_stats_router

api_router = APIRouter()

api_router.include_router(dashboard_stats_router, tags=["dashboard-stats"])
api_router.include_router(admin_dashboard_router, tags=["admin-dashboard"])
api_router.include_router(live_stats_router, tags=["live-stats"])

__all__ = [
    "api_router",
    "dashboard_stats_router",
    "admin_dashboard_router",
    "live_stats_router",
]
