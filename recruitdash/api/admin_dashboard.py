"""
FastAPI router module for admin dashboard totals.

Key Endpoints:
- GET /admin/dashboard/data: all-time candidate and recruiter counts
- GET /admin/dashboard/recruiter/{recruiter_id}/data: one recruiter's totals

Authentication and page rendering belong to the surrounding application.
"""

import logging
from typing import Union

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from recruitdash.core.dependencies import CandidateStoreDep
from recruitdash.core.exceptions import StoreUnavailable
from recruitdash.models.schemas import AdminOverview, RecruiterPerformance, StatsError
from recruitdash.services.overview import get_admin_overview, get_recruiter_performance
from recruitdash.services.stats_query import SERVER_ERROR_MESSAGE


logger = logging.getLogger(__name__)

router = APIRouter(prefix='/admin/dashboard')


@router.get(
    '/data',
    response_model=AdminOverview,
    responses={500: {"model": StatsError}},
)
async def get_admin_dashboard_data(store: CandidateStoreDep) -> Union[AdminOverview, JSONResponse]:
    try:
        return await get_admin_overview(store=store)
    except StoreUnavailable as e:
        logger.error(f"Error fetching admin dashboard data: {e}")
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MESSAGE})


@router.get(
    '/recruiter/{recruiter_id}/data',
    response_model=RecruiterPerformance,
    responses={500: {"model": StatsError}},
)
async def get_recruiter_performance_data(
    recruiter_id: str,
    store: CandidateStoreDep
) -> Union[RecruiterPerformance, JSONResponse]:
    """All-time totals for one recruiter; unknown ids report zeros."""
    try:
        return await get_recruiter_performance(recruiter_id, store=store)
    except StoreUnavailable as e:
        logger.error(f"Error fetching recruiter performance data for {recruiter_id}: {e}")
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MESSAGE})
