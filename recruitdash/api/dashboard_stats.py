"""
FastAPI router module for the dashboard stats pull endpoint.

Key Endpoints:
- GET /api/dashboard-stats: aggregates for one day and optional recruiter
- GET /api/recruiters: recruiter options for the dashboard filter

Response contract:
- 200: AggregateResult (same JSON as the live statsUpdate payload)
- 400: {"error": ...} only when STRICT_FILTERS rejects the date
- 500: {"error": "Server error"} when the record store fails
"""

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from recruitdash.core.dependencies import CandidateStoreDep
from recruitdash.core.exceptions import InvalidFilter, StoreUnavailable
from recruitdash.models.schemas import AggregateResult, RecruiterOption, StatsError
from recruitdash.services.overview import list_recruiters
from recruitdash.services.stats_query import SERVER_ERROR_MESSAGE, get_stats


logger = logging.getLogger(__name__)

router = APIRouter()


def _error_response(status_code: int, message: str = SERVER_ERROR_MESSAGE) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=StatsError(error=message).model_dump())


@router.get(
    '/api/dashboard-stats',
    response_model=AggregateResult,
    responses={400: {"model": StatsError}, 500: {"model": StatsError}},
    summary="Get Dashboard Stats",
    description="""
    Aggregate candidate records created on one calendar day.

    - recruiterId: restrict to one recruiter (empty means all)
    - date: ISO-8601 date; empty or unparseable means today in the dashboard timezone
    """
)
async def get_dashboard_stats(
    store: CandidateStoreDep,
    recruiter_id: Optional[str] = Query(default=None, alias='recruiterId'),
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
) -> Union[AggregateResult, JSONResponse]:
    """
    Return totals plus per-recruiter and per-client breakdowns.

    Raises:
        Nothing; failures are returned as {"error": ...} bodies.
    """
    try:
        result = await get_stats(recruiter_id, date, store=store)
    except InvalidFilter as e:
        return _error_response(400, str(e))
    except Exception:
        logger.exception(f"dashboard-stats error for recruiterId={recruiter_id!r} date={date!r}")
        return _error_response(500)

    if isinstance(result, StatsError):
        return _error_response(500, result.error)
    return result


@router.get(
    '/api/recruiters',
    response_model=List[RecruiterOption],
    responses={500: {"model": StatsError}},
    summary="List Recruiters",
)
async def get_recruiters(store: CandidateStoreDep) -> Union[List[RecruiterOption], JSONResponse]:
    """Recruiters for the dashboard filter dropdown, ordered by username."""
    try:
        return await list_recruiters(store=store)
    except StoreUnavailable as e:
        logger.error(f"Error listing recruiters: {e}")
        return _error_response(500)
