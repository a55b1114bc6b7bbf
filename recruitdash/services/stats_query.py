"""
Stats query service: the single entry point for dashboard aggregates.

Both the GET /api/dashboard-stats endpoint and the live WebSocket channel call
get_stats() in-process, so the two paths share one normalization rule and one
source of truth.

Normalization:
- recruiterId: surrounding whitespace stripped; empty means "all recruiters"
- date: ISO-8601 calendar date (YYYY-MM-DD) or ISO-8601 datetime (converted to
  the dashboard timezone, then truncated to its day); empty means "today"

Malformed dates fall back to "today" unless STRICT_FILTERS is enabled, in
which case InvalidFilter is raised.

Errors:
    StoreUnavailable is logged with its detail and converted into the generic
    StatsError body. The store is not retried.
"""

import logging
from datetime import date, datetime, tzinfo
from typing import Optional, Union

from recruitdash.core.config import get_settings
from recruitdash.core.exceptions import InvalidFilter, StoreUnavailable
from recruitdash.models.schemas import AggregateResult, StatsError, StatsFilter
from recruitdash.services.aggregation import compute_aggregates
from recruitdash.services.candidate_store import CandidateStore


logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE: str = "Server error"


def parse_filter_date(raw_date: Optional[str], tz: tzinfo) -> Optional[date]:
    """
    Parse a raw date parameter.

    Args:
        raw_date: Query/payload value.
        tz: Dashboard timezone used to place aware datetimes on a day.

    Returns:
        The calendar day, or None when the value is empty or unparseable.
    """
    if raw_date is None:
        return None
    value = raw_date.strip()
    if not value:
        return None

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.date()
    return parsed.astimezone(tz).date()


def normalize_filter(
    raw_recruiter_id: Optional[str],
    raw_date: Optional[str],
    strict: Optional[bool] = None,
    tz: Optional[tzinfo] = None
) -> StatsFilter:
    """
    Turn raw request values into a StatsFilter.

    Args:
        raw_recruiter_id: recruiterId query/payload value.
        raw_date: date query/payload value.
        strict: Override STRICT_FILTERS.
        tz: Override DASHBOARD_TIMEZONE.

    Raises:
        InvalidFilter: In strict mode, when a non-empty date cannot be parsed.
    """
    settings = get_settings()
    if strict is None:
        strict = settings.strict_filters
    if tz is None:
        tz = settings.tzinfo

    recruiter_id = (raw_recruiter_id or '').strip() or None

    day = parse_filter_date(raw_date, tz)
    if day is None and raw_date and raw_date.strip():
        if strict:
            raise InvalidFilter(f"Invalid date: {raw_date!r}", field='date', value=raw_date)
        logger.debug(f"Ignoring unparseable date {raw_date!r}; using current day")

    return StatsFilter(recruiterId=recruiter_id, date=day)


async def get_stats(
    raw_recruiter_id: Optional[str],
    raw_date: Optional[str],
    store: Optional[CandidateStore] = None,
    now: Optional[datetime] = None
) -> Union[AggregateResult, StatsError]:
    """
    Normalize the raw filter and compute aggregates.

    Returns:
        AggregateResult on success, StatsError when the record store fails.

    Raises:
        InvalidFilter: Only in strict mode (see normalize_filter).
    """
    stats_filter = normalize_filter(raw_recruiter_id, raw_date)

    try:
        return await compute_aggregates(stats_filter, store=store, now=now)
    except StoreUnavailable as e:
        logger.error(
            f"dashboard-stats failed for recruiter={stats_filter.recruiterId} "
            f"date={stats_filter.date}: {e}"
        )
        return StatsError(error=SERVER_ERROR_MESSAGE)
