"""
Aggregation engine for the recruitment dashboard.

Computes the four dashboard figures for one StatsFilter:

1. totalCalls: candidates created inside the day window (and by the recruiter,
   when one is given)
2. totalSelected: the same set restricted to hrStatus "Select"
3. recruiterCalls: counts grouped by createdBy, left-joined to recruiter
   display names (unresolvable ids keep their count with no name)
4. clientCalls: counts grouped by client, sorted by calls descending; ties
   keep first-seen order

Day window:
    A filter date D becomes [D 00:00:00.000, D 23:59:59.999] in the dashboard
    timezone. Without a date, D is the current calendar day in that timezone
    at evaluation time.

Failure semantics:
    All four figures are read from one store snapshot. Either the complete
    AggregateResult is produced or StoreUnavailable propagates; there is no
    partial result. The engine keeps no state between calls.
"""

import logging
from datetime import date, datetime, time, tzinfo
from typing import Dict, List, Optional

from recruitdash.core.config import get_settings
from recruitdash.models.enums import HrStatus
from recruitdash.models.schemas import (
    AggregateResult,
    AppliedFilter,
    ClientCalls,
    RecruiterCalls,
    StatsFilter,
)
from recruitdash.services.candidate_store import (
    CandidateStore,
    GroupCount,
    RecruiterFound,
    RecruiterLookup,
    TimeWindow,
    NOT_FOUND,
    get_candidate_store,
)


logger = logging.getLogger(__name__)

# Last representable millisecond of a day
END_OF_DAY: time = time(23, 59, 59, 999000)


# =============================================================================
# Time Window Resolution
# =============================================================================


def resolve_day(day: Optional[date], tz: tzinfo, now: Optional[datetime] = None) -> date:
    """
    Return the calendar day a filter refers to.

    Args:
        day: Explicit day from the filter, or None.
        tz: Dashboard reference timezone.
        now: Evaluation instant (defaults to the current time). Naive values
            are interpreted in tz.

    Returns:
        date: day itself, or today's date in tz.
    """
    if day is not None:
        return day

    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz)

    return now.astimezone(tz).date()


def resolve_time_window(day: Optional[date], tz: tzinfo, now: Optional[datetime] = None) -> TimeWindow:
    """
    Expand a filter day into its closed created_at interval.

    Example:
        >>> w = resolve_time_window(date(2026, 10, 18), ZoneInfo("UTC"))
        >>> w.start.isoformat(), w.end.isoformat()
        ('2026-10-18T00:00:00+00:00', '2026-10-18T23:59:59.999000+00:00')
    """
    effective = resolve_day(day, tz, now)
    return TimeWindow(
        start=datetime.combine(effective, time.min, tzinfo=tz),
        end=datetime.combine(effective, END_OF_DAY, tzinfo=tz),
    )


# =============================================================================
# Result Assembly
# =============================================================================


def sort_client_calls(groups: List[GroupCount]) -> List[ClientCalls]:
    """
    Order client groups by calls descending.

    sorted() is stable, so groups with equal counts keep the order in which
    the store reported them (first-seen).
    """
    ordered = sorted(groups, key=lambda g: g.calls, reverse=True)
    return [ClientCalls(clientName=g.key, calls=g.calls) for g in ordered]


def join_recruiter_calls(
    groups: List[GroupCount],
    lookups: Dict[str, RecruiterLookup]
) -> List[RecruiterCalls]:
    """
    Left-join recruiter groups with display metadata.

    Every group produces exactly one entry, in group order.
    """
    joined = []
    for group in groups:
        lookup = lookups.get(group.key, NOT_FOUND)
        name = lookup.name if isinstance(lookup, RecruiterFound) else None
        joined.append(RecruiterCalls(
            recruiterId=group.key,
            recruiterDisplayName=name,
            calls=group.calls,
        ))
    return joined


def build_aggregate_result(
    stats_filter: StatsFilter,
    day: date,
    window: TimeWindow,
    total_calls: int,
    total_selected: int,
    recruiter_groups: List[GroupCount],
    client_groups: List[GroupCount],
    lookups: Dict[str, RecruiterLookup]
) -> AggregateResult:
    """Assemble the AggregateResult from raw store figures."""
    return AggregateResult(
        totalCalls=total_calls,
        totalSelected=total_selected,
        recruiterCalls=join_recruiter_calls(recruiter_groups, lookups),
        clientCalls=sort_client_calls(client_groups),
        filter=AppliedFilter(
            recruiterId=stats_filter.recruiterId,
            date=day,
            windowStart=window.start,
            windowEnd=window.end,
        ),
    )


# =============================================================================
# Engine Entry Point
# =============================================================================


async def compute_aggregates(
    stats_filter: StatsFilter,
    store: Optional[CandidateStore] = None,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None
) -> AggregateResult:
    """
    Compute dashboard aggregates for a normalized filter.

    Args:
        stats_filter: Normalized filter (see stats_query.normalize_filter).
        store: Record store adapter; defaults to the application store.
        now: Evaluation instant used when the filter has no date.
        tz: Reference timezone; defaults to DASHBOARD_TIMEZONE.

    Returns:
        AggregateResult for the filter. Empty matches yield zero totals and
        empty breakdowns.

    Raises:
        StoreUnavailable: If the record store fails or times out.
    """
    if tz is None:
        tz = get_settings().tzinfo
    if store is None:
        store = get_candidate_store()

    day = resolve_day(stats_filter.date, tz, now)
    window = resolve_time_window(day, tz)
    recruiter_id = stats_filter.recruiterId

    async with store.reader() as reader:
        total_calls = await reader.count_candidates(window, recruiter_id)
        total_selected = await reader.count_candidates(
            window, recruiter_id, hr_status=HrStatus.SELECT.value
        )
        recruiter_groups = await reader.count_by_recruiter(window, recruiter_id)
        client_groups = await reader.count_by_client(window, recruiter_id)
        lookups = await reader.lookup_recruiters(g.key for g in recruiter_groups)

    logger.debug(
        f"Aggregated day={day} recruiter={recruiter_id}: "
        f"total={total_calls} selected={total_selected} "
        f"recruiters={len(recruiter_groups)} clients={len(client_groups)}"
    )

    return build_aggregate_result(
        stats_filter,
        day,
        window,
        total_calls,
        total_selected,
        recruiter_groups,
        client_groups,
        lookups,
    )
