"""
Dashboard Services Module

Business logic for the dashboard metrics pipeline. Services read the record
store through candidate_store and are consumed by the API layer.

Services:
- candidate_store: read-only PostgreSQL adapter with snapshot reads and timeouts
- aggregation: day-window aggregation engine
- stats_query: filter normalization and the shared get_stats entry point
- session_registry: table of live connections
- live_channel: requestStats/statsUpdate event handling
- overview: all-time totals for recruiter picker and admin pages
"""

from recruitdash.services.candidate_store import (
    CandidateStore,
    CandidateReader,
    TimeWindow,
    GroupCount,
    RecruiterFound,
    RecruiterNotFound,
    RecruiterLookup,
    get_candidate_store,
)

from recruitdash.services.aggregation import (
    compute_aggregates,
    resolve_day,
    resolve_time_window,
    sort_client_calls,
    join_recruiter_calls,
)

from recruitdash.services.stats_query import (
    get_stats,
    normalize_filter,
    parse_filter_date,
)

from recruitdash.services.session_registry import (
    LiveSession,
    SessionRegistry,
)

from recruitdash.services.live_channel import (
    LiveStatsChannel,
    build_frame,
)

from recruitdash.services.overview import (
    list_recruiters,
    get_admin_overview,
    get_recruiter_performance,
)

__all__ = [
    # Record store
    'CandidateStore',
    'CandidateReader',
    'TimeWindow',
    'GroupCount',
    'RecruiterFound',
    'RecruiterNotFound',
    'RecruiterLookup',
    'get_candidate_store',
    # Aggregation
    'compute_aggregates',
    'resolve_day',
    'resolve_time_window',
    'sort_client_calls',
    'join_recruiter_calls',
    # Stats query
    'get_stats',
    'normalize_filter',
    'parse_filter_date',
    # Live channel
    'LiveSession',
    'SessionRegistry',
    'LiveStatsChannel',
    'build_frame',
    # Overview
    'list_recruiters',
    'get_admin_overview',
    'get_recruiter_performance',
]
