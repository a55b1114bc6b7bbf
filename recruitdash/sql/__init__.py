"""
SQL Query Module for the recruitment dashboard backend.

Provides parameterized SQL queries for:
- Windowed stats aggregation over candidates (stats_queries)
- All-time overview counts (overview_queries)

Example usage:
    from recruitdash.sql import get_count_query, get_grouped_count_query

    sql = get_grouped_count_query("client")
    rows = await conn.fetch(sql, window_start, window_end, recruiter_id)
"""

from recruitdash.sql.stats_queries import (
    get_match_clause,
    get_count_query,
    get_grouped_count_query,
    get_recruiter_lookup_query,
    CANDIDATES_TABLE,
    USERS_TABLE,
)

from recruitdash.sql.overview_queries import (
    RECRUITER_OPTIONS_QUERY,
    TOTAL_CANDIDATES_QUERY,
    TOTAL_USERS_WITH_ROLE_QUERY,
    RECRUITER_TOTALS_QUERY,
)

__all__ = [
    'get_match_clause',
    'get_count_query',
    'get_grouped_count_query',
    'get_recruiter_lookup_query',
    'CANDIDATES_TABLE',
    'USERS_TABLE',
    'RECRUITER_OPTIONS_QUERY',
    'TOTAL_CANDIDATES_QUERY',
    'TOTAL_USERS_WITH_ROLE_QUERY',
    'RECRUITER_TOTALS_QUERY',
]
