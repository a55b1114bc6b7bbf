"""
Parameterized SQL for the all-time overview counts.

These back the recruiter picker and the admin dashboard totals. They do not
use the dashboard time window.
"""

from recruitdash.sql.stats_queries import CANDIDATES_TABLE, USERS_TABLE


# $1: role
RECRUITER_OPTIONS_QUERY: str = f"""
    SELECT id::text AS id, username
    FROM {USERS_TABLE}
    WHERE role = $1
    ORDER BY username ASC
"""

TOTAL_CANDIDATES_QUERY: str = f"""
    SELECT COUNT(*)::bigint AS total
    FROM {CANDIDATES_TABLE}
"""

# $1: role
TOTAL_USERS_WITH_ROLE_QUERY: str = f"""
    SELECT COUNT(*)::bigint AS total
    FROM {USERS_TABLE}
    WHERE role = $1
"""

# $1: recruiter id, $2: selected status
RECRUITER_TOTALS_QUERY: str = f"""
    SELECT
        COUNT(*)::bigint AS total_candidates,
        COUNT(*) FILTER (WHERE hr_status = $2)::bigint AS total_selected
    FROM {CANDIDATES_TABLE}
    WHERE created_by = $1
"""
