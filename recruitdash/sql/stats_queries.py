"""
Parameterized SQL query module for dashboard stats aggregation.

The record store is the PostgreSQL database owned by the candidate CRUD
application. This pipeline only reads it. Expected relations:

    candidates(id, created_at timestamptz, created_by text, client text, hr_status text)
    users(id text, username text, role text)

Every aggregation query shares the same match predicate:

    created_at BETWEEN window_start AND window_end   (closed interval)
    AND (recruiter_id IS NULL OR created_by = recruiter_id)

Positional parameters follow asyncpg's $n style:
    $1 window_start (timestamptz), $2 window_end (timestamptz), $3 recruiter_id (text or NULL)
"""

from typing import List


CANDIDATES_TABLE: str = "candidates"
USERS_TABLE: str = "users"

# Grouped rows are returned in first-seen order so that callers can apply a
# stable sort without losing the encounter order of ties.
_GROUP_ORDER: str = "ORDER BY first_seen ASC, group_key ASC"


def get_match_clause() -> str:
    """
    Return the WHERE clause body shared by all windowed stats queries.

    Returns:
        str: Predicate using $1, $2 and $3.
    """
    conditions: List[str] = [
        "created_at >= $1",
        "created_at <= $2",
        "($3::text IS NULL OR created_by = $3::text)",
    ]
    return " AND ".join(conditions)


def get_count_query(with_status: bool = False) -> str:
    """
    Generate SQL counting candidates that match the filter.

    Args:
        with_status: Add an hr_status equality on parameter $4.

    Returns:
        str: Query returning a single bigint column ``total``.

    Example:
        >>> sql = get_count_query(with_status=True)
        >>> # await conn.fetchval(sql, start, end, None, "Select")
    """
    where_clause = get_match_clause()
    if with_status:
        where_clause += " AND hr_status = $4::text"

    return f"""
        SELECT COUNT(*)::bigint AS total
        FROM {CANDIDATES_TABLE}
        WHERE {where_clause}
    """


def get_grouped_count_query(group_column: str) -> str:
    """
    Generate SQL counting matching candidates per value of one column.

    NULL group values are folded into the empty string so they still produce
    a row. The first_seen column is the earliest created_at of the group.

    Args:
        group_column: Either ``created_by`` or ``client``.

    Returns:
        str: Query returning ``group_key``, ``calls``, ``first_seen`` rows
            in first-seen order.

    Raises:
        ValueError: If group_column is not one of the supported keys.
    """
    if group_column not in ("created_by", "client"):
        raise ValueError(f"Unsupported group column: {group_column}")

    return f"""
        SELECT
            COALESCE({group_column}, '') AS group_key,
            COUNT(*)::bigint AS calls,
            MIN(created_at) AS first_seen
        FROM {CANDIDATES_TABLE}
        WHERE {get_match_clause()}
        GROUP BY COALESCE({group_column}, '')
        {_GROUP_ORDER}
    """


def get_recruiter_lookup_query() -> str:
    """
    Generate SQL resolving recruiter ids to display metadata.

    Parameters:
        $1: text[] of user ids

    Returns:
        str: Query returning ``id`` and ``username`` for ids that exist.
    """
    return f"""
        SELECT id::text AS id, username
        FROM {USERS_TABLE}
        WHERE id::text = ANY($1::text[])
    """
