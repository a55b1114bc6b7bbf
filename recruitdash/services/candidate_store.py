"""
Read-only adapter over the candidate record store (PostgreSQL via asyncpg).

The store is owned by the candidate CRUD application; this module only issues
reads. It exposes the query capabilities the aggregation pipeline consumes:

- count-matching-predicate (optionally with an hr_status equality)
- grouped-count-matching-predicate, grouped by recruiter or by client
- lookup from recruiter id to display metadata, as a tagged result

One CandidateReader wraps one pooled connection inside a read-only
REPEATABLE READ transaction, so every query issued through it sees the same
snapshot while unrelated write traffic continues.

Every call is bounded by STORE_TIMEOUT_SECONDS. Timeouts, PostgreSQL errors
and connection errors surface as StoreUnavailable.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import AsyncIterator, Dict, Iterable, List, Optional, Union

import asyncpg
from asyncpg import Connection, Pool

from recruitdash.core.config import get_settings
from recruitdash.core.database import get_db_pool
from recruitdash.core.exceptions import StoreUnavailable
from recruitdash.sql.stats_queries import (
    get_count_query,
    get_grouped_count_query,
    get_recruiter_lookup_query,
)
from recruitdash.sql.overview_queries import (
    RECRUITER_OPTIONS_QUERY,
    TOTAL_CANDIDATES_QUERY,
    TOTAL_USERS_WITH_ROLE_QUERY,
    RECRUITER_TOTALS_QUERY,
)


logger = logging.getLogger(__name__)

# Failures that mean "the store could not answer"
STORE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
)


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class TimeWindow:
    """Closed [start, end] interval on created_at."""
    start: datetime
    end: datetime


@dataclass(frozen=True)
class GroupCount:
    """Count of matching candidates for one group key."""
    key: str
    calls: int


@dataclass(frozen=True)
class RecruiterFound:
    """Recruiter metadata resolved from the users relation."""
    name: str


@dataclass(frozen=True)
class RecruiterNotFound:
    """The createdBy value has no matching user."""


RecruiterLookup = Union[RecruiterFound, RecruiterNotFound]

NOT_FOUND = RecruiterNotFound()


# =============================================================================
# Reader
# =============================================================================


class CandidateReader:
    """
    Query surface over one connection and one snapshot.

    Obtained from CandidateStore.reader(); not meant to outlive that block.
    """

    def __init__(self, conn: Connection, timeout: float):
        self._conn = conn
        self._timeout = timeout

    async def count_candidates(
        self,
        window: TimeWindow,
        recruiter_id: Optional[str],
        hr_status: Optional[str] = None
    ) -> int:
        """Count candidates in the window, optionally for one recruiter and status."""
        args = [window.start, window.end, recruiter_id]
        if hr_status is not None:
            args.append(hr_status)

        total = await self._conn.fetchval(
            get_count_query(with_status=hr_status is not None),
            *args,
            timeout=self._timeout,
        )
        return int(total or 0)

    async def count_by_recruiter(
        self,
        window: TimeWindow,
        recruiter_id: Optional[str]
    ) -> List[GroupCount]:
        """Group matching candidates by created_by, in first-seen order."""
        return await self._grouped("created_by", window, recruiter_id)

    async def count_by_client(
        self,
        window: TimeWindow,
        recruiter_id: Optional[str]
    ) -> List[GroupCount]:
        """Group matching candidates by client, in first-seen order."""
        return await self._grouped("client", window, recruiter_id)

    async def _grouped(
        self,
        column: str,
        window: TimeWindow,
        recruiter_id: Optional[str]
    ) -> List[GroupCount]:
        rows = await self._conn.fetch(
            get_grouped_count_query(column),
            window.start,
            window.end,
            recruiter_id,
            timeout=self._timeout,
        )
        return [GroupCount(key=row['group_key'], calls=int(row['calls'])) for row in rows]

    async def lookup_recruiters(self, recruiter_ids: Iterable[str]) -> Dict[str, RecruiterLookup]:
        """
        Resolve recruiter ids to display names.

        Every requested id gets an entry; ids without a user map to NOT_FOUND.
        """
        ids = list(dict.fromkeys(recruiter_ids))
        if not ids:
            return {}

        rows = await self._conn.fetch(
            get_recruiter_lookup_query(),
            ids,
            timeout=self._timeout,
        )
        found = {row['id']: RecruiterFound(name=row['username'] or '') for row in rows}
        return {rid: found.get(rid, NOT_FOUND) for rid in ids}

    # -------------------------------------------------------------------------
    # All-time overview reads
    # -------------------------------------------------------------------------

    async def list_users_with_role(self, role: str) -> List[Dict[str, str]]:
        rows = await self._conn.fetch(RECRUITER_OPTIONS_QUERY, role, timeout=self._timeout)
        return [{'id': row['id'], 'username': row['username'] or ''} for row in rows]

    async def count_all_candidates(self) -> int:
        total = await self._conn.fetchval(TOTAL_CANDIDATES_QUERY, timeout=self._timeout)
        return int(total or 0)

    async def count_users_with_role(self, role: str) -> int:
        total = await self._conn.fetchval(TOTAL_USERS_WITH_ROLE_QUERY, role, timeout=self._timeout)
        return int(total or 0)

    async def recruiter_totals(self, recruiter_id: str, selected_status: str) -> Dict[str, int]:
        row = await self._conn.fetchrow(
            RECRUITER_TOTALS_QUERY,
            recruiter_id,
            selected_status,
            timeout=self._timeout,
        )
        if row is None:
            return {'total_candidates': 0, 'total_selected': 0}
        return {
            'total_candidates': int(row['total_candidates'] or 0),
            'total_selected': int(row['total_selected'] or 0),
        }


# =============================================================================
# Store
# =============================================================================


class CandidateStore:
    """
    Entry point to the candidate record store.

    Args:
        pool: asyncpg pool to use; defaults to the application pool.
        timeout: Per-call ceiling in seconds; defaults to STORE_TIMEOUT_SECONDS.
    """

    def __init__(self, pool: Optional[Pool] = None, timeout: Optional[float] = None):
        self._pool = pool
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        if self._timeout is None:
            return get_settings().store_timeout_seconds
        return self._timeout

    @asynccontextmanager
    async def reader(self) -> AsyncIterator[CandidateReader]:
        """
        Open a read-only snapshot of the store.

        Raises:
            StoreUnavailable: If the pool, connection or any query inside the
                block fails or times out.

        Example:
            async with store.reader() as reader:
                total = await reader.count_candidates(window, None)
        """
        timeout = self.timeout
        try:
            pool = self._pool if self._pool is not None else await get_db_pool()
            async with pool.acquire(timeout=timeout) as conn:
                async with conn.transaction(isolation='repeatable_read', readonly=True):
                    yield CandidateReader(conn, timeout)
        except STORE_ERRORS as e:
            raise StoreUnavailable(
                f"Record store unavailable: {type(e).__name__}: {e}",
                operation="read",
            ) from e


def get_candidate_store() -> CandidateStore:
    """Return a store bound to the application pool and configured timeout."""
    return CandidateStore()
