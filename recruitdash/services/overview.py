"""
All-time overview figures for the dashboard pages.

- list_recruiters: options for the recruiter filter dropdown
- get_admin_overview: total candidates and total recruiters
- get_recruiter_performance: total and selected candidates for one recruiter

These read the same record store as the aggregation engine but ignore the
day window. StoreUnavailable propagates to the API layer.
"""

import logging
from typing import List, Optional

from recruitdash.models.enums import HrStatus, UserRole
from recruitdash.models.schemas import AdminOverview, RecruiterOption, RecruiterPerformance
from recruitdash.services.candidate_store import CandidateStore, get_candidate_store


logger = logging.getLogger(__name__)


async def list_recruiters(store: Optional[CandidateStore] = None) -> List[RecruiterOption]:
    """Return every user with the recruiter role, ordered by username."""
    store = store or get_candidate_store()
    async with store.reader() as reader:
        rows = await reader.list_users_with_role(UserRole.RECRUITER.value)
    return [RecruiterOption(id=row['id'], username=row['username']) for row in rows]


async def get_admin_overview(store: Optional[CandidateStore] = None) -> AdminOverview:
    store = store or get_candidate_store()
    async with store.reader() as reader:
        total_candidates = await reader.count_all_candidates()
        total_recruiters = await reader.count_users_with_role(UserRole.RECRUITER.value)
    return AdminOverview(totalCandidates=total_candidates, totalRecruiters=total_recruiters)


async def get_recruiter_performance(
    recruiter_id: str,
    store: Optional[CandidateStore] = None
) -> RecruiterPerformance:
    """
    All-time candidate and selection totals for one recruiter.

    An id with no candidates yields zero totals rather than an error.
    """
    store = store or get_candidate_store()
    async with store.reader() as reader:
        totals = await reader.recruiter_totals(recruiter_id, HrStatus.SELECT.value)

    logger.debug(f"Recruiter {recruiter_id} totals: {totals}")
    return RecruiterPerformance(
        totalCandidates=totals['total_candidates'],
        totalSelected=totals['total_selected'],
    )
