"""
Package initialization file for dashboard models.

Re-exports the Pydantic schemas and enumerations so other modules can import
them from recruitdash.models directly.

Usage:
    from recruitdash.models import AggregateResult, StatsFilter, HrStatus
"""

from recruitdash.models.enums import (
    HrStatus,
    UserRole,
    LiveEvent,
)

from recruitdash.models.schemas import (
    StatsFilter,
    StatsRequestPayload,
    AppliedFilter,
    RecruiterCalls,
    ClientCalls,
    AggregateResult,
    StatsError,
    LiveFrame,
    RecruiterOption,
    AdminOverview,
    RecruiterPerformance,
)

__all__ = [
    # Enums
    'HrStatus',
    'UserRole',
    'LiveEvent',
    # Filters
    'StatsFilter',
    'StatsRequestPayload',
    'AppliedFilter',
    # Aggregates
    'RecruiterCalls',
    'ClientCalls',
    'AggregateResult',
    'StatsError',
    # Live channel
    'LiveFrame',
    # Overview
    'RecruiterOption',
    'AdminOverview',
    'RecruiterPerformance',
]
