"""
Pydantic request/response models for the recruitment dashboard backend.

This module provides type-safe validation and serialization for:
- the normalized stats filter and the filter payload sent by live clients
- the AggregateResult contract shared by the pull endpoint and the live channel
- the error body returned when aggregation fails
- the live channel frame envelope
- overview models for the recruiter picker and admin dashboard counts

Field names are camelCase because they are the JSON contract consumed by the
dashboard frontend.

All models use Pydantic v2 syntax.
"""

import json
from datetime import date as DateType, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Filter Models
# =============================================================================


class StatsFilter(BaseModel):
    """
    Normalized filter for one aggregation.

    A missing date means "the current calendar day at evaluation time"; a
    missing recruiterId means "all recruiters".
    """
    model_config = ConfigDict(frozen=True)

    recruiterId: Optional[str] = Field(
        default=None,
        description="Restrict to records whose createdBy equals this id"
    )
    date: Optional[DateType] = Field(
        default=None,
        description="Calendar day in the dashboard timezone"
    )


class StatsRequestPayload(BaseModel):
    """
    Raw filter payload carried by a requestStats live event.

    Values are kept as unvalidated strings; normalization happens in the
    stats query service so both entry points share one rule.
    """
    model_config = ConfigDict(
        extra='ignore',
        json_schema_extra={
            "example": {
                "recruiterId": "665f1c2ab4e1",
                "date": "2026-10-18"
            }
        }
    )

    recruiterId: Optional[str] = None
    date: Optional[str] = None

    @field_validator('recruiterId', mode='before')
    @classmethod
    def _coerce_recruiter_id(cls, value: Any) -> Optional[str]:
        # Opaque id: any non-null value is kept as text so a bad id matches
        # no records instead of widening the filter to all recruiters
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (dict, list)):
            return json.dumps(value, separators=(',', ':'), sort_keys=True)
        if isinstance(value, bool):
            return json.dumps(value)
        return str(value)

    @field_validator('date', mode='before')
    @classmethod
    def _coerce_date(cls, value: Any) -> Optional[str]:
        # Clients occasionally send numbers; anything non-scalar falls back to today
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None


class AppliedFilter(BaseModel):
    """
    Echo of the filter an AggregateResult was computed for.

    Live clients use it to discard results that arrive after a newer request.
    """
    recruiterId: Optional[str] = Field(default=None)
    date: DateType = Field(..., description="Calendar day that was aggregated")
    windowStart: datetime = Field(..., description="Inclusive interval start")
    windowEnd: datetime = Field(..., description="Inclusive interval end (23:59:59.999)")


# =============================================================================
# Aggregate Result Models
# =============================================================================


class RecruiterCalls(BaseModel):
    """
    Per-recruiter record count.

    recruiterDisplayName is None when createdBy does not resolve to a user.
    """
    recruiterId: str = Field(..., description="createdBy value of the group")
    recruiterDisplayName: Optional[str] = Field(
        default=None,
        description="Username of the recruiter, if resolvable"
    )
    calls: int = Field(..., ge=0)


class ClientCalls(BaseModel):
    """Per-client record count."""
    clientName: str = Field(..., description="client value of the group")
    calls: int = Field(..., ge=0)


class AggregateResult(BaseModel):
    """
    Dashboard aggregate for one filter.

    Shared by GET /api/dashboard-stats and the statsUpdate live event.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "totalCalls": 3,
                "totalSelected": 2,
                "recruiterCalls": [
                    {"recruiterId": "r1", "recruiterDisplayName": "asha", "calls": 2},
                    {"recruiterId": "r2", "recruiterDisplayName": "ben", "calls": 1}
                ],
                "clientCalls": [
                    {"clientName": "Acme", "calls": 2},
                    {"clientName": "Globex", "calls": 1}
                ],
                "filter": {
                    "recruiterId": None,
                    "date": "2026-10-18",
                    "windowStart": "2026-10-18T00:00:00+00:00",
                    "windowEnd": "2026-10-18T23:59:59.999000+00:00"
                }
            }
        }
    )

    totalCalls: int = Field(..., ge=0, description="Records matching the filter")
    totalSelected: int = Field(..., ge=0, description="Matching records with hrStatus Select")
    recruiterCalls: List[RecruiterCalls] = Field(default_factory=list)
    clientCalls: List[ClientCalls] = Field(
        default_factory=list,
        description="Sorted by calls descending, ties in first-seen order"
    )
    filter: AppliedFilter

    @model_validator(mode='after')
    def _selected_within_total(self) -> 'AggregateResult':
        if self.totalSelected > self.totalCalls:
            raise ValueError("totalSelected cannot exceed totalCalls")
        return self


class StatsError(BaseModel):
    """Uniform error body; never carries internal failure detail."""
    error: str = Field(default="Server error")


# =============================================================================
# Live Channel Frame
# =============================================================================


class LiveFrame(BaseModel):
    """
    Envelope for every WebSocket text frame.

    seq is chosen by the client on requestStats (or assigned by the server)
    and echoed on the matching statsUpdate.
    """
    model_config = ConfigDict(extra='ignore')

    event: str
    data: Any = None
    seq: Optional[int] = None


# =============================================================================
# Overview Models
# =============================================================================


class RecruiterOption(BaseModel):
    """Entry of the recruiter filter dropdown."""
    id: str
    username: str


class AdminOverview(BaseModel):
    """All-time totals for the admin dashboard."""
    totalCandidates: int = Field(..., ge=0)
    totalRecruiters: int = Field(..., ge=0)


class RecruiterPerformance(BaseModel):
    """All-time totals for a single recruiter."""
    totalCandidates: int = Field(..., ge=0)
    totalSelected: int = Field(..., ge=0)
