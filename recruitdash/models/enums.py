"""
Enumeration definitions for the recruitment dashboard backend.

All enums inherit from both `str` and `Enum` so they serialize as their plain
string values in Pydantic models and JSON frames.
"""

from enum import Enum


class HrStatus(str, Enum):
    """
    Hiring status recorded on a candidate by HR.

    Only SELECT participates in dashboard aggregation (totalSelected); the
    other values are listed so the status column can be validated and
    documented in one place.
    """
    SELECT = "Select"
    REJECT = "Reject"
    HOLD = "Hold"
    PENDING = "Pending"


class UserRole(str, Enum):
    """Role column of the users relation."""
    ADMIN = "admin"
    RECRUITER = "recruiter"


class LiveEvent(str, Enum):
    """
    Event names carried in live channel frames.

    - REQUEST_STATS: inbound, client supplies a filter
    - STATS_UPDATE: outbound, aggregate snapshot (or error) for that filter
    - ERROR: outbound, frame could not be understood
    """
    REQUEST_STATS = "requestStats"
    STATS_UPDATE = "statsUpdate"
    ERROR = "error"
