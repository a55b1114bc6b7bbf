"""
Exception taxonomy for the dashboard stats pipeline.

- StoreUnavailable: the candidate record store could not be reached, failed,
  or exceeded the configured timeout. Never retried by the pipeline.
- InvalidFilter: filter input could not be interpreted. Only raised when
  STRICT_FILTERS is enabled; the default is to coerce to defaults.
- DeliveryDiscarded: a computed result has no live connection to go to.
  Not a failure; callers treat it as a silent no-op.
"""

from typing import Optional


class DashboardError(Exception):
    """Base class for dashboard pipeline errors."""


class StoreUnavailable(DashboardError):
    """Raised when the record store is unreachable or times out."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class InvalidFilter(DashboardError):
    """Raised when a filter field cannot be parsed (strict mode only)."""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.value = value


class DeliveryDiscarded(DashboardError):
    """Raised when the originating live connection is gone."""

    def __init__(self, connection_id: str):
        super().__init__(f"Connection {connection_id} is closed")
        self.connection_id = connection_id
