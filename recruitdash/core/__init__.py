"""
Core infrastructure package for the dashboard backend.

Provides:
- Configuration management via pydantic-settings
- Async PostgreSQL connectivity via asyncpg
- Exception taxonomy for the stats pipeline

FastAPI dependencies live in recruitdash.core.dependencies; they are not
re-exported here because they import the service layer.

Usage Examples:
    from recruitdash.core import get_settings, init_db, close_db, StoreUnavailable
"""

from recruitdash.core.config import Settings, get_settings

from recruitdash.core.database import init_db, close_db, get_db_pool

from recruitdash.core.exceptions import (
    DashboardError,
    StoreUnavailable,
    InvalidFilter,
    DeliveryDiscarded,
)

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # Database pool lifecycle (from database.py)
    'init_db',
    'close_db',
    'get_db_pool',
    # Exceptions (from exceptions.py)
    'DashboardError',
    'StoreUnavailable',
    'InvalidFilter',
    'DeliveryDiscarded',
]
