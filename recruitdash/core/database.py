"""
Async PostgreSQL connection pool module for the candidate record store.

This module owns the asyncpg connection pool used by every read the dashboard
pipeline makes. The pool is a module-level singleton created at application
startup and closed at shutdown.

Key Components:
- Global connection pool singleton (_pool), created under _pool_lock
- init_db(): Initialize the connection pool at application startup
- get_db_pool(): Get the pool instance (initializes if needed)
- close_db(): Gracefully close the pool at application shutdown

Connection Pool Configuration:
- min_size / max_size: from DB_POOL_MIN_SIZE / DB_POOL_MAX_SIZE
- timeout: STORE_TIMEOUT_SECONDS (ceiling for opening each pool connection)
- command_timeout: STORE_TIMEOUT_SECONDS (default per-statement ceiling)

Usage:
    # At application startup (in FastAPI lifespan)
    await init_db()

    # In services
    pool = await get_db_pool()
    async with pool.acquire() as conn:
        total = await conn.fetchval("SELECT COUNT(*) FROM candidates")

    # At application shutdown
    await close_db()
"""

import asyncio
from typing import Optional

import asyncpg
from asyncpg import Pool

from recruitdash.core.config import get_settings


# Global connection pool instance - None until init_db() is called
_pool: Optional[Pool] = None

# Serializes pool creation so concurrent first requests share one pool
_pool_lock: asyncio.Lock = asyncio.Lock()


async def init_db() -> Pool:
    """
    Initialize the database connection pool.

    Idempotent: if the pool already exists it is returned unchanged. Concurrent
    callers wait on _pool_lock and receive the same pool. A failed attempt
    leaves _pool unset so the next call retries.

    Returns:
        Pool: The asyncpg connection pool instance.

    Raises:
        asyncpg.PostgresError: If connection to the database fails.
        OSError: If the database host is unreachable.
        asyncio.TimeoutError: If connecting exceeds STORE_TIMEOUT_SECONDS.
    """
    global _pool

    if _pool is not None:
        return _pool

    async with _pool_lock:
        if _pool is None:
            settings = get_settings()

            _pool = await asyncpg.create_pool(
                dsn=settings.database_url,
                min_size=settings.db_pool_min_size,
                max_size=settings.db_pool_max_size,
                timeout=settings.store_timeout_seconds,
                command_timeout=settings.store_timeout_seconds,
            )

    return _pool


async def get_db_pool() -> Pool:
    """
    Get the database connection pool, initializing if needed.

    Returns:
        Pool: The asyncpg connection pool instance.

    Raises:
        asyncpg.PostgresError: If connection to the database fails during lazy init.
    """
    global _pool

    if _pool is None:
        await init_db()

    assert _pool is not None, "Pool should be initialized after init_db()"

    return _pool


async def close_db() -> None:
    """
    Close the database connection pool gracefully.

    Safe to call when the pool was never created. After closing, the next
    get_db_pool() call creates a fresh pool.
    """
    global _pool

    if _pool is not None:
        await _pool.close()
        _pool = None
