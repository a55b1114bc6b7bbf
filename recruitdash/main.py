"""
FastAPI application entry point for the Recruitment Dashboard API.

Configures logging and CORS, registers the API routers and manages the
lifecycle of the database pool and the live stats channel.

Run locally:
    uvicorn recruitdash.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recruitdash.api import api_router
from recruitdash.core.config import get_settings
from recruitdash.core.database import init_db, close_db
from recruitdash.core.dependencies import LiveChannelDep
from recruitdash.services.live_channel import LiveStatsChannel


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for startup and shutdown.

    On startup:
        - Create the live stats channel (and its session registry)
        - Initialize the database connection pool

    On shutdown:
        - Cancel in-flight live requests and clear the session registry
        - Close the database connection pool
    """
    logger.info("Recruitment Dashboard API starting")
    app.state.live_channel = LiveStatsChannel()
    try:
        await init_db()
        logger.info("Database connection pool initialized")
    except Exception as e:
        # Stats requests report StoreUnavailable until the pool can be created
        logger.error(f"Failed to initialize database: {e}")

    yield

    logger.info("Recruitment Dashboard API shutting down")
    await app.state.live_channel.close()
    try:
        await close_db()
        logger.info("Database connection pool closed")
    except Exception as e:
        logger.error(f"Error closing database pool: {e}")


app = FastAPI(
    title="Recruitment Dashboard API",
    version="1.0.0",
    description=(
        "Dashboard metrics for candidate records: daily totals, selections, "
        "per-recruiter and per-client breakdowns over HTTP and a live WebSocket channel."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check(channel: LiveChannelDep):
    """
    Health check endpoint for monitoring and load balancer probes.

    Returns:
        Dict with status 'healthy' and the number of live sessions
    """
    return {"status": "healthy", "liveSessions": len(channel.registry)}


@app.get("/")
async def root():
    return {
        "name": "Recruitment Dashboard API",
        "version": "1.0.0",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recruitdash.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
