"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from psycopg_pool import ConnectionPool

from src.adapters.storage import InMemoryStateStore, PostgresStateStore, run_migrations
from src.api.dependencies import get_notification_sink
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings
from src.domain.dashboard import Dashboard
from src.domain.exceptions import PersistenceUnavailable
from src.domain.ports import StateStore

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Sign-up Feed API v1 - Sign up, unlock the reviewer panel, review accounts and notifications",
    },
]


def build_dashboard(settings: Settings, store: StateStore) -> Dashboard:
    """Wire and load the dashboard for the given settings and store."""
    dashboard = Dashboard.create(
        store=store,
        sink=get_notification_sink(),
        gate_secret=settings.gate_secret.get_secret_value(),
        gate_max_attempts=settings.gate_max_attempts,
        success_seconds=settings.success_seconds,
        error_seconds=settings.error_seconds,
        welcome_seconds=settings.welcome_seconds,
        gate_error_seconds=settings.gate_error_seconds,
    )
    dashboard.load()
    return dashboard


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the state store (and database pool for postgres)
    - Runs migrations on startup (postgres only)
    - Loads accounts and notifications into the dashboard
    - Closes connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    pool: ConnectionPool | None = None
    store: StateStore
    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        logger.info("Running database migrations...")
        run_migrations(pool)
        store = PostgresStateStore(pool)
    else:
        logger.info("Using in-memory state store (data is lost on restart)")
        store = InMemoryStateStore()

    app.state.store = store
    app.state.dashboard = build_dashboard(settings, store)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="signup-feed",
    description="Sign-up Feed API - Demo registration flow with a gated reviewer notification feed",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with store validation.

    Returns 200 OK if application and state store are healthy.
    Returns 503 if the store cannot be reached.
    """
    store: StateStore = request.app.state.store
    try:
        store.ping()
    except PersistenceUnavailable:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="State store unavailable",
        ) from None

    return {"status": "healthy"}
