"""
FastAPI application entry point.

Run with:
    uvicorn dwd_alerts.main:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

# ── Core infrastructure ──
from dwd_alerts.core.config import settings
from dwd_alerts.core.logging_config import setup_logging
from dwd_alerts.core.errors import register_error_handlers
from dwd_alerts.core.middleware import RequestLoggingMiddleware

# ── API routers ──
from dwd_alerts.api.v1.warnings import router as warnings_router

# ── Initialise logging ──
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage startup and shutdown events."""
    logger.info(
        "Starting %s v%s [%s] upstream=%s",
        settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT,
        settings.DWD_WARNINGS_URL,
    )
    yield
    logger.info("Shutting down %s", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    description=(
        "Read-only access to the Deutscher Wetterdienst weather warnings "
        "feed: typed warnings ordered by start time, with activity status."
    ),
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

register_error_handlers(app)

app.include_router(warnings_router)


@app.get("/", tags=["root"])
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "upstream": settings.DWD_WARNINGS_URL,
        "docs": "/docs",
    }


@app.get("/health/live", tags=["health"])
async def liveness():
    """Liveness probe — is the process alive?"""
    return {"status": "alive"}
