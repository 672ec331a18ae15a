"""Health check endpoints for monitoring."""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from playground_api.services.profile_store import ProfileStore, get_store

logger = structlog.get_logger()
router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    message: str
    timestamp: str


class ReadinessResponse(BaseModel):
    """Readiness probe response."""
    ready: bool
    database: str


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Does not touch the database; use /health/ready for that.
    """
    return HealthResponse(
        status="OK",
        message="API is healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    store: ProfileStore = Depends(get_store),
) -> ReadinessResponse:
    """
    Readiness probe.

    Reports whether the database answers a trivial query.
    """
    if not store.ping():
        logger.error("Database health check failed")
        return ReadinessResponse(ready=False, database="disconnected")

    return ReadinessResponse(ready=True, database="connected")
