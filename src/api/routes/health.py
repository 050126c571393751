"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_engine
from core.config import settings
from infrastructure.engine import PlannerEngine

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    store: dict[str, int] | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without touching the store. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    engine: PlannerEngine = Depends(get_engine),
) -> HealthResponse:
    """
    Health check including the size of the in-memory store.

    Acquires the store lock, so a stuck writer shows up as a hanging probe.
    """
    with engine.store.lock:
        state = engine.store.state
        counts = {
            "attributes": len(state.attributes),
            "members": len(state.members),
            "events": len(state.events),
            "audit_entries": len(state.activities),
        }

    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        store=counts,
    )
