"""Health check endpoints. Used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import get_state_cache
from app.application.services.state_cache import StateCache
from app.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    request: Request,
    cache: Annotated[StateCache, Depends(get_state_cache)],
) -> ReadinessResponse:
    """Return 200 once the state cache has been loaded (lifespan startup)."""
    return ReadinessResponse(
        tasks=len(cache.tasks()),
        assistant_enabled=getattr(request.app.state, "completion_client", None) is not None,
    )
