"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready: the state cache is loaded."""

    status: str = Field(default="ok", description="Readiness status")
    tasks: int = Field(default=0, description="Live tasks held in the state cache")
    assistant_enabled: bool = Field(default=False)
