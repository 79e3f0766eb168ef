"""WebSocket API schemas."""

from pydantic import BaseModel, Field


class WebSocketStatusResponse(BaseModel):
    """Response for GET /ws/status (connection count)."""

    total_connections: int = Field(..., description="Number of active WebSocket connections")


class CacheRefreshedEvent(BaseModel):
    """Message pushed to every client after a cache refresh."""

    type: str = Field(default="cache.refreshed")
    tables: list[str] = Field(..., description="Refreshed table names, sorted")
