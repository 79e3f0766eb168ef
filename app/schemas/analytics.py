"""Analytics API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import LoadTier


class ProjectHoursItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    project_id: str
    name: str
    minutes: int
    formatted: str


class HoursByProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[ProjectHoursItem]
    max_minutes: int


class CompletionRateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    percent: int
    completed_count: int
    pending_count: int
    total: int


class CollaboratorLoadItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    name: str
    avatar: str
    minutes: int
    formatted: str
    percentage: float
    tier: LoadTier


class DashboardStatsResponse(BaseModel):
    """Response for GET /analytics/dashboard."""

    model_config = ConfigDict(from_attributes=True)

    total_hours: str = Field(..., description="Sum of dedicated time, HH:mm")
    completion: CompletionRateResponse
    hours_by_project: HoursByProjectResponse
    collaborator_load: list[CollaboratorLoadItem]
    capacity_hours: int
