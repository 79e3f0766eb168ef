"""Task API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import TaskPriority, TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for creating a task. collaborator_id defaults to the caller."""

    project_id: str = Field(..., min_length=1)
    collaborator_id: str | None = Field(default=None)
    planned_activity: str = Field(..., min_length=1, max_length=2000)
    delivered_activity: str = Field(default="", max_length=2000)
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: date | None = None
    hours_dedicated: str = Field(
        default="00:00", description="HH:mm"
    )
    notes: str = Field(default="", max_length=4000)


class TaskUpdateRequest(BaseModel):
    """Request body for updating a task (partial; omitted or null keeps the value)."""

    project_id: str | None = None
    collaborator_id: str | None = None
    planned_activity: str | None = Field(default=None, max_length=2000)
    delivered_activity: str | None = Field(default=None, max_length=2000)
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
    due_date: date | None = None
    hours_dedicated: str | None = None
    notes: str | None = Field(default=None, max_length=4000)


class TaskRescheduleRequest(BaseModel):
    """Move a task to another day (weekly planning drag and drop)."""

    due_date: date


class TaskQuickAddRequest(BaseModel):
    """Inline creation from the weekly planner."""

    project_id: str = Field(..., min_length=1)
    planned_activity: str = Field(..., min_length=1, max_length=2000)
    due_date: date


class TaskResponse(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    collaborator_id: str
    sector: str
    planned_activity: str
    delivered_activity: str
    priority: TaskPriority
    status: TaskStatus
    due_date: date | None
    hours_dedicated: str
    notes: str
    updated_at: datetime
