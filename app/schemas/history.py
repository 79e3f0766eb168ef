"""Weekly history and week closing API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.board_task import BoardTaskResponse
from app.schemas.task import TaskResponse


class WeeklyHistorySummary(BaseModel):
    """History entry without its snapshots (list view)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str | None
    display_title: str
    start_date: datetime
    end_date: datetime
    total_hours: str
    tasks_completed: int
    tasks_pending: int
    created_at: datetime
    timezone: str


class WeeklyHistoryResponse(WeeklyHistorySummary):
    """History entry with the archived task and board snapshots."""

    tasks: list[TaskResponse]
    board_tasks: list[BoardTaskResponse]


class WeeklyHistoryRenameRequest(BaseModel):
    """New title; null or blank restores the default date-based title."""

    title: str | None = Field(default=None, max_length=200)


class CleanupResponse(BaseModel):
    """Per-collection outcome of the cleanup phase."""

    model_config = ConfigDict(from_attributes=True)

    tasks_deleted: bool
    board_tasks_deleted: bool
    fully_cleared: bool


class WeekClosingResponse(BaseModel):
    """Result of closing the week: archive succeeded, cleanup may be partial."""

    model_config = ConfigDict(from_attributes=True)

    archived: bool
    history: WeeklyHistorySummary
    cleanup: CleanupResponse


class TaskReportRowSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    project: str
    sector: str
    collaborator: str
    planned_activity: str
    delivered_activity: str
    status: str
    priority: str
    due_date: str
    hours_dedicated: str
    notes: str


class BoardReportRowSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    status: str
    start_date: str
    end_date: str
    members: str
    description: str


class WeeklyReportResponse(BaseModel):
    """Report rows derived from one history entry, names resolved."""

    model_config = ConfigDict(from_attributes=True)

    history_id: str
    title: str
    week_label: str
    task_rows: list[TaskReportRowSchema]
    board_rows: list[BoardReportRowSchema]
