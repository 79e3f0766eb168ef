"""Board task (kanban) API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import BoardStatus


class SubtaskSchema(BaseModel):
    """Checklist item. An empty id on input gets a generated one."""

    model_config = ConfigDict(from_attributes=True)

    id: str = ""
    title: str = Field(..., min_length=1, max_length=500)
    completed: bool = False


class BoardTaskCreateRequest(BaseModel):
    """Request body for creating a board task."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = Field(default="", max_length=4000)
    start_date: date | None = None
    end_date: date | None = None
    member_ids: list[str] = Field(default_factory=list)
    status: BoardStatus = BoardStatus.TODO
    subtasks: list[SubtaskSchema] = Field(default_factory=list)


class BoardTaskUpdateRequest(BaseModel):
    """Request body for updating a board task (partial)."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=4000)
    start_date: date | None = None
    end_date: date | None = None
    member_ids: list[str] | None = None
    status: BoardStatus | None = None
    subtasks: list[SubtaskSchema] | None = None


class BoardTaskMoveRequest(BaseModel):
    """Move a card to another column."""

    status: BoardStatus


class BoardTaskResponse(BaseModel):
    """Board task as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    start_date: date | None
    end_date: date | None
    member_ids: list[str]
    status: BoardStatus
    subtasks: list[SubtaskSchema]
    updated_at: datetime
