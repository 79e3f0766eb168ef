"""DTOs for kanban board tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime

from app.domain.enums import BoardStatus


@dataclass(frozen=True)
class Subtask:
    """Checklist item on a board task."""

    id: str
    title: str
    completed: bool = False


@dataclass(frozen=True)
class BoardTaskResult:
    """Board task read-model. Subtasks keep their insertion order."""

    id: str
    title: str
    description: str
    start_date: date | None
    end_date: date | None
    member_ids: tuple[str, ...]
    status: BoardStatus
    subtasks: tuple[Subtask, ...]
    updated_at: datetime


@dataclass(frozen=True)
class BoardTaskCreate:
    """Fields for a new board task."""

    title: str
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    member_ids: tuple[str, ...] = ()
    status: BoardStatus = BoardStatus.TODO
    subtasks: tuple[Subtask, ...] = ()


@dataclass(frozen=True)
class BoardTaskPatch:
    """Partial update for a board task (None = keep current value)."""

    title: str | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    member_ids: tuple[str, ...] | None = None
    status: BoardStatus | None = None
    subtasks: tuple[Subtask, ...] | None = None

    def present_fields(self) -> dict[str, object]:
        return {
            name: value
            for name, value in self.__dict__.items()
            if value is not None
        }

    def apply_to(self, task: BoardTaskResult) -> BoardTaskResult:
        return replace(task, **self.present_fields())
