"""DTOs for logged tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime

from app.domain.enums import TaskPriority, TaskStatus

COPY_MARKER = " (Cópia)"


@dataclass(frozen=True)
class TaskResult:
    """Task read-model.

    ``sector`` is the sector *name* copied from the task's project when the
    project was assigned. It is not re-derived if the project's sector changes
    later.
    """

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


@dataclass(frozen=True)
class TaskCreate:
    """Fields for a new task. The sector is resolved from the project by the service."""

    project_id: str
    collaborator_id: str
    planned_activity: str
    due_date: date | None = None
    delivered_activity: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    hours_dedicated: str = "00:00"
    notes: str = ""


@dataclass(frozen=True)
class TaskPatch:
    """Partial update for a task.

    A field set to None is absent and keeps its current value; any other value
    overwrites (an empty string clears a text field).
    """

    project_id: str | None = None
    collaborator_id: str | None = None
    planned_activity: str | None = None
    delivered_activity: str | None = None
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
    due_date: date | None = None
    hours_dedicated: str | None = None
    notes: str | None = None

    def present_fields(self) -> dict[str, object]:
        """Return the fields that are set on this patch."""
        return {
            name: value
            for name, value in self.__dict__.items()
            if value is not None
        }

    def apply_to(self, task: TaskResult) -> TaskResult:
        """Return a copy of task with present fields overwritten."""
        return replace(task, **self.present_fields())


def duplicate_of(task: TaskResult, collaborator_id: str) -> TaskCreate:
    """Build the create payload for a copy of task owned by collaborator_id.

    Delivered activity is cleared, status reset to pending, hours reset to zero,
    and the planned activity gets a copy marker.
    """
    return TaskCreate(
        project_id=task.project_id,
        collaborator_id=collaborator_id,
        planned_activity=f"{task.planned_activity}{COPY_MARKER}",
        due_date=task.due_date,
        delivered_activity="",
        priority=task.priority,
        status=TaskStatus.PENDING,
        hours_dedicated="00:00",
        notes=task.notes,
    )
