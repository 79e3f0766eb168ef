"""Task repository for the live task table."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import TaskCreate, TaskResult
from app.domain.enums import TaskPriority, TaskStatus
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc, utc_now


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        project_id=t.project_id,
        collaborator_id=t.collaborator_id,
        sector=t.sector,
        planned_activity=t.planned_activity,
        delivered_activity=t.delivered_activity,
        priority=TaskPriority(t.priority),
        status=TaskStatus(t.status),
        due_date=t.due_date,
        hours_dedicated=t.hours_dedicated,
        notes=t.notes,
        updated_at=ensure_utc(t.updated_at),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def list_all(self) -> list[TaskResult]:
        return [_to_result(t) for t in await self.list_models(Task.created_at, Task.id)]

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        task = await self.get_model(task_id)
        return _to_result(task) if task else None

    async def create(self, data: TaskCreate, sector: str) -> TaskResult:
        """Insert a task with the sector name resolved by the caller."""
        task = Task(
            project_id=data.project_id,
            collaborator_id=data.collaborator_id,
            sector=sector,
            planned_activity=data.planned_activity,
            delivered_activity=data.delivered_activity,
            priority=data.priority.value,
            status=data.status.value,
            due_date=data.due_date,
            hours_dedicated=data.hours_dedicated,
            notes=data.notes,
        )
        return _to_result(await self.add(task))

    async def update(self, task: TaskResult) -> TaskResult:
        """Write every mutable column of task and bump updated_at."""
        row = await self.get_model(task.id)
        if row is None:
            raise ResourceNotFoundException("task", task.id)
        row.project_id = task.project_id
        row.collaborator_id = task.collaborator_id
        row.sector = task.sector
        row.planned_activity = task.planned_activity
        row.delivered_activity = task.delivered_activity
        row.priority = task.priority.value
        row.status = task.status.value
        row.due_date = task.due_date
        row.hours_dedicated = task.hours_dedicated
        row.notes = task.notes
        row.updated_at = utc_now()
        return _to_result(await self.save(row))

    async def count_by_project(self, project_id: str) -> int:
        return await self.count_where(Task.project_id == project_id)

    async def count_by_collaborator(self, user_id: str) -> int:
        return await self.count_where(Task.collaborator_id == user_id)
