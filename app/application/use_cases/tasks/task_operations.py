"""Task operations: create, update, delete, duplicate, toggle, reschedule, quick add."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import TYPE_CHECKING

from app.application.dtos.task import (
    TaskCreate,
    TaskPatch,
    TaskResult,
    duplicate_of,
)
from app.application.services.state_cache import TASKS
from app.domain.enums import ActivityAction, TaskPriority, TaskStatus
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import Duration

if TYPE_CHECKING:
    from app.application.dtos.catalog import UserResult
    from app.application.interfaces.repositories import IUnitOfWork
    from app.application.interfaces.services import UnitOfWorkFactory
    from app.application.services.activity_log_service import ActivityLogService
    from app.application.services.state_cache import StateCache


def validate_hours(value: str) -> str:
    """Validate ``HH:mm`` input and return it normalized (zero-padded)."""
    try:
        return str(Duration.from_input(value))
    except ValueError as e:
        raise ValidationException(str(e), field="hours_dedicated") from e


class TaskService:
    """Writes to the live task table.

    A collaborator may change only their own tasks; admins may change any task
    and create tasks on behalf of others. Every write refreshes the cached task
    table (which notifies listeners) and appends an activity entry.
    """

    def __init__(
        self,
        uow_factory: "UnitOfWorkFactory",
        cache: "StateCache",
        activity_log: "ActivityLogService",
    ) -> None:
        self._uow_factory = uow_factory
        self._cache = cache
        self._activity_log = activity_log

    # Helpers

    @staticmethod
    def _ensure_owner(actor: "UserResult", task: TaskResult, action: str) -> None:
        if not actor.is_admin and task.collaborator_id != actor.id:
            raise AuthorizationException("task", action)

    @staticmethod
    def _ensure_can_assign(actor: "UserResult", collaborator_id: str) -> None:
        if not actor.is_admin and collaborator_id != actor.id:
            raise AuthorizationException(
                message="Only admins can assign tasks to other collaborators"
            )

    async def _sector_for_project(self, uow: "IUnitOfWork", project_id: str) -> str:
        """Sector name of the project right now (copied onto the task)."""
        project = await uow.projects.get_by_id(project_id)
        if project is None:
            raise ResourceNotFoundException("project", project_id)
        sector = await uow.sectors.get_by_id(project.sector_id)
        return sector.name if sector is not None else ""

    async def _ensure_user_exists(self, uow: "IUnitOfWork", user_id: str) -> None:
        if await uow.users.get_by_id(user_id) is None:
            raise ResourceNotFoundException("user", user_id)

    async def _get_task(self, uow: "IUnitOfWork", task_id: str) -> TaskResult:
        task = await uow.tasks.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    # Operations

    async def create(self, actor: "UserResult", data: TaskCreate) -> TaskResult:
        """Create a task; its sector is copied from the project's sector."""
        self._ensure_can_assign(actor, data.collaborator_id)
        if not data.planned_activity.strip():
            raise ValidationException(
                "Planned activity must not be empty", field="planned_activity"
            )
        data = replace(data, hours_dedicated=validate_hours(data.hours_dedicated))
        async with self._uow_factory() as uow:
            await self._ensure_user_exists(uow, data.collaborator_id)
            sector = await self._sector_for_project(uow, data.project_id)
            task = await uow.tasks.create(data, sector)
        await self._cache.refresh(TASKS)
        await self._activity_log.record(
            actor.id, ActivityAction.CREATE, f"Nova atividade: {task.planned_activity}"
        )
        return task

    async def update(self, actor: "UserResult", task_id: str, patch: TaskPatch) -> TaskResult:
        """Apply patch: present fields overwrite, absent fields are kept.

        Reassigning the project re-copies the sector from the new project; any
        other update leaves the stored sector untouched.
        """
        if patch.hours_dedicated is not None:
            patch = replace(patch, hours_dedicated=validate_hours(patch.hours_dedicated))
        if patch.planned_activity is not None and not patch.planned_activity.strip():
            raise ValidationException(
                "Planned activity must not be empty", field="planned_activity"
            )
        async with self._uow_factory() as uow:
            task = await self._get_task(uow, task_id)
            self._ensure_owner(actor, task, "update")
            if patch.collaborator_id is not None and patch.collaborator_id != task.collaborator_id:
                self._ensure_can_assign(actor, patch.collaborator_id)
                await self._ensure_user_exists(uow, patch.collaborator_id)
            updated = patch.apply_to(task)
            if patch.project_id is not None and patch.project_id != task.project_id:
                updated = replace(
                    updated, sector=await self._sector_for_project(uow, patch.project_id)
                )
            saved = await uow.tasks.update(updated)
        await self._cache.refresh(TASKS)
        await self._activity_log.record(actor.id, ActivityAction.UPDATE, "Atividade atualizada")
        return saved

    async def delete(self, actor: "UserResult", task_id: str) -> None:
        async with self._uow_factory() as uow:
            task = await self._get_task(uow, task_id)
            self._ensure_owner(actor, task, "delete")
            await uow.tasks.delete(task_id)
        await self._cache.refresh(TASKS)
        await self._activity_log.record(actor.id, ActivityAction.DELETE, "Atividade removida")

    async def duplicate(self, actor: "UserResult", task_id: str) -> TaskResult:
        """Copy a task for the actor (copy marker, cleared delivery, pending, zero hours).

        The sector is copied from the source task as stored.
        """
        async with self._uow_factory() as uow:
            source = await self._get_task(uow, task_id)
            task = await uow.tasks.create(duplicate_of(source, actor.id), source.sector)
        await self._cache.refresh(TASKS)
        await self._activity_log.record(
            actor.id, ActivityAction.CREATE, f"Nova atividade: {task.planned_activity}"
        )
        return task

    async def toggle_completion(self, actor: "UserResult", task_id: str) -> TaskResult:
        """Completed <-> Pending. Completing with no delivery records the planned activity."""
        task = self._cache.get_task(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        if task.status == TaskStatus.COMPLETED:
            patch = TaskPatch(status=TaskStatus.PENDING)
        else:
            patch = TaskPatch(
                status=TaskStatus.COMPLETED,
                delivered_activity=task.delivered_activity or task.planned_activity,
            )
        return await self.update(actor, task_id, patch)

    async def reschedule(self, actor: "UserResult", task_id: str, due_date: date) -> TaskResult:
        """Move a task to another day (planner drag-and-drop). No write when unchanged."""
        task = self._cache.get_task(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        if task.due_date == due_date:
            self._ensure_owner(actor, task, "update")
            return task
        return await self.update(actor, task_id, TaskPatch(due_date=due_date))

    async def quick_add(
        self,
        actor: "UserResult",
        project_id: str,
        planned_activity: str,
        due_date: date,
    ) -> TaskResult:
        """Create a pending, medium-priority task for the actor on due_date."""
        return await self.create(
            actor,
            TaskCreate(
                project_id=project_id,
                collaborator_id=actor.id,
                planned_activity=planned_activity,
                due_date=due_date,
                priority=TaskPriority.MEDIUM,
                status=TaskStatus.PENDING,
                hours_dedicated="00:00",
            ),
        )
