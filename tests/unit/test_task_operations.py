"""Tests for TaskService (ownership, sector copy, patch semantics, duplicate, toggle)."""

from dataclasses import replace
from datetime import date

import pytest

from app.application.dtos.task import TaskCreate, TaskPatch
from app.application.services.activity_log_service import ActivityLogService
from app.application.services.state_cache import StateCache
from app.application.use_cases.tasks import TaskService
from app.domain.enums import ActivityAction, TaskPriority, TaskStatus
from app.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from tests.conftest import Seed
from tests.fakes import InMemoryStore


@pytest.fixture
def service(
    store: InMemoryStore, cache: StateCache, activity_log: ActivityLogService
) -> TaskService:
    return TaskService(store, cache, activity_log)


async def _create(service: TaskService, seed: Seed, **overrides: object):
    data = TaskCreate(
        project_id=seed.app_project.id,
        collaborator_id=seed.carlos.id,
        planned_activity="Implementar login",
        hours_dedicated="02:30",
    )
    return await service.create(seed.carlos, replace(data, **overrides))


class TestCreate:
    async def test_sector_copied_from_project(
        self, service: TaskService, seed: Seed, cache: StateCache
    ) -> None:
        task = await _create(service, seed)
        assert task.sector == "Desenvolvimento"
        assert cache.get_task(task.id) == task

    async def test_logs_activity(self, service: TaskService, seed: Seed, cache: StateCache) -> None:
        await _create(service, seed)
        entry = cache.activity_logs()[0]
        assert entry.action == ActivityAction.CREATE
        assert entry.description == "Nova atividade: Implementar login"
        assert entry.user_id == seed.carlos.id

    async def test_invalid_hours_rejected(self, service: TaskService, seed: Seed) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await _create(service, seed, hours_dedicated="2h")
        assert exc_info.value.details == {"field": "hours_dedicated"}

    async def test_blank_planned_activity_rejected(self, service: TaskService, seed: Seed) -> None:
        with pytest.raises(ValidationException):
            await _create(service, seed, planned_activity="   ")

    async def test_unknown_project_rejected(
        self, service: TaskService, seed: Seed, store: InMemoryStore
    ) -> None:
        with pytest.raises(ResourceNotFoundException):
            await _create(service, seed, project_id="p-gone")
        assert store.rows("tasks") == []

    async def test_user_cannot_assign_to_others(self, service: TaskService, seed: Seed) -> None:
        with pytest.raises(AuthorizationException):
            await _create(service, seed, collaborator_id=seed.bea.id)

    async def test_admin_assigns_to_others(self, service: TaskService, seed: Seed) -> None:
        data = TaskCreate(
            project_id=seed.site_project.id,
            collaborator_id=seed.bea.id,
            planned_activity="Novo layout",
        )
        task = await service.create(seed.admin, data)
        assert task.collaborator_id == seed.bea.id
        assert task.sector == "Design"


class TestUpdate:
    async def test_absent_fields_are_kept(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed, notes="importante")
        updated = await service.update(
            seed.carlos, task.id, TaskPatch(status=TaskStatus.IN_PROGRESS)
        )
        assert updated.status == TaskStatus.IN_PROGRESS
        assert updated.notes == "importante"
        assert updated.hours_dedicated == "02:30"

    async def test_empty_string_clears_text(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed, notes="importante")
        updated = await service.update(seed.carlos, task.id, TaskPatch(notes=""))
        assert updated.notes == ""

    async def test_sector_not_rederived_without_project_change(
        self, service: TaskService, seed: Seed, store: InMemoryStore
    ) -> None:
        task = await _create(service, seed)
        # Move the project to another sector after the task was created.
        store.tables["projects"][seed.app_project.id] = replace(
            seed.app_project, sector_id=seed.design.id
        )
        updated = await service.update(
            seed.carlos, task.id, TaskPatch(priority=TaskPriority.HIGH)
        )
        assert updated.sector == "Desenvolvimento"

    async def test_sector_rederived_on_project_change(
        self, service: TaskService, seed: Seed
    ) -> None:
        task = await _create(service, seed)
        updated = await service.update(
            seed.carlos, task.id, TaskPatch(project_id=seed.site_project.id)
        )
        assert updated.sector == "Design"

    async def test_other_users_task_forbidden(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed)
        with pytest.raises(AuthorizationException):
            await service.update(seed.bea, task.id, TaskPatch(notes="x"))

    async def test_admin_updates_any_task(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed)
        updated = await service.update(seed.admin, task.id, TaskPatch(notes="revisado"))
        assert updated.notes == "revisado"

    async def test_invalid_hours_rejected_on_update(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed)
        with pytest.raises(ValidationException):
            await service.update(seed.carlos, task.id, TaskPatch(hours_dedicated="01:99"))

    async def test_unknown_task(self, service: TaskService, seed: Seed) -> None:
        with pytest.raises(ResourceNotFoundException):
            await service.update(seed.carlos, "t-missing", TaskPatch(notes="x"))


class TestDeleteDuplicateToggle:
    async def test_delete(
        self, service: TaskService, seed: Seed, cache: StateCache
    ) -> None:
        task = await _create(service, seed)
        await service.delete(seed.carlos, task.id)
        assert cache.get_task(task.id) is None
        assert cache.activity_logs()[0].description == "Atividade removida"

    async def test_delete_forbidden_for_other_user(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed)
        with pytest.raises(AuthorizationException):
            await service.delete(seed.bea, task.id)

    async def test_duplicate(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed, delivered_activity="Feito", status=TaskStatus.COMPLETED)
        copy = await service.duplicate(seed.bea, task.id)
        assert copy.id != task.id
        assert copy.planned_activity == "Implementar login (Cópia)"
        assert copy.delivered_activity == ""
        assert copy.status == TaskStatus.PENDING
        assert copy.hours_dedicated == "00:00"
        assert copy.collaborator_id == seed.bea.id
        assert copy.sector == task.sector

    async def test_toggle_completes_with_planned_as_delivered(
        self, service: TaskService, seed: Seed
    ) -> None:
        task = await _create(service, seed)
        done = await service.toggle_completion(seed.carlos, task.id)
        assert done.status == TaskStatus.COMPLETED
        assert done.delivered_activity == "Implementar login"

    async def test_toggle_keeps_existing_delivery(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed, delivered_activity="Login com OAuth")
        done = await service.toggle_completion(seed.carlos, task.id)
        assert done.delivered_activity == "Login com OAuth"

    async def test_toggle_back_to_pending(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed)
        await service.toggle_completion(seed.carlos, task.id)
        pending = await service.toggle_completion(seed.carlos, task.id)
        assert pending.status == TaskStatus.PENDING
        assert pending.delivered_activity == "Implementar login"


class TestRescheduleAndQuickAdd:
    async def test_reschedule(self, service: TaskService, seed: Seed) -> None:
        task = await _create(service, seed, due_date=date(2026, 10, 19))
        moved = await service.reschedule(seed.carlos, task.id, date(2026, 10, 21))
        assert moved.due_date == date(2026, 10, 21)

    async def test_reschedule_same_day_does_not_write(
        self, service: TaskService, seed: Seed, store: InMemoryStore
    ) -> None:
        task = await _create(service, seed, due_date=date(2026, 10, 19))
        calls = len(store.calls)
        same = await service.reschedule(seed.carlos, task.id, date(2026, 10, 19))
        assert same == task
        assert "tasks.update" not in store.calls[calls:]

    async def test_quick_add(self, service: TaskService, seed: Seed) -> None:
        task = await service.quick_add(
            seed.bea, seed.site_project.id, "Revisar banner", date(2026, 10, 22)
        )
        assert task.collaborator_id == seed.bea.id
        assert task.status == TaskStatus.PENDING
        assert task.priority == TaskPriority.MEDIUM
        assert task.hours_dedicated == "00:00"
        assert task.due_date == date(2026, 10, 22)
