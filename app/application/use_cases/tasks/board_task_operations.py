"""Kanban board operations: create, update, move, toggle subtask, delete."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from app.application.dtos.board_task import (
    BoardTaskCreate,
    BoardTaskPatch,
    BoardTaskResult,
    Subtask,
)
from app.application.services.state_cache import BOARD_TASKS
from app.domain.enums import ActivityAction, BoardStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.generators import generate_cuid

if TYPE_CHECKING:
    from app.application.dtos.catalog import UserResult
    from app.application.interfaces.repositories import IUnitOfWork
    from app.application.interfaces.services import UnitOfWorkFactory
    from app.application.services.activity_log_service import ActivityLogService
    from app.application.services.state_cache import StateCache


def with_subtask_ids(subtasks: tuple[Subtask, ...]) -> tuple[Subtask, ...]:
    """Give every subtask without an id a fresh one; order is kept."""
    return tuple(s if s.id else replace(s, id=generate_cuid()) for s in subtasks)


def _validate_dates(task: BoardTaskCreate | BoardTaskResult) -> None:
    if task.start_date and task.end_date and task.end_date < task.start_date:
        raise ValidationException("End date is before start date", field="end_date")


class BoardTaskService:
    """Writes to the live board table. Any status may move to any other."""

    def __init__(
        self,
        uow_factory: "UnitOfWorkFactory",
        cache: "StateCache",
        activity_log: "ActivityLogService",
    ) -> None:
        self._uow_factory = uow_factory
        self._cache = cache
        self._activity_log = activity_log

    async def _get(self, uow: "IUnitOfWork", board_task_id: str) -> BoardTaskResult:
        board_task = await uow.board_tasks.get_by_id(board_task_id)
        if board_task is None:
            raise ResourceNotFoundException("board_task", board_task_id)
        return board_task

    async def create(self, actor: "UserResult", data: BoardTaskCreate) -> BoardTaskResult:
        if not data.title.strip():
            raise ValidationException("Title must not be empty", field="title")
        _validate_dates(data)
        data = replace(data, subtasks=with_subtask_ids(data.subtasks))
        async with self._uow_factory() as uow:
            board_task = await uow.board_tasks.create(data)
        await self._cache.refresh(BOARD_TASKS)
        await self._activity_log.record(
            actor.id, ActivityAction.CREATE, f"Novo quadro: {board_task.title}"
        )
        return board_task

    async def update(self, board_task_id: str, patch: BoardTaskPatch) -> BoardTaskResult:
        if patch.title is not None and not patch.title.strip():
            raise ValidationException("Title must not be empty", field="title")
        if patch.subtasks is not None:
            patch = replace(patch, subtasks=with_subtask_ids(patch.subtasks))
        async with self._uow_factory() as uow:
            current = await self._get(uow, board_task_id)
            updated = patch.apply_to(current)
            _validate_dates(updated)
            saved = await uow.board_tasks.update(updated)
        await self._cache.refresh(BOARD_TASKS)
        return saved

    async def move(self, board_task_id: str, status: BoardStatus) -> BoardTaskResult:
        """Drag-and-drop between columns. No write when the status is unchanged."""
        current = self._cache.get_board_task(board_task_id)
        if current is None:
            raise ResourceNotFoundException("board_task", board_task_id)
        if current.status == status:
            return current
        return await self.update(board_task_id, BoardTaskPatch(status=status))

    async def toggle_subtask(self, board_task_id: str, subtask_id: str) -> BoardTaskResult:
        current = self._cache.get_board_task(board_task_id)
        if current is None:
            raise ResourceNotFoundException("board_task", board_task_id)
        if not any(s.id == subtask_id for s in current.subtasks):
            raise ResourceNotFoundException("subtask", subtask_id)
        subtasks = tuple(
            replace(s, completed=not s.completed) if s.id == subtask_id else s
            for s in current.subtasks
        )
        return await self.update(board_task_id, BoardTaskPatch(subtasks=subtasks))

    async def delete(self, actor: "UserResult", board_task_id: str) -> None:
        async with self._uow_factory() as uow:
            await self._get(uow, board_task_id)
            await uow.board_tasks.delete(board_task_id)
        await self._cache.refresh(BOARD_TASKS)
        await self._activity_log.record(
            actor.id, ActivityAction.DELETE, "Tarefa do quadro removida"
        )
