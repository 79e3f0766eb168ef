"""Board task repository for the live kanban table."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.board_task import BoardTaskCreate, BoardTaskResult
from app.domain.enums import BoardStatus
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.board_task import BoardTask
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.snapshot_codec import (
    decode_subtasks,
    encode_subtasks,
)
from app.shared.utils.datetime import ensure_utc, utc_now


def _to_result(b: BoardTask) -> BoardTaskResult:
    """Map BoardTask ORM to BoardTaskResult DTO."""
    return BoardTaskResult(
        id=b.id,
        title=b.title,
        description=b.description,
        start_date=b.start_date,
        end_date=b.end_date,
        member_ids=tuple(b.member_ids or ()),
        status=BoardStatus(b.status),
        subtasks=decode_subtasks(b.subtasks),
        updated_at=ensure_utc(b.updated_at),
    )


class BoardTaskRepository(BaseRepository[BoardTask]):
    """Board task repository. Implements IBoardTaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, BoardTask)

    async def list_all(self) -> list[BoardTaskResult]:
        rows = await self.list_models(BoardTask.created_at, BoardTask.id)
        return [_to_result(b) for b in rows]

    async def get_by_id(self, board_task_id: str) -> BoardTaskResult | None:
        row = await self.get_model(board_task_id)
        return _to_result(row) if row else None

    async def create(self, data: BoardTaskCreate) -> BoardTaskResult:
        row = BoardTask(
            title=data.title,
            description=data.description,
            start_date=data.start_date,
            end_date=data.end_date,
            member_ids=list(data.member_ids),
            status=data.status.value,
            subtasks=encode_subtasks(data.subtasks),
        )
        return _to_result(await self.add(row))

    async def update(self, board_task: BoardTaskResult) -> BoardTaskResult:
        row = await self.get_model(board_task.id)
        if row is None:
            raise ResourceNotFoundException("board_task", board_task.id)
        row.title = board_task.title
        row.description = board_task.description
        row.start_date = board_task.start_date
        row.end_date = board_task.end_date
        # JSON columns are replaced, not mutated, so the change is detected.
        row.member_ids = list(board_task.member_ids)
        row.subtasks = encode_subtasks(board_task.subtasks)
        row.status = board_task.status.value
        row.updated_at = utc_now()
        return _to_result(await self.save(row))
