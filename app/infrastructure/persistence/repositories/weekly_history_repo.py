"""Weekly history repository (archive). Snapshot columns are written once."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.weekly_history import WeeklyHistoryCreate, WeeklyHistoryResult
from app.infrastructure.persistence.models.weekly_history import WeeklyHistory
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.snapshot_codec import (
    decode_board_task,
    decode_task,
    encode_board_task,
    encode_task,
)
from app.shared.utils.datetime import ensure_utc


def _to_result(h: WeeklyHistory) -> WeeklyHistoryResult:
    """Map WeeklyHistory ORM to WeeklyHistoryResult DTO (snapshots decoded)."""
    return WeeklyHistoryResult(
        id=h.id,
        title=h.title,
        start_date=ensure_utc(h.start_date),
        end_date=ensure_utc(h.end_date),
        total_hours=h.total_hours,
        tasks_completed=h.tasks_completed,
        tasks_pending=h.tasks_pending,
        tasks=tuple(decode_task(t) for t in h.tasks_snapshot or []),
        board_tasks=tuple(decode_board_task(b) for b in h.board_tasks_snapshot or []),
        created_at=ensure_utc(h.created_at),
        timezone=h.timezone,
    )


class WeeklyHistoryRepository(BaseRepository[WeeklyHistory]):
    """Weekly history repository. Implements IWeeklyHistoryRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, WeeklyHistory)

    async def list_all(self) -> list[WeeklyHistoryResult]:
        rows = await self.list_models(WeeklyHistory.created_at.desc())
        return [_to_result(h) for h in rows]

    async def get_by_id(self, history_id: str) -> WeeklyHistoryResult | None:
        row = await self.get_model(history_id)
        return _to_result(row) if row else None

    async def create(self, data: WeeklyHistoryCreate) -> WeeklyHistoryResult:
        row = WeeklyHistory(
            title=None,
            start_date=data.start_date,
            end_date=data.end_date,
            total_hours=data.total_hours,
            tasks_completed=data.tasks_completed,
            tasks_pending=data.tasks_pending,
            tasks_snapshot=[encode_task(t) for t in data.tasks],
            board_tasks_snapshot=[encode_board_task(b) for b in data.board_tasks],
            created_at=data.created_at,
            timezone=data.timezone,
        )
        return _to_result(await self.add(row))

    async def update_title(
        self, history_id: str, title: str | None
    ) -> WeeklyHistoryResult | None:
        """Set only the title column."""
        row = await self.get_model(history_id)
        if row is None:
            return None
        row.title = title
        return _to_result(await self.save(row))
