"""Activity log repository (append-only)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.domain.enums import ActivityAction
from app.infrastructure.persistence.models.activity_log import ActivityLog
from app.shared.utils.datetime import ensure_utc, utc_now


def _to_result(a: ActivityLog) -> ActivityLogResult:
    """Map ActivityLog ORM to ActivityLogResult DTO."""
    return ActivityLogResult(
        id=a.id,
        user_id=a.user_id,
        action=ActivityAction(a.action),
        description=a.description,
        timestamp=ensure_utc(a.timestamp),
    )


class ActivityLogRepository:
    """Activity log repository. Implements IActivityLogRepository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, data: ActivityLogCreate) -> ActivityLogResult:
        entry = ActivityLog(
            user_id=data.user_id,
            action=data.action.value,
            description=data.description,
            timestamp=utc_now(),
        )
        self.db.add(entry)
        await self.db.flush()
        return _to_result(entry)

    async def list_recent(self, limit: int) -> list[ActivityLogResult]:
        result = await self.db.execute(
            select(ActivityLog)
            .order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc())
            .limit(limit)
        )
        return [_to_result(a) for a in result.scalars().all()]
