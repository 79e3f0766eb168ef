"""Activity log: append one entry per user-visible write."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.application.services.state_cache import ACTIVITY_LOGS
from app.domain.enums import ActivityAction

if TYPE_CHECKING:
    from app.application.interfaces.services import UnitOfWorkFactory
    from app.application.services.state_cache import StateCache


class ActivityLogService:
    """Appends entries and refreshes the cached latest-N window."""

    def __init__(self, uow_factory: "UnitOfWorkFactory", cache: "StateCache") -> None:
        self._uow_factory = uow_factory
        self._cache = cache

    async def record(
        self, user_id: str, action: ActivityAction, description: str
    ) -> ActivityLogResult:
        async with self._uow_factory() as uow:
            entry = await uow.activity_logs.create(
                ActivityLogCreate(user_id=user_id, action=action, description=description)
            )
        await self._cache.refresh(ACTIVITY_LOGS)
        return entry

    def recent(self) -> tuple[ActivityLogResult, ...]:
        return self._cache.activity_logs()
