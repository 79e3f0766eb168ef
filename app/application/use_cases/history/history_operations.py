"""Weekly history archive: list, rename, and report derivation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.report import WeeklyReport
from app.application.dtos.weekly_history import WeeklyHistoryResult
from app.application.services.reporting import derive_report
from app.application.services.state_cache import WEEKLY_HISTORY
from app.domain.exceptions import ResourceNotFoundException, ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.services import UnitOfWorkFactory
    from app.application.services.state_cache import StateCache

MAX_TITLE_LENGTH = 200


class HistoryService:
    """Read access to the archive plus the one permitted mutation (title)."""

    def __init__(self, uow_factory: "UnitOfWorkFactory", cache: "StateCache") -> None:
        self._uow_factory = uow_factory
        self._cache = cache

    def list_history(self) -> tuple[WeeklyHistoryResult, ...]:
        return self._cache.weekly_history()

    def get_history(self, history_id: str) -> WeeklyHistoryResult:
        history = self._cache.get_history(history_id)
        if history is None:
            raise ResourceNotFoundException("weekly_history", history_id)
        return history

    async def rename(self, history_id: str, title: str | None) -> WeeklyHistoryResult:
        """Set the custom title. A blank title restores the date-derived default.

        Snapshot fields are never written by this operation.
        """
        normalized = (title or "").strip() or None
        if normalized is not None and len(normalized) > MAX_TITLE_LENGTH:
            raise ValidationException(
                f"Title must be at most {MAX_TITLE_LENGTH} characters", field="title"
            )
        async with self._uow_factory() as uow:
            updated = await uow.weekly_history.update_title(history_id, normalized)
        if updated is None:
            raise ResourceNotFoundException("weekly_history", history_id)
        await self._cache.refresh(WEEKLY_HISTORY)
        return updated

    def report(self, history_id: str) -> WeeklyReport:
        """Two-sheet report with names resolved against the current catalog."""
        return derive_report(
            self.get_history(history_id),
            project_name=self._cache.resolve_project_name,
            user_name=self._cache.resolve_user_name,
        )
