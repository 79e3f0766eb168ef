"""Close the week: archive live tasks and board tasks, then clear them.

Two phases, strictly sequential:

1. Archive. Statistics and deep copies of the live collections (as held by the
   state cache at invocation) are written as one WeeklyHistory record in its
   own transaction. If that write fails nothing else happens and
   ArchiveWriteException is raised.
2. Cleanup. Rows whose ids were captured before deletion are deleted, tasks
   and board tasks independently. A failure is logged and reported in the
   result; it never undoes the archive.

Once the archive exists the close is reported as successful; a failed cache
refresh or activity log write afterwards is logged and does not raise.

Rows created by another session while the close runs are not in the captured
id lists and survive untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from app.application.dtos.weekly_history import (
    CleanupResult,
    WeekClosingResult,
    WeeklyHistoryCreate,
    WeeklyHistoryResult,
)
from app.application.services.aggregation import (
    compute_completion_rate,
    compute_total_hours,
)
from app.application.services.planning import week_start
from app.application.services.state_cache import BOARD_TASKS, TASKS, WEEKLY_HISTORY
from app.domain.enums import ActivityAction
from app.domain.exceptions import ArchiveWriteException
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.dtos.board_task import BoardTaskResult
    from app.application.dtos.catalog import UserResult
    from app.application.dtos.task import TaskResult
    from app.application.interfaces.services import UnitOfWorkFactory
    from app.application.services.activity_log_service import ActivityLogService
    from app.application.services.state_cache import StateCache

logger = get_logger(__name__)

CLOSE_WEEK_DESCRIPTION = "Semana fechada e dados resetados."


def build_history_record(
    tasks: Sequence[TaskResult],
    board_tasks: Sequence[BoardTaskResult],
    closed_at: datetime,
    tz: ZoneInfo,
) -> WeeklyHistoryCreate:
    """Summary statistics plus deep copies of both collections."""
    completion = compute_completion_rate(tasks)
    return WeeklyHistoryCreate(
        start_date=week_start(closed_at, tz),
        end_date=closed_at,
        total_hours=compute_total_hours(tasks),
        tasks_completed=completion.completed_count,
        tasks_pending=completion.pending_count,
        tasks=tuple(copy.deepcopy(list(tasks))),
        board_tasks=tuple(copy.deepcopy(list(board_tasks))),
        created_at=closed_at,
        timezone=tz.key,
    )


class CloseWeekUseCase:
    """Archive-then-clear transition for the current week."""

    def __init__(
        self,
        uow_factory: "UnitOfWorkFactory",
        cache: "StateCache",
        activity_log: "ActivityLogService",
        planning_tz: ZoneInfo,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache = cache
        self._activity_log = activity_log
        self._tz = planning_tz
        self._clock = clock

    async def close_week(self, actor: "UserResult") -> WeekClosingResult:
        """Run both phases and return the two-phase result.

        Raises:
            ArchiveWriteException: When the history record could not be written.
                Live tasks and board tasks are left untouched.
        """
        tasks = self._cache.tasks()
        board_tasks = self._cache.board_tasks()
        task_ids = [t.id for t in tasks]
        board_task_ids = [b.id for b in board_tasks]

        record = build_history_record(tasks, board_tasks, self._clock(), self._tz)
        history = await self._archive(record)
        logger.info(
            "Week archived as %s (%d tasks, %d board tasks, %s)",
            history.id,
            len(task_ids),
            len(board_task_ids),
            record.total_hours,
        )

        cleanup = CleanupResult(
            tasks_deleted=await self._delete_tasks(task_ids),
            board_tasks_deleted=await self._delete_board_tasks(board_task_ids),
        )

        await self._after_close(actor)
        return WeekClosingResult(archived=True, history=history, cleanup=cleanup)

    async def _after_close(self, actor: "UserResult") -> None:
        """Refresh the cache and record the close. Failures here are logged only."""
        try:
            await self._cache.refresh(TASKS, BOARD_TASKS, WEEKLY_HISTORY)
        except Exception:
            logger.error("Cache refresh after week close failed", exc_info=True)
        try:
            await self._activity_log.record(
                actor.id, ActivityAction.DELETE, CLOSE_WEEK_DESCRIPTION
            )
        except Exception:
            logger.error("Activity log entry for week close failed", exc_info=True)

    async def _archive(self, record: WeeklyHistoryCreate) -> WeeklyHistoryResult:
        try:
            async with self._uow_factory() as uow:
                return await uow.weekly_history.create(record)
        except Exception as e:
            logger.exception("Archive write failed; live data left untouched")
            raise ArchiveWriteException(str(e)) from e

    async def _delete_tasks(self, task_ids: list[str]) -> bool:
        try:
            async with self._uow_factory() as uow:
                await uow.tasks.delete_by_ids(task_ids)
        except Exception:
            logger.error(
                "Cleanup failed for table tasks (%d captured ids)",
                len(task_ids),
                exc_info=True,
            )
            return False
        return True

    async def _delete_board_tasks(self, board_task_ids: list[str]) -> bool:
        try:
            async with self._uow_factory() as uow:
                await uow.board_tasks.delete_by_ids(board_task_ids)
        except Exception:
            logger.error(
                "Cleanup failed for table board_tasks (%d captured ids)",
                len(board_task_ids),
                exc_info=True,
            )
            return False
        return True
