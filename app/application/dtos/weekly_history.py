"""DTOs for weekly history (immutable archive produced by week closing)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.board_task import BoardTaskResult
from app.application.dtos.task import TaskResult
from app.shared.utils.datetime import ensure_utc, get_zone

DEFAULT_TIMEZONE = "UTC"


def week_label(created_at: datetime, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Closing date as dd/mm/YYYY on the calendar of the given IANA zone."""
    return f"{ensure_utc(created_at).astimezone(get_zone(timezone)):%d/%m/%Y}"


def default_history_title(created_at: datetime, timezone: str = DEFAULT_TIMEZONE) -> str:
    """Display title used when a history entry has no custom title."""
    return f"Semana de {week_label(created_at, timezone)}"


@dataclass(frozen=True)
class WeeklyHistoryCreate:
    """Record written by week closing. Snapshot collections are copies of the live rows."""

    start_date: datetime
    end_date: datetime
    total_hours: str
    tasks_completed: int
    tasks_pending: int
    tasks: tuple[TaskResult, ...]
    board_tasks: tuple[BoardTaskResult, ...]
    created_at: datetime
    timezone: str = DEFAULT_TIMEZONE


@dataclass(frozen=True)
class WeeklyHistoryResult:
    """Weekly history read-model. Only ``title`` changes after creation.

    ``timezone`` is the planning zone at closing; dates in labels and file names
    are rendered on that calendar.
    """

    id: str
    title: str | None
    start_date: datetime
    end_date: datetime
    total_hours: str
    tasks_completed: int
    tasks_pending: int
    tasks: tuple[TaskResult, ...]
    board_tasks: tuple[BoardTaskResult, ...]
    created_at: datetime
    timezone: str = DEFAULT_TIMEZONE

    @property
    def display_title(self) -> str:
        return self.title or default_history_title(self.created_at, self.timezone)


@dataclass(frozen=True)
class CleanupResult:
    """Outcome of clearing the live collections after the archive was written."""

    tasks_deleted: bool
    board_tasks_deleted: bool

    @property
    def fully_cleared(self) -> bool:
        return self.tasks_deleted and self.board_tasks_deleted


@dataclass(frozen=True)
class WeekClosingResult:
    """Two-phase result of week closing: archive (atomic) then cleanup (best effort).

    When the archive write fails no result is produced; ArchiveWriteException
    is raised instead.
    """

    archived: bool
    history: WeeklyHistoryResult
    cleanup: CleanupResult
