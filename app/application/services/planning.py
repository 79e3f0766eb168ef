"""Weekly planning calendar: working days of the current week and tasks per day."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from app.application.dtos.task import TaskResult

WORKING_DAYS = 5


def local_today(now: datetime, tz: ZoneInfo) -> date:
    """Calendar date of now in tz (naive datetimes are treated as UTC)."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=ZoneInfo("UTC"))
    return now.astimezone(tz).date()


def week_monday(now: datetime, tz: ZoneInfo) -> date:
    """Monday of the week containing now; Sunday belongs to the week that started six days earlier."""
    today = local_today(now, tz)
    return today - timedelta(days=today.weekday())


def week_start(now: datetime, tz: ZoneInfo) -> datetime:
    """Monday 00:00 in tz of the week containing now."""
    return datetime.combine(week_monday(now, tz), time.min, tzinfo=tz)


def week_days(now: datetime, tz: ZoneInfo) -> list[date]:
    """Monday through Friday of the week containing now."""
    monday = week_monday(now, tz)
    return [monday + timedelta(days=offset) for offset in range(WORKING_DAYS)]


def tasks_for_day(
    tasks: Iterable[TaskResult], day: date, collaborator_id: str
) -> list[TaskResult]:
    """Tasks of one collaborator due on day."""
    return [
        task
        for task in tasks
        if task.collaborator_id == collaborator_id and task.due_date == day
    ]
