"""Aggregation engine: hour totals, completion rate and collaborator load.

Pure functions over task collections. Stored durations that do not parse as
``HH:mm`` are skipped silently; they never raise.
"""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping

from app.application.dtos.analytics import (
    CollaboratorLoad,
    CompletionRate,
    HoursByProject,
    ProjectHours,
)
from app.application.dtos.catalog import ProjectResult, UserResult
from app.application.dtos.task import TaskResult
from app.domain.enums import LoadTier, TaskStatus
from app.domain.value_objects import Duration

UNKNOWN_PROJECT_LABEL = "Desconhecido"
DEFAULT_CAPACITY_MINUTES = 44 * 60
DEFAULT_ELEVATED_HOURS = 40
DEFAULT_TOP_PROJECTS = 5


def task_minutes(task: TaskResult) -> int:
    """Return the task's dedicated minutes; 0 when absent or malformed."""
    duration = Duration.parse(task.hours_dedicated)
    return duration.minutes if duration is not None else 0


def sum_minutes(tasks: Iterable[TaskResult], collaborator_id: str | None = None) -> int:
    """Sum dedicated minutes, optionally for one collaborator only."""
    return sum(
        task_minutes(task)
        for task in tasks
        if collaborator_id is None or task.collaborator_id == collaborator_id
    )


def compute_total_hours(
    tasks: Iterable[TaskResult], collaborator_id: str | None = None
) -> str:
    """Return total dedicated time as zero-padded ``HH:mm`` (``00:00`` when empty)."""
    return str(Duration(sum_minutes(tasks, collaborator_id)))


def compute_hours_by_project(
    tasks: Iterable[TaskResult],
    projects: Iterable[ProjectResult] | Mapping[str, str],
    limit: int = DEFAULT_TOP_PROJECTS,
) -> HoursByProject:
    """Rank projects by dedicated minutes and keep the top ``limit``.

    ``projects`` is either the project list or an id -> name mapping. Tasks on
    a project that no longer exists are grouped under their project id with the
    unknown-project label. Projects with no dedicated time are left out.
    """
    if isinstance(projects, Mapping):
        names = dict(projects)
    else:
        names = {project.id: project.name for project in projects}

    totals: dict[str, int] = defaultdict(int)
    for task in tasks:
        minutes = task_minutes(task)
        if minutes > 0:
            totals[task.project_id] += minutes

    ranked = sorted(
        (
            ProjectHours(
                project_id=project_id,
                name=names.get(project_id, UNKNOWN_PROJECT_LABEL),
                minutes=minutes,
                formatted=Duration(minutes).display(),
            )
            for project_id, minutes in totals.items()
        ),
        key=lambda item: (-item.minutes, item.name, item.project_id),
    )[: max(limit, 0)]
    max_minutes = max((item.minutes for item in ranked), default=0) or 1
    return HoursByProject(items=tuple(ranked), max_minutes=max_minutes)


def compute_completion_rate(tasks: Iterable[TaskResult]) -> CompletionRate:
    """Share of tasks whose status is Completed; 0% for an empty collection."""
    statuses = [task.status for task in tasks]
    total = len(statuses)
    completed = sum(1 for status in statuses if status == TaskStatus.COMPLETED)
    # Half-up rounding: 12.5% displays as 13%.
    percent = math.floor(100 * completed / total + 0.5) if total else 0
    return CompletionRate(
        percent=percent,
        completed_count=completed,
        pending_count=total - completed,
        total=total,
    )


def classify_load(
    minutes: int,
    capacity_minutes: int = DEFAULT_CAPACITY_MINUTES,
    elevated_hours: int = DEFAULT_ELEVATED_HOURS,
) -> LoadTier:
    """Classify weekly load: above capacity is over, above elevated_hours is elevated."""
    if minutes > capacity_minutes:
        return LoadTier.OVER_CAPACITY
    if minutes > elevated_hours * 60:
        return LoadTier.ELEVATED
    return LoadTier.NORMAL


def compute_collaborator_load(
    tasks: Iterable[TaskResult],
    users: Iterable[UserResult],
    capacity_minutes: int = DEFAULT_CAPACITY_MINUTES,
    elevated_hours: int = DEFAULT_ELEVATED_HOURS,
) -> list[CollaboratorLoad]:
    """Return one entry per known user (including idle ones), busiest first."""
    if capacity_minutes <= 0:
        raise ValueError("capacity_minutes must be positive")
    per_user: dict[str, int] = defaultdict(int)
    for task in tasks:
        per_user[task.collaborator_id] += task_minutes(task)

    loads = []
    for user in users:
        minutes = per_user.get(user.id, 0)
        loads.append(
            CollaboratorLoad(
                user_id=user.id,
                name=user.name,
                avatar=user.avatar,
                minutes=minutes,
                formatted=Duration(minutes).display(),
                percentage=min(100.0, minutes / capacity_minutes * 100),
                tier=classify_load(minutes, capacity_minutes, elevated_hours),
            )
        )
    loads.sort(key=lambda load: load.minutes, reverse=True)
    return loads
