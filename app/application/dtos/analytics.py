"""DTOs for dashboard analytics (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.enums import LoadTier


@dataclass(frozen=True)
class ProjectHours:
    """Accumulated minutes for one project."""

    project_id: str
    name: str
    minutes: int
    formatted: str


@dataclass(frozen=True)
class HoursByProject:
    """Top projects by dedicated minutes, busiest first.

    ``max_minutes`` is the largest value in ``items`` (1 when empty) so callers
    can draw proportional bars without dividing by zero.
    """

    items: tuple[ProjectHours, ...]
    max_minutes: int


@dataclass(frozen=True)
class CompletionRate:
    percent: int
    completed_count: int
    pending_count: int
    total: int


@dataclass(frozen=True)
class CollaboratorLoad:
    """Weekly load of one collaborator against the capacity threshold.

    ``percentage`` is capped at 100; ``minutes`` is never capped.
    """

    user_id: str
    name: str
    avatar: str
    minutes: int
    formatted: str
    percentage: float
    tier: LoadTier


@dataclass
class DashboardStats:
    """Dashboard figures computed from the live task collection."""

    total_hours: str
    completion: CompletionRate
    hours_by_project: HoursByProject
    collaborator_load: list[CollaboratorLoad] = field(default_factory=list)
    capacity_hours: int = 44
