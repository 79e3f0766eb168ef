"""Analytics use case: dashboard figures over the cached live tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.analytics import DashboardStats
from app.application.services.aggregation import (
    DEFAULT_ELEVATED_HOURS,
    DEFAULT_TOP_PROJECTS,
    compute_collaborator_load,
    compute_completion_rate,
    compute_hours_by_project,
    compute_total_hours,
)
from app.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from app.application.services.state_cache import StateCache


class GetDashboardStatsUseCase:
    """Total hours, completion rate, top projects and collaborator load.

    With collaborator_id, totals, completion and top projects cover that
    collaborator's tasks only; the load list always covers every profile.
    """

    def __init__(
        self,
        cache: "StateCache",
        capacity_hours: int = 44,
        elevated_hours: int = DEFAULT_ELEVATED_HOURS,
        top_projects_limit: int = DEFAULT_TOP_PROJECTS,
    ) -> None:
        self.cache = cache
        self.capacity_hours = capacity_hours
        self.elevated_hours = elevated_hours
        self.top_projects_limit = top_projects_limit

    def get_dashboard_stats(self, collaborator_id: str | None = None) -> DashboardStats:
        all_tasks = self.cache.tasks()
        if collaborator_id is not None:
            if self.cache.get_user(collaborator_id) is None:
                raise ResourceNotFoundException("user", collaborator_id)
            tasks = [t for t in all_tasks if t.collaborator_id == collaborator_id]
        else:
            tasks = list(all_tasks)
        return DashboardStats(
            total_hours=compute_total_hours(tasks),
            completion=compute_completion_rate(tasks),
            hours_by_project=compute_hours_by_project(
                tasks, self.cache.projects(), limit=self.top_projects_limit
            ),
            collaborator_load=compute_collaborator_load(
                all_tasks,
                self.cache.users(),
                capacity_minutes=self.capacity_hours * 60,
                elevated_hours=self.elevated_hours,
            ),
            capacity_hours=self.capacity_hours,
        )
