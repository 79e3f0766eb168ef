"""Application services: aggregation, reporting, planning, state cache, activity log."""

from app.application.services.activity_log_service import ActivityLogService
from app.application.services.aggregation import (
    compute_collaborator_load,
    compute_completion_rate,
    compute_hours_by_project,
    compute_total_hours,
)
from app.application.services.planning import tasks_for_day, week_days
from app.application.services.reporting import derive_report
from app.application.services.state_cache import StateCache

__all__ = [
    "ActivityLogService",
    "StateCache",
    "compute_collaborator_load",
    "compute_completion_rate",
    "compute_hours_by_project",
    "compute_total_hours",
    "derive_report",
    "tasks_for_day",
    "week_days",
]
