"""Analytics API: dashboard figures over the live tasks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import CurrentUser, get_dashboard_stats_use_case
from app.application.use_cases.analytics import GetDashboardStatsUseCase
from app.schemas.analytics import DashboardStatsResponse

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStatsResponse)
async def get_dashboard(
    _: CurrentUser,
    use_case: Annotated[
        GetDashboardStatsUseCase, Depends(get_dashboard_stats_use_case)
    ],
    collaborator_id: Annotated[
        str | None,
        Query(description="Limit totals, completion and projects to one collaborator"),
    ] = None,
):
    """Total hours, completion rate, top projects and collaborator load."""
    stats = use_case.get_dashboard_stats(collaborator_id=collaborator_id)
    return DashboardStatsResponse.model_validate(stats)
