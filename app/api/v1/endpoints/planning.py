"""Weekly planning API: Monday to Friday of the current week."""

from typing import Annotated

from fastapi import APIRouter, Query

from app.api.v1.dependencies import CacheDep, CurrentUser, SettingsDep
from app.application.services.planning import tasks_for_day, week_days
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.planning import PlanningDay, PlanningWeekResponse
from app.schemas.task import TaskResponse
from app.shared.utils.datetime import get_zone, utc_now

router = APIRouter()


@router.get("/week", response_model=PlanningWeekResponse)
async def get_planning_week(
    cache: CacheDep,
    actor: CurrentUser,
    settings: SettingsDep,
    collaborator_id: Annotated[
        str | None, Query(description="Defaults to the caller")
    ] = None,
):
    """Tasks due on each working day of the current week for one collaborator."""
    target = collaborator_id or actor.id
    if cache.get_user(target) is None:
        raise ResourceNotFoundException("user", target)
    tasks = cache.tasks()
    days = week_days(utc_now(), get_zone(settings.planning_timezone))
    return PlanningWeekResponse(
        collaborator_id=target,
        days=[
            PlanningDay(
                day=day,
                tasks=[TaskResponse.model_validate(t) for t in tasks_for_day(tasks, day, target)],
            )
            for day in days
        ],
    )
