"""Weekly planning API schemas."""

from datetime import date

from pydantic import BaseModel

from app.schemas.task import TaskResponse


class PlanningDay(BaseModel):
    """One weekday column with the tasks due on it."""

    day: date
    tasks: list[TaskResponse]


class PlanningWeekResponse(BaseModel):
    """Monday to Friday of the current week in the planning timezone."""

    collaborator_id: str
    days: list[PlanningDay]
