"""Task API: thin routes delegating to TaskService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import CacheDep, CurrentUser, get_task_service
from app.application.dtos.task import TaskCreate, TaskPatch
from app.application.use_cases.tasks import TaskService
from app.core.limiter import limit_writes
from app.domain.enums import TaskStatus
from app.schemas.task import (
    TaskCreateRequest,
    TaskQuickAddRequest,
    TaskRescheduleRequest,
    TaskResponse,
    TaskUpdateRequest,
)

router = APIRouter()

TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    cache: CacheDep,
    _: CurrentUser,
    collaborator_id: Annotated[str | None, Query()] = None,
    project_id: Annotated[str | None, Query()] = None,
    status: Annotated[TaskStatus | None, Query()] = None,
):
    """List live tasks from the state cache, optionally filtered."""
    tasks = cache.tasks()
    if collaborator_id is not None:
        tasks = tuple(t for t in tasks if t.collaborator_id == collaborator_id)
    if project_id is not None:
        tasks = tuple(t for t in tasks if t.project_id == project_id)
    if status is not None:
        tasks = tuple(t for t in tasks if t.status == status)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    """Create a task. Non-admins may only create tasks for themselves."""
    created = await task_svc.create(
        actor,
        TaskCreate(
            project_id=body.project_id,
            collaborator_id=body.collaborator_id or actor.id,
            planned_activity=body.planned_activity,
            delivered_activity=body.delivered_activity,
            priority=body.priority,
            status=body.status,
            due_date=body.due_date,
            hours_dedicated=body.hours_dedicated,
            notes=body.notes,
        ),
    )
    return TaskResponse.model_validate(created)


@router.post("/quick-add", response_model=TaskResponse, status_code=201)
@limit_writes
async def quick_add_task(
    request: Request,
    body: TaskQuickAddRequest,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    """Create a pending task for the caller on a planner day."""
    created = await task_svc.quick_add(
        actor, body.project_id, body.planned_activity, body.due_date
    )
    return TaskResponse.model_validate(created)


@router.patch("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    body: TaskUpdateRequest,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    """Partial update; the stored sector changes only when the project changes."""
    updated = await task_svc.update(actor, task_id, TaskPatch(**body.model_dump()))
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: str,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    await task_svc.delete(actor, task_id)
    return Response(status_code=204)


@router.post("/{task_id}/duplicate", response_model=TaskResponse, status_code=201)
@limit_writes
async def duplicate_task(
    request: Request,
    task_id: str,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    """Copy a task as a new pending task owned by the caller."""
    created = await task_svc.duplicate(actor, task_id)
    return TaskResponse.model_validate(created)


@router.post("/{task_id}/toggle", response_model=TaskResponse)
@limit_writes
async def toggle_task(
    request: Request,
    task_id: str,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    """Flip between completed and pending."""
    updated = await task_svc.toggle_completion(actor, task_id)
    return TaskResponse.model_validate(updated)


@router.post("/{task_id}/reschedule", response_model=TaskResponse)
@limit_writes
async def reschedule_task(
    request: Request,
    task_id: str,
    body: TaskRescheduleRequest,
    actor: CurrentUser,
    task_svc: TaskServiceDep,
):
    """Move a task to another due date."""
    updated = await task_svc.reschedule(actor, task_id, body.due_date)
    return TaskResponse.model_validate(updated)
