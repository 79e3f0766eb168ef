"""Board (kanban) API: thin routes delegating to BoardTaskService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import CacheDep, CurrentUser, get_board_task_service
from app.application.dtos.board_task import BoardTaskCreate, BoardTaskPatch, Subtask
from app.application.use_cases.tasks import BoardTaskService
from app.core.limiter import limit_writes
from app.schemas.board_task import (
    BoardTaskCreateRequest,
    BoardTaskMoveRequest,
    BoardTaskResponse,
    BoardTaskUpdateRequest,
    SubtaskSchema,
)

router = APIRouter()

BoardServiceDep = Annotated[BoardTaskService, Depends(get_board_task_service)]


def _subtasks(items: list[SubtaskSchema]) -> tuple[Subtask, ...]:
    return tuple(Subtask(id=s.id, title=s.title, completed=s.completed) for s in items)


@router.get("", response_model=list[BoardTaskResponse])
async def list_board_tasks(cache: CacheDep, _: CurrentUser):
    return [BoardTaskResponse.model_validate(b) for b in cache.board_tasks()]


@router.post("", response_model=BoardTaskResponse, status_code=201)
@limit_writes
async def create_board_task(
    request: Request,
    body: BoardTaskCreateRequest,
    actor: CurrentUser,
    board_svc: BoardServiceDep,
):
    created = await board_svc.create(
        actor,
        BoardTaskCreate(
            title=body.title,
            description=body.description,
            start_date=body.start_date,
            end_date=body.end_date,
            member_ids=tuple(body.member_ids),
            status=body.status,
            subtasks=_subtasks(body.subtasks),
        ),
    )
    return BoardTaskResponse.model_validate(created)


@router.patch("/{board_task_id}", response_model=BoardTaskResponse)
@limit_writes
async def update_board_task(
    request: Request,
    board_task_id: str,
    body: BoardTaskUpdateRequest,
    _: CurrentUser,
    board_svc: BoardServiceDep,
):
    patch = BoardTaskPatch(
        title=body.title,
        description=body.description,
        start_date=body.start_date,
        end_date=body.end_date,
        member_ids=tuple(body.member_ids) if body.member_ids is not None else None,
        status=body.status,
        subtasks=_subtasks(body.subtasks) if body.subtasks is not None else None,
    )
    updated = await board_svc.update(board_task_id, patch)
    return BoardTaskResponse.model_validate(updated)


@router.post("/{board_task_id}/move", response_model=BoardTaskResponse)
@limit_writes
async def move_board_task(
    request: Request,
    board_task_id: str,
    body: BoardTaskMoveRequest,
    _: CurrentUser,
    board_svc: BoardServiceDep,
):
    """Move a card to another column (any column to any column)."""
    moved = await board_svc.move(board_task_id, body.status)
    return BoardTaskResponse.model_validate(moved)


@router.post(
    "/{board_task_id}/subtasks/{subtask_id}/toggle", response_model=BoardTaskResponse
)
@limit_writes
async def toggle_board_subtask(
    request: Request,
    board_task_id: str,
    subtask_id: str,
    _: CurrentUser,
    board_svc: BoardServiceDep,
):
    updated = await board_svc.toggle_subtask(board_task_id, subtask_id)
    return BoardTaskResponse.model_validate(updated)


@router.delete("/{board_task_id}", status_code=204)
@limit_writes
async def delete_board_task(
    request: Request,
    board_task_id: str,
    actor: CurrentUser,
    board_svc: BoardServiceDep,
):
    await board_svc.delete(actor, board_task_id)
    return Response(status_code=204)
