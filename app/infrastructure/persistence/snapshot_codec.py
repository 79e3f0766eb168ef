"""JSON codec for weekly history snapshots and board task subtasks.

Snapshots are stored with snake_case keys, ISO dates and enum values so they
stay readable without the ORM. Decoding tolerates missing optional keys from
older rows.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from app.application.dtos.board_task import BoardTaskResult, Subtask
from app.application.dtos.task import TaskResult
from app.domain.enums import BoardStatus, TaskPriority, TaskStatus
from app.shared.utils.datetime import ensure_utc


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _iso_or_none(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def encode_subtasks(subtasks: tuple[Subtask, ...]) -> list[dict[str, Any]]:
    return [{"id": s.id, "title": s.title, "completed": s.completed} for s in subtasks]


def decode_subtasks(raw: list[dict[str, Any]] | None) -> tuple[Subtask, ...]:
    return tuple(
        Subtask(
            id=str(item.get("id", "")),
            title=str(item.get("title", "")),
            completed=bool(item.get("completed", False)),
        )
        for item in raw or []
    )


def encode_task(task: TaskResult) -> dict[str, Any]:
    return {
        "id": task.id,
        "project_id": task.project_id,
        "collaborator_id": task.collaborator_id,
        "sector": task.sector,
        "planned_activity": task.planned_activity,
        "delivered_activity": task.delivered_activity,
        "priority": task.priority.value,
        "status": task.status.value,
        "due_date": _iso_or_none(task.due_date),
        "hours_dedicated": task.hours_dedicated,
        "notes": task.notes,
        "updated_at": task.updated_at.isoformat(),
    }


def decode_task(raw: dict[str, Any]) -> TaskResult:
    return TaskResult(
        id=raw["id"],
        project_id=raw.get("project_id", ""),
        collaborator_id=raw.get("collaborator_id", ""),
        sector=raw.get("sector") or "",
        planned_activity=raw.get("planned_activity") or "",
        delivered_activity=raw.get("delivered_activity") or "",
        priority=TaskPriority(raw.get("priority", TaskPriority.MEDIUM.value)),
        status=TaskStatus(raw.get("status", TaskStatus.PENDING.value)),
        due_date=_date_or_none(raw.get("due_date")),
        hours_dedicated=raw.get("hours_dedicated") or "",
        notes=raw.get("notes") or "",
        updated_at=ensure_utc(datetime.fromisoformat(raw["updated_at"])),
    )


def encode_board_task(board_task: BoardTaskResult) -> dict[str, Any]:
    return {
        "id": board_task.id,
        "title": board_task.title,
        "description": board_task.description,
        "start_date": _iso_or_none(board_task.start_date),
        "end_date": _iso_or_none(board_task.end_date),
        "member_ids": list(board_task.member_ids),
        "status": board_task.status.value,
        "subtasks": encode_subtasks(board_task.subtasks),
        "updated_at": board_task.updated_at.isoformat(),
    }


def decode_board_task(raw: dict[str, Any]) -> BoardTaskResult:
    return BoardTaskResult(
        id=raw["id"],
        title=raw.get("title") or "",
        description=raw.get("description") or "",
        start_date=_date_or_none(raw.get("start_date")),
        end_date=_date_or_none(raw.get("end_date")),
        member_ids=tuple(raw.get("member_ids") or ()),
        status=BoardStatus(raw.get("status", BoardStatus.TODO.value)),
        subtasks=decode_subtasks(raw.get("subtasks")),
        updated_at=ensure_utc(datetime.fromisoformat(raw["updated_at"])),
    )
