"""Weekly report derivation: one history entry -> task and board row-sets.

Pure transformation; styling and file encoding belong to the renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from app.application.dtos.board_task import BoardTaskResult
from app.application.dtos.report import BoardReportRow, TaskReportRow, WeeklyReport
from app.application.dtos.task import TaskResult
from app.application.dtos.weekly_history import WeeklyHistoryResult, week_label

NameResolver = Callable[[str], str]


def _date_cell(value: date | None) -> str:
    return value.isoformat() if value is not None else ""


def task_row(
    task: TaskResult,
    project_name: NameResolver,
    user_name: NameResolver,
) -> TaskReportRow:
    return TaskReportRow(
        project=project_name(task.project_id),
        sector=task.sector,
        collaborator=user_name(task.collaborator_id),
        planned_activity=task.planned_activity,
        delivered_activity=task.delivered_activity,
        status=task.status.value,
        priority=task.priority.value,
        due_date=_date_cell(task.due_date),
        hours_dedicated=task.hours_dedicated,
        notes=task.notes,
    )


def board_row(board_task: BoardTaskResult, user_name: NameResolver) -> BoardReportRow:
    return BoardReportRow(
        title=board_task.title,
        status=board_task.status.value,
        start_date=_date_cell(board_task.start_date),
        end_date=_date_cell(board_task.end_date),
        members=", ".join(user_name(member_id) for member_id in board_task.member_ids),
        description=board_task.description,
    )


def derive_report(
    history: WeeklyHistoryResult,
    project_name: NameResolver,
    user_name: NameResolver,
) -> WeeklyReport:
    """Build the two-sheet report for a history entry.

    Resolvers must not raise for unknown ids; the state cache resolvers fall back
    to the raw id so entries stay exportable after references are deleted.
    """
    return WeeklyReport(
        history_id=history.id,
        title=history.display_title,
        week_label=week_label(history.created_at, history.timezone),
        task_rows=tuple(task_row(t, project_name, user_name) for t in history.tasks),
        board_rows=tuple(board_row(b, user_name) for b in history.board_tasks),
    )
