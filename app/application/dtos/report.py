"""DTOs for the weekly report derived from a history snapshot."""

from __future__ import annotations

from dataclasses import dataclass, fields

TASK_SHEET_NAME = "Atividades"
BOARD_SHEET_NAME = "Quadro"


@dataclass(frozen=True)
class TaskReportRow:
    """One archived task, with names resolved."""

    project: str
    sector: str
    collaborator: str
    planned_activity: str
    delivered_activity: str
    status: str
    priority: str
    due_date: str
    hours_dedicated: str
    notes: str


@dataclass(frozen=True)
class BoardReportRow:
    """One archived board task; members are comma-joined names."""

    title: str
    status: str
    start_date: str
    end_date: str
    members: str
    description: str


TASK_REPORT_HEADERS: dict[str, str] = {
    "project": "Projeto",
    "sector": "Setor",
    "collaborator": "Colaborador",
    "planned_activity": "Atividade Planejada",
    "delivered_activity": "Atividade Entregue",
    "status": "Status",
    "priority": "Prioridade",
    "due_date": "Data Entrega",
    "hours_dedicated": "Horas Dedicadas",
    "notes": "Observações",
}

BOARD_REPORT_HEADERS: dict[str, str] = {
    "title": "Titulo",
    "status": "Status",
    "start_date": "Data Inicio",
    "end_date": "Data Fim",
    "members": "Membros",
    "description": "Descrição",
}


def row_values(row: TaskReportRow | BoardReportRow) -> list[str]:
    """Return the row's cells in column order."""
    return [getattr(row, f.name) for f in fields(row)]


@dataclass(frozen=True)
class WeeklyReport:
    """Two row-sets derived from one weekly history entry."""

    history_id: str
    title: str
    week_label: str
    task_rows: tuple[TaskReportRow, ...]
    board_rows: tuple[BoardReportRow, ...]
