"""Application DTOs (no ORM dependency)."""

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.application.dtos.analytics import (
    CollaboratorLoad,
    CompletionRate,
    DashboardStats,
    HoursByProject,
    ProjectHours,
)
from app.application.dtos.board_task import (
    BoardTaskCreate,
    BoardTaskPatch,
    BoardTaskResult,
    Subtask,
)
from app.application.dtos.catalog import (
    ProfilePatch,
    ProjectResult,
    SectorResult,
    UserCreate,
    UserResult,
)
from app.application.dtos.chat import ChatChannelResult, ChatMessageResult
from app.application.dtos.report import BoardReportRow, TaskReportRow, WeeklyReport
from app.application.dtos.task import TaskCreate, TaskPatch, TaskResult
from app.application.dtos.weekly_history import (
    CleanupResult,
    WeekClosingResult,
    WeeklyHistoryCreate,
    WeeklyHistoryResult,
)

__all__ = [
    "ActivityLogCreate",
    "ActivityLogResult",
    "BoardReportRow",
    "BoardTaskCreate",
    "BoardTaskPatch",
    "BoardTaskResult",
    "ChatChannelResult",
    "ChatMessageResult",
    "CleanupResult",
    "CollaboratorLoad",
    "CompletionRate",
    "DashboardStats",
    "HoursByProject",
    "ProfilePatch",
    "ProjectHours",
    "ProjectResult",
    "SectorResult",
    "Subtask",
    "TaskCreate",
    "TaskPatch",
    "TaskReportRow",
    "TaskResult",
    "UserCreate",
    "UserResult",
    "WeekClosingResult",
    "WeeklyHistoryCreate",
    "WeeklyHistoryResult",
    "WeeklyReport",
]
