"""Persistence repositories. Re-exports for the unit of work."""

from app.infrastructure.persistence.repositories.activity_log_repo import (
    ActivityLogRepository,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.board_task_repo import (
    BoardTaskRepository,
)
from app.infrastructure.persistence.repositories.chat_repo import ChatRepository
from app.infrastructure.persistence.repositories.profile_repo import ProfileRepository
from app.infrastructure.persistence.repositories.sector_repo import (
    ProjectRepository,
    SectorRepository,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.repositories.weekly_history_repo import (
    WeeklyHistoryRepository,
)

__all__ = [
    "ActivityLogRepository",
    "BaseRepository",
    "BoardTaskRepository",
    "ChatRepository",
    "ProfileRepository",
    "ProjectRepository",
    "SectorRepository",
    "TaskRepository",
    "WeeklyHistoryRepository",
]
