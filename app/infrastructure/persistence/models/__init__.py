"""Persistence models: ORM entities and mixins.

Importing this package registers every table on Base.metadata (Alembic).
"""

from app.infrastructure.persistence.models.activity_log import ActivityLog
from app.infrastructure.persistence.models.board_task import BoardTask
from app.infrastructure.persistence.models.chat import ChatChannel, ChatMessage
from app.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    TimestampedModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.profile import Profile
from app.infrastructure.persistence.models.sector import Project, Sector
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.weekly_history import WeeklyHistory

__all__ = [
    "ActivityLog",
    "BoardTask",
    "ChatChannel",
    "ChatMessage",
    "CreatedAtMixin",
    "CuidMixin",
    "Profile",
    "Project",
    "Sector",
    "Task",
    "TimestampMixin",
    "TimestampedModel",
    "WeeklyHistory",
]
