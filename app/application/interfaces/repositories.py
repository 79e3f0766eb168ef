"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
    from app.application.dtos.board_task import BoardTaskCreate, BoardTaskResult
    from app.application.dtos.catalog import (
        ProjectResult,
        SectorResult,
        UserCreate,
        UserResult,
    )
    from app.application.dtos.chat import ChatChannelResult, ChatMessageResult
    from app.application.dtos.task import TaskCreate, TaskResult
    from app.application.dtos.weekly_history import (
        WeeklyHistoryCreate,
        WeeklyHistoryResult,
    )
    from app.domain.enums import ChatRole


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for the live task table."""

    async def list_all(self) -> list[TaskResult]:
        """Return every live task (arbitrary order)."""

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID."""

    async def create(self, data: TaskCreate, sector: str) -> TaskResult:
        """Insert a task with the sector name resolved by the caller."""

    async def update(self, task: TaskResult) -> TaskResult:
        """Persist every field of task (full row write)."""

    async def delete(self, task_id: str) -> bool:
        """Delete task by ID. Return False when it does not exist."""

    async def delete_by_ids(self, task_ids: Sequence[str]) -> int:
        """Delete the given tasks. Return the number of rows removed."""

    async def count_by_project(self, project_id: str) -> int:
        """Return number of live tasks referencing project."""

    async def count_by_collaborator(self, user_id: str) -> int:
        """Return number of live tasks owned by user."""


# Board task repository interface
class IBoardTaskRepository(Protocol):
    """Protocol for the live kanban board table."""

    async def list_all(self) -> list[BoardTaskResult]:
        """Return every live board task."""

    async def get_by_id(self, board_task_id: str) -> BoardTaskResult | None:
        """Return board task by ID."""

    async def create(self, data: BoardTaskCreate) -> BoardTaskResult:
        """Insert a board task."""

    async def update(self, board_task: BoardTaskResult) -> BoardTaskResult:
        """Persist every field of board_task."""

    async def delete(self, board_task_id: str) -> bool:
        """Delete board task by ID. Return False when it does not exist."""

    async def delete_by_ids(self, board_task_ids: Sequence[str]) -> int:
        """Delete the given board tasks. Return the number of rows removed."""


# Weekly history repository interface
class IWeeklyHistoryRepository(Protocol):
    """Protocol for the weekly history archive. Snapshots are write-once."""

    async def list_all(self) -> list[WeeklyHistoryResult]:
        """Return every history entry."""

    async def get_by_id(self, history_id: str) -> WeeklyHistoryResult | None:
        """Return history entry by ID."""

    async def create(self, data: WeeklyHistoryCreate) -> WeeklyHistoryResult:
        """Insert one history entry."""

    async def update_title(self, history_id: str, title: str | None) -> WeeklyHistoryResult | None:
        """Set only the title column. Return None when the entry does not exist."""


# Activity log repository interface
class IActivityLogRepository(Protocol):
    """Protocol for the append-only activity log."""

    async def create(self, data: ActivityLogCreate) -> ActivityLogResult:
        """Append one entry."""

    async def list_recent(self, limit: int) -> list[ActivityLogResult]:
        """Return the latest entries, newest first."""


# Profile repository interface
class IUserRepository(Protocol):
    """Protocol for profiles (collaborators and admins)."""

    async def list_all(self) -> list[UserResult]:
        """Return every profile."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return profile by ID."""

    async def create(self, data: UserCreate) -> UserResult:
        """Insert a profile."""

    async def update(self, user: UserResult) -> UserResult:
        """Persist profile fields."""

    async def delete(self, user_id: str) -> bool:
        """Delete profile by ID."""


# Sector repository interface
class ISectorRepository(Protocol):
    async def list_all(self) -> list[SectorResult]:
        """Return every sector."""

    async def get_by_id(self, sector_id: str) -> SectorResult | None:
        """Return sector by ID."""

    async def create(self, name: str) -> SectorResult:
        """Insert a sector."""

    async def delete(self, sector_id: str) -> bool:
        """Delete sector by ID."""


# Project repository interface
class IProjectRepository(Protocol):
    async def list_all(self) -> list[ProjectResult]:
        """Return every project."""

    async def get_by_id(self, project_id: str) -> ProjectResult | None:
        """Return project by ID."""

    async def create(self, name: str, sector_id: str) -> ProjectResult:
        """Insert a project."""

    async def delete(self, project_id: str) -> bool:
        """Delete project by ID."""

    async def count_by_sector(self, sector_id: str) -> int:
        """Return number of projects in sector."""


# Chat repository interface
class IChatRepository(Protocol):
    """Protocol for chat channels and messages."""

    async def list_channels(self) -> list[ChatChannelResult]:
        """Return every channel, oldest first."""

    async def get_channel(
        self, channel_id: str, *, for_update: bool = False
    ) -> ChatChannelResult | None:
        """Return channel by ID, row-locked for the transaction when for_update."""

    async def create_channel(self, name: str) -> ChatChannelResult:
        """Insert an unlocked channel."""

    async def delete_channel(self, channel_id: str) -> bool:
        """Delete channel and its messages."""

    async def set_lock(self, channel_id: str, locked_by: str | None) -> None:
        """Lock channel for locked_by, or unlock when None."""

    async def create_message(
        self,
        channel_id: str,
        user_id: str | None,
        role: ChatRole,
        content: str,
    ) -> ChatMessageResult:
        """Insert one message."""

    async def list_recent_messages(self, limit: int) -> list[ChatMessageResult]:
        """Return the latest messages across channels, oldest first."""


# Unit of work interface
class IUnitOfWork(Protocol):
    """One transaction exposing a repository per table.

    Used as ``async with uow_factory() as uow``: commits when the block exits
    normally and rolls back when it raises.
    """

    tasks: ITaskRepository
    board_tasks: IBoardTaskRepository
    weekly_history: IWeeklyHistoryRepository
    activity_logs: IActivityLogRepository
    users: IUserRepository
    sectors: ISectorRepository
    projects: IProjectRepository
    chat: IChatRepository

    async def __aenter__(self) -> IUnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...
