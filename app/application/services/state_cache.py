"""In-process mirror of the persistent store with change notification.

One instance is owned by the application lifespan. Every table is held as an
immutable tuple and is only ever replaced by a full re-fetch; readers never
mutate it.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from app.application.dtos.activity_log import ActivityLogResult
from app.application.dtos.board_task import BoardTaskResult
from app.application.dtos.catalog import ProjectResult, SectorResult, UserResult
from app.application.dtos.chat import (
    DEFAULT_CHANNEL_NAME,
    ChatChannelResult,
    ChatMessageResult,
)
from app.application.dtos.task import TaskResult
from app.application.dtos.weekly_history import WeeklyHistoryResult
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IUnitOfWork
    from app.application.interfaces.services import CacheListener, UnitOfWorkFactory

logger = get_logger(__name__)

TASKS = "tasks"
BOARD_TASKS = "board_tasks"
WEEKLY_HISTORY = "weekly_history"
USERS = "users"
SECTORS = "sectors"
PROJECTS = "projects"
ACTIVITY_LOGS = "activity_logs"
CHAT_CHANNELS = "chat_channels"
CHAT_MESSAGES = "chat_messages"

ALL_TABLES: tuple[str, ...] = (
    USERS,
    SECTORS,
    PROJECTS,
    TASKS,
    BOARD_TASKS,
    WEEKLY_HISTORY,
    ACTIVITY_LOGS,
    CHAT_CHANNELS,
    CHAT_MESSAGES,
)


class StateCache:
    """Snapshot accessors plus push-based change notification.

    ``refresh`` re-fetches whole tables through a fresh unit of work, then
    calls every subscribed listener once with the set of refreshed tables.
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        activity_log_limit: int = 20,
        chat_message_limit: int = 200,
    ) -> None:
        self._uow_factory = uow_factory
        self.activity_log_limit = activity_log_limit
        self.chat_message_limit = chat_message_limit
        self._listeners: list[CacheListener] = []
        self._tasks: tuple[TaskResult, ...] = ()
        self._board_tasks: tuple[BoardTaskResult, ...] = ()
        self._weekly_history: tuple[WeeklyHistoryResult, ...] = ()
        self._users: tuple[UserResult, ...] = ()
        self._sectors: tuple[SectorResult, ...] = ()
        self._projects: tuple[ProjectResult, ...] = ()
        self._activity_logs: tuple[ActivityLogResult, ...] = ()
        self._chat_channels: tuple[ChatChannelResult, ...] = ()
        self._chat_messages: tuple[ChatMessageResult, ...] = ()
        self._project_names: dict[str, str] = {}
        self._user_names: dict[str, str] = {}

    # Loading

    async def load(self) -> None:
        """Initial fetch of every table. Creates the default chat channel when none exists."""
        async with self._uow_factory() as uow:
            channels = await uow.chat.list_channels()
            if not channels:
                await uow.chat.create_channel(DEFAULT_CHANNEL_NAME)
                logger.info("Created default chat channel %r", DEFAULT_CHANNEL_NAME)
        await self.refresh(*ALL_TABLES)

    async def refresh(self, *tables: str, notify: bool = True) -> frozenset[str]:
        """Re-fetch the named tables in full and notify listeners once."""
        names = frozenset(tables)
        unknown = names.difference(ALL_TABLES)
        if unknown:
            raise ValueError(f"Unknown cache table(s): {sorted(unknown)}")
        if not names:
            return names
        async with self._uow_factory() as uow:
            for table in ALL_TABLES:
                if table in names:
                    await self._fetch(uow, table)
        if notify:
            await self.notify(names)
        return names

    async def handle_change(self, table: str) -> None:
        """Entry point for store change notifications on one table."""
        logger.debug("Store change on %s; refreshing", table)
        await self.refresh(table)

    async def _fetch(self, uow: IUnitOfWork, table: str) -> None:
        if table == TASKS:
            self._tasks = tuple(await uow.tasks.list_all())
        elif table == BOARD_TASKS:
            self._board_tasks = tuple(await uow.board_tasks.list_all())
        elif table == WEEKLY_HISTORY:
            entries = await uow.weekly_history.list_all()
            self._weekly_history = tuple(
                sorted(entries, key=lambda h: h.created_at, reverse=True)
            )
        elif table == USERS:
            self._users = tuple(await uow.users.list_all())
            self._user_names = {u.id: u.name for u in self._users}
        elif table == SECTORS:
            self._sectors = tuple(await uow.sectors.list_all())
        elif table == PROJECTS:
            self._projects = tuple(await uow.projects.list_all())
            self._project_names = {p.id: p.name for p in self._projects}
        elif table == ACTIVITY_LOGS:
            self._activity_logs = tuple(
                await uow.activity_logs.list_recent(self.activity_log_limit)
            )
        elif table == CHAT_CHANNELS:
            self._chat_channels = tuple(await uow.chat.list_channels())
        elif table == CHAT_MESSAGES:
            self._chat_messages = tuple(
                await uow.chat.list_recent_messages(self.chat_message_limit)
            )

    # Notification

    def subscribe(self, listener: CacheListener) -> Callable[[], None]:
        """Register listener; return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def notify(self, tables: Iterable[str]) -> None:
        """Call every listener with tables. A failing listener does not stop the others."""
        changed = frozenset(tables)
        for listener in list(self._listeners):
            try:
                result = listener(changed)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Cache listener %r failed", listener)

    # Snapshot accessors

    def tasks(self) -> tuple[TaskResult, ...]:
        return self._tasks

    def board_tasks(self) -> tuple[BoardTaskResult, ...]:
        return self._board_tasks

    def weekly_history(self) -> tuple[WeeklyHistoryResult, ...]:
        """History entries, newest first."""
        return self._weekly_history

    def users(self) -> tuple[UserResult, ...]:
        return self._users

    def sectors(self) -> tuple[SectorResult, ...]:
        return self._sectors

    def projects(self) -> tuple[ProjectResult, ...]:
        return self._projects

    def activity_logs(self) -> tuple[ActivityLogResult, ...]:
        """Latest activity entries, newest first."""
        return self._activity_logs

    def chat_channels(self) -> tuple[ChatChannelResult, ...]:
        return self._chat_channels

    def chat_messages(self, channel_id: str | None = None) -> tuple[ChatMessageResult, ...]:
        """Latest messages, oldest first; only channel_id's when given."""
        if channel_id is None:
            return self._chat_messages
        return tuple(m for m in self._chat_messages if m.channel_id == channel_id)

    def get_task(self, task_id: str) -> TaskResult | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def get_board_task(self, board_task_id: str) -> BoardTaskResult | None:
        return next((b for b in self._board_tasks if b.id == board_task_id), None)

    def get_history(self, history_id: str) -> WeeklyHistoryResult | None:
        return next((h for h in self._weekly_history if h.id == history_id), None)

    def get_user(self, user_id: str) -> UserResult | None:
        return next((u for u in self._users if u.id == user_id), None)

    def get_project(self, project_id: str) -> ProjectResult | None:
        return next((p for p in self._projects if p.id == project_id), None)

    def get_sector(self, sector_id: str) -> SectorResult | None:
        return next((s for s in self._sectors if s.id == sector_id), None)

    def get_channel(self, channel_id: str) -> ChatChannelResult | None:
        return next((c for c in self._chat_channels if c.id == channel_id), None)

    # Name resolution (never raises)

    def resolve_project_name(self, project_id: str) -> str:
        return self._project_names.get(project_id, project_id)

    def resolve_user_name(self, user_id: str) -> str:
        return self._user_names.get(user_id, user_id)
