"""In-memory unit of work implementing the repository ports.

``InMemoryStore`` holds committed rows; each ``FakeUnitOfWork`` works on a copy
and writes it back only when its block exits without an exception, so
transaction boundaries behave like the SQL unit of work.

Failures are injected per operation name (``"<repo>.<method>"``)::

    store.fail_on["weekly_history.create"] = RuntimeError("disk full")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta

from app.application.dtos.activity_log import ActivityLogCreate, ActivityLogResult
from app.application.dtos.board_task import BoardTaskCreate, BoardTaskResult
from app.application.dtos.catalog import ProjectResult, SectorResult, UserCreate, UserResult
from app.application.dtos.chat import ChatChannelResult, ChatMessageResult
from app.application.dtos.task import TaskCreate, TaskResult
from app.application.dtos.weekly_history import WeeklyHistoryCreate, WeeklyHistoryResult
from app.domain.enums import BoardStatus, ChatRole, TaskPriority, TaskStatus
from app.domain.exceptions import ResourceNotFoundException

TABLES = (
    "tasks",
    "board_tasks",
    "weekly_history",
    "activity_logs",
    "users",
    "sectors",
    "projects",
    "chat_channels",
    "chat_messages",
)

BASE_TIME = datetime.fromisoformat("2026-10-19T12:00:00+00:00")


class InMemoryStore:
    """Committed state shared by every unit of work created from it."""

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, object]] = {name: {} for name in TABLES}
        self.fail_on: dict[str, Exception] = {}
        self.calls: list[str] = []
        self.commits = 0
        self._seq = 0

    def next_id(self, prefix: str) -> str:
        self._seq += 1
        return f"{prefix}{self._seq}"

    def tick(self) -> datetime:
        """Monotonic fake clock: one second per call."""
        self._seq += 1
        return BASE_TIME + timedelta(seconds=self._seq)

    def uow(self) -> FakeUnitOfWork:
        return FakeUnitOfWork(self)

    __call__ = uow

    def rows(self, table: str) -> list:
        return list(self.tables[table].values())


class _FakeRepo:
    name = ""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow
        self._store = uow.store

    def _check(self, op: str) -> None:
        key = f"{self.name}.{op}"
        self._store.calls.append(key)
        exc = self._store.fail_on.get(key)
        if exc is not None:
            raise exc

    @property
    def rows(self) -> dict:
        return self._uow.working[self.name]


class FakeTaskRepository(_FakeRepo):
    name = "tasks"

    async def list_all(self) -> list[TaskResult]:
        self._check("list_all")
        return list(self.rows.values())

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        return self.rows.get(task_id)

    async def create(self, data: TaskCreate, sector: str) -> TaskResult:
        self._check("create")
        task = TaskResult(
            id=self._store.next_id("t"),
            project_id=data.project_id,
            collaborator_id=data.collaborator_id,
            sector=sector,
            planned_activity=data.planned_activity,
            delivered_activity=data.delivered_activity,
            priority=data.priority,
            status=data.status,
            due_date=data.due_date,
            hours_dedicated=data.hours_dedicated,
            notes=data.notes,
            updated_at=self._store.tick(),
        )
        self.rows[task.id] = task
        return task

    async def update(self, task: TaskResult) -> TaskResult:
        self._check("update")
        if task.id not in self.rows:
            raise ResourceNotFoundException("task", task.id)
        saved = replace(task, updated_at=self._store.tick())
        self.rows[task.id] = saved
        return saved

    async def delete(self, task_id: str) -> bool:
        self._check("delete")
        return self.rows.pop(task_id, None) is not None

    async def delete_by_ids(self, task_ids: Sequence[str]) -> int:
        self._check("delete_by_ids")
        return sum(1 for i in task_ids if self.rows.pop(i, None) is not None)

    async def count_by_project(self, project_id: str) -> int:
        return sum(1 for t in self.rows.values() if t.project_id == project_id)

    async def count_by_collaborator(self, user_id: str) -> int:
        return sum(1 for t in self.rows.values() if t.collaborator_id == user_id)


class FakeBoardTaskRepository(_FakeRepo):
    name = "board_tasks"

    async def list_all(self) -> list[BoardTaskResult]:
        self._check("list_all")
        return list(self.rows.values())

    async def get_by_id(self, board_task_id: str) -> BoardTaskResult | None:
        return self.rows.get(board_task_id)

    async def create(self, data: BoardTaskCreate) -> BoardTaskResult:
        self._check("create")
        board_task = BoardTaskResult(
            id=self._store.next_id("b"),
            title=data.title,
            description=data.description,
            start_date=data.start_date,
            end_date=data.end_date,
            member_ids=tuple(data.member_ids),
            status=data.status,
            subtasks=tuple(data.subtasks),
            updated_at=self._store.tick(),
        )
        self.rows[board_task.id] = board_task
        return board_task

    async def update(self, board_task: BoardTaskResult) -> BoardTaskResult:
        self._check("update")
        if board_task.id not in self.rows:
            raise ResourceNotFoundException("board_task", board_task.id)
        saved = replace(board_task, updated_at=self._store.tick())
        self.rows[board_task.id] = saved
        return saved

    async def delete(self, board_task_id: str) -> bool:
        self._check("delete")
        return self.rows.pop(board_task_id, None) is not None

    async def delete_by_ids(self, board_task_ids: Sequence[str]) -> int:
        self._check("delete_by_ids")
        return sum(1 for i in board_task_ids if self.rows.pop(i, None) is not None)


class FakeWeeklyHistoryRepository(_FakeRepo):
    name = "weekly_history"

    async def list_all(self) -> list[WeeklyHistoryResult]:
        self._check("list_all")
        return list(self.rows.values())

    async def get_by_id(self, history_id: str) -> WeeklyHistoryResult | None:
        return self.rows.get(history_id)

    async def create(self, data: WeeklyHistoryCreate) -> WeeklyHistoryResult:
        self._check("create")
        history = WeeklyHistoryResult(
            id=self._store.next_id("h"),
            title=None,
            start_date=data.start_date,
            end_date=data.end_date,
            total_hours=data.total_hours,
            tasks_completed=data.tasks_completed,
            tasks_pending=data.tasks_pending,
            tasks=tuple(data.tasks),
            board_tasks=tuple(data.board_tasks),
            created_at=data.created_at,
            timezone=data.timezone,
        )
        self.rows[history.id] = history
        return history

    async def update_title(
        self, history_id: str, title: str | None
    ) -> WeeklyHistoryResult | None:
        self._check("update_title")
        current = self.rows.get(history_id)
        if current is None:
            return None
        updated = replace(current, title=title)
        self.rows[history_id] = updated
        return updated


class FakeActivityLogRepository(_FakeRepo):
    name = "activity_logs"

    async def create(self, data: ActivityLogCreate) -> ActivityLogResult:
        self._check("create")
        entry = ActivityLogResult(
            id=self._store.next_id("a"),
            user_id=data.user_id,
            action=data.action,
            description=data.description,
            timestamp=self._store.tick(),
        )
        self.rows[entry.id] = entry
        return entry

    async def list_recent(self, limit: int) -> list[ActivityLogResult]:
        entries = sorted(self.rows.values(), key=lambda e: e.timestamp, reverse=True)
        return entries[:limit]


class FakeUserRepository(_FakeRepo):
    name = "users"

    async def list_all(self) -> list[UserResult]:
        return list(self.rows.values())

    async def get_by_id(self, user_id: str) -> UserResult | None:
        return self.rows.get(user_id)

    async def create(self, data: UserCreate) -> UserResult:
        self._check("create")
        user = UserResult(
            id=self._store.next_id("u"),
            name=data.name,
            email=data.email,
            avatar=data.avatar,
            role=data.role,
            sector=data.sector,
        )
        self.rows[user.id] = user
        return user

    async def update(self, user: UserResult) -> UserResult:
        self._check("update")
        self.rows[user.id] = user
        return user

    async def delete(self, user_id: str) -> bool:
        self._check("delete")
        return self.rows.pop(user_id, None) is not None


class FakeSectorRepository(_FakeRepo):
    name = "sectors"

    async def list_all(self) -> list[SectorResult]:
        return list(self.rows.values())

    async def get_by_id(self, sector_id: str) -> SectorResult | None:
        return self.rows.get(sector_id)

    async def create(self, name: str) -> SectorResult:
        self._check("create")
        sector = SectorResult(id=self._store.next_id("s"), name=name)
        self.rows[sector.id] = sector
        return sector

    async def delete(self, sector_id: str) -> bool:
        self._check("delete")
        return self.rows.pop(sector_id, None) is not None


class FakeProjectRepository(_FakeRepo):
    name = "projects"

    async def list_all(self) -> list[ProjectResult]:
        return list(self.rows.values())

    async def get_by_id(self, project_id: str) -> ProjectResult | None:
        return self.rows.get(project_id)

    async def create(self, name: str, sector_id: str) -> ProjectResult:
        self._check("create")
        project = ProjectResult(id=self._store.next_id("p"), name=name, sector_id=sector_id)
        self.rows[project.id] = project
        return project

    async def delete(self, project_id: str) -> bool:
        self._check("delete")
        return self.rows.pop(project_id, None) is not None

    async def count_by_sector(self, sector_id: str) -> int:
        return sum(1 for p in self.rows.values() if p.sector_id == sector_id)


class FakeChatRepository(_FakeRepo):
    name = "chat"

    @property
    def channels(self) -> dict:
        return self._uow.working["chat_channels"]

    @property
    def messages(self) -> dict:
        return self._uow.working["chat_messages"]

    async def list_channels(self) -> list[ChatChannelResult]:
        return list(self.channels.values())

    async def get_channel(
        self, channel_id: str, *, for_update: bool = False
    ) -> ChatChannelResult | None:
        if for_update:
            self._check("get_channel_for_update")
        return self.channels.get(channel_id)

    async def create_channel(self, name: str) -> ChatChannelResult:
        self._check("create_channel")
        channel = ChatChannelResult(
            id=self._store.next_id("c"),
            name=name,
            is_locked=False,
            locked_by=None,
            created_at=self._store.tick(),
        )
        self.channels[channel.id] = channel
        return channel

    async def delete_channel(self, channel_id: str) -> bool:
        self._check("delete_channel")
        if self.channels.pop(channel_id, None) is None:
            return False
        for message_id in [m.id for m in self.messages.values() if m.channel_id == channel_id]:
            del self.messages[message_id]
        return True

    async def set_lock(self, channel_id: str, locked_by: str | None) -> None:
        self._check("set_lock")
        channel = self.channels[channel_id]
        self.channels[channel_id] = replace(
            channel, is_locked=locked_by is not None, locked_by=locked_by
        )

    async def create_message(
        self, channel_id: str, user_id: str | None, role: ChatRole, content: str
    ) -> ChatMessageResult:
        self._check("create_message")
        message = ChatMessageResult(
            id=self._store.next_id("m"),
            channel_id=channel_id,
            user_id=user_id,
            role=role,
            content=content,
            created_at=self._store.tick(),
        )
        self.messages[message.id] = message
        return message

    async def list_recent_messages(self, limit: int) -> list[ChatMessageResult]:
        ordered = sorted(self.messages.values(), key=lambda m: m.created_at)
        return ordered[-limit:] if limit else []


class FakeUnitOfWork:
    """IUnitOfWork over an InMemoryStore (commit on success, discard on error)."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store
        self.working: dict[str, dict[str, object]] = {}
        self._snapshot: dict[str, dict[str, object]] = {}

    async def __aenter__(self) -> FakeUnitOfWork:
        self._snapshot = {name: dict(rows) for name, rows in self.store.tables.items()}
        self.working = {name: dict(rows) for name, rows in self.store.tables.items()}
        self.tasks = FakeTaskRepository(self)
        self.board_tasks = FakeBoardTaskRepository(self)
        self.weekly_history = FakeWeeklyHistoryRepository(self)
        self.activity_logs = FakeActivityLogRepository(self)
        self.users = FakeUserRepository(self)
        self.sectors = FakeSectorRepository(self)
        self.projects = FakeProjectRepository(self)
        self.chat = FakeChatRepository(self)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            return
        # Only tables this unit of work changed are written back.
        for name, rows in self.working.items():
            if rows != self._snapshot[name]:
                self.store.tables[name] = rows
        self.store.commits += 1


class FakeCompletionClient:
    """ICompletionClient double: records calls, returns a fixed reply or raises."""

    def __init__(self, reply: str = "Olá!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_instruction: str, prompt: str) -> str:
        self.calls.append((system_instruction, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


class StatusError(Exception):
    """Provider error carrying an HTTP status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"status {status_code}")
        self.status_code = status_code


def auth(user: UserResult) -> dict[str, str]:
    """Identity header for user."""
    return {"X-User-ID": user.id}


def make_task(**overrides: object) -> TaskResult:
    """TaskResult with sensible defaults; override any field."""
    values: dict[str, object] = {
        "id": "t-1",
        "project_id": "p-app",
        "collaborator_id": "u-carlos",
        "sector": "Desenvolvimento",
        "planned_activity": "Implementar login",
        "delivered_activity": "",
        "priority": TaskPriority.MEDIUM,
        "status": TaskStatus.PENDING,
        "due_date": None,
        "hours_dedicated": "00:00",
        "notes": "",
        "updated_at": BASE_TIME,
    }
    values.update(overrides)
    return TaskResult(**values)


def make_board_task(**overrides: object) -> BoardTaskResult:
    """BoardTaskResult with sensible defaults; override any field."""
    values: dict[str, object] = {
        "id": "b-1",
        "title": "Lançamento",
        "description": "",
        "start_date": None,
        "end_date": None,
        "member_ids": (),
        "status": BoardStatus.TODO,
        "subtasks": (),
        "updated_at": BASE_TIME,
    }
    values.update(overrides)
    return BoardTaskResult(**values)
