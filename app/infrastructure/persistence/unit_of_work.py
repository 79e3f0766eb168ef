"""SQL unit of work: one session and transaction, one repository per table."""

from __future__ import annotations

from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.infrastructure.persistence.database import get_session_factory
from app.infrastructure.persistence.repositories import (
    ActivityLogRepository,
    BoardTaskRepository,
    ChatRepository,
    ProfileRepository,
    ProjectRepository,
    SectorRepository,
    TaskRepository,
    WeeklyHistoryRepository,
)


class SqlUnitOfWork:
    """Implements IUnitOfWork.

    ``async with SqlUnitOfWork() as uow`` opens a session and begins a
    transaction; it commits when the block exits normally and rolls back when
    it raises. Repositories are only valid inside the block.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SqlUnitOfWork:
        factory = self._session_factory or get_session_factory()
        session = factory()
        await session.begin()
        self._session = session
        self.tasks = TaskRepository(session)
        self.board_tasks = BoardTaskRepository(session)
        self.weekly_history = WeeklyHistoryRepository(session)
        self.activity_logs = ActivityLogRepository(session)
        self.users = ProfileRepository(session)
        self.sectors = SectorRepository(session)
        self.projects = ProjectRepository(session)
        self.chat = ChatRepository(session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self._session
        if session is None:
            return
        self._session = None
        try:
            if exc_type is None:
                await session.commit()
            else:
                await session.rollback()
        finally:
            await session.close()
