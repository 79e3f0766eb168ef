"""Base repository: generic lookups, inserts, deletes and counts."""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository over one table keyed by ``id``.

    Subclasses expose DTO-returning methods (ports) and use these helpers for
    the ORM side; ORM rows never leave the repository.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model(self, entity_id: str) -> ModelType | None:
        """Return a single row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def list_models(self, *order_by: Any) -> list[ModelType]:
        """Return every row, ordered by the given columns."""
        stmt = select(self.model)
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new row and reload server-generated columns."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def save(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached row and reload it."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, entity_id: str) -> bool:
        """Delete one row by primary key. Return False when it does not exist."""
        obj = await self.get_model(entity_id)
        if obj is None:
            return False
        await self.db.delete(obj)
        await self.db.flush()
        return True

    async def delete_by_ids(self, entity_ids: Sequence[str]) -> int:
        """Delete exactly the given ids (never a blanket delete). Return rows removed."""
        if not entity_ids:
            return 0
        model: Any = self.model
        result = await self.db.execute(
            delete(self.model).where(model.id.in_(list(entity_ids)))
        )
        return result.rowcount or 0

    async def count_where(self, *criteria: Any) -> int:
        """Return number of rows matching criteria."""
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())
