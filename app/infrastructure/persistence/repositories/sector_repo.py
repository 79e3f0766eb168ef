"""Sector and project repositories (reference data)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.catalog import ProjectResult, SectorResult
from app.infrastructure.persistence.models.sector import Project, Sector
from app.infrastructure.persistence.repositories.base import BaseRepository


class SectorRepository(BaseRepository[Sector]):
    """Sector repository. Implements ISectorRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Sector)

    @staticmethod
    def _to_result(s: Sector) -> SectorResult:
        return SectorResult(id=s.id, name=s.name)

    async def list_all(self) -> list[SectorResult]:
        return [self._to_result(s) for s in await self.list_models(Sector.name)]

    async def get_by_id(self, sector_id: str) -> SectorResult | None:
        row = await self.get_model(sector_id)
        return self._to_result(row) if row else None

    async def create(self, name: str) -> SectorResult:
        return self._to_result(await self.add(Sector(name=name)))


class ProjectRepository(BaseRepository[Project]):
    """Project repository. Implements IProjectRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Project)

    @staticmethod
    def _to_result(p: Project) -> ProjectResult:
        return ProjectResult(id=p.id, name=p.name, sector_id=p.sector_id)

    async def list_all(self) -> list[ProjectResult]:
        return [self._to_result(p) for p in await self.list_models(Project.name)]

    async def get_by_id(self, project_id: str) -> ProjectResult | None:
        row = await self.get_model(project_id)
        return self._to_result(row) if row else None

    async def create(self, name: str, sector_id: str) -> ProjectResult:
        return self._to_result(await self.add(Project(name=name, sector_id=sector_id)))

    async def count_by_sector(self, sector_id: str) -> int:
        return await self.count_where(Project.sector_id == sector_id)
