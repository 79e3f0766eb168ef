"""Profile repository (collaborators and admins)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.catalog import UserCreate, UserResult
from app.domain.enums import UserRole
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.profile import Profile
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(p: Profile) -> UserResult:
    """Map Profile ORM to UserResult DTO."""
    return UserResult(
        id=p.id,
        name=p.name,
        email=p.email,
        avatar=p.avatar,
        role=UserRole(p.role),
        sector=p.sector,
    )


class ProfileRepository(BaseRepository[Profile]):
    """Profile repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Profile)

    async def list_all(self) -> list[UserResult]:
        return [_to_result(p) for p in await self.list_models(Profile.name, Profile.id)]

    async def get_by_id(self, user_id: str) -> UserResult | None:
        row = await self.get_model(user_id)
        return _to_result(row) if row else None

    async def create(self, data: UserCreate) -> UserResult:
        row = Profile(
            name=data.name,
            email=data.email,
            avatar=data.avatar,
            role=data.role.value,
            sector=data.sector,
        )
        return _to_result(await self.add(row))

    async def update(self, user: UserResult) -> UserResult:
        """Persist name, avatar and sector (role and email are not self-editable)."""
        row = await self.get_model(user.id)
        if row is None:
            raise ResourceNotFoundException("user", user.id)
        row.name = user.name
        row.avatar = user.avatar
        row.sector = user.sector
        return _to_result(await self.save(row))
