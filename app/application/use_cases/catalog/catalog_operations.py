"""Catalog operations: sectors, projects and profiles.

Creation and deletion are admin actions (enforced at the API boundary).
Deleting an entity that live rows still reference is refused.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from app.application.dtos.catalog import (
    ProfilePatch,
    ProjectResult,
    SectorResult,
    UserCreate,
    UserResult,
)
from app.application.services.state_cache import PROJECTS, SECTORS, USERS
from app.domain.exceptions import (
    ReferenceInUseException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.utils.generators import default_avatar_url

if TYPE_CHECKING:
    from app.application.interfaces.services import UnitOfWorkFactory
    from app.application.services.state_cache import StateCache


def _required(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationException(f"{field} must not be empty", field=field)
    return value


class CatalogService:
    """Reference data writes; each refreshes the affected cached table."""

    def __init__(self, uow_factory: "UnitOfWorkFactory", cache: "StateCache") -> None:
        self._uow_factory = uow_factory
        self._cache = cache

    # Sectors

    async def create_sector(self, name: str) -> SectorResult:
        name = _required(name, "name")
        if any(s.name.casefold() == name.casefold() for s in self._cache.sectors()):
            raise ValidationException(f"Sector already exists: {name}", field="name")
        async with self._uow_factory() as uow:
            sector = await uow.sectors.create(name)
        await self._cache.refresh(SECTORS)
        return sector

    async def delete_sector(self, sector_id: str) -> None:
        async with self._uow_factory() as uow:
            if await uow.sectors.get_by_id(sector_id) is None:
                raise ResourceNotFoundException("sector", sector_id)
            if await uow.projects.count_by_sector(sector_id):
                raise ReferenceInUseException(
                    "sector",
                    sector_id,
                    "Cannot delete this sector: projects are still linked to it",
                )
            await uow.sectors.delete(sector_id)
        await self._cache.refresh(SECTORS)

    # Projects

    async def create_project(self, name: str, sector_id: str) -> ProjectResult:
        name = _required(name, "name")
        async with self._uow_factory() as uow:
            if await uow.sectors.get_by_id(sector_id) is None:
                raise ResourceNotFoundException("sector", sector_id)
            project = await uow.projects.create(name, sector_id)
        await self._cache.refresh(PROJECTS)
        return project

    async def delete_project(self, project_id: str) -> None:
        async with self._uow_factory() as uow:
            if await uow.projects.get_by_id(project_id) is None:
                raise ResourceNotFoundException("project", project_id)
            if await uow.tasks.count_by_project(project_id):
                raise ReferenceInUseException(
                    "project",
                    project_id,
                    "Cannot delete this project: tasks are still linked to it",
                )
            await uow.projects.delete(project_id)
        await self._cache.refresh(PROJECTS)

    # Profiles

    async def create_user(self, data: UserCreate) -> UserResult:
        name = _required(data.name, "name")
        email = _required(data.email, "email").lower()
        if "@" not in email:
            raise ValidationException("Invalid email address", field="email")
        if any(u.email.lower() == email for u in self._cache.users()):
            raise ValidationException(f"Email already registered: {email}", field="email")
        data = replace(
            data,
            name=name,
            email=email,
            avatar=data.avatar or default_avatar_url(name),
        )
        async with self._uow_factory() as uow:
            user = await uow.users.create(data)
        await self._cache.refresh(USERS)
        return user

    async def delete_user(self, actor: UserResult, user_id: str) -> None:
        if actor.id == user_id:
            raise ValidationException("You cannot delete your own profile", field="user_id")
        async with self._uow_factory() as uow:
            if await uow.users.get_by_id(user_id) is None:
                raise ResourceNotFoundException("user", user_id)
            if await uow.tasks.count_by_collaborator(user_id):
                raise ReferenceInUseException(
                    "user",
                    user_id,
                    "Cannot delete this user: tasks are still assigned to them",
                )
            await uow.users.delete(user_id)
        await self._cache.refresh(USERS)

    async def update_profile(self, actor: UserResult, patch: ProfilePatch) -> UserResult:
        """Self-service update of name, avatar and sector."""
        if patch.name is not None:
            patch = replace(patch, name=_required(patch.name, "name"))
        async with self._uow_factory() as uow:
            current = await uow.users.get_by_id(actor.id)
            if current is None:
                raise ResourceNotFoundException("user", actor.id)
            user = await uow.users.update(patch.apply_to(current))
        await self._cache.refresh(USERS)
        return user
