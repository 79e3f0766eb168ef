"""DTOs for reference data: profiles, sectors, projects."""

from __future__ import annotations

from dataclasses import dataclass, replace

from app.domain.enums import UserRole


@dataclass(frozen=True)
class UserResult:
    """Profile read-model (collaborator or admin)."""

    id: str
    name: str
    email: str
    avatar: str
    role: UserRole
    sector: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class UserCreate:
    name: str
    email: str
    role: UserRole = UserRole.USER
    sector: str = ""
    avatar: str = ""


@dataclass(frozen=True)
class ProfilePatch:
    """Self-service profile update (None = keep current value)."""

    name: str | None = None
    avatar: str | None = None
    sector: str | None = None

    def apply_to(self, user: UserResult) -> UserResult:
        values = {k: v for k, v in self.__dict__.items() if v is not None}
        return replace(user, **values)


@dataclass(frozen=True)
class SectorResult:
    id: str
    name: str


@dataclass(frozen=True)
class ProjectResult:
    id: str
    name: str
    sector_id: str
