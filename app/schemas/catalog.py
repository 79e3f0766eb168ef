"""Reference data API schemas: profiles, sectors, projects."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import UserRole


class UserCreateRequest(BaseModel):
    """Request body for creating a profile (admin)."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    role: UserRole = UserRole.USER
    sector: str = Field(default="", max_length=255)
    avatar: str = Field(default="", max_length=2000)


class ProfileUpdateRequest(BaseModel):
    """Self-service profile update (partial)."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    avatar: str | None = Field(default=None, max_length=2000)
    sector: str | None = Field(default=None, max_length=255)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    avatar: str
    role: UserRole
    sector: str
    is_admin: bool


class SectorCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class SectorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class ProjectCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    sector_id: str = Field(..., min_length=1)


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    sector_id: str
