"""Reference data API: sectors, projects and profiles."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import (
    AdminUser,
    CacheDep,
    CurrentUser,
    get_catalog_service,
)
from app.application.dtos.catalog import ProfilePatch, UserCreate
from app.application.use_cases.catalog import CatalogService
from app.core.limiter import limit_writes
from app.schemas.catalog import (
    ProfileUpdateRequest,
    ProjectCreateRequest,
    ProjectResponse,
    SectorCreateRequest,
    SectorResponse,
    UserCreateRequest,
    UserResponse,
)

router = APIRouter()

CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


# Sectors


@router.get("/sectors", response_model=list[SectorResponse])
async def list_sectors(cache: CacheDep, _: CurrentUser):
    return [SectorResponse.model_validate(s) for s in cache.sectors()]


@router.post("/sectors", response_model=SectorResponse, status_code=201)
@limit_writes
async def create_sector(
    request: Request,
    body: SectorCreateRequest,
    _: AdminUser,
    catalog_svc: CatalogServiceDep,
):
    return SectorResponse.model_validate(await catalog_svc.create_sector(body.name))


@router.delete("/sectors/{sector_id}", status_code=204)
@limit_writes
async def delete_sector(
    request: Request,
    sector_id: str,
    _: AdminUser,
    catalog_svc: CatalogServiceDep,
):
    """Delete a sector; 409 while projects still reference it."""
    await catalog_svc.delete_sector(sector_id)
    return Response(status_code=204)


# Projects


@router.get("/projects", response_model=list[ProjectResponse])
async def list_projects(cache: CacheDep, _: CurrentUser):
    return [ProjectResponse.model_validate(p) for p in cache.projects()]


@router.post("/projects", response_model=ProjectResponse, status_code=201)
@limit_writes
async def create_project(
    request: Request,
    body: ProjectCreateRequest,
    _: AdminUser,
    catalog_svc: CatalogServiceDep,
):
    created = await catalog_svc.create_project(body.name, body.sector_id)
    return ProjectResponse.model_validate(created)


@router.delete("/projects/{project_id}", status_code=204)
@limit_writes
async def delete_project(
    request: Request,
    project_id: str,
    _: AdminUser,
    catalog_svc: CatalogServiceDep,
):
    """Delete a project; 409 while tasks still reference it."""
    await catalog_svc.delete_project(project_id)
    return Response(status_code=204)


# Profiles


@router.get("/users", response_model=list[UserResponse])
async def list_users(cache: CacheDep, _: CurrentUser):
    return [UserResponse.model_validate(u) for u in cache.users()]


@router.get("/users/me", response_model=UserResponse)
async def get_me(actor: CurrentUser):
    return UserResponse.model_validate(actor)


@router.patch("/users/me", response_model=UserResponse)
@limit_writes
async def update_me(
    request: Request,
    body: ProfileUpdateRequest,
    actor: CurrentUser,
    catalog_svc: CatalogServiceDep,
):
    """Update the caller's own name, avatar or sector."""
    updated = await catalog_svc.update_profile(
        actor, ProfilePatch(name=body.name, avatar=body.avatar, sector=body.sector)
    )
    return UserResponse.model_validate(updated)


@router.post("/users", response_model=UserResponse, status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    _: AdminUser,
    catalog_svc: CatalogServiceDep,
):
    created = await catalog_svc.create_user(
        UserCreate(
            name=body.name,
            email=body.email,
            role=body.role,
            sector=body.sector,
            avatar=body.avatar,
        )
    )
    return UserResponse.model_validate(created)


@router.delete("/users/{user_id}", status_code=204)
@limit_writes
async def delete_user(
    request: Request,
    user_id: str,
    actor: AdminUser,
    catalog_svc: CatalogServiceDep,
):
    """Delete a profile; admins cannot delete themselves, 409 while tasks reference it."""
    await catalog_svc.delete_user(actor, user_id)
    return Response(status_code=204)
