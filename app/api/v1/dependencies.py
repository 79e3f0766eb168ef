"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the state cache, the unit-of-work factory, the
acting profile and the application services. All services are built from
infrastructure implementations here; routes depend only on these
dependencies, not on infra directly.

Identity comes from the profile id in the ``X-User-ID`` header (set by the
authenticating gateway) and is resolved against the cached profiles.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.dtos.catalog import UserResult
from app.application.interfaces.services import (
    ICompletionClient,
    IReportRenderer,
    UnitOfWorkFactory,
)
from app.application.services.activity_log_service import ActivityLogService
from app.application.services.state_cache import StateCache
from app.application.use_cases.analytics import GetDashboardStatsUseCase
from app.application.use_cases.catalog import CatalogService
from app.application.use_cases.chat import ChatService
from app.application.use_cases.history import CloseWeekUseCase, HistoryService
from app.application.use_cases.tasks import BoardTaskService, TaskService
from app.core.config import Settings, get_settings
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.infrastructure.export import SpreadsheetReportRenderer
from app.shared.utils.datetime import get_zone


def get_state_cache(request: Request) -> StateCache:
    """State cache loaded in lifespan (app.state.state_cache)."""
    return request.app.state.state_cache


def get_uow_factory(request: Request) -> UnitOfWorkFactory:
    """Unit-of-work factory set in lifespan (app.state.uow_factory)."""
    return request.app.state.uow_factory


def get_completion_client(request: Request) -> ICompletionClient | None:
    """AI completion client, or None when no key is configured."""
    return getattr(request.app.state, "completion_client", None)


def get_report_renderer() -> IReportRenderer:
    return SpreadsheetReportRenderer()


SettingsDep = Annotated[Settings, Depends(get_settings)]
CacheDep = Annotated[StateCache, Depends(get_state_cache)]
UowFactoryDep = Annotated[UnitOfWorkFactory, Depends(get_uow_factory)]


# Identity


def get_current_user(request: Request, cache: CacheDep, settings: SettingsDep) -> UserResult:
    """Resolve the acting profile from the identity header.

    Raises:
        AuthenticationException: Header missing or profile unknown (401).
    """
    user_id = (request.headers.get(settings.user_header_name) or "").strip()
    if not user_id:
        raise AuthenticationException(f"Missing {settings.user_header_name} header")
    user = cache.get_user(user_id)
    if user is None:
        raise AuthenticationException("Unknown profile")
    return user


CurrentUser = Annotated[UserResult, Depends(get_current_user)]


def require_admin(user: CurrentUser) -> UserResult:
    """Acting profile, which must have the admin role (403 otherwise)."""
    if not user.is_admin:
        raise AuthorizationException(message="Admin role required")
    return user


AdminUser = Annotated[UserResult, Depends(require_admin)]


# Services


def get_activity_log_service(
    uow_factory: UowFactoryDep, cache: CacheDep
) -> ActivityLogService:
    return ActivityLogService(uow_factory, cache)


ActivityLogDep = Annotated[ActivityLogService, Depends(get_activity_log_service)]


def get_task_service(
    uow_factory: UowFactoryDep, cache: CacheDep, activity_log: ActivityLogDep
) -> TaskService:
    return TaskService(uow_factory, cache, activity_log)


def get_board_task_service(
    uow_factory: UowFactoryDep, cache: CacheDep, activity_log: ActivityLogDep
) -> BoardTaskService:
    return BoardTaskService(uow_factory, cache, activity_log)


def get_close_week_use_case(
    uow_factory: UowFactoryDep,
    cache: CacheDep,
    activity_log: ActivityLogDep,
    settings: SettingsDep,
) -> CloseWeekUseCase:
    return CloseWeekUseCase(
        uow_factory, cache, activity_log, get_zone(settings.planning_timezone)
    )


def get_history_service(uow_factory: UowFactoryDep, cache: CacheDep) -> HistoryService:
    return HistoryService(uow_factory, cache)


def get_catalog_service(uow_factory: UowFactoryDep, cache: CacheDep) -> CatalogService:
    return CatalogService(uow_factory, cache)


def get_chat_service(
    uow_factory: UowFactoryDep,
    cache: CacheDep,
    settings: SettingsDep,
    completion_client: Annotated[ICompletionClient | None, Depends(get_completion_client)],
) -> ChatService:
    return ChatService(
        uow_factory, cache, completion_client, history_limit=settings.chat_history_limit
    )


def get_dashboard_stats_use_case(
    cache: CacheDep, settings: SettingsDep
) -> GetDashboardStatsUseCase:
    return GetDashboardStatsUseCase(
        cache,
        capacity_hours=settings.weekly_capacity_hours,
        elevated_hours=settings.elevated_load_hours,
        top_projects_limit=settings.top_projects_limit,
    )
