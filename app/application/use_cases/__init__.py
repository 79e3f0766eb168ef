"""Application use cases: one entry point per workflow."""

from app.application.use_cases.analytics import GetDashboardStatsUseCase
from app.application.use_cases.catalog import CatalogService
from app.application.use_cases.chat import ChatService
from app.application.use_cases.history import CloseWeekUseCase, HistoryService
from app.application.use_cases.tasks import BoardTaskService, TaskService

__all__ = [
    "BoardTaskService",
    "CatalogService",
    "ChatService",
    "CloseWeekUseCase",
    "GetDashboardStatsUseCase",
    "HistoryService",
    "TaskService",
]
