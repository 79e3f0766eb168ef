"""Application layer: DTOs, interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, unit of work,
report renderer, completion client).
"""

from app.application.interfaces import (
    ICompletionClient,
    IReportRenderer,
    IUnitOfWork,
)
from app.application.services import StateCache
from app.application.use_cases import (
    BoardTaskService,
    CatalogService,
    ChatService,
    CloseWeekUseCase,
    GetDashboardStatsUseCase,
    HistoryService,
    TaskService,
)

__all__ = [
    "BoardTaskService",
    "CatalogService",
    "ChatService",
    "CloseWeekUseCase",
    "GetDashboardStatsUseCase",
    "HistoryService",
    "ICompletionClient",
    "IReportRenderer",
    "IUnitOfWork",
    "StateCache",
    "TaskService",
]
