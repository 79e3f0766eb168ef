"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IActivityLogRepository,
    IBoardTaskRepository,
    IChatRepository,
    IProjectRepository,
    ISectorRepository,
    ITaskRepository,
    IUnitOfWork,
    IUserRepository,
    IWeeklyHistoryRepository,
)
from app.application.interfaces.services import (
    CacheListener,
    ICompletionClient,
    IReportRenderer,
    UnitOfWorkFactory,
)

__all__ = [
    "CacheListener",
    "IActivityLogRepository",
    "IBoardTaskRepository",
    "IChatRepository",
    "ICompletionClient",
    "IProjectRepository",
    "IReportRenderer",
    "ISectorRepository",
    "ITaskRepository",
    "IUnitOfWork",
    "IUserRepository",
    "IWeeklyHistoryRepository",
    "UnitOfWorkFactory",
]
