"""Weekly history use cases (close week, rename, report)."""

from app.application.use_cases.history.close_week import CloseWeekUseCase
from app.application.use_cases.history.history_operations import HistoryService

__all__ = [
    "CloseWeekUseCase",
    "HistoryService",
]
