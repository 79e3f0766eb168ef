"""Task and kanban board use cases."""

from app.application.use_cases.tasks.board_task_operations import BoardTaskService
from app.application.use_cases.tasks.task_operations import TaskService

__all__ = [
    "BoardTaskService",
    "TaskService",
]
