"""Domain enumerations for the Vontta application.

Enums represent fixed sets of domain values. Stored values match the labels
the team uses day to day (Portuguese), so persisted rows and exported reports
read the same.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Status of a logged task."""

    PENDING = "Pendente"
    IN_PROGRESS = "Em Andamento"
    COMPLETED = "Concluído"
    BLOCKED = "Bloqueado"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class TaskPriority(str, Enum):
    """Priority of a logged task."""

    LOW = "Baixa"
    MEDIUM = "Média"
    HIGH = "Alta"
    CRITICAL = "Crítica"


class BoardStatus(str, Enum):
    """Kanban column of a board task. Any column may move to any other."""

    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"
    CANCELED = "CANCELED"


class UserRole(str, Enum):
    """Profile role. Admins may act on any task and run week closing."""

    ADMIN = "admin"
    USER = "user"


class ActivityAction(str, Enum):
    """Kind of activity log entry."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class LoadTier(str, Enum):
    """Collaborator weekly load classification against the capacity threshold."""

    NORMAL = "normal"
    ELEVATED = "elevated"
    OVER_CAPACITY = "over_capacity"


class ChatRole(str, Enum):
    """Author role of a chat message."""

    USER = "user"
    MODEL = "model"
