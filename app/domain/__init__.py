"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    ActivityAction,
    BoardStatus,
    ChatRole,
    LoadTier,
    TaskPriority,
    TaskStatus,
    UserRole,
)
from app.domain.exceptions import (
    ArchiveWriteException,
    AssistantRequestException,
    AssistantUnavailableException,
    AuthenticationException,
    AuthorizationException,
    ChannelLockedException,
    ReferenceInUseException,
    ResourceNotFoundException,
    ValidationException,
    VonttaException,
)
from app.domain.value_objects import Duration

__all__ = [
    # Enums
    "ActivityAction",
    "BoardStatus",
    "ChatRole",
    "LoadTier",
    "TaskPriority",
    "TaskStatus",
    "UserRole",
    # Exceptions
    "ArchiveWriteException",
    "AssistantRequestException",
    "AssistantUnavailableException",
    "AuthenticationException",
    "AuthorizationException",
    "ChannelLockedException",
    "ReferenceInUseException",
    "ResourceNotFoundException",
    "ValidationException",
    "VonttaException",
    # Value objects
    "Duration",
]
