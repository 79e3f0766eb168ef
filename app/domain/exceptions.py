"""Domain exceptions for the Vontta application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class VonttaException(Exception):
    """Base exception for all Vontta application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(VonttaException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(VonttaException):
    """Raised when the caller identity is missing or unknown."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(VonttaException):
    """Raised when the user lacks required permissions for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'task', 'weekly_history').
            action: Optional action that was attempted (e.g. 'update', 'close').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(VonttaException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'weekly_history').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ReferenceInUseException(VonttaException):
    """Raised when deleting a sector, project or profile that other rows still reference."""

    def __init__(self, resource_type: str, resource_id: str, message: str) -> None:
        super().__init__(
            message,
            "REFERENCE_IN_USE",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ArchiveWriteException(VonttaException):
    """Raised when the weekly history record could not be written.

    Live tasks and board tasks are untouched when this is raised.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Failed to save weekly history: {reason}",
            "ARCHIVE_WRITE_FAILED",
            {"reason": reason},
        )


class ChannelLockedException(VonttaException):
    """Raised when a chat channel is locked by another user's pending request."""

    def __init__(self, channel_id: str, locked_by: str | None) -> None:
        super().__init__(
            "Chat channel is locked by another user",
            "CHANNEL_LOCKED",
            {"channel_id": channel_id, "locked_by": locked_by},
        )


class AssistantUnavailableException(VonttaException):
    """Raised when the AI assistant is not configured."""

    def __init__(self) -> None:
        super().__init__(
            "Chat unavailable: AI API key is not configured",
            "ASSISTANT_UNAVAILABLE",
        )


class AssistantRequestException(VonttaException):
    """Raised by the completion client when the AI provider call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(
            message,
            "ASSISTANT_REQUEST_FAILED",
            {"status_code": status_code} if status_code is not None else {},
        )
        self.status_code = status_code
