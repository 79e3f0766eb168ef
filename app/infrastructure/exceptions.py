"""Infrastructure exceptions for external operations.

Extend VonttaException so presentation can map them to HTTP responses
consistently.
"""

from app.domain.exceptions import VonttaException


class ReportRenderException(VonttaException):
    """Raised when a weekly report file could not be produced."""

    def __init__(self, history_id: str, reason: str) -> None:
        super().__init__(
            f"Failed to render report for history {history_id}",
            "REPORT_RENDER_ERROR",
            {"history_id": history_id, "reason": reason},
        )
