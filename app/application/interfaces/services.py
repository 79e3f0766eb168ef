"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.report import WeeklyReport
    from app.application.interfaces.repositories import IUnitOfWork

UnitOfWorkFactory = Callable[[], "IUnitOfWork"]
"""Zero-argument callable returning a fresh unit of work."""

CacheListener = Callable[[frozenset[str]], "Awaitable[None] | None"]
"""Change listener: receives the names of the refreshed tables."""


# Generative AI completion interface
class ICompletionClient(Protocol):
    """Protocol for the external generative-AI chat completion call."""

    async def complete(self, system_instruction: str, prompt: str) -> str:
        """Return the model reply text for prompt.

        Raises any exception on transport or provider failure; the caller
        decides how to surface it.
        """


# Report renderer interface
class IReportRenderer(Protocol):
    """Protocol for rendering a weekly report to a downloadable file."""

    media_type: str

    def render(self, report: WeeklyReport) -> bytes:
        """Return the encoded file."""

    def filename(self, report: WeeklyReport) -> str:
        """Return the download file name."""
