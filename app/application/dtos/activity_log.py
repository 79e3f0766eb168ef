"""DTOs for the activity log (append-only)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import ActivityAction


@dataclass(frozen=True)
class ActivityLogCreate:
    """Input for appending one activity log entry."""

    user_id: str
    action: ActivityAction
    description: str


@dataclass(frozen=True)
class ActivityLogResult:
    """Activity log entry read-model."""

    id: str
    user_id: str
    action: ActivityAction
    description: str
    timestamp: datetime
