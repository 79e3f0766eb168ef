"""DTOs for team chat channels and messages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import ChatRole

DEFAULT_CHANNEL_NAME = "Geral"


@dataclass(frozen=True)
class ChatChannelResult:
    id: str
    name: str
    is_locked: bool
    locked_by: str | None
    created_at: datetime


@dataclass(frozen=True)
class ChatMessageResult:
    """Chat message. ``user_id`` is None for assistant replies."""

    id: str
    channel_id: str
    user_id: str | None
    role: ChatRole
    content: str
    created_at: datetime
