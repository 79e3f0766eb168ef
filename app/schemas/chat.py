"""Team chat API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import ChatRole


class ChatChannelCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ChatChannelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    is_locked: bool
    locked_by: str | None
    created_at: datetime


class ChatMessageCreateRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=4000)


class ChatMessageResponse(BaseModel):
    """Chat message; user_id is null for assistant replies."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    channel_id: str
    user_id: str | None
    role: ChatRole
    content: str
    created_at: datetime
