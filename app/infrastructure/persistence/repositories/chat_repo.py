"""Chat repository: channels and messages."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.chat import ChatChannelResult, ChatMessageResult
from app.domain.enums import ChatRole
from app.infrastructure.persistence.models.chat import ChatChannel, ChatMessage
from app.shared.utils.datetime import ensure_utc, utc_now


def _channel_to_result(c: ChatChannel) -> ChatChannelResult:
    return ChatChannelResult(
        id=c.id,
        name=c.name,
        is_locked=c.is_locked,
        locked_by=c.locked_by,
        created_at=ensure_utc(c.created_at),
    )


def _message_to_result(m: ChatMessage) -> ChatMessageResult:
    return ChatMessageResult(
        id=m.id,
        channel_id=m.channel_id,
        user_id=m.user_id,
        role=ChatRole(m.role),
        content=m.content,
        created_at=ensure_utc(m.created_at),
    )


class ChatRepository:
    """Chat repository. Implements IChatRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_channels(self) -> list[ChatChannelResult]:
        result = await self.db.execute(
            select(ChatChannel).order_by(ChatChannel.created_at, ChatChannel.id)
        )
        return [_channel_to_result(c) for c in result.scalars().all()]

    async def get_channel(
        self, channel_id: str, *, for_update: bool = False
    ) -> ChatChannelResult | None:
        """Return channel by ID; ``for_update`` holds a row lock until commit."""
        row = await self.db.get(ChatChannel, channel_id, with_for_update=for_update)
        return _channel_to_result(row) if row else None

    async def create_channel(self, name: str) -> ChatChannelResult:
        channel = ChatChannel(name=name, is_locked=False, created_at=utc_now())
        self.db.add(channel)
        await self.db.flush()
        return _channel_to_result(channel)

    async def delete_channel(self, channel_id: str) -> bool:
        """Delete channel and its messages (explicit delete; SQLite ignores FK cascades)."""
        await self.db.execute(delete(ChatMessage).where(ChatMessage.channel_id == channel_id))
        result = await self.db.execute(delete(ChatChannel).where(ChatChannel.id == channel_id))
        return bool(result.rowcount)

    async def set_lock(self, channel_id: str, locked_by: str | None) -> None:
        await self.db.execute(
            update(ChatChannel)
            .where(ChatChannel.id == channel_id)
            .values(is_locked=locked_by is not None, locked_by=locked_by)
        )

    async def create_message(
        self,
        channel_id: str,
        user_id: str | None,
        role: ChatRole,
        content: str,
    ) -> ChatMessageResult:
        message = ChatMessage(
            channel_id=channel_id,
            user_id=user_id,
            role=role.value,
            content=content,
            created_at=utc_now(),
        )
        self.db.add(message)
        await self.db.flush()
        return _message_to_result(message)

    async def list_recent_messages(self, limit: int) -> list[ChatMessageResult]:
        """Latest messages across channels, returned oldest first."""
        result = await self.db.execute(
            select(ChatMessage)
            .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
            .limit(limit)
        )
        return [_message_to_result(m) for m in reversed(result.scalars().all())]
