"""Chat ORM models: channels and messages."""

from sqlalchemy import Boolean, ForeignKey, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CreatedAtMixin, CuidMixin


class ChatChannel(CuidMixin, CreatedAtMixin, Base):
    """Chat channel; locked while an assistant reply is pending. Table: chat_channel."""

    __tablename__ = "chat_channel"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_locked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    locked_by: Mapped[str | None] = mapped_column(String, nullable=True)


class ChatMessage(CuidMixin, CreatedAtMixin, Base):
    """Message in a channel. user_id is NULL for assistant replies. Table: chat_message."""

    __tablename__ = "chat_message"

    channel_id: Mapped[str] = mapped_column(
        String, ForeignKey("chat_channel.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("profile.id", ondelete="SET NULL"), nullable=True
    )
    role: Mapped[str] = mapped_column(String(8), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
