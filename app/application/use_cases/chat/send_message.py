"""Team chat: channels, messages and the AI assistant reply.

Sending a message locks the channel for the sender until the assistant has
answered (or failed), so only one prompt per channel is in flight.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from app.application.dtos.chat import ChatChannelResult, ChatMessageResult
from app.application.services.state_cache import CHAT_CHANNELS, CHAT_MESSAGES
from app.domain.enums import ChatRole
from app.domain.exceptions import (
    AssistantUnavailableException,
    ChannelLockedException,
    ResourceNotFoundException,
    ValidationException,
)
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.application.dtos.catalog import UserResult
    from app.application.interfaces.services import ICompletionClient, UnitOfWorkFactory
    from app.application.services.state_cache import StateCache

logger = get_logger(__name__)

ASSISTANT_NAME = "Assistente"
ASSISTANT_ERROR_REPLY = "Erro na IA."
MAX_MESSAGE_LENGTH = 4000


def system_instruction(channel_name: str) -> str:
    return (
        "Você é um assistente de IA colaborativo da equipe Vontta. "
        f'Você está no canal de chat "{channel_name}". '
        "Responda de forma concisa, profissional e útil."
    )


def build_prompt(
    history: list[ChatMessageResult],
    author_name: str,
    content: str,
    resolve_user_name: Callable[[str], str],
) -> str:
    """Channel transcript (``name: content`` lines) followed by the new message."""
    lines = ["Histórico do canal:"]
    for message in history:
        name = resolve_user_name(message.user_id) if message.user_id else ASSISTANT_NAME
        lines.append(f"{name}: {message.content}")
    return "\n".join(lines) + f"\n\nO usuário {author_name} disse: {content}"


def error_reply(exc: Exception) -> str:
    """Reply stored in the channel when the assistant call fails."""
    status_code = getattr(exc, "status_code", None)
    if status_code == 404:
        return f"{ASSISTANT_ERROR_REPLY} (Modelo não encontrado)"
    if status_code in (401, 403):
        return f"{ASSISTANT_ERROR_REPLY} (Chave inválida)"
    return ASSISTANT_ERROR_REPLY


class ChatService:
    """Channel management and message sending."""

    def __init__(
        self,
        uow_factory: "UnitOfWorkFactory",
        cache: "StateCache",
        completion_client: "ICompletionClient | None",
        history_limit: int = 15,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache = cache
        self._completion_client = completion_client
        self._history_limit = history_limit

    # Channels

    async def create_channel(self, name: str) -> ChatChannelResult:
        name = name.strip()
        if not name:
            raise ValidationException("Channel name must not be empty", field="name")
        async with self._uow_factory() as uow:
            channel = await uow.chat.create_channel(name)
        await self._cache.refresh(CHAT_CHANNELS)
        return channel

    async def delete_channel(self, channel_id: str) -> None:
        """Delete channel and its messages."""
        async with self._uow_factory() as uow:
            if not await uow.chat.delete_channel(channel_id):
                raise ResourceNotFoundException("chat_channel", channel_id)
        await self._cache.refresh(CHAT_CHANNELS, CHAT_MESSAGES)

    # Messages

    async def send(self, actor: "UserResult", channel_id: str, content: str) -> ChatMessageResult:
        """Post content and store the assistant reply (or an error reply).

        Raises:
            ResourceNotFoundException: Unknown channel.
            ChannelLockedException: Another prompt is in flight in the channel.
            AssistantUnavailableException: No completion client is configured.
        """
        content = content.strip()
        if not content:
            raise ValidationException("Message must not be empty", field="content")
        if len(content) > MAX_MESSAGE_LENGTH:
            raise ValidationException(
                f"Message must be at most {MAX_MESSAGE_LENGTH} characters", field="content"
            )
        if self._completion_client is None:
            raise AssistantUnavailableException()

        async with self._uow_factory() as uow:
            # Row lock so two senders cannot both see the channel unlocked.
            channel = await uow.chat.get_channel(channel_id, for_update=True)
            if channel is None:
                raise ResourceNotFoundException("chat_channel", channel_id)
            if channel.is_locked:
                raise ChannelLockedException(channel_id, channel.locked_by)
            await uow.chat.set_lock(channel_id, actor.id)

        try:
            async with self._uow_factory() as uow:
                await uow.chat.create_message(channel_id, actor.id, ChatRole.USER, content)
            await self._cache.refresh(CHAT_CHANNELS, CHAT_MESSAGES)
            return await self._reply(actor, channel, content)
        finally:
            async with self._uow_factory() as uow:
                await uow.chat.set_lock(channel_id, None)
            await self._cache.refresh(CHAT_CHANNELS)

    async def _reply(
        self, actor: "UserResult", channel: ChatChannelResult, content: str
    ) -> ChatMessageResult:
        history = list(self._cache.chat_messages(channel.id))[-self._history_limit :]
        prompt = build_prompt(history, actor.name, content, self._cache.resolve_user_name)
        try:
            reply = await self._completion_client.complete(
                system_instruction(channel.name), prompt
            )
        except Exception as e:
            logger.warning("Assistant call failed in channel %s: %s", channel.id, e)
            reply = error_reply(e)
        async with self._uow_factory() as uow:
            message = await uow.chat.create_message(channel.id, None, ChatRole.MODEL, reply)
        await self._cache.refresh(CHAT_MESSAGES)
        return message
