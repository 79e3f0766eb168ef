"""Team chat API: channels, messages and assistant replies."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import AdminUser, CacheDep, CurrentUser, get_chat_service
from app.application.use_cases.chat import ChatService
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.chat import (
    ChatChannelCreateRequest,
    ChatChannelResponse,
    ChatMessageCreateRequest,
    ChatMessageResponse,
)

router = APIRouter()

ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]


@router.get("/channels", response_model=list[ChatChannelResponse])
async def list_channels(cache: CacheDep, _: CurrentUser):
    return [ChatChannelResponse.model_validate(c) for c in cache.chat_channels()]


@router.post("/channels", response_model=ChatChannelResponse, status_code=201)
@limit_writes
async def create_channel(
    request: Request,
    body: ChatChannelCreateRequest,
    _: AdminUser,
    chat_svc: ChatServiceDep,
):
    return ChatChannelResponse.model_validate(await chat_svc.create_channel(body.name))


@router.delete("/channels/{channel_id}", status_code=204)
@limit_writes
async def delete_channel(
    request: Request,
    channel_id: str,
    _: AdminUser,
    chat_svc: ChatServiceDep,
):
    await chat_svc.delete_channel(channel_id)
    return Response(status_code=204)


@router.get("/channels/{channel_id}/messages", response_model=list[ChatMessageResponse])
async def list_messages(channel_id: str, cache: CacheDep, _: CurrentUser):
    """Cached messages of one channel, oldest first."""
    if cache.get_channel(channel_id) is None:
        raise ResourceNotFoundException("chat_channel", channel_id)
    return [ChatMessageResponse.model_validate(m) for m in cache.chat_messages(channel_id)]


@router.post(
    "/channels/{channel_id}/messages",
    response_model=ChatMessageResponse,
    status_code=201,
)
@limit_writes
async def send_message(
    request: Request,
    channel_id: str,
    body: ChatMessageCreateRequest,
    actor: CurrentUser,
    chat_svc: ChatServiceDep,
):
    """Post a message and return the assistant reply (or the stored error reply).

    409 while another prompt is in flight in the channel.
    """
    reply = await chat_svc.send(actor, channel_id, body.content)
    return ChatMessageResponse.model_validate(reply)
