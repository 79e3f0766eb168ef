"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (state cache, WebSocket manager,
AI HTTP client, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, state cache load, WebSocket manager subscription,
    AI client (if a key is configured). Shutdown order: cache unsubscribe,
    HTTP client close, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    from app.api.websocket import ConnectionManager
    from app.application.services.state_cache import StateCache
    from app.infrastructure.persistence.unit_of_work import SqlUnitOfWork

    cache = StateCache(
        SqlUnitOfWork,
        activity_log_limit=settings.activity_log_limit,
        chat_message_limit=settings.chat_message_limit,
    )
    await cache.load()
    app.state.state_cache = cache
    app.state.uow_factory = SqlUnitOfWork
    logger.info("State cache loaded")

    app.state.ws_manager = ConnectionManager()
    unsubscribe = cache.subscribe(app.state.ws_manager.on_cache_refreshed)

    if settings.assistant_enabled:
        from app.infrastructure.external.ai import GeminiCompletionClient

        app.state.ai_http_client = httpx.AsyncClient(timeout=settings.ai_timeout_seconds)
        app.state.completion_client = GeminiCompletionClient(
            http_client=app.state.ai_http_client,
            api_key=settings.ai_api_key.get_secret_value(),
            model=settings.ai_model,
            base_url=settings.ai_base_url,
            timeout=settings.ai_timeout_seconds,
        )
        logger.info("Chat assistant enabled (model=%s)", settings.ai_model)
    else:
        app.state.ai_http_client = None
        app.state.completion_client = None
        logger.info("Chat assistant disabled: AI_API_KEY not set")

    yield

    # ---- Shutdown ----
    unsubscribe()

    if getattr(app.state, "ai_http_client", None) is not None:
        await app.state.ai_http_client.aclose()
        app.state.ai_http_client = None
        logger.info("AI HTTP client closed")

    from app.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
