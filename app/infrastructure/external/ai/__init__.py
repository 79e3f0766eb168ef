"""Generative AI providers for the chat assistant."""

from app.infrastructure.external.ai.gemini_client import GeminiCompletionClient

__all__ = ["GeminiCompletionClient"]
