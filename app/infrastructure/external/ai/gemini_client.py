"""Generative Language API (Gemini) completion client over httpx."""

from __future__ import annotations

from typing import Any

import httpx

from app.domain.exceptions import AssistantRequestException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class GeminiCompletionClient:
    """ICompletionClient backed by the ``generateContent`` REST endpoint.

    The shared httpx.AsyncClient is owned by the application lifespan; this
    class never closes it.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 30.0,
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    @staticmethod
    def build_payload(system_instruction: str, prompt: str) -> dict[str, Any]:
        return {
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }

    @staticmethod
    def extract_text(data: dict[str, Any]) -> str:
        """Join the text parts of the first candidate; empty string when absent."""
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts)

    async def complete(self, system_instruction: str, prompt: str) -> str:
        try:
            response = await self._http.post(
                self.endpoint,
                params={"key": self._api_key},
                json=self.build_payload(system_instruction, prompt),
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            logger.error("Assistant request to %s failed: %s", self._model, e)
            raise AssistantRequestException(f"Assistant request failed: {e}") from e
        if response.status_code != 200:
            logger.error(
                "Assistant request failed: model=%s status=%d",
                self._model,
                response.status_code,
            )
            raise AssistantRequestException(
                f"Assistant request failed with status {response.status_code}",
                status_code=response.status_code,
            )
        text = self.extract_text(response.json())
        if not text:
            raise AssistantRequestException("Assistant returned an empty reply")
        return text
