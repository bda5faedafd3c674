"""Consumer-side client for the model listing, with retry and defaults."""

import asyncio
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from model_arena.catalog import DisplayModel
from model_arena.const import MODELS_FIELD, MODELS_CLIENT_MAX_ATTEMPTS, MODELS_CLIENT_RETRY_DELAY_SEC

logger = logging.getLogger(__name__)

DEFAULT_MODELS: List[DisplayModel] = [
    DisplayModel("xai/grok-3-beta", "Grok 3 Beta", True, 32.7),
    DisplayModel("anthropic/claude-3-7-sonnet", "Claude 3.7 Sonnet", True, 28.5),
    DisplayModel("groq/llama-3.1-70b-versatile", "Llama 3.1 70B", True, 90.4),
    DisplayModel("google/gemini-2.0-flash-002", "Gemini 2.0 Flash", True, 26.8),
]

KNOWN_PERFORMANCE: Dict[str, float] = {
    "xai/grok-3-beta": 32.7,
    "anthropic/claude-3-7-sonnet": 28.5,
    "anthropic/claude-3-opus": 22.1,
    "anthropic/claude-3-5-sonnet": 25.8,
    "groq/llama-3.1-70b-versatile": 90.4,
    "groq/mixtral-8x7b-32768": 75.6,
    "google/gemini-2.0-flash-002": 26.8,
    "google/gemini-2.0-pro-002": 24.3,
    "openai/gpt-4o": 30.5,
    "openai/gpt-4o-mini": 35.2,
    "openai/gpt-4-turbo": 27.6,
    "openai/gpt-3.5-turbo": 40.3,
    "mistral/mistral-large-2": 29.8,
    "mistral/mistral-medium": 38.5,
    "mistral/mistral-small": 42.7,
    "meta/llama-3-8b": 45.2,
    "meta/llama-3-70b": 31.9,
}


def estimate_tokens_per_second(model_id: str, performance: Dict[str, float]) -> float:
    """Known throughput for the model, else a guess from its size in the name."""
    if model_id in performance:
        return performance[model_id]
    if "small" in model_id:
        return 40
    if "medium" in model_id:
        return 35
    if "large" in model_id:
        return 30
    return 25


class AvailableModelsClient:
    """Fetches the model listing from a running Model Arena service."""

    def __init__(
        self,
        base_url: str,
        max_attempts: int = MODELS_CLIENT_MAX_ATTEMPTS,
        retry_delay: float = MODELS_CLIENT_RETRY_DELAY_SEC,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.base_url = base_url
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._transport = transport
        self._sleep = sleep
        self.performance: Dict[str, float] = dict(KNOWN_PERFORMANCE)
        self.models: List[DisplayModel] = [replace(m) for m in DEFAULT_MODELS]
        self.error: Optional[Exception] = None

    def build_model_list(self, entries: List[Dict[str, Any]]) -> List[DisplayModel]:
        return [
            DisplayModel(
                id=entry["id"],
                label=entry.get("label") or entry.get("name") or entry["id"],
                is_available=entry.get("isAvailable", entry.get("available")) is not False,
                tokens_per_second=entry.get("tokensPerSecond") or estimate_tokens_per_second(entry["id"], self.performance),
                rank=entry.get("rank"),
            )
            for entry in entries
        ]

    async def _request_models(self) -> List[DisplayModel]:
        async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport) as client:
            response = await client.get("/api/models")
            response.raise_for_status()
            return self.build_model_list(response.json()[MODELS_FIELD])

    async def fetch_models(self) -> List[DisplayModel]:
        """
        Fetch the listing, retrying with a fixed delay between attempts.

        Returns:
            The fetched models, or the default models once every attempt failed.
            The last failure is kept on self.error.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                self.models = await self._request_models()
                self.error = None
                return self.models
            except (httpx.HTTPError, ValueError, KeyError) as e:
                self.error = e
                logger.error(f"Error fetching models (attempt {attempt}/{self.max_attempts}): {e}")
                if attempt < self.max_attempts:
                    await self._sleep(self.retry_delay)

        self.models = [replace(m) for m in DEFAULT_MODELS]
        return self.models

    def update_performance(self, model_id: str, tokens_per_second: float) -> None:
        """Record a new throughput for the model in the held list and the performance table."""
        for model in self.models:
            if model.id == model_id:
                model.tokens_per_second = tokens_per_second
        self.performance[model_id] = tokens_per_second
