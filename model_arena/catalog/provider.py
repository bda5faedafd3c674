"""Model catalog sourced from a static table or the gateway."""

from typing import Dict, List, Optional

from model_arena.const import CATALOG_SOURCE_GATEWAY
from model_arena.shared.config import Config
from model_arena.shared.exceptions import GatewayError
from model_arena.shared.logging import LoggingManager
from model_arena.shared.ttl_cache import TimedValue
from .models import DisplayModel, STATIC_CATALOG


class ModelCatalog:
    """Supplies the selectable models and their availability."""

    def __init__(self, gateway_client, cache: TimedValue[List[DisplayModel]], config: Optional[Config] = None):
        self.gateway_client = gateway_client
        self.cache = cache
        self.config = config or Config()
        self.logger = LoggingManager.get_logger(__name__)
        self._unavailable = set(self.config.unavailable_models)
        self._performance: Dict[str, float] = {}

    def is_available(self, model_id: str) -> bool:
        return model_id not in self._unavailable

    async def list_models(self) -> List[DisplayModel]:
        """Return the catalog, reloading it once the cached copy expires."""
        models = self.cache.get()
        if models is None:
            models = await self._load()
            self.cache.set(models)
        return models

    async def get(self, model_id: str) -> Optional[DisplayModel]:
        for model in await self.list_models():
            if model.id == model_id:
                return model
        return None

    async def _load(self) -> List[DisplayModel]:
        entries = list(STATIC_CATALOG)
        if self.config.catalog_source == CATALOG_SOURCE_GATEWAY:
            try:
                upstream = await self.gateway_client.list_models()
                entries = [(m["id"], m.get("name") or m["id"]) for m in upstream if m.get("id")]
                self.logger.info(f"Loaded {len(entries)} models from gateway")
            except (GatewayError, KeyError, TypeError) as e:
                self.logger.error(f"Error fetching models from gateway, using static catalog: {e}")
                entries = list(STATIC_CATALOG)

        return [
            DisplayModel(
                id=model_id,
                label=label,
                is_available=self.is_available(model_id),
                tokens_per_second=self._performance.get(model_id),
            )
            for model_id, label in entries
        ]

    def update_performance(self, model_id: str, tokens_per_second: float) -> None:
        """Record a completed benchmark on the model's performance field."""
        self._performance[model_id] = tokens_per_second
        for model in self.cache.get() or []:
            if model.id == model_id:
                model.tokens_per_second = tokens_per_second

    def resolve_chat_model(self, model_id: Optional[str]) -> str:
        """Return the model to chat with, falling back to the default for unavailable models."""
        if not model_id:
            return self.config.default_model
        if not self.is_available(model_id):
            self.logger.warning(f"Model {model_id} is unavailable, falling back to {self.config.default_model}")
            return self.config.default_model
        return model_id
