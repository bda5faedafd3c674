from fastapi import APIRouter, HTTPException
from typing import Dict, Any

from model_arena.const import HTTP_ERROR, MODELS_FIELD
from model_arena.shared.logging import LoggingManager


class ModelsRouter:
    """Router for the model listing endpoint."""

    def __init__(self, aggregator):
        self.aggregator = aggregator
        self.router = APIRouter(prefix="/api/models", tags=["models"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("")(self.list_models)

    @classmethod
    def get_router(cls, aggregator) -> APIRouter:
        """Get the router instance."""
        return cls(aggregator).router

    async def list_models(self) -> Dict[str, Any]:
        """List catalog models with availability and performance."""
        try:
            models = await self.aggregator.list_models()
            self.logger.info(f"Listed {len(models)} models")
            return {MODELS_FIELD: models}
        except Exception as e:
            self.logger.error(f"Error fetching models: {str(e)}")
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to fetch models")
