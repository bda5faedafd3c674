from fastapi import APIRouter
from typing import Dict, Any

from model_arena.const import (
    HEALTH_STATUS_HEALTHY, HEALTH_STATUS_UNHEALTHY, HEALTH_STATUS_OK, HEALTH_STATUS_ERROR
)
from model_arena.shared.logging import LoggingManager


class HealthRouter:
    """Router for health endpoints."""

    def __init__(self, gateway_client):
        self.gateway_client = gateway_client
        self.router = APIRouter(prefix="/health", tags=["health"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("", response_model=Dict[str, Any])(self.health_check)

    @classmethod
    def get_router(cls, gateway_client) -> APIRouter:
        """Get the router instance."""
        return cls(gateway_client).router

    async def health_check(self) -> Dict[str, Any]:
        """Check health of the service and the upstream gateway."""
        proxy_status = HEALTH_STATUS_OK
        upstream_status = HEALTH_STATUS_OK

        try:
            self.logger.debug("Checking upstream gateway health")
            await self.gateway_client.list_models()
        except Exception as e:
            upstream_status = HEALTH_STATUS_ERROR
            self.logger.warning(f"Upstream gateway health check failed: {str(e)}")

        status = HEALTH_STATUS_HEALTHY if upstream_status == HEALTH_STATUS_OK else HEALTH_STATUS_UNHEALTHY
        self.logger.info(f"Health check result: {status} (proxy: {proxy_status}, upstream: {upstream_status})")

        return {
            "status": status,
            "proxy": proxy_status,
            "upstream": upstream_status
        }
