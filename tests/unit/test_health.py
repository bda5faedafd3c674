"""Unit tests for health slice."""

from unittest.mock import AsyncMock

import pytest

from model_arena.shared.exceptions import GatewayError
from model_arena.slices.health.health_router import HealthRouter


class TestHealthRouter:
    """Test health endpoint functionality."""

    @pytest.mark.asyncio
    async def test_health_check_success(self, mock_gateway_client):
        """Test successful health check."""
        router = HealthRouter(mock_gateway_client)
        result = await router.health_check()

        expected = {
            "status": "healthy",
            "proxy": "Ok",
            "upstream": "Ok"
        }
        assert result == expected
        mock_gateway_client.list_models.assert_called_once()

    @pytest.mark.asyncio
    async def test_health_check_upstream_error(self, mock_gateway_client):
        """Test health check when the gateway is unreachable."""
        mock_gateway_client.list_models = AsyncMock(side_effect=GatewayError("Connection failed"))

        router = HealthRouter(mock_gateway_client)
        result = await router.health_check()

        expected = {
            "status": "unhealthy",
            "proxy": "Ok",
            "upstream": "error"
        }
        assert result == expected
        mock_gateway_client.list_models.assert_called_once()
