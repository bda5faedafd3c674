"""Unit tests for benchmarks, models and leaderboard slices."""

from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException

from model_arena.benchmark import BenchmarkEntry, BenchmarkResult
from model_arena.leaderboard import LeaderboardEntry
from model_arena.slices.benchmarks.benchmarks_router import BenchmarksRouter, BenchmarkRequest
from model_arena.slices.leaderboard.leaderboard_router import LeaderboardRouter
from model_arena.slices.models.models_router import ModelsRouter
from ..test_const import TEST_MODEL, HTTP_BAD_REQUEST, HTTP_ERROR

RESULT = BenchmarkResult(TEST_MODEL, 80.0, 0.25, 1.5, 1000.0)
ENTRY = BenchmarkEntry.from_result(RESULT, "Llama 3.1 70B")


class TestBenchmarkRequest:
    """Test BenchmarkRequest parsing."""

    def test_camel_case_alias(self):
        request = BenchmarkRequest(**{"modelId": TEST_MODEL, "refresh": True})
        assert request.model_id == TEST_MODEL
        assert request.refresh is True

    def test_defaults(self):
        request = BenchmarkRequest()
        assert request.model_id is None
        assert request.refresh is False


class TestBenchmarksRouter:
    """Test benchmark endpoint functionality."""

    @pytest.mark.asyncio
    async def test_list_benchmarks(self, mock_aggregator):
        mock_aggregator.list_benchmarks.return_value = ([ENTRY], "cache")

        router = BenchmarksRouter(mock_aggregator)
        result = await router.list_benchmarks()

        assert result == {"data": [ENTRY.to_dict()], "source": "cache"}

    @pytest.mark.asyncio
    async def test_list_benchmarks_error(self, mock_aggregator):
        mock_aggregator.list_benchmarks.side_effect = Exception("boom")

        router = BenchmarksRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.list_benchmarks()
        assert exc_info.value.status_code == HTTP_ERROR
        assert exc_info.value.detail == "Failed to fetch benchmark data"

    @pytest.mark.asyncio
    async def test_run_benchmark(self, mock_aggregator):
        mock_aggregator.run_benchmark.return_value = RESULT

        router = BenchmarksRouter(mock_aggregator)
        result = await router.run_benchmark(BenchmarkRequest(modelId=TEST_MODEL))

        assert result == {"data": {
            "modelId": TEST_MODEL,
            "tokensPerSecond": 80.0,
            "timeToFirstToken": 0.25,
            "totalTime": 1.5,
            "timestamp": 1000.0,
        }}
        mock_aggregator.run_benchmark.assert_called_once_with(TEST_MODEL, refresh=False)

    @pytest.mark.asyncio
    async def test_run_benchmark_missing_model(self, mock_aggregator):
        router = BenchmarksRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.run_benchmark(BenchmarkRequest())
        assert exc_info.value.status_code == HTTP_BAD_REQUEST
        assert exc_info.value.detail == "Model ID is required"
        mock_aggregator.run_benchmark.assert_not_called()

    @pytest.mark.asyncio
    async def test_run_benchmark_no_result(self, mock_aggregator):
        mock_aggregator.run_benchmark.return_value = None

        router = BenchmarksRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.run_benchmark(BenchmarkRequest(modelId=TEST_MODEL))
        assert exc_info.value.status_code == HTTP_ERROR
        assert exc_info.value.detail == "Failed to run benchmark"

    @pytest.mark.asyncio
    async def test_run_benchmark_error(self, mock_aggregator):
        mock_aggregator.run_benchmark.side_effect = Exception("boom")

        router = BenchmarksRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.run_benchmark(BenchmarkRequest(modelId=TEST_MODEL))
        assert exc_info.value.status_code == HTTP_ERROR

    @pytest.mark.asyncio
    async def test_run_all(self, mock_aggregator):
        mock_aggregator.run_all.return_value = [ENTRY]

        router = BenchmarksRouter(mock_aggregator)
        result = await router.run_all()

        assert result == {"data": [ENTRY.to_dict()]}

    @pytest.mark.asyncio
    async def test_run_all_error(self, mock_aggregator):
        mock_aggregator.run_all.side_effect = Exception("boom")

        router = BenchmarksRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.run_all()
        assert exc_info.value.detail == "Failed to run benchmarks"


class TestModelsRouter:
    """Test model listing endpoint."""

    @pytest.mark.asyncio
    async def test_list_models(self, mock_aggregator):
        models = [{"id": TEST_MODEL, "label": "Llama 3.1 70B", "isAvailable": True}]
        mock_aggregator.list_models.return_value = models

        router = ModelsRouter(mock_aggregator)
        assert await router.list_models() == {"models": models}

    @pytest.mark.asyncio
    async def test_list_models_error(self, mock_aggregator):
        mock_aggregator.list_models = AsyncMock(side_effect=Exception("boom"))

        router = ModelsRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.list_models()
        assert exc_info.value.status_code == HTTP_ERROR
        assert exc_info.value.detail == "Failed to fetch models"


class TestLeaderboardRouter:
    """Test leaderboard passthrough endpoint."""

    @pytest.mark.asyncio
    async def test_get_leaderboard(self, mock_aggregator):
        mock_aggregator.leaderboard_entries.return_value = [LeaderboardEntry("gpt-4o", "openai", 30.5, 1)]

        router = LeaderboardRouter(mock_aggregator)
        result = await router.get_leaderboard()

        assert result == {"data": [{"model": "gpt-4o", "provider": "openai", "tokensPerSecond": 30.5, "rank": 1}]}

    @pytest.mark.asyncio
    async def test_get_leaderboard_error(self, mock_aggregator):
        mock_aggregator.leaderboard_entries.side_effect = Exception("boom")

        router = LeaderboardRouter(mock_aggregator)
        with pytest.raises(HTTPException) as exc_info:
            await router.get_leaderboard()
        assert exc_info.value.detail == "Failed to fetch leaderboard data"
