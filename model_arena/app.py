"""Application wiring for Model Arena."""

from typing import Optional

import httpx
from fastapi import FastAPI

from model_arena.benchmark import (
    BenchmarkRunner, BenchmarkStrategy, SimulatedBenchmarkStrategy, GatewayBenchmarkStrategy
)
from model_arena.catalog import ModelCatalog
from model_arena.const import APP_TITLE, APP_DESCRIPTION, APP_VERSION, BENCHMARK_MODE_GATEWAY
from model_arena.leaderboard import LeaderboardService
from model_arena.shared.config import Config
from model_arena.shared.gateway_client import GatewayClient
from model_arena.shared.logging import LoggingManager
from model_arena.shared.ttl_cache import TTLCache, TimedValue
from model_arena.slices.benchmark_aggregator import BenchmarkAggregator
from model_arena.slices.benchmarks.benchmarks_router import BenchmarksRouter
from model_arena.slices.chat.chat_router import ChatRouter
from model_arena.slices.health.health_router import HealthRouter
from model_arena.slices.leaderboard.leaderboard_router import LeaderboardRouter
from model_arena.slices.models.models_router import ModelsRouter


class ModelArenaApp:
    """Main application class for Model Arena."""

    def __init__(
        self,
        config: Optional[Config] = None,
        strategy: Optional[BenchmarkStrategy] = None,
        gateway_transport: Optional[httpx.AsyncBaseTransport] = None,
        leaderboard_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or Config()

        # Setup logging
        LoggingManager.setup_logging(self.config.log_level)
        self.logger = LoggingManager.get_logger(__name__)

        # Initialize upstream clients
        self.gateway_client = GatewayClient(self.config, transport=gateway_transport)

        # Caches live on the app instance
        self.benchmark_cache = TTLCache(self.config.benchmark_ttl)
        self.listing_cache = TimedValue(self.config.listing_cache_ttl)
        self.models_cache = TimedValue(self.config.models_cache_ttl)
        self.catalog_cache = TimedValue(self.config.models_cache_ttl)
        self.leaderboard_cache = TimedValue(self.config.leaderboard_ttl)

        # Initialize services
        self.catalog = ModelCatalog(self.gateway_client, self.catalog_cache, self.config)
        self.leaderboard = LeaderboardService(self.leaderboard_cache, self.config, transport=leaderboard_transport)
        self.runner = BenchmarkRunner(strategy or self._build_strategy(), self.benchmark_cache)
        self.aggregator = BenchmarkAggregator(
            self.catalog, self.runner, self.leaderboard, self.listing_cache, self.models_cache,
            listing_strategy=self._build_listing_strategy(),
        )

        # Create FastAPI app
        self.app = FastAPI(
            title=APP_TITLE,
            description=APP_DESCRIPTION,
            version=APP_VERSION,
        )

        # Mount slices
        self.app.include_router(ModelsRouter.get_router(self.aggregator))
        self.app.include_router(BenchmarksRouter.get_router(self.aggregator))
        self.app.include_router(LeaderboardRouter.get_router(self.aggregator))
        self.app.include_router(ChatRouter.get_router(self.catalog, self.gateway_client))
        self.app.include_router(HealthRouter.get_router(self.gateway_client))

    def _build_strategy(self) -> BenchmarkStrategy:
        if self.config.benchmark_mode == BENCHMARK_MODE_GATEWAY:
            self.logger.info("Benchmarks are measured through the gateway")
            return GatewayBenchmarkStrategy(self.gateway_client)
        return SimulatedBenchmarkStrategy()

    def _build_listing_strategy(self) -> Optional[BenchmarkStrategy]:
        # Listings never stream live completions; misses get simulated numbers
        if self.config.benchmark_mode == BENCHMARK_MODE_GATEWAY:
            return SimulatedBenchmarkStrategy()
        return None
