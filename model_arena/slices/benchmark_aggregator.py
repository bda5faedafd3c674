"""Merges the catalog, leaderboard and benchmark cache into API responses."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from model_arena.benchmark import BenchmarkEntry, BenchmarkResult, BenchmarkRunner, BenchmarkStrategy
from model_arena.catalog import ModelCatalog
from model_arena.const import SOURCE_CACHE, SOURCE_BENCHMARK
from model_arena.leaderboard import LeaderboardEntry, LeaderboardService
from model_arena.shared.logging import LoggingManager
from model_arena.shared.ttl_cache import TimedValue


class BenchmarkAggregator:
    """Builds the benchmark and model listings consumed by the UI."""

    def __init__(
        self,
        catalog: ModelCatalog,
        runner: BenchmarkRunner,
        leaderboard: LeaderboardService,
        listing_cache: TimedValue[List[BenchmarkEntry]],
        models_cache: TimedValue[List[Dict[str, Any]]],
        listing_strategy: Optional[BenchmarkStrategy] = None,
    ):
        self.catalog = catalog
        self.runner = runner
        self.leaderboard = leaderboard
        self.listing_cache = listing_cache
        self.models_cache = models_cache
        # Fills listing misses; explicit benchmark requests use the runner's own strategy
        self.listing_strategy = listing_strategy
        self.logger = LoggingManager.get_logger(__name__)

    async def list_benchmarks(self) -> Tuple[List[BenchmarkEntry], str]:
        """Return the benchmark listing and whether it came from the listing cache."""
        cached = self.listing_cache.get()
        if cached is not None:
            return cached, SOURCE_CACHE

        models = await self.catalog.list_models()
        results = await self.runner.run_all((model.id for model in models), strategy=self.listing_strategy)
        entries = self._to_entries(models, results)
        self.listing_cache.set(entries)
        self.logger.info(f"Built benchmark listing for {len(entries)} models")
        return entries, SOURCE_BENCHMARK

    async def run_benchmark(self, model_id: str, refresh: bool = False) -> Optional[BenchmarkResult]:
        """Benchmark one model and record its throughput on the catalog."""
        if refresh:
            result = await self.runner.refresh(model_id)
        else:
            result = await self.runner.get_result(model_id)
        if result is None:
            return None

        self.catalog.update_performance(model_id, result.tokens_per_second)
        self.listing_cache.invalidate()
        self.models_cache.invalidate()
        return result

    async def run_all(self) -> List[BenchmarkEntry]:
        """Re-benchmark every catalog model concurrently."""
        models = await self.catalog.list_models()
        results = await self.runner.run_all((model.id for model in models), refresh=True)
        for model_id, result in results.items():
            self.catalog.update_performance(model_id, result.tokens_per_second)

        entries = self._to_entries(models, results)
        self.listing_cache.set(entries)
        self.models_cache.invalidate()
        self.logger.info(f"Benchmarked {len(results)} of {len(models)} models")
        return entries

    async def list_models(self) -> List[Dict[str, Any]]:
        """Return the catalog joined with benchmark results and leaderboard rank."""
        cached = self.models_cache.get()
        if cached is not None:
            return cached

        models = await self.catalog.list_models()
        results = await self.runner.run_all((model.id for model in models), strategy=self.listing_strategy)
        performances = await asyncio.gather(
            *(self.leaderboard.get_model_performance(model.id) for model in models)
        )

        listing = []
        for model, performance in zip(models, performances):
            result = results.get(model.id)
            row = model.to_dict()
            row["provider"] = model.provider
            row["tokensPerSecond"] = (
                result.tokens_per_second if result is not None
                else model.tokens_per_second or performance.get("tokensPerSecond")
            )
            row["timeToFirstToken"] = result.time_to_first_token if result is not None else None
            row["totalTime"] = result.total_time if result is not None else None
            row["rank"] = performance.get("rank")
            listing.append(row)

        self.models_cache.set(listing)
        return listing

    async def leaderboard_entries(self) -> List[LeaderboardEntry]:
        return await self.leaderboard.fetch()

    @staticmethod
    def _to_entries(models, results: Dict[str, BenchmarkResult]) -> List[BenchmarkEntry]:
        return [
            BenchmarkEntry.from_result(results[model.id], model.label)
            for model in models
            if model.id in results
        ]
