"""Cached benchmark execution."""
import asyncio
import logging
from typing import Dict, Iterable, List, Optional

from model_arena.shared.ttl_cache import TTLCache
from .models import BenchmarkResult
from .strategies import BenchmarkStrategy


# Configure logging
logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Serves per-model benchmark results from a TTL cache, running a strategy on a miss."""

    def __init__(self, strategy: BenchmarkStrategy, cache: TTLCache[BenchmarkResult]):
        self.strategy = strategy
        self.cache = cache

    async def get_result(self, model_id: str, strategy: Optional[BenchmarkStrategy] = None) -> Optional[BenchmarkResult]:
        """
        Return the cached result while it is younger than the TTL, else run a new benchmark.

        Args:
            model_id: Model identifier in "provider/model" form.
            strategy: Strategy used on a cache miss instead of the runner's own.

        Returns:
            The benchmark result, or None if the strategy failed.
        """
        cached = self.cache.get(model_id)
        if cached is not None:
            logger.debug(f"Benchmark cache hit for {model_id}")
            return cached
        return await self.refresh(model_id, strategy)

    async def refresh(self, model_id: str, strategy: Optional[BenchmarkStrategy] = None) -> Optional[BenchmarkResult]:
        """Run the strategy and overwrite the model's cache slot."""
        strategy = strategy or self.strategy
        try:
            result = await strategy.run(model_id)
        except Exception as e:
            logger.error(f"Error running {strategy.name} benchmark for {model_id}: {e}")
            return None

        self.cache.put(model_id, result)
        logger.info(f"Benchmarked {model_id}: {result.tokens_per_second:.1f} tok/s")
        return result

    async def run_all(
        self,
        model_ids: Iterable[str],
        refresh: bool = False,
        strategy: Optional[BenchmarkStrategy] = None
    ) -> Dict[str, BenchmarkResult]:
        """
        Benchmark every model concurrently and wait for all of them.

        Args:
            model_ids: Models to benchmark.
            refresh: Ignore cached results when True.
            strategy: Strategy used instead of the runner's own.

        Returns:
            Mapping of model id to result, without the models that failed.
        """
        ids: List[str] = list(model_ids)
        run = self.refresh if refresh else self.get_result
        results = await asyncio.gather(*(run(model_id, strategy) for model_id in ids))
        return {model_id: result for model_id, result in zip(ids, results) if result is not None}

    def cached_results(self, model_ids: Iterable[str]) -> Dict[str, BenchmarkResult]:
        return self.cache.get_many(list(model_ids))
