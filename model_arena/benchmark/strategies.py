"""Strategies that produce a benchmark result for a model."""
import random
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from model_arena.const import (
    BENCHMARK_TOKEN_COUNT, TPS_JITTER, TTFT_JITTER, BENCHMARK_PROMPT, BENCHMARK_MAX_TOKENS, USER_ROLE
)
from model_arena.shared.exceptions import UnsupportedProviderError, GatewayError
from model_arena.shared.gateway_client import GatewayClient
from model_arena.shared.logging import LoggingManager
from .constants import BenchmarkConstants
from .models import BenchmarkResult


class BenchmarkStrategy(ABC):
    """Base class for benchmark result producers."""

    name: str = "base"

    @abstractmethod
    async def run(self, model_id: str) -> BenchmarkResult:
        """Produce a fresh benchmark result for the model."""
        pass


class SimulatedBenchmarkStrategy(BenchmarkStrategy):
    """Generate plausible benchmark numbers without calling any model."""

    name = "simulated"

    def __init__(self, rng: Optional[random.Random] = None, clock: Callable[[], float] = time.time):
        self._rng = rng or random.Random()
        self._clock = clock

    @staticmethod
    def base_values(model_id: str) -> Tuple[float, float]:
        """Return (tokens/s, ttft) for the first keyword contained in the model id."""
        lowered = model_id.lower()
        for keyword, tps, ttft in BenchmarkConstants.BASE_VALUES:
            if keyword in lowered:
                return tps, ttft
        return BenchmarkConstants.DEFAULT_BASE

    async def run(self, model_id: str) -> BenchmarkResult:
        return self.simulate(model_id)

    def simulate(self, model_id: str) -> BenchmarkResult:
        base_tps, base_ttft = self.base_values(model_id)

        tokens_per_second = base_tps * self._rng.uniform(*TPS_JITTER)
        time_to_first_token = base_ttft * self._rng.uniform(*TTFT_JITTER)
        total_time = time_to_first_token + BENCHMARK_TOKEN_COUNT / tokens_per_second

        return BenchmarkResult(
            model_id=model_id,
            tokens_per_second=tokens_per_second,
            time_to_first_token=time_to_first_token,
            total_time=total_time,
            timestamp=self._clock(),
        )


class GatewayBenchmarkStrategy(BenchmarkStrategy):
    """Measure a model by streaming a fixed prompt through the gateway."""

    name = "gateway"

    def __init__(self, gateway_client: GatewayClient, clock: Callable[[], float] = time.time,
                 timer: Callable[[], float] = time.perf_counter):
        self.gateway_client = gateway_client
        self._clock = clock
        self._timer = timer
        self.logger = LoggingManager.get_logger(__name__)

    async def run(self, model_id: str) -> BenchmarkResult:
        provider = model_id.split('/')[0].lower()
        if provider not in BenchmarkConstants.SUPPORTED_PROVIDERS:
            raise UnsupportedProviderError(f"Unsupported provider: {provider}")

        messages = [{"role": USER_ROLE, "content": BENCHMARK_PROMPT}]
        start_time = self._timer()
        first_token_time: Optional[float] = None
        streamed_chunks = 0
        completion_tokens: Optional[int] = None

        async for event in self.gateway_client.stream_chat_events(
            model_id,
            messages,
            max_tokens=BENCHMARK_MAX_TOKENS,
            stream_options={"include_usage": True},
        ):
            usage = event.get("usage") or {}
            if usage.get("completion_tokens"):
                completion_tokens = usage["completion_tokens"]
            for choice in event.get("choices", []):
                if choice.get("delta", {}).get("content"):
                    if first_token_time is None:
                        first_token_time = self._timer()
                    streamed_chunks += 1

        end_time = self._timer()
        if first_token_time is None:
            raise GatewayError(f"Gateway returned no tokens for {model_id}")

        tokens = completion_tokens or streamed_chunks
        time_to_first_token = first_token_time - start_time
        total_time = end_time - start_time
        generation_time = end_time - first_token_time
        tokens_per_second = tokens / (generation_time if generation_time > 0 else total_time)

        self.logger.info(f"Measured {model_id}: {tokens_per_second:.1f} tok/s, ttft {time_to_first_token:.3f}s")
        return BenchmarkResult(
            model_id=model_id,
            tokens_per_second=tokens_per_second,
            time_to_first_token=time_to_first_token,
            total_time=total_time,
            timestamp=self._clock(),
        )
