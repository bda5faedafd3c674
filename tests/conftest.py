"""Shared test configuration and fixtures for all tests."""

import json
import random
from typing import Callable, List
from unittest.mock import MagicMock, AsyncMock

import httpx
import pytest

from model_arena.benchmark import BenchmarkResult, BenchmarkStrategy, SimulatedBenchmarkStrategy
from model_arena.shared.config import Config
from .test_const import (
    TEST_GATEWAY_URL, TEST_LEADERBOARD_URL, TEST_DEFAULT_MODEL, TEST_SEED, TEST_START_TIME,
    MOCK_LEADERBOARD, MOCK_GATEWAY_MODELS, MOCK_SSE_STREAM, HTTP_ERROR
)


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: float = TEST_START_TIME):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FixedRandom:
    """Random source whose uniform() always returns the lower bound."""

    def uniform(self, a: float, b: float) -> float:
        return a


class CountingStrategy(BenchmarkStrategy):
    """Strategy that records calls and can be told to fail for some models."""

    name = "counting"

    def __init__(self, clock: Callable[[], float], failing: List[str] = None):
        self.clock = clock
        self.failing = set(failing or [])
        self.calls: List[str] = []

    async def run(self, model_id: str) -> BenchmarkResult:
        self.calls.append(model_id)
        if model_id in self.failing:
            raise RuntimeError(f"benchmark failed for {model_id}")
        return BenchmarkResult(
            model_id=model_id,
            tokens_per_second=50.0,
            time_to_first_token=0.5,
            total_time=2.5,
            timestamp=self.clock(),
        )


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def clock():
    """Fake wall clock fixture."""
    return FakeClock()


@pytest.fixture
def test_config():
    """Configuration pointing at fake upstreams."""
    return Config(
        gateway_url=TEST_GATEWAY_URL,
        leaderboard_url=TEST_LEADERBOARD_URL,
        default_model=TEST_DEFAULT_MODEL,
    )


@pytest.fixture
def simulated_strategy(clock):
    """Deterministic simulated benchmark strategy."""
    return SimulatedBenchmarkStrategy(rng=random.Random(TEST_SEED), clock=clock)


@pytest.fixture
def counting_strategy(clock):
    """Strategy fixture that counts runs."""
    return CountingStrategy(clock)


@pytest.fixture
def leaderboard_transport():
    """Transport serving the mock leaderboard."""
    return RecordingTransport(lambda request: httpx.Response(200, json=MOCK_LEADERBOARD))


@pytest.fixture
def failing_leaderboard_transport():
    """Transport whose leaderboard always answers 500."""
    return RecordingTransport(lambda request: httpx.Response(HTTP_ERROR, json={"error": "down"}))


@pytest.fixture
def gateway_transport():
    """Transport serving the mock gateway model list and chat stream."""
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/models"):
            return httpx.Response(200, json=MOCK_GATEWAY_MODELS)
        if request.url.path.endswith("/chat/completions"):
            return httpx.Response(
                200,
                content=MOCK_SSE_STREAM,
                headers={"content-type": "text/event-stream"}
            )
        return httpx.Response(404, content=json.dumps({"error": "not found"}))

    return RecordingTransport(handler)


@pytest.fixture
def mock_gateway_client():
    """Mock gateway client fixture."""
    mock_client = MagicMock()
    mock_client.list_models = AsyncMock(return_value=MOCK_GATEWAY_MODELS["data"])
    return mock_client


@pytest.fixture
def mock_aggregator():
    """Mock benchmark aggregator fixture."""
    mock_aggregator = MagicMock()
    mock_aggregator.list_benchmarks = AsyncMock()
    mock_aggregator.run_benchmark = AsyncMock()
    mock_aggregator.run_all = AsyncMock()
    mock_aggregator.list_models = AsyncMock()
    mock_aggregator.leaderboard_entries = AsyncMock()
    return mock_aggregator


class FakeChatStream:
    """Opened chat stream that yields fixed chunks and may fail part way."""

    def __init__(self, chunks=None, error=None):
        self.chunks = chunks or []
        self.error = error
        self.closed = False

    async def aiter_bytes(self):
        try:
            for chunk in self.chunks:
                yield chunk
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


def make_stream_client(chunks=None, events=None, error=None, open_error=None):
    """Build a gateway client stub whose streams yield the given chunks or events."""
    client = MagicMock()
    client.stream_calls = []
    client.stream = FakeChatStream(chunks, error)

    async def open_chat(model, messages, **kwargs):
        client.stream_calls.append({"model": model, "messages": messages, **kwargs})
        if open_error is not None:
            raise open_error
        return client.stream

    async def stream_chat_events(model, messages, **kwargs):
        client.stream_calls.append({"model": model, "messages": messages, **kwargs})
        for event in events or []:
            yield event
        if error is not None:
            raise error

    client.open_chat = open_chat
    client.stream_chat_events = stream_chat_events
    return client
