"""Benchmark package initialization."""
from .models import BenchmarkResult, BenchmarkEntry
from .constants import BenchmarkConstants
from .strategies import BenchmarkStrategy, SimulatedBenchmarkStrategy, GatewayBenchmarkStrategy
from .runner import BenchmarkRunner

__all__ = [
    'BenchmarkResult',
    'BenchmarkEntry',
    'BenchmarkConstants',
    'BenchmarkStrategy',
    'SimulatedBenchmarkStrategy',
    'GatewayBenchmarkStrategy',
    'BenchmarkRunner'
]
