"""Data models for the benchmarking system."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BenchmarkResult:
    """A single throughput measurement for one model.

    Results are never updated in place; a newer result replaces the old one.
    """
    model_id: str
    tokens_per_second: float
    time_to_first_token: float
    total_time: float
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modelId": self.model_id,
            "tokensPerSecond": self.tokens_per_second,
            "timeToFirstToken": self.time_to_first_token,
            "totalTime": self.total_time,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class BenchmarkEntry:
    """A benchmark listing row joined with its catalog model."""
    model_id: str
    model_name: str
    provider: str
    tokens_per_second: float
    time_to_first_token: float
    total_time: float
    timestamp: float

    @classmethod
    def from_result(cls, result: BenchmarkResult, model_name: str) -> 'BenchmarkEntry':
        return cls(
            model_id=result.model_id,
            model_name=model_name,
            provider=result.model_id.split('/')[0],
            tokens_per_second=result.tokens_per_second,
            time_to_first_token=result.time_to_first_token,
            total_time=result.total_time,
            timestamp=result.timestamp,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modelId": self.model_id,
            "modelName": self.model_name,
            "provider": self.provider,
            "tokensPerSecond": self.tokens_per_second,
            "timeToFirstToken": self.time_to_first_token,
            "totalTime": self.total_time,
            "timestamp": self.timestamp,
        }
