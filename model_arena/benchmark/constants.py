"""Constants for the benchmarking system."""
from typing import List, Tuple


class BenchmarkConstants:
    """Centralized constants for benchmark simulation and measurement."""
    # Ordered (keyword, tokens/s, ttft seconds); the first keyword found in a model id wins
    BASE_VALUES: List[Tuple[str, float, float]] = [
        ("small", 40, 0.2),
        ("medium", 30, 0.3),
        ("large", 25, 0.4),
        ("llama", 85, 0.25),
        ("gpt-4", 30, 0.35),
        ("gpt-3.5", 40, 0.3),
        ("claude", 25, 0.4),
        ("gemini", 25, 0.4),
        ("mistral", 30, 0.35),
        ("grok", 33, 0.3),
    ]
    DEFAULT_BASE: Tuple[float, float] = (30, 0.4)

    # Providers the gateway measurement knows how to reach
    SUPPORTED_PROVIDERS: List[str] = ["openai", "anthropic", "mistral", "groq", "google", "xai"]
