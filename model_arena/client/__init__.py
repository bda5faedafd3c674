"""Client helpers for consuming the Model Arena API."""
from .models_client import AvailableModelsClient, DEFAULT_MODELS, KNOWN_PERFORMANCE, estimate_tokens_per_second

__all__ = [
    'AvailableModelsClient',
    'DEFAULT_MODELS',
    'KNOWN_PERFORMANCE',
    'estimate_tokens_per_second'
]
