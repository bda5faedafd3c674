import json
from pathlib import Path
from typing import Dict, Any, List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from model_arena.const import (
    DEFAULT_GATEWAY_URL, DEFAULT_LEADERBOARD_URL, DEFAULT_MODEL, DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT, REQUEST_TIMEOUT, BENCHMARK_TTL, LISTING_CACHE_TTL, MODELS_CACHE_TTL,
    LEADERBOARD_TTL, CATALOG_SOURCE_STATIC, BENCHMARK_MODE_SIMULATED, DEFAULT_LOG_LEVEL
)


class Config(BaseSettings):
    """Global configuration settings for Model Arena."""

    gateway_url: str = DEFAULT_GATEWAY_URL
    gateway_api_key: Optional[str] = None
    leaderboard_url: str = DEFAULT_LEADERBOARD_URL
    default_model: str = DEFAULT_MODEL
    catalog_source: str = CATALOG_SOURCE_STATIC
    benchmark_mode: str = BENCHMARK_MODE_SIMULATED
    unavailable_models: List[str] = [
        "google/gemini-2.0-pro-002",
        "xai/grok-3-beta",
        "mistral/mistral-medium",
    ]
    benchmark_ttl: int = BENCHMARK_TTL
    listing_cache_ttl: int = LISTING_CACHE_TTL
    models_cache_ttl: int = MODELS_CACHE_TTL
    leaderboard_ttl: int = LEADERBOARD_TTL
    request_timeout: float = REQUEST_TIMEOUT
    server_host: str = DEFAULT_SERVER_HOST
    server_port: int = DEFAULT_SERVER_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = {
        "uvicorn": "WARNING",
        "uvicorn.access": "WARNING",
        "fastapi": "WARNING",
        "httpx": "WARNING"
    }

    model_config = SettingsConfigDict(
        protected_namespaces=('settings_',),
        env_prefix='MODEL_ARENA_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path("config.json")
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
