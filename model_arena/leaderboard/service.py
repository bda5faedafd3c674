"""Public leaderboard fetching and model matching."""

import re
from typing import Any, Dict, List, Optional

import httpx

from model_arena.const import ACCEPT_HEADER, CONTENT_TYPE_JSON, KNOWN_PROVIDERS, UNKNOWN_PROVIDER
from model_arena.shared.config import Config
from model_arena.shared.exceptions import LeaderboardFetchError
from model_arena.shared.logging import LoggingManager
from model_arena.shared.ttl_cache import TimedValue
from .models import LeaderboardEntry, FALLBACK_LEADERBOARD

_SEPARATORS = re.compile(r'[-_]')
_PARAM_SUFFIX = re.compile(r'\d+b$', re.IGNORECASE)
_CONTEXT_SUFFIX = re.compile(r'\d+k$', re.IGNORECASE)
_VERSION_SUFFIX = re.compile(r'\d+\.\d+$')


def normalize_model_id(model_id: str) -> str:
    """Reduce a model id to a comparable name.

    Drops the provider prefix, lower-cases, strips separators, then strips one
    trailing parameter-size, context-length and version suffix in that order.
    """
    parts = model_id.split('/')
    name = parts[1] if len(parts) > 1 else model_id
    name = _SEPARATORS.sub('', name.lower())
    name = _PARAM_SUFFIX.sub('', name, count=1)
    name = _CONTEXT_SUFFIX.sub('', name, count=1)
    return _VERSION_SUFFIX.sub('', name, count=1)


def extract_provider(model_name: str) -> str:
    """Guess the provider of a leaderboard model name."""
    if '/' in model_name:
        return model_name.split('/')[0]
    lowered = model_name.lower()
    for provider in KNOWN_PROVIDERS:
        if provider in lowered:
            return provider
    return UNKNOWN_PROVIDER


def names_match(left: str, right: str) -> bool:
    """Fuzzy match of two normalized names by substring containment either way."""
    if not left or not right:
        return False
    return left in right or right in left


def find_entry(model_id: str, entries: List[LeaderboardEntry]) -> Optional[LeaderboardEntry]:
    """Find the leaderboard entry for a model: exact normalized match first, then the first fuzzy match."""
    normalized = normalize_model_id(model_id)
    normalized_entries = [(normalize_model_id(entry.model), entry) for entry in entries]

    for name, entry in normalized_entries:
        if name == normalized:
            return entry
    for name, entry in normalized_entries:
        if names_match(name, normalized):
            return entry
    return None


class LeaderboardService:
    """Fetches the throughput leaderboard and matches catalog models against it."""

    def __init__(self, cache: TimedValue[List[LeaderboardEntry]], config: Optional[Config] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.cache = cache
        self.config = config or Config()
        self._transport = transport
        self.logger = LoggingManager.get_logger(__name__)

    async def fetch(self) -> List[LeaderboardEntry]:
        """Return the leaderboard, from cache while fresh, else from upstream or the fallback table."""
        cached = self.cache.get()
        if cached is not None:
            return cached

        try:
            entries = await self._fetch_upstream()
        except LeaderboardFetchError as e:
            self.logger.error(f"Error fetching leaderboard data: {e}")
            return list(FALLBACK_LEADERBOARD)

        self.cache.set(entries)
        self.logger.info(f"Fetched {len(entries)} leaderboard entries")
        return entries

    async def _fetch_upstream(self) -> List[LeaderboardEntry]:
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.request_timeout),
                transport=self._transport,
            ) as client:
                response = await client.get(
                    self.config.leaderboard_url,
                    headers={ACCEPT_HEADER: CONTENT_TYPE_JSON},
                )
        except httpx.HTTPError as e:
            raise LeaderboardFetchError(f"Leaderboard request failed: {e}") from e

        if not response.is_success:
            raise LeaderboardFetchError(f"Failed to fetch leaderboard data: {response.status_code}")

        try:
            return self.parse_entries(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise LeaderboardFetchError(f"Invalid leaderboard payload: {e}") from e

    @staticmethod
    def parse_entries(data: Dict[str, Any]) -> List[LeaderboardEntry]:
        entries = []
        for index, model in enumerate(data["models"]):
            name = model["name"]
            entries.append(LeaderboardEntry(
                model=name,
                provider=extract_provider(name),
                tokens_per_second=model.get("throughput") or model.get("tokens_per_second"),
                rank=index + 1,
            ))
        return entries

    async def get_model_performance(self, model_id: str) -> Dict[str, Any]:
        """Return {"tokensPerSecond", "rank"} for the matching entry, or {} when nothing matches."""
        try:
            entry = find_entry(model_id, await self.fetch())
        except Exception as e:
            self.logger.error(f"Error getting performance for model {model_id}: {e}")
            return {}

        if entry is None:
            return {}
        return {"tokensPerSecond": entry.tokens_per_second, "rank": entry.rank}
