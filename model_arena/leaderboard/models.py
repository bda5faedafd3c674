"""Leaderboard data models and the fallback table."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class LeaderboardEntry:
    """One row of the public throughput leaderboard."""
    model: str
    provider: Optional[str] = None
    tokens_per_second: Optional[float] = None
    rank: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "provider": self.provider,
            "tokensPerSecond": self.tokens_per_second,
            "rank": self.rank,
        }


FALLBACK_LEADERBOARD: List[LeaderboardEntry] = [
    LeaderboardEntry("gpt-4o", "openai", 30.5, 1),
    LeaderboardEntry("claude-3-opus", "anthropic", 22.1, 2),
    LeaderboardEntry("claude-3-sonnet", "anthropic", 28.5, 3),
    LeaderboardEntry("gpt-4-turbo", "openai", 27.6, 4),
    LeaderboardEntry("gemini-2.0-pro", "google", 24.3, 5),
    LeaderboardEntry("llama-3.1-70b", "groq", 90.4, 6),
    LeaderboardEntry("mistral-large-2", "mistral", 29.8, 7),
    LeaderboardEntry("gpt-4o-mini", "openai", 35.2, 8),
    LeaderboardEntry("llama-3.1-8b", "groq", 102.3, 9),
    LeaderboardEntry("gemini-2.0-flash", "google", 26.8, 10),
]
