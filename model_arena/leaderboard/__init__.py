"""Leaderboard package initialization."""
from .models import LeaderboardEntry, FALLBACK_LEADERBOARD
from .service import LeaderboardService, normalize_model_id, extract_provider, names_match, find_entry

__all__ = [
    'LeaderboardEntry',
    'FALLBACK_LEADERBOARD',
    'LeaderboardService',
    'normalize_model_id',
    'extract_provider',
    'names_match',
    'find_entry'
]
