"""Custom exceptions for Model Arena."""

from typing import Optional


class ModelArenaError(Exception):
    """Base exception for Model Arena failures."""
    pass


class GatewayError(ModelArenaError):
    """Exception raised when a gateway request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause


class LeaderboardFetchError(ModelArenaError):
    """Exception raised when the leaderboard cannot be fetched or parsed."""
    pass


class UnsupportedProviderError(ModelArenaError):
    """Exception raised when a provider cannot be benchmarked."""
    pass
