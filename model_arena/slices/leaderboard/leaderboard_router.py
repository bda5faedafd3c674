from fastapi import APIRouter, HTTPException
from typing import Dict, Any

from model_arena.const import HTTP_ERROR, DATA_FIELD
from model_arena.shared.logging import LoggingManager


class LeaderboardRouter:
    """Router for the leaderboard passthrough endpoint."""

    def __init__(self, aggregator):
        self.aggregator = aggregator
        self.router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("")(self.get_leaderboard)

    @classmethod
    def get_router(cls, aggregator) -> APIRouter:
        """Get the router instance."""
        return cls(aggregator).router

    async def get_leaderboard(self) -> Dict[str, Any]:
        try:
            entries = await self.aggregator.leaderboard_entries()
            return {DATA_FIELD: [entry.to_dict() for entry in entries]}
        except Exception as e:
            self.logger.error(f"Error in leaderboard API: {str(e)}")
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to fetch leaderboard data")
