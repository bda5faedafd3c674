from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from model_arena.const import HTTP_BAD_REQUEST, HTTP_ERROR, DATA_FIELD, SOURCE_FIELD, MODEL_ID_FIELD
from model_arena.shared.logging import LoggingManager


class BenchmarkRequest(BaseModel):
    """Request to benchmark a single model."""

    model_config = ConfigDict(populate_by_name=True)

    model_id: Optional[str] = Field(default=None, alias=MODEL_ID_FIELD)
    refresh: bool = False


class BenchmarksRouter:
    """Router for benchmark endpoints."""

    def __init__(self, aggregator):
        self.aggregator = aggregator
        self.router = APIRouter(prefix="/api/benchmarks", tags=["benchmarks"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("")(self.list_benchmarks)
        self.router.post("")(self.run_benchmark)
        self.router.post("/all")(self.run_all)

    @classmethod
    def get_router(cls, aggregator) -> APIRouter:
        """Get the router instance."""
        return cls(aggregator).router

    async def list_benchmarks(self) -> Dict[str, Any]:
        """List benchmark results for every catalog model."""
        try:
            entries, source = await self.aggregator.list_benchmarks()
            self.logger.info(f"Listed {len(entries)} benchmarks from {source}")
            return {
                DATA_FIELD: [entry.to_dict() for entry in entries],
                SOURCE_FIELD: source
            }
        except Exception as e:
            self.logger.error(f"Error in benchmarks API: {str(e)}")
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to fetch benchmark data")

    async def run_benchmark(self, request: BenchmarkRequest) -> Dict[str, Any]:
        """Benchmark a single model."""
        if not request.model_id:
            raise HTTPException(status_code=HTTP_BAD_REQUEST, detail="Model ID is required")

        try:
            result = await self.aggregator.run_benchmark(request.model_id, refresh=request.refresh)
        except Exception as e:
            self.logger.error(f"Error running benchmark: {str(e)}")
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to run benchmark")

        if result is None:
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to run benchmark")
        return {DATA_FIELD: result.to_dict()}

    async def run_all(self) -> Dict[str, Any]:
        """Benchmark every catalog model concurrently."""
        try:
            entries = await self.aggregator.run_all()
            return {DATA_FIELD: [entry.to_dict() for entry in entries]}
        except Exception as e:
            self.logger.error(f"Error benchmarking all models: {str(e)}")
            raise HTTPException(status_code=HTTP_ERROR, detail="Failed to run benchmarks")
