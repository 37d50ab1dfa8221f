"""
Statistics router.
"""

from fastapi import APIRouter, Depends

from adtracker.api.deps import get_stats_service
from adtracker.core import StatsService
from adtracker.schemas.response import StatsResponse

router = APIRouter()


@router.get("", response_model=StatsResponse, summary="Revenue statistics")
async def get_stats(service: StatsService = Depends(get_stats_service)) -> StatsResponse:
    """Totals across all ads plus per-ad revenue, impressions, clicks and CTR."""
    return service.compute_stats()
