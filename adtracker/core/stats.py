"""
Revenue statistics.

Totals across the whole store plus one row per ad with its own revenue,
impressions, clicks and click-through rate. Computed from the store's
current contents on every call; nothing is cached and nothing is written.
"""

from __future__ import annotations

from collections.abc import Iterable

from adtracker.common.logger import get_logger
from adtracker.common.utils import Timer, safe_divide
from adtracker.core.store import Store
from adtracker.models import Ad, RevenueEntry
from adtracker.schemas.response import AdStats, StatsResponse

logger = get_logger(__name__)


def click_through_rate(clicks: int, impressions: int) -> str | int:
    """
    CTR as a percentage with two decimals, e.g. ``"5.00"``.

    Zero impressions yield the integer ``0`` rather than a formatted string.
    """
    if impressions <= 0:
        return 0
    return f"{safe_divide(clicks, impressions) * 100:.2f}"


def _totals(entries: Iterable[RevenueEntry]) -> tuple[float, int, int]:
    revenue, impressions, clicks = 0.0, 0, 0
    for entry in entries:
        revenue += entry.amount
        impressions += entry.impressions
        clicks += entry.clicks
    return revenue, impressions, clicks


class StatsService:
    """Read-only statistics over a ``Store``."""

    def __init__(self, store: Store):
        self.store = store

    def compute_stats(self) -> StatsResponse:
        with Timer() as timer:
            ads = self.store.list_ads()
            entries = self.store.list_revenue()

            total_revenue, total_impressions, total_clicks = _totals(entries)
            by_ad = [self._ad_stats(ad, entries) for ad in ads]

        logger.debug(
            "Stats computed",
            ads=len(ads),
            revenue_entries=len(entries),
            duration_ms=round(timer.elapsed_ms, 2),
        )

        return StatsResponse(
            total_ads=len(ads),
            total_revenue=total_revenue,
            total_impressions=total_impressions,
            total_clicks=total_clicks,
            by_ad=by_ad,
        )

    @staticmethod
    def _ad_stats(ad: Ad, entries: list[RevenueEntry]) -> AdStats:
        revenue, impressions, clicks = _totals(r for r in entries if r.ad_id == ad.id)
        return AdStats(
            id=ad.id,
            name=ad.name,
            platform=ad.platform,
            type=ad.type,
            revenue=revenue,
            impressions=impressions,
            clicks=clicks,
            ctr=click_through_rate(clicks, impressions),
        )
