"""
Core ad tracking logic: the consistent store and statistics over it.
"""

from adtracker.core.stats import StatsService, click_through_rate
from adtracker.core.store import Clock, IdFactory, Store

__all__ = [
    "Store",
    "IdFactory",
    "Clock",
    "StatsService",
    "click_through_rate",
]
