"""
Data models for AdTracker.
"""

from adtracker.models.ad import Ad, RevenueEntry
from adtracker.models.base import EntityModel

__all__ = [
    "EntityModel",
    "Ad",
    "RevenueEntry",
]
