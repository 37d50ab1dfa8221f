"""
Ad tracking entities.

Defines: Ad, RevenueEntry
"""

from __future__ import annotations

from pydantic import Field

from adtracker.models.base import EntityModel


class Ad(EntityModel):
    """A tracked advertising placement."""

    name: str = Field(..., description="Ad name")
    platform: str = Field(..., description="Platform the ad runs on (Google, Meta, ...)")
    type: str = Field(..., description="Ad format: banner, video, native, ...")
    created_at: str = Field(..., description="Creation time, ISO-8601 UTC")


class RevenueEntry(EntityModel):
    """Earnings and engagement metrics recorded against one ad for one day."""

    ad_id: str = Field(..., description="ID of the ad this entry belongs to")
    amount: float = Field(..., ge=0, description="Revenue earned, currency units")
    impressions: int = Field(..., ge=0)
    clicks: int = Field(..., ge=0)
    date: str = Field(..., description="Calendar date, YYYY-MM-DD")
    created_at: str = Field(..., description="Creation time, ISO-8601 UTC")
