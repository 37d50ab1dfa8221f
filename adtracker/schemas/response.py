"""
API response schemas.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AdStats(BaseModel):
    """Per-ad totals."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    platform: str
    type: str
    revenue: float = Field(..., description="Summed revenue amount")
    impressions: int = Field(..., description="Summed impressions")
    clicks: int = Field(..., description="Summed clicks")
    ctr: str | int = Field(
        ..., description='Click-through rate in percent ("5.00"), or 0 without impressions'
    )


class StatsResponse(BaseModel):
    """Store-wide totals and per-ad breakdown."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalAds": 1,
                "totalRevenue": 10.5,
                "totalImpressions": 1000,
                "totalClicks": 50,
                "byAd": [
                    {
                        "id": "4f9c2a7d0e8b4c1a9f3e6d5b2a1c0e9f",
                        "name": "Banner A",
                        "platform": "Google",
                        "type": "banner",
                        "revenue": 10.5,
                        "impressions": 1000,
                        "clicks": 50,
                        "ctr": "5.00",
                    }
                ],
            }
        },
    )

    total_ads: int
    total_revenue: float
    total_impressions: int
    total_clicks: int
    by_ad: list[AdStats] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    storage: bool = Field(..., description="Whether the data file is writable")
    ads: int = Field(..., description="Number of ads in the store")
    revenue: int = Field(..., description="Number of revenue entries in the store")


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: dict[str, Any] | None = Field(None, description="Error details")
    request_id: str | None = Field(None, description="Request identifier")

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "ValidationError",
                "message": "Missing required fields: name, platform, type",
                "details": {"missing": ["platform"]},
                "request_id": "0b6f3c1e-6c1a-4c55-9f7e-1d2a3b4c5d6e",
            }
        }
    }
