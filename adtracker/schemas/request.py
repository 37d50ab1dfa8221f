"""
API request schemas.

Fields are deliberately loose (``Any``): numbers may arrive as strings and
missing fields must surface as a 400 from the store, not as a 422 here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AdCreate(BaseModel):
    """Create-ad request body."""

    name: Any = Field(None, description="Ad name")
    platform: Any = Field(None, description="Platform (Google, Meta, ...)")
    type: Any = Field(None, description="Ad format (banner, video, native, ...)")

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Banner A", "platform": "Google", "type": "banner"}
        }
    }


class RevenueCreate(BaseModel):
    """Create-revenue request body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "adId": "4f9c2a7d0e8b4c1a9f3e6d5b2a1c0e9f",
                "amount": "10.50",
                "impressions": 1000,
                "clicks": 50,
                "date": "2024-05-01",
            }
        },
    )

    ad_id: Any = Field(None, description="ID of an existing ad")
    amount: Any = Field(None, description="Revenue amount, number or numeric string")
    impressions: Any = Field(None, description="Impression count")
    clicks: Any = Field(None, description="Click count")
    date: Any = Field(None, description="YYYY-MM-DD, defaults to today (UTC)")
