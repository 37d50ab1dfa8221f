"""
Pydantic schemas for API requests and responses.
"""

from adtracker.schemas.request import AdCreate, RevenueCreate
from adtracker.schemas.response import (
    AdStats,
    ErrorResponse,
    HealthResponse,
    StatsResponse,
)

__all__ = [
    # Request schemas
    "AdCreate",
    "RevenueCreate",
    # Response schemas
    "AdStats",
    "StatsResponse",
    "HealthResponse",
    "ErrorResponse",
]
