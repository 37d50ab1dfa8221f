"""
Middleware for the API server.
"""

from adtracker.api.middleware.metrics import (
    MetricsMiddleware,
    metrics_endpoint,
    record_ad_created,
    record_ad_deleted,
    record_revenue_created,
    record_revenue_deleted,
)

__all__ = [
    "MetricsMiddleware",
    "metrics_endpoint",
    "record_ad_created",
    "record_ad_deleted",
    "record_revenue_created",
    "record_revenue_deleted",
]
