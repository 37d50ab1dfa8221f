"""
Prometheus metrics for the HTTP surface and the ad/revenue store.

Request metrics are labelled with the normalised route (ids replaced by
``{id}``) so label cardinality stays bounded. Business counters are bumped
by the routers after a mutation has been persisted.
"""

from typing import Callable

from fastapi import Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, Info, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response as StarletteResponse

from adtracker import __version__

# =============================================================================
# Prometheus Metrics Definitions
# =============================================================================

APP_INFO = Info("adtracker_app", "AdTracker application information")
APP_INFO.info({
    "version": __version__,
    "name": "adtracker",
    "description": "Ad campaign and revenue tracking",
})

# HTTP request metrics
HTTP_REQUEST_TOTAL = Counter(
    "adtracker_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "adtracker_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "adtracker_http_requests_in_progress",
    "HTTP requests currently in progress",
    ["method", "endpoint"],
)

# Business metrics
ADS_CREATED_TOTAL = Counter(
    "adtracker_ads_created_total",
    "Total ads created",
    ["platform"],
)

ADS_DELETED_TOTAL = Counter(
    "adtracker_ads_deleted_total",
    "Total ads deleted",
)

REVENUE_ENTRIES_CREATED_TOTAL = Counter(
    "adtracker_revenue_entries_created_total",
    "Total revenue entries recorded",
)

REVENUE_ENTRIES_DELETED_TOTAL = Counter(
    "adtracker_revenue_entries_deleted_total",
    "Total revenue entries deleted",
    ["reason"],
)

REVENUE_AMOUNT_TOTAL = Counter(
    "adtracker_revenue_amount_total",
    "Sum of recorded revenue amounts",
)

# Path segments that are followed by an entity id
_ID_COLLECTIONS = {"ads", "revenue"}


# =============================================================================
# Metrics Middleware
# =============================================================================

class MetricsMiddleware(BaseHTTPMiddleware):
    """Per-request counters, latency and in-flight gauge, labelled by route shape."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        endpoint = normalize_path(request.url.path)
        status = "500"

        in_progress = HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint)
        latency = HTTP_REQUEST_DURATION.labels(method=method, endpoint=endpoint)
        try:
            with in_progress.track_inprogress(), latency.time():
                response = await call_next(request)
            status = str(response.status_code)
            return response
        finally:
            HTTP_REQUEST_TOTAL.labels(method=method, endpoint=endpoint, status=status).inc()


def normalize_path(path: str) -> str:
    """Replace entity ids with ``{id}``: ``/api/ads/4f9c...`` -> ``/api/ads/{id}``."""
    parts = path.split("/")
    return "/".join(
        "{id}" if i > 0 and part and parts[i - 1] in _ID_COLLECTIONS else part
        for i, part in enumerate(parts)
    )


# =============================================================================
# Metrics Endpoint
# =============================================================================

async def metrics_endpoint() -> StarletteResponse:
    """Default registry in the Prometheus text exposition format."""
    return StarletteResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


# =============================================================================
# Helper Functions for Recording Business Metrics
# =============================================================================

def record_ad_created(platform: str) -> None:
    """Record a newly created ad."""
    ADS_CREATED_TOTAL.labels(platform=platform).inc()


def record_ad_deleted(revenue_removed: int) -> None:
    """Record an ad deletion and the revenue entries removed with it."""
    ADS_DELETED_TOTAL.inc()
    if revenue_removed:
        REVENUE_ENTRIES_DELETED_TOTAL.labels(reason="cascade").inc(revenue_removed)


def record_revenue_created(amount: float) -> None:
    """Record a new revenue entry."""
    REVENUE_ENTRIES_CREATED_TOTAL.inc()
    REVENUE_AMOUNT_TOTAL.inc(amount)


def record_revenue_deleted() -> None:
    """Record a directly deleted revenue entry."""
    REVENUE_ENTRIES_DELETED_TOTAL.labels(reason="direct").inc()
