"""
Revenue router.

Endpoints:
    GET    /api/revenue        – List revenue entries
    POST   /api/revenue        – Record revenue for an ad
    DELETE /api/revenue/{id}   – Delete a revenue entry
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from adtracker.api.deps import get_store
from adtracker.api.middleware.metrics import record_revenue_created, record_revenue_deleted
from adtracker.core import Store
from adtracker.models import RevenueEntry
from adtracker.schemas.request import RevenueCreate

router = APIRouter()


@router.get("", response_model=list[RevenueEntry], summary="List revenue entries")
async def list_revenue(store: Store = Depends(get_store)) -> list[RevenueEntry]:
    return store.list_revenue()


@router.post("", response_model=RevenueEntry, status_code=201, summary="Record revenue")
async def create_revenue(
    body: RevenueCreate,
    store: Store = Depends(get_store),
) -> RevenueEntry:
    """
    Record revenue for an ad.

    Numeric fields accept numbers or numeric strings. Responds 404 when
    ``adId`` does not match an existing ad.
    """
    entry = store.add_revenue(
        ad_id=body.ad_id,
        amount=body.amount,
        impressions=body.impressions,
        clicks=body.clicks,
        date=body.date,
    )
    record_revenue_created(entry.amount)
    return entry


@router.delete("/{revenue_id}", status_code=204, summary="Delete revenue entry")
async def delete_revenue(revenue_id: str, store: Store = Depends(get_store)) -> Response:
    store.delete_revenue(revenue_id)
    record_revenue_deleted()
    return Response(status_code=204)
