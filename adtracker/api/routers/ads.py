"""
Ad router.

Endpoints:
    GET    /api/ads        – List ads
    POST   /api/ads        – Create ad
    DELETE /api/ads/{id}   – Delete ad and its revenue entries
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from adtracker.api.deps import get_store
from adtracker.api.middleware.metrics import record_ad_created, record_ad_deleted
from adtracker.core import Store
from adtracker.models import Ad
from adtracker.schemas.request import AdCreate

router = APIRouter()


@router.get("", response_model=list[Ad], summary="List ads")
async def list_ads(store: Store = Depends(get_store)) -> list[Ad]:
    return store.list_ads()


@router.post("", response_model=Ad, status_code=201, summary="Create ad")
async def create_ad(body: AdCreate, store: Store = Depends(get_store)) -> Ad:
    ad = store.add_ad(name=body.name, platform=body.platform, type=body.type)
    record_ad_created(ad.platform)
    return ad


@router.delete("/{ad_id}", status_code=204, summary="Delete ad")
async def delete_ad(ad_id: str, store: Store = Depends(get_store)) -> Response:
    """Delete an ad. All revenue entries recorded for it are deleted too."""
    revenue_removed = len(store.revenue_for_ad(ad_id))
    store.delete_ad(ad_id)
    record_ad_deleted(revenue_removed)
    return Response(status_code=204)
