"""
Ad and revenue store.

Owns the ``Ad`` and ``RevenueEntry`` collections, keeps them referentially
consistent and persists the full dataset after every successful mutation.

Rules enforced on mutation:
- a revenue entry can only be created for an existing ad;
- deleting an ad deletes all of its revenue entries in the same step;
- identifiers are never reused, not even after a delete;
- amount, impressions and clicks are never negative.

All validation runs before anything is changed. If the write to disk fails
the in-memory collections are restored and ``StorageError`` is raised, so
memory never holds state that was not persisted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from adtracker.common.exceptions import NotFoundError, StorageError, ValidationError
from adtracker.common.logger import get_logger
from adtracker.common.storage import Dataset, JsonFileStorage
from adtracker.common.utils import (
    current_date,
    current_datetime,
    generate_id,
    isoformat_utc,
)
from adtracker.core.parsing import (
    is_missing,
    parse_amount,
    parse_count,
    parse_date,
    require_text,
)
from adtracker.models import Ad, RevenueEntry

logger = get_logger(__name__)

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


class Store:
    """In-process store for ads and revenue entries backed by a JSON file."""

    def __init__(
        self,
        storage: JsonFileStorage,
        id_factory: IdFactory = generate_id,
        clock: Clock = current_datetime,
    ):
        self.storage = storage
        self._new_id = id_factory
        self._now = clock

        dataset = storage.load()
        self._ads: list[Ad] = dataset.ads
        self._revenue: list[RevenueEntry] = dataset.revenue
        # Every id handed out or loaded, including those of deleted entities
        self._issued_ids: set[str] = {a.id for a in self._ads} | {r.id for r in self._revenue}

    # ------------------------------------------------------------------
    # Ads
    # ------------------------------------------------------------------

    def list_ads(self) -> list[Ad]:
        """All ads in insertion order."""
        return list(self._ads)

    def get_ad(self, ad_id: str) -> Ad:
        for ad in self._ads:
            if ad.id == ad_id:
                return ad
        raise NotFoundError("Ad not found", details={"id": ad_id})

    def add_ad(self, name: Any, platform: Any, type: Any) -> Ad:
        """Create an ad. ``name`` and ``platform`` are trimmed."""
        if any(is_missing(v) for v in (name, platform, type)):
            raise ValidationError(
                "Missing required fields: name, platform, type",
                details={
                    "missing": [
                        field
                        for field, v in (("name", name), ("platform", platform), ("type", type))
                        if is_missing(v)
                    ]
                },
            )

        name = require_text(name, "name")
        platform = require_text(platform, "platform")
        type = require_text(type, "type")

        ad = Ad(
            id=self._unique_id(),
            name=name,
            platform=platform,
            type=type,
            created_at=isoformat_utc(self._now()),
        )

        with self._mutation():
            self._ads.append(ad)

        logger.info("Ad created", ad_id=ad.id, name=ad.name, platform=ad.platform)
        return ad

    def delete_ad(self, ad_id: str) -> None:
        """Delete an ad together with all of its revenue entries."""
        ad = self.get_ad(ad_id)

        with self._mutation():
            before = len(self._revenue)
            self._ads = [a for a in self._ads if a.id != ad.id]
            self._revenue = [r for r in self._revenue if r.ad_id != ad.id]
            removed = before - len(self._revenue)

        logger.info("Ad deleted", ad_id=ad.id, revenue_removed=removed)

    # ------------------------------------------------------------------
    # Revenue
    # ------------------------------------------------------------------

    def list_revenue(self) -> list[RevenueEntry]:
        """All revenue entries in insertion order."""
        return list(self._revenue)

    def revenue_for_ad(self, ad_id: str) -> list[RevenueEntry]:
        """Revenue entries referencing ``ad_id``, in insertion order."""
        return [r for r in self._revenue if r.ad_id == ad_id]

    def add_revenue(
        self,
        ad_id: Any,
        amount: Any,
        impressions: Any,
        clicks: Any,
        date: Any = None,
    ) -> RevenueEntry:
        """
        Record revenue for an existing ad.

        Numeric fields accept numbers or numeric strings. ``date`` defaults
        to the current UTC date.

        Raises:
            ValidationError: a field is missing or invalid.
            NotFoundError: ``ad_id`` does not match any ad.
        """
        missing = [
            field
            for field, v in (
                ("adId", None if is_missing(ad_id) else ad_id),
                ("amount", amount),
                ("impressions", impressions),
                ("clicks", clicks),
            )
            if v is None
        ]
        if missing:
            raise ValidationError(
                "Missing required fields: adId, amount, impressions, clicks",
                details={"missing": missing},
            )

        ad = self.get_ad(ad_id)

        now = self._now()
        values = {
            "amount": parse_amount(amount),
            "impressions": parse_count(impressions, "impressions"),
            "clicks": parse_count(clicks, "clicks"),
            "date": parse_date(date, current_date(now)),
        }
        entry = RevenueEntry(
            id=self._unique_id(),
            ad_id=ad.id,
            created_at=isoformat_utc(now),
            **values,
        )

        with self._mutation():
            self._revenue.append(entry)

        logger.info(
            "Revenue recorded",
            revenue_id=entry.id,
            ad_id=entry.ad_id,
            amount=entry.amount,
            impressions=entry.impressions,
            clicks=entry.clicks,
        )
        return entry

    def delete_revenue(self, revenue_id: str) -> None:
        if not any(r.id == revenue_id for r in self._revenue):
            raise NotFoundError("Revenue entry not found", details={"id": revenue_id})

        with self._mutation():
            self._revenue = [r for r in self._revenue if r.id != revenue_id]

        logger.info("Revenue deleted", revenue_id=revenue_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _unique_id(self) -> str:
        """Draw an id never issued before by this store."""
        new_id = self._new_id()
        while new_id in self._issued_ids:
            logger.warning("Generated id already in use, retrying", id=new_id)
            new_id = self._new_id()
        self._issued_ids.add(new_id)
        return new_id

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        """Apply a change and persist it; restore the previous state if the write fails."""
        ads, revenue = list(self._ads), list(self._revenue)
        yield
        try:
            self.storage.save(Dataset(ads=self._ads, revenue=self._revenue))
        except StorageError:
            self._ads, self._revenue = ads, revenue
            raise
