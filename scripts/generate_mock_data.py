#!/usr/bin/env python3
"""
Generate mock data for testing and development.
"""

import random
from datetime import timedelta

from adtracker.common.config import get_settings
from adtracker.common.storage import JsonFileStorage
from adtracker.common.utils import current_date
from adtracker.core import Store

PLATFORMS = ["Google", "Meta", "TikTok", "LinkedIn", "X"]
AD_TYPES = ["banner", "video", "native", "text"]


def generate_mock_data(
    data_file: str,
    num_ads: int = 10,
    days_per_ad: int = 7,
) -> None:
    """Generate mock ads with daily revenue entries."""
    store = Store(JsonFileStorage(data_file))
    today = current_date()

    print(f"Generating {num_ads} ads...")

    for i in range(num_ads):
        ad = store.add_ad(
            name=f"Ad {i + 1}",
            platform=random.choice(PLATFORMS),
            type=random.choice(AD_TYPES),
        )
        print(f"  Created ad: {ad.name} (ID: {ad.id})")

        for day in range(days_per_ad):
            impressions = random.randint(500, 50000)
            clicks = random.randint(0, impressions // 20)
            store.add_revenue(
                ad_id=ad.id,
                amount=round(random.uniform(0.5, 250.0), 2),
                impressions=impressions,
                clicks=clicks,
                date=today - timedelta(days=day),
            )

    print(f"\nGenerated:")
    print(f"  - {num_ads} ads")
    print(f"  - {num_ads * days_per_ad} revenue entries")
    print(f"  -> {data_file}")


def main() -> None:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Generate mock data for AdTracker")
    parser.add_argument(
        "--data-file",
        default=get_settings().storage.data_file,
        help="Data file to write (appends to existing data)",
    )
    parser.add_argument("--ads", type=int, default=10, help="Number of ads")
    parser.add_argument("--days", type=int, default=7, help="Revenue entries per ad")

    args = parser.parse_args()

    generate_mock_data(
        data_file=args.data_file,
        num_ads=args.ads,
        days_per_ad=args.days,
    )


if __name__ == "__main__":
    main()
