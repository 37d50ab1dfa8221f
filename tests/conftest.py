"""
Pytest configuration and fixtures.
"""

import itertools
import os
from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

os.environ.setdefault("ADTRACKER_ENV", "test")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from adtracker.api.main import create_app
from adtracker.common.storage import JsonFileStorage
from adtracker.core import Store


FIXED_NOW = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic ids: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture
def store(
    data_file: Path,
    id_factory: Callable[[], str],
    clock: Callable[[], datetime],
) -> Store:
    """Empty store persisting to a temporary file."""
    return Store(JsonFileStorage(data_file), id_factory=id_factory, clock=clock)


@pytest_asyncio.fixture(scope="function")
async def client(store: Store) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client bound to the temporary store."""
    app = create_app(store=store)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def sample_ad() -> dict[str, Any]:
    """Sample create-ad request body."""
    return {"name": "Banner A", "platform": "Google", "type": "banner"}


@pytest.fixture
def sample_revenue() -> dict[str, Any]:
    """Sample create-revenue request body (without adId)."""
    return {"amount": "10.50", "impressions": "1000", "clicks": "50"}
