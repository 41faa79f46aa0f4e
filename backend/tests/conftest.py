"""
Plant Catalog Backend - Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── plant_store:   PlantStore over a fresh SQLite file (aiosqlite)
    ├── broken_store:  PlantStore whose database cannot be opened
    ├── mock_store:    AsyncMock standing in for PlantStore
    ├── sample_plant:  A PlantRecord as the store would return it
    └── test_client:   HTTPX AsyncClient wired to an app serving plant_store
"""

import os

# Override settings for testing BEFORE any plant_catalog imports:
# no Postgres, no seeding, quiet logs
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from plant_catalog.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    create_tables,
    dispose_engine,
)
from plant_catalog.schemas.plant import PlantRecord  # noqa: E402
from plant_catalog.services.plant_store import PlantStore  # noqa: E402


@pytest_asyncio.fixture
async def plant_store(tmp_path) -> AsyncGenerator[PlantStore, None]:
    """
    A real PlantStore backed by a throwaway SQLite file.

    Why a file (not :memory:): every store operation opens its own
    session, and each pooled :memory: connection would see its own
    empty database.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'plants.db'}")
    await create_tables(engine)
    yield PlantStore(build_session_factory(engine))
    await dispose_engine(engine)


@pytest_asyncio.fixture
async def broken_store(tmp_path) -> AsyncGenerator[PlantStore, None]:
    """A PlantStore pointed at a directory that does not exist; every call fails."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'plants.db'}")
    yield PlantStore(build_session_factory(engine))
    await dispose_engine(engine)


@pytest.fixture
def mock_store():
    """
    AsyncMock with the PlantStore surface.

    Usage:
        mock_store.find_by_name.return_value = None
        mock_store.create.side_effect = StoreError("boom")
    """
    store = AsyncMock(spec=PlantStore)
    store.create = AsyncMock()
    store.find_by_name = AsyncMock()
    store.replace_by_name = AsyncMock()
    store.delete_by_name = AsyncMock()
    store.bulk_seed = AsyncMock()
    store.ping = AsyncMock()
    return store


@pytest.fixture
def sample_plant():
    return PlantRecord(id=1, name="ROSE", type="Flower", price=10, family="Rosaceae")


@pytest_asyncio.fixture
async def test_client(plant_store):
    """
    HTTPX AsyncClient talking to an app that serves `plant_store`.

    ASGITransport does not run the lifespan, so the store is injected
    through create_app() instead.
    """
    from plant_catalog.main import create_app

    app = create_app(store=plant_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
