"""
Plant Catalog Backend - Startup Sequence Tests
===============================================

What:  Tests for the application lifespan.
How:   Enters app.router.lifespan_context directly, since ASGITransport
       never sends lifespan events.

What we test:
    ✅ Tables and seed data exist before the first request is served
    ✅ An unreachable database is logged and startup still completes
"""

import pytest
from httpx import AsyncClient, ASGITransport

from plant_catalog import main
from plant_catalog.config import settings
from plant_catalog.services.seed import SEED_PLANTS


@pytest.fixture
def startup_settings(monkeypatch):
    """Seeding on, table creation on, logging left to pytest."""
    monkeypatch.setattr(settings, "seed_on_startup", True)
    monkeypatch.setattr(settings, "db_create_tables", True)
    monkeypatch.setattr(main, "setup_logging", lambda: None)
    return settings


class TestLifespan:

    @pytest.mark.asyncio
    async def test_seed_is_loaded_before_serving(self, startup_settings, monkeypatch, tmp_path):
        monkeypatch.setattr(
            startup_settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'plants.db'}"
        )
        app = main.create_app()

        async with app.router.lifespan_context(app):
            store = app.state.plant_store
            for plant in SEED_PLANTS:
                assert await store.find_by_name(plant["name"]) is not None

            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/plants/MONSTERA")

            assert response.status_code == 200
            assert response.json()["type"] == "Tropical"

    @pytest.mark.asyncio
    async def test_unreachable_database_does_not_block_startup(
        self, startup_settings, monkeypatch, tmp_path
    ):
        monkeypatch.setattr(
            startup_settings,
            "database_url",
            f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'plants.db'}",
        )
        app = main.create_app()

        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                health = await client.get("/health")
                read = await client.get("/plants/MONSTERA")

        assert health.status_code == 503
        assert read.status_code == 500
        assert read.json() == {"err": "Failed to fetch plant"}

    @pytest.mark.asyncio
    async def test_injected_store_is_kept(self, startup_settings, plant_store):
        app = main.create_app(store=plant_store)

        async with app.router.lifespan_context(app):
            assert app.state.plant_store is plant_store
            assert await plant_store.find_by_name("LAVENDER") is not None
