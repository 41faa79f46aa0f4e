"""
Plant Catalog Backend - Seed Loader Tests
==========================================

What:  Tests for load_initial_plants.
Why:   Startup must survive both a fully seeded database and a failing one.
"""

import logging

import pytest

from plant_catalog.exceptions import StoreError
from plant_catalog.services.seed import SEED_PLANTS, load_initial_plants


def test_seed_names_are_pre_normalized():
    """The seed path skips normalization, so the literals must already be upper-case."""
    assert all(p["name"] == p["name"].upper() for p in SEED_PLANTS)


class TestLoadInitialPlants:

    @pytest.mark.asyncio
    async def test_first_run_inserts_everything(self, plant_store):
        assert await load_initial_plants(plant_store) == len(SEED_PLANTS)
        assert await plant_store.find_by_name("MONSTERA") is not None

    @pytest.mark.asyncio
    async def test_defaults_to_seed_list(self, mock_store):
        mock_store.bulk_seed.return_value = len(SEED_PLANTS)

        await load_initial_plants(mock_store)

        mock_store.bulk_seed.assert_awaited_once_with(SEED_PLANTS)

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, plant_store):
        await load_initial_plants(plant_store)

        assert await load_initial_plants(plant_store) == 0
        assert (await plant_store.find_by_name("LAVENDER")).price == 10

    @pytest.mark.asyncio
    async def test_store_failure_is_logged_not_raised(self, mock_store, caplog):
        mock_store.bulk_seed.side_effect = StoreError("Bulk seed failed for 1 record(s)")

        with caplog.at_level(logging.ERROR, logger="plant_catalog.services.seed"):
            assert await load_initial_plants(mock_store) == 0

        assert "Seeding initial plants failed" in caplog.text

    @pytest.mark.asyncio
    async def test_unreachable_database_does_not_raise(self, broken_store):
        assert await load_initial_plants(broken_store) == 0
