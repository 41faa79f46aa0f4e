"""
Plant Catalog Backend - Plant Service Unit Tests
=================================================

What:  Tests for the per-verb request handlers in PlantService.
How:   Uses a mocked PlantStore; no database involved.

What we test:
    ✅ Each handler makes exactly one store call
    ✅ Absent records become PlantNotFoundError (404, {"err": "Plant not found"})
    ✅ Store faults and invalid payloads become 500 failures with per-verb messages
    ✅ Log lines are present where the handlers supply them
"""

import pytest

from plant_catalog.exceptions import (
    DuplicateKeyError,
    PlantCatalogError,
    PlantNotFoundError,
    StoreError,
)
from plant_catalog.schemas.plant import PlantCreate
from plant_catalog.services.plant_service import PlantService


class TestCreatePlant:
    """Tests for create_plant."""

    def setup_method(self):
        self.service = PlantService()

    @pytest.mark.asyncio
    async def test_create_success(self, mock_store, sample_plant):
        mock_store.create.return_value = sample_plant

        result = await self.service.create_plant(
            mock_store, {"name": "rose", "type": "Flower", "price": 10, "color": "red"}
        )

        assert result == sample_plant
        mock_store.create.assert_awaited_once_with(
            PlantCreate(name="rose", type="Flower", price=10)
        )

    @pytest.mark.asyncio
    async def test_create_duplicate_is_plain_500(self, mock_store):
        mock_store.create.side_effect = DuplicateKeyError(name="ROSE")

        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.create_plant(
                mock_store, {"name": "rose", "type": "Flower", "price": 10}
            )

        err = exc_info.value
        assert err.status == 500
        assert err.message == {"err": "Failed to create plant"}
        assert err.log.startswith("Error creating plant:")

    @pytest.mark.asyncio
    async def test_create_invalid_payload_never_reaches_store(self, mock_store):
        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.create_plant(mock_store, {"name": "rose"})

        assert exc_info.value.status == 500
        assert exc_info.value.message == {"err": "Failed to create plant"}
        mock_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, ["rose"], {"name": "", "type": "Flower", "price": 1}])
    async def test_create_rejected_payloads(self, mock_store, payload):
        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.create_plant(mock_store, payload)

        assert exc_info.value.message == {"err": "Failed to create plant"}
        mock_store.create.assert_not_awaited()


class TestGetPlant:
    """Tests for get_plant."""

    def setup_method(self):
        self.service = PlantService()

    @pytest.mark.asyncio
    async def test_get_found(self, mock_store, sample_plant):
        mock_store.find_by_name.return_value = sample_plant

        assert await self.service.get_plant(mock_store, "ROSE") == sample_plant
        mock_store.find_by_name.assert_awaited_once_with("ROSE")

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_store):
        mock_store.find_by_name.return_value = None

        with pytest.raises(PlantNotFoundError) as exc_info:
            await self.service.get_plant(mock_store, "ROSE")

        err = exc_info.value
        assert err.status == 404
        assert err.message == {"err": "Plant not found"}
        assert err.log == "Plant not found: ROSE"

    @pytest.mark.asyncio
    async def test_get_store_fault(self, mock_store):
        mock_store.find_by_name.side_effect = StoreError("connection reset")

        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.get_plant(mock_store, "ROSE")

        assert exc_info.value.status == 500
        assert exc_info.value.message == {"err": "Failed to fetch plant"}
        assert "connection reset" in exc_info.value.log


class TestUpdatePlant:
    """Tests for update_plant."""

    def setup_method(self):
        self.service = PlantService()

    @pytest.mark.asyncio
    async def test_update_passes_only_supplied_fields(self, mock_store, sample_plant):
        mock_store.replace_by_name.return_value = sample_plant

        await self.service.update_plant(mock_store, "ROSE", {"price": 99, "bogus": 1})

        mock_store.replace_by_name.assert_awaited_once_with("ROSE", {"price": 99.0})

    @pytest.mark.asyncio
    async def test_update_keeps_lowercase_name(self, mock_store, sample_plant):
        mock_store.replace_by_name.return_value = sample_plant

        await self.service.update_plant(mock_store, "ROSE", {"name": "rosa"})

        mock_store.replace_by_name.assert_awaited_once_with("ROSE", {"name": "rosa"})

    @pytest.mark.asyncio
    async def test_update_without_body_is_empty_update(self, mock_store, sample_plant):
        mock_store.replace_by_name.return_value = sample_plant

        assert await self.service.update_plant(mock_store, "ROSE", None) == sample_plant
        mock_store.replace_by_name.assert_awaited_once_with("ROSE", {})

    @pytest.mark.asyncio
    async def test_update_non_object_body(self, mock_store):
        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.update_plant(mock_store, "ROSE", ["price", 1])

        assert exc_info.value.status == 500
        assert exc_info.value.message == {"err": "Failed to update plant"}
        mock_store.replace_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_not_found_has_no_log(self, mock_store):
        mock_store.replace_by_name.return_value = None

        with pytest.raises(PlantNotFoundError) as exc_info:
            await self.service.update_plant(mock_store, "ROSE", {"price": 1})

        assert exc_info.value.status == 404
        assert exc_info.value.log is None

    @pytest.mark.asyncio
    async def test_update_store_fault(self, mock_store):
        mock_store.replace_by_name.side_effect = StoreError("disk full")

        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.update_plant(mock_store, "ROSE", {"price": 1})

        assert exc_info.value.status == 500
        assert exc_info.value.message == {"err": "Failed to update plant"}

    @pytest.mark.asyncio
    async def test_update_invalid_price(self, mock_store):
        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.update_plant(mock_store, "ROSE", {"price": "a lot"})

        assert exc_info.value.message == {"err": "Failed to update plant"}
        mock_store.replace_by_name.assert_not_awaited()


class TestDeletePlant:
    """Tests for delete_plant."""

    def setup_method(self):
        self.service = PlantService()

    @pytest.mark.asyncio
    async def test_delete_returns_removed_record(self, mock_store, sample_plant):
        mock_store.delete_by_name.return_value = sample_plant

        assert await self.service.delete_plant(mock_store, "ROSE") == sample_plant
        mock_store.delete_by_name.assert_awaited_once_with("ROSE")

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_store):
        mock_store.delete_by_name.return_value = None

        with pytest.raises(PlantNotFoundError):
            await self.service.delete_plant(mock_store, "ROSE")

    @pytest.mark.asyncio
    async def test_delete_store_fault(self, mock_store):
        mock_store.delete_by_name.side_effect = StoreError()

        with pytest.raises(PlantCatalogError) as exc_info:
            await self.service.delete_plant(mock_store, "ROSE")

        assert exc_info.value.status == 500
        assert exc_info.value.message == {"err": "Failed to delete plant"}
