"""
Plant Catalog Backend - Plant Service (Request Handlers)
=========================================================

What:  One handler per CRUD verb for plant records.
Why:   Keeps the "one store call, two outcomes" rule out of the HTTP layer.
How:   Each method calls exactly one PlantStore operation, then either returns
       the PlantRecord or raises a PlantCatalogError carrying the log line,
       status and client message for the boundary error handler.
Who:   Called by the routes in routes/plants.py.

Outcome Table:
    create_plant   success → record      any failure → 500 "Failed to create plant"
    get_plant      success → record      absent → 404    fault → 500 "Failed to fetch plant"
    update_plant   success → record      absent → 404    fault → 500 "Failed to update plant"
    delete_plant   success → record      absent → 404    fault → 500 "Failed to delete plant"

Design Decision:
    PlantService holds no state; the store is passed into every call so routes
    (and tests) decide which store backs the request. Nothing here retries.
"""

import logging
from typing import Any

from pydantic import ValidationError

from plant_catalog.exceptions import PlantCatalogError, PlantNotFoundError, StoreError
from plant_catalog.schemas.plant import PlantCreate, PlantRecord, PlantUpdate
from plant_catalog.services.plant_store import PlantStore

logger = logging.getLogger(__name__)


class PlantService:
    """Request handlers for the /plants resource."""

    async def create_plant(self, store: PlantStore, payload: Any) -> PlantRecord:
        """
        Validate `payload` and insert it.

        A duplicate name is not special-cased here; it surfaces as the same
        500 as any other create failure. So does a missing or non-object body.

        Raises:
            PlantCatalogError: 500 for invalid payloads and every store fault
        """
        try:
            data = PlantCreate.model_validate(payload)
            return await store.create(data)
        except (ValidationError, StoreError) as e:
            raise PlantCatalogError(
                log=f"Error creating plant: {e}",
                status=500,
                message={"err": "Failed to create plant"},
            ) from e

    async def get_plant(self, store: PlantStore, name: str) -> PlantRecord:
        """
        Look up a plant by its exact name.

        Raises:
            PlantNotFoundError: no plant has that name
            PlantCatalogError: 500 on store fault
        """
        try:
            plant = await store.find_by_name(name)
        except StoreError as e:
            raise PlantCatalogError(
                log=f"Error fetching plant: {e}",
                status=500,
                message={"err": "Failed to fetch plant"},
            ) from e

        if plant is None:
            raise PlantNotFoundError(log=f"Plant not found: {name}")
        return plant

    async def update_plant(
        self, store: PlantStore, name: str, payload: Any
    ) -> PlantRecord:
        """
        Apply the fields present in `payload` to the plant named `name`.

        `name` in the payload is stored as sent (not upper-cased). A missing
        body is an empty update; any other non-object body is invalid.

        Raises:
            PlantNotFoundError: no plant has that name
            PlantCatalogError: 500 for invalid payloads and store faults
        """
        if payload is None:
            payload = {}

        try:
            updates = PlantUpdate.model_validate(payload).model_dump(exclude_unset=True)
            plant = await store.replace_by_name(name, updates)
        except (ValidationError, StoreError) as e:
            raise PlantCatalogError(
                log=f"Error updating plant: {e}",
                status=500,
                message={"err": "Failed to update plant"},
            ) from e

        if plant is None:
            raise PlantNotFoundError()
        return plant

    async def delete_plant(self, store: PlantStore, name: str) -> PlantRecord:
        """
        Delete the plant named `name` and return what was removed.

        Raises:
            PlantNotFoundError: no plant has that name (including a repeat delete)
            PlantCatalogError: 500 on store fault
        """
        try:
            plant = await store.delete_by_name(name)
        except StoreError as e:
            raise PlantCatalogError(
                log=f"Error deleting plant: {e}",
                status=500,
                message={"err": "Failed to delete plant"},
            ) from e

        if plant is None:
            raise PlantNotFoundError()
        return plant


# Stateless; one shared instance is enough
plant_service = PlantService()
