"""
Plant Catalog Backend - Plant Route Handlers
=============================================

What:  POST /plants, GET|PATCH|DELETE /plants/{name}.
How:   Extract the name and/or body, delegate to PlantService, serialize the
       returned record. Failures raised by the service propagate to the
       boundary error handler registered in main.py.

Status Codes:
    201  record created
    200  record read, updated or deleted
    404  no plant with that name
    500  store fault
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from plant_catalog.dependencies import get_plant_store
from plant_catalog.schemas.plant import ErrorResponse, PlantRecord
from plant_catalog.services.plant_service import plant_service
from plant_catalog.services.plant_store import PlantStore

router = APIRouter(prefix="/plants", tags=["Plants"])

NOT_FOUND = {404: {"description": "Plant not found", "model": ErrorResponse}}
SERVER_ERROR = {500: {"description": "Store fault", "model": ErrorResponse}}


@router.post(
    "",
    status_code=201,
    response_model=PlantRecord,
    response_model_exclude_none=True,
    responses={**SERVER_ERROR},
    summary="Create a plant",
    description="Stores a new plant. The name is upper-cased before it is saved.",
)
async def create_plant(
    payload: Any = Body(
        default=None, examples=[{"name": "rose", "type": "Flower", "price": 10}]
    ),
    store: PlantStore = Depends(get_plant_store),
) -> PlantRecord:
    return await plant_service.create_plant(store, payload)


@router.get(
    "/{name}",
    response_model=PlantRecord,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a plant by name",
)
async def get_plant(
    name: str,
    store: PlantStore = Depends(get_plant_store),
) -> PlantRecord:
    """Names are matched exactly; look up `ROSE`, not `rose`, after creating `rose`."""
    return await plant_service.get_plant(store, name)


@router.patch(
    "/{name}",
    response_model=PlantRecord,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Update fields of a plant",
    description="Applies only the supplied fields. A new name is stored exactly as sent.",
)
async def update_plant(
    name: str,
    payload: Any = Body(default=None, examples=[{"price": 99}]),
    store: PlantStore = Depends(get_plant_store),
) -> PlantRecord:
    return await plant_service.update_plant(store, name, payload)


@router.delete(
    "/{name}",
    response_model=PlantRecord,
    response_model_exclude_none=True,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a plant",
    description="Returns the record as it was before deletion.",
)
async def delete_plant(
    name: str,
    store: PlantStore = Depends(get_plant_store),
) -> PlantRecord:
    return await plant_service.delete_plant(store, name)
