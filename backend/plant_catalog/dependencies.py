"""
Plant Catalog Backend - FastAPI Dependencies
=============================================

What:  Resolves the PlantStore a request should use.
Why:   The store is attached to the application (app.state.plant_store) by the
       lifespan or by create_app(store=...), never imported as a module global.
       Tests build an app around their own store and every route picks it up.
"""

from fastapi import Request

from plant_catalog.services.plant_store import PlantStore


def get_plant_store(request: Request) -> PlantStore:
    """
    FastAPI dependency returning the application's PlantStore.

    Example usage in a route:
        @router.get("/plants/{name}")
        async def get_plant(name: str, store: PlantStore = Depends(get_plant_store)):
            ...
    """
    return request.app.state.plant_store
