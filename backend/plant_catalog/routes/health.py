"""
Plant Catalog Backend - Health Check Route
===========================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the database through the application's PlantStore.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from plant_catalog import __version__
from plant_catalog.dependencies import get_plant_store
from plant_catalog.exceptions import StoreError
from plant_catalog.schemas.plant import HealthResponse
from plant_catalog.services.plant_store import PlantStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
)
async def health_check(
    response: Response,
    store: PlantStore = Depends(get_plant_store),
) -> HealthResponse:
    """
    Report service and database status.

    Runs SELECT 1 rather than a real query; health checks run every few
    seconds and should cost nothing.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await store.ping()
    except StoreError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
