"""
Plant Catalog Backend - Pydantic Request/Response Schemas
==========================================================

What:  Pydantic models defining the API contract for plant records.
Why:   Input validation, serialization, and OpenAPI doc generation.
How:   PlantService validates request payloads against PlantCreate / PlantUpdate;
       PlantStore returns PlantRecord snapshots; routes serialize them.

Design Decision:
    Request bodies reach the handlers as plain dicts and are validated inside
    PlantService rather than by FastAPI. A payload that fails validation is a
    create/update failure like any other store fault, and is reported through
    the same {"err": ...} shape instead of FastAPI's 422 detail list.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PlantCreate(BaseModel):
    """
    What:  Fields accepted by POST /plants.
    Note:  `name` is stored upper-cased; see PlantStore.create.
    """
    # Empty strings count as missing
    name: str = Field(min_length=1, description="Unique plant name")
    type: str = Field(min_length=1, description="Plant type, e.g. 'Flower'")
    price: float = Field(description="Unit price")
    family: Optional[str] = Field(default=None, description="Botanical family")

    model_config = {"extra": "ignore"}


class PlantUpdate(BaseModel):
    """
    What:  Partial update accepted by PATCH /plants/{name}.
    How:   Only fields present in the request are applied
           (`model_dump(exclude_unset=True)`). `name` is applied as given.
    """
    name: Optional[str] = None
    type: Optional[str] = None
    price: Optional[float] = None
    family: Optional[str] = None

    model_config = {"extra": "ignore"}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PlantRecord(BaseModel):
    """
    What:  A stored plant as returned by every successful /plants call.
    Why:   Detached snapshot of the ORM row; safe to use after the session closes.
    """
    id: int = Field(description="Store-assigned identifier")
    name: str = Field(description="Plant name (upper-cased when created via the API)")
    type: str = Field(description="Plant type")
    price: float = Field(description="Unit price")
    family: Optional[str] = Field(default=None, description="Botanical family, if recorded")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Body of every failure response.

    Example:
        {"err": "Plant not found"}
    """
    err: str = Field(description="Short, client-safe error summary")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
