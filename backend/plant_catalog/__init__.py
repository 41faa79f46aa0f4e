"""
Plant Catalog Backend - Application Package Initializer
========================================================

What: Marks the `plant_catalog` directory as a Python package.
Why:  Enables module imports like `from plant_catalog.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Handlers & Store)     │  ← One store call per request
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the database directly; they receive a PlantStore
    through FastAPI's dependency injection and hand it to PlantService.
"""

__version__ = "1.0.0"
