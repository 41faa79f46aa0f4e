"""
Plant Catalog Backend - Database Engine & Session Factory
==========================================================

What:  Async SQLAlchemy engine construction, session factory, and schema bootstrap.
Why:   Centralizes all database connection logic in one place.
How:   Builders return new objects instead of module-level singletons, so the
       application lifespan (and the test suite) decide which database a
       PlantStore talks to.
Who:   Used by the application lifespan, Alembic, and test fixtures.
When:  Engine is created once at startup; sessions are opened per store operation.

Connection Pooling Strategy:
    pool_size=10:      Persistent connections for normal load
    max_overflow=5:    Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs skip the pool arguments entirely; aiosqlite manages a single
    connection per checkout and rejects QueuePool sizing options.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from plant_catalog.config import settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers models with a shared metadata object, which both
    create_tables() and Alembic's --autogenerate read from.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def build_engine(database_url: str | None = None) -> AsyncEngine:
    """
    Create an async engine for the given URL (defaults to settings.database_url).

    Echoes SQL when LOG_LEVEL is DEBUG.
    """
    url = database_url or settings.database_url
    kwargs = {"echo": settings.log_level == "DEBUG"}

    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )

    return create_async_engine(url, **kwargs)


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after commit, so a store
# operation can return what it just wrote without another round-trip
def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory a PlantStore opens its sessions from."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(engine: AsyncEngine) -> None:
    """
    What:  Creates every table registered on Base.metadata if it is missing.
    When:  Called during application startup when DB_CREATE_TABLES is on.
    Why:   Lets a fresh database serve requests without running Alembic first.
    """
    # Import models so they register with Base before create_all runs
    from plant_catalog.models import plant  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is in place")


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
