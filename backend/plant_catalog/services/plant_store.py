"""
Plant Catalog Backend - Plant Store (Record Store Adapter)
===========================================================

What:  Persistence operations for the `plants` table.
Why:   Keeps SQLAlchemy out of the request handlers. Handlers see plain
       PlantRecord snapshots, `None` for "absent", and StoreError subclasses.
How:   Every operation opens its own session from the injected factory,
       performs one unit of work, and commits.
Who:   Built by the application lifespan (or a test fixture) and handed to
       routes through `get_plant_store`.

Operations:
    create           → insert, name upper-cased
    find_by_name     → exact-match lookup
    replace_by_name  → apply supplied fields, no re-normalization
    delete_by_name   → remove and return the prior state
    bulk_seed        → insert many, each in its own transaction, duplicates skipped

Error Mapping:
    IntegrityError on the unique index  → DuplicateKeyError
    any other SQLAlchemyError or OSError → StoreError
"""

import logging
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from plant_catalog.exceptions import DuplicateKeyError, StoreError
from plant_catalog.models.plant import Plant
from plant_catalog.schemas.plant import PlantCreate, PlantRecord

logger = logging.getLogger(__name__)

# Driver-level connection failures (e.g. asyncpg refusing a connection) surface
# as OSError rather than a wrapped SQLAlchemy error
STORE_FAULTS = (SQLAlchemyError, OSError)

# SQLSTATE for unique_violation (PostgreSQL)
UNIQUE_VIOLATION = "23505"


def is_duplicate_key(exc: IntegrityError) -> bool:
    """
    Tell a unique-index violation apart from other integrity failures
    (NOT NULL, CHECK, ...).

    asyncpg exposes the SQLSTATE; SQLite only reports it in the message.
    """
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    text_ = str(orig).lower()
    return "unique constraint" in text_ or "duplicate key" in text_


class PlantStore:
    """
    Record store adapter over the `plants` table.

    Args:
        session_factory: async_sessionmaker bound to the application's engine.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, data: PlantCreate) -> PlantRecord:
        """
        Insert a new plant with its name upper-cased.

        Raises:
            DuplicateKeyError: a plant with the normalized name already exists
            StoreError: any other database failure
        """
        plant = Plant(
            name=data.name.upper(),
            type=data.type,
            price=data.price,
            family=data.family,
        )
        try:
            async with self._session_factory() as session:
                session.add(plant)
                await session.flush()
                record = PlantRecord.model_validate(plant)
                await session.commit()
        except IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateKeyError(name=plant.name) from e
            raise StoreError(
                message=f"Integrity error inserting plant: {e.orig}",
                context={"name": plant.name},
            ) from e
        except STORE_FAULTS as e:
            raise StoreError(
                message=f"Could not insert plant: {e}",
                context={"name": plant.name, "error_type": type(e).__name__},
            ) from e

        logger.debug("Inserted plant %s (id=%s)", record.name, record.id)
        return record

    async def find_by_name(self, name: str) -> Optional[PlantRecord]:
        """Return the plant whose name equals `name` exactly, or None."""
        try:
            async with self._session_factory() as session:
                plant = await self._load(session, name)
                return PlantRecord.model_validate(plant) if plant else None
        except STORE_FAULTS as e:
            raise StoreError(
                message=f"Could not read plant: {e}",
                context={"name": name, "error_type": type(e).__name__},
            ) from e

    async def replace_by_name(
        self, name: str, updates: Dict[str, Any]
    ) -> Optional[PlantRecord]:
        """
        Apply `updates` to the plant named `name` and return the new state.

        Supplied values are written as given, including `name`.
        Returns None when nothing matches. Concurrent calls are last-write-wins.
        """
        try:
            async with self._session_factory() as session:
                plant = await self._load(session, name)
                if plant is None:
                    return None
                for field, value in updates.items():
                    setattr(plant, field, value)
                await session.flush()
                record = PlantRecord.model_validate(plant)
                await session.commit()
                return record
        except IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateKeyError(name=updates.get("name"), context={"matched": name}) from e
            raise StoreError(
                message=f"Integrity error updating plant: {e.orig}",
                context={"name": name},
            ) from e
        except STORE_FAULTS as e:
            raise StoreError(
                message=f"Could not update plant: {e}",
                context={"name": name, "error_type": type(e).__name__},
            ) from e

    async def delete_by_name(self, name: str) -> Optional[PlantRecord]:
        """Delete the plant named `name`; return it as it was, or None."""
        try:
            async with self._session_factory() as session:
                plant = await self._load(session, name)
                if plant is None:
                    return None
                record = PlantRecord.model_validate(plant)
                await session.delete(plant)
                await session.commit()
                return record
        except STORE_FAULTS as e:
            raise StoreError(
                message=f"Could not delete plant: {e}",
                context={"name": name, "error_type": type(e).__name__},
            ) from e

    async def bulk_seed(self, records: Iterable[Dict[str, Any]]) -> int:
        """
        Insert `records` as given (no normalization), skipping duplicates.

        Each record gets its own transaction, so one failure never prevents
        the rest from being attempted.

        Returns:
            Number of records actually inserted.

        Raises:
            StoreError: after every record was attempted, if any failure was
                        something other than a duplicate name.
        """
        inserted = 0
        skipped = []
        failures = []

        for values in records:
            try:
                async with self._session_factory() as session:
                    session.add(Plant(**values))
                    await session.commit()
                inserted += 1
            except IntegrityError as e:
                if is_duplicate_key(e):
                    skipped.append(values.get("name"))
                else:
                    failures.append((values.get("name"), str(e.orig)))
            except STORE_FAULTS as e:
                failures.append((values.get("name"), str(e)))

        if skipped:
            logger.info("Bulk seed skipped %d existing plant(s): %s", len(skipped), skipped)

        if failures:
            raise StoreError(
                message=f"Bulk seed failed for {len(failures)} record(s)",
                context={"inserted": inserted, "failures": failures},
            )

        return inserted

    async def ping(self) -> None:
        """Run a trivial query; raises StoreError when the database is unreachable."""
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except STORE_FAULTS as e:
            raise StoreError(message=f"Database unreachable: {e}") from e

    @staticmethod
    async def _load(session: AsyncSession, name: str) -> Optional[Plant]:
        result = await session.execute(select(Plant).where(Plant.name == name))
        return result.scalar_one_or_none()
