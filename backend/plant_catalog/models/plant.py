"""
Plant Catalog Backend - Plant SQLAlchemy Model
===============================================

What:  ORM model representing the `plants` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PlantStore for every read and write.

Table Design:
    - Integer surrogate key: the API addresses records by name, never by id
    - name: UNIQUE index, the only lookup key the API exposes
    - family: nullable, older records were written without it
"""

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from plant_catalog.database import Base


class Plant(Base):
    """
    A single catalog entry.

    Lifecycle:
        1. Created through POST /plants (name upper-cased) or the startup seed
        2. Fields replaced in place through PATCH /plants/{name}
        3. Removed through DELETE /plants/{name}; there is no soft delete
    """

    __tablename__ = "plants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Uniqueness is enforced here, not in Python; a violation reaches the
    # store adapter as an IntegrityError
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    type: Mapped[str] = mapped_column(String(255), nullable=False)

    price: Mapped[float] = mapped_column(Float, nullable=False)

    family: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    __table_args__ = (
        Index("ix_plants_name", "name", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Plant(id={self.id}, name='{self.name}', type='{self.type}')>"
