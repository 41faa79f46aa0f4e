"""Create plants table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `plants` table and its unique index on `name`.
Why:   The unique index is what makes a repeated name a duplicate-key fault;
       the application never checks for duplicates itself.

Rollback: downgrade() drops the table entirely (destructive - all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the plants table. Column docs live in plant_catalog/models/plant.py."""
    op.create_table(
        "plants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        # Optional; rows written before the family field existed leave it NULL
        sa.Column("family", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("ix_plants_name", "plants", ["name"], unique=True)


def downgrade() -> None:
    """Drop the plants table (all plant data is lost)."""
    op.drop_index("ix_plants_name", table_name="plants")
    op.drop_table("plants")
