"""rotation catalog

Revision ID: 4c1f7a2d9e10
Revises:
Create Date: 2026-10-19 09:40:12.518204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "4c1f7a2d9e10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create catalog, settings, administrator and entity tables."""
    op.create_table(
        "image_record",
        sa.Column("position", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("reference", sa.Text(), nullable=False),
        sa.Column("attribution", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("position"),
    )
    op.create_table(
        "global_defaults",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("tick_duration", sa.BigInteger(), nullable=False),
        sa.Column("index_offset", sa.BigInteger(), nullable=False),
        sa.Column("use_most_recent", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "entity_override",
        sa.Column("entity_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("tick_duration", sa.BigInteger(), nullable=False),
        sa.Column("index_offset", sa.BigInteger(), nullable=False),
        sa.Column("use_most_recent", sa.Boolean(), nullable=False),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("entity_id"),
    )
    op.create_table(
        "administrator",
        sa.Column("id", sa.BigInteger(), nullable=False),
        sa.Column("identity", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "entity",
        sa.Column("entity_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("owner", sa.Text(), nullable=False),
        sa.Column("approved", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("entity_id"),
    )
    op.create_index("ix_entity_owner", "entity", ["owner"])


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index("ix_entity_owner", table_name="entity")
    op.drop_table("entity")
    op.drop_table("administrator")
    op.drop_table("entity_override")
    op.drop_table("global_defaults")
    op.drop_table("image_record")
