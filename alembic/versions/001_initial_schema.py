"""Initial layout schema

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create layout tables."""

    # ==========================================================================
    # LAYOUT BLOCKS
    # ==========================================================================
    op.create_table(
        "layout_blocks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.String(64), nullable=False),
        sa.Column("block_id", sa.Integer, nullable=False),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("bottom_floor", sa.Integer, nullable=False),
        sa.Column("top_floor", sa.Integer, nullable=False),
        sa.Column("is_parking", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint("project_id", "block_id", name="layout_blocks_uk_block"),
        sa.CheckConstraint("top_floor >= bottom_floor", name="layout_blocks_ck_range"),
    )
    op.create_index("idx_layout_blocks_project", "layout_blocks", ["project_id", "position"])

    # ==========================================================================
    # BLOCK FLOOR MAPPING
    # ==========================================================================
    op.create_table(
        "block_floor_mapping",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.String(64), nullable=False),
        sa.Column("block_id", sa.Integer, nullable=False),
        sa.Column("floor_number", sa.Integer, nullable=False),
        sa.Column("floor_type", sa.String(32), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "project_id", "block_id", "floor_number",
            name="block_floor_mapping_uk_floor",
        ),
        sa.CheckConstraint(
            "floor_type IN ('underground_parking', 'typical', 'technical', 'stylobate', 'roof')",
            name="block_floor_mapping_ck_type",
        ),
    )
    op.create_index("idx_block_floor_mapping_project", "block_floor_mapping", ["project_id"])

    # ==========================================================================
    # BLOCK CONNECTIONS MAPPING
    # ==========================================================================
    op.create_table(
        "block_connections_mapping",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.String(64), nullable=False),
        sa.Column("from_block_id", sa.Integer, nullable=False),
        sa.Column("to_block_id", sa.Integer, nullable=False),
        sa.Column("connection_type", sa.String(32), nullable=False),
        sa.Column("floors_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "project_id", "from_block_id", "to_block_id", "connection_type",
            name="block_connections_mapping_uk_pair",
        ),
        sa.CheckConstraint(
            "(connection_type = 'stylobate' AND floors_count >= 1)"
            " OR (connection_type = 'underground_parking' AND floors_count = 0)",
            name="block_connections_mapping_ck_floors",
        ),
    )
    op.create_index(
        "idx_block_connections_mapping_project",
        "block_connections_mapping",
        ["project_id"],
    )


def downgrade() -> None:
    """Drop layout tables."""
    op.drop_table("block_connections_mapping")
    op.drop_table("block_floor_mapping")
    op.drop_table("layout_blocks")
