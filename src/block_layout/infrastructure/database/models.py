"""SQLAlchemy ORM Models.

Three tables per project layout: the ordered blocks, one row per block
floor with its floor type, and one row per connector.
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)
from sqlalchemy.sql import func


# =============================================================================
# Base Class
# =============================================================================


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# =============================================================================
# Layout Tables
# =============================================================================


class LayoutBlockORM(Base):
    """Block of a project layout, in layout order."""

    __tablename__ = "layout_blocks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[str] = mapped_column(String(64), nullable=False)
    block_id: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    bottom_floor: Mapped[int] = mapped_column(Integer, nullable=False)
    top_floor: Mapped[int] = mapped_column(Integer, nullable=False)
    is_parking: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    __table_args__ = (
        UniqueConstraint("project_id", "block_id", name="layout_blocks_uk_block"),
        Index("idx_layout_blocks_project", "project_id", "position"),
    )


class BlockFloorMappingORM(Base):
    """Floor of a block with its floor type."""

    __tablename__ = "block_floor_mapping"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[str] = mapped_column(String(64), nullable=False)
    block_id: Mapped[int] = mapped_column(Integer, nullable=False)
    floor_number: Mapped[int] = mapped_column(Integer, nullable=False)
    floor_type: Mapped[str] = mapped_column(String(32), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    __table_args__ = (
        UniqueConstraint(
            "project_id", "block_id", "floor_number",
            name="block_floor_mapping_uk_floor",
        ),
        Index("idx_block_floor_mapping_project", "project_id"),
    )


class BlockConnectionORM(Base):
    """Stylobate or underground connection between neighbouring blocks."""

    __tablename__ = "block_connections_mapping"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[str] = mapped_column(String(64), nullable=False)
    from_block_id: Mapped[int] = mapped_column(Integer, nullable=False)
    to_block_id: Mapped[int] = mapped_column(Integer, nullable=False)
    connection_type: Mapped[str] = mapped_column(String(32), nullable=False)
    floors_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    __table_args__ = (
        UniqueConstraint(
            "project_id", "from_block_id", "to_block_id", "connection_type",
            name="block_connections_mapping_uk_pair",
        ),
        Index("idx_block_connections_mapping_project", "project_id"),
    )
