"""Database Infrastructure.

SQLAlchemy ORM models and connection management.
"""
from __future__ import annotations

from block_layout.infrastructure.database.connection import (
    close_database,
    get_engine,
    get_session_factory,
    init_database,
)
from block_layout.infrastructure.database.models import (
    Base,
    BlockConnectionORM,
    BlockFloorMappingORM,
    LayoutBlockORM,
)

__all__ = [
    # Connection
    "get_engine",
    "get_session_factory",
    "init_database",
    "close_database",
    # Models
    "Base",
    "LayoutBlockORM",
    "BlockFloorMappingORM",
    "BlockConnectionORM",
]
