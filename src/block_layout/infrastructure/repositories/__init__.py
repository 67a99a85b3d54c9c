"""Repository Implementations.

Database and in-memory implementations of the layout repository interface.
"""
from __future__ import annotations

from block_layout.infrastructure.repositories.layout_mapper import (
    LayoutRows,
    rows_to_snapshot,
    snapshot_to_rows,
)
from block_layout.infrastructure.repositories.layout_repository import LayoutRepository
from block_layout.infrastructure.repositories.memory_repository import InMemoryLayoutRepository
from block_layout.infrastructure.repositories.unit_of_work import (
    DatabaseLayoutRepository,
    UnitOfWork,
)

__all__ = [
    "LayoutRows",
    "rows_to_snapshot",
    "snapshot_to_rows",
    "LayoutRepository",
    "InMemoryLayoutRepository",
    "DatabaseLayoutRepository",
    "UnitOfWork",
]
