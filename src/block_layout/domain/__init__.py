"""Domain Layer.

Contains the layout entities, value objects, stores and repository interfaces.
This layer has NO external dependencies (no SQLAlchemy, no frameworks).
"""
from __future__ import annotations

from block_layout.domain.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    LastBlockRemovalError,
    PersistenceFailureError,
    ValidationError,
)
from block_layout.domain.models import (
    Block,
    Layout,
    LayoutSnapshot,
    Stylobate,
)
from block_layout.domain.repositories import ILayoutRepository
from block_layout.domain.stores import (
    BlockStore,
    ConnectionStore,
    ConnectorChange,
)
from block_layout.domain.value_objects import (
    BlockPair,
    CellCategory,
    FloorExtent,
    FloorType,
)

__all__ = [
    # Exceptions
    "DomainError",
    "EntityNotFoundError",
    "InvariantViolationError",
    "LastBlockRemovalError",
    "PersistenceFailureError",
    "ValidationError",
    # Models
    "Block",
    "Layout",
    "LayoutSnapshot",
    "Stylobate",
    # Stores
    "BlockStore",
    "ConnectionStore",
    "ConnectorChange",
    # Value Objects
    "BlockPair",
    "CellCategory",
    "FloorExtent",
    "FloorType",
    # Repositories
    "ILayoutRepository",
]
