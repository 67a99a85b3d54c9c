"""Domain Value Objects.

Immutable objects that represent domain concepts without identity.
"""
from __future__ import annotations

from block_layout.domain.value_objects.block_pair import BlockPair
from block_layout.domain.value_objects.cell_category import CellCategory, FloorType
from block_layout.domain.value_objects.floor_extent import FloorExtent

__all__ = [
    "BlockPair",
    "CellCategory", "FloorType",
    "FloorExtent",
]
