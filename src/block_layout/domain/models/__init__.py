"""Domain Models.

Core domain entities of the building layout.
"""
from __future__ import annotations

from block_layout.domain.models.block import (
    DEFAULT_BOTTOM_FLOOR,
    DEFAULT_TOP_FLOOR,
    Block,
)
from block_layout.domain.models.connection import (
    Stylobate,
    short_block_name,
    stylobate_name,
)
from block_layout.domain.models.snapshot import LayoutSnapshot
from block_layout.domain.models.layout import Layout

__all__ = [
    # Block
    "Block",
    "DEFAULT_BOTTOM_FLOOR",
    "DEFAULT_TOP_FLOOR",
    # Connection
    "Stylobate",
    "short_block_name",
    "stylobate_name",
    # Aggregate
    "LayoutSnapshot",
    "Layout",
]
