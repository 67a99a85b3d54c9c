"""Layout Stores.

Mutable state of one layout: the ordered blocks and the connectors
between them.
"""
from __future__ import annotations

from block_layout.domain.stores.block_store import BlockStore
from block_layout.domain.stores.connection_store import (
    PARKING_BOTTOM_FLOOR,
    ConnectionStore,
    ConnectorChange,
)

__all__ = [
    "BlockStore",
    "ConnectionStore",
    "ConnectorChange",
    "PARKING_BOTTOM_FLOOR",
]
