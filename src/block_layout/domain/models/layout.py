"""Layout Aggregate Root.

Ties the block store and the connection store together so that changes
to blocks reach the connectors that reference them.
"""
from __future__ import annotations

from block_layout.domain.models.block import Block
from block_layout.domain.models.snapshot import LayoutSnapshot
from block_layout.domain.stores import BlockStore, ConnectionStore


class Layout:
    """Building layout Aggregate Root.

    Owns one BlockStore and one ConnectionStore. Operations that touch
    both (rename, removal) go through the aggregate; single-store
    operations can use ``layout.blocks`` / ``layout.connections``
    directly.

    Usage:
        layout = Layout.from_snapshot(snapshot)
        layout.add_block()
        layout.connections.apply_connector_click(1, 2, floor=1)
        saved = layout.snapshot()
    """

    def __init__(self, snapshot: LayoutSnapshot | None = None) -> None:
        self.blocks = BlockStore()
        self.connections = ConnectionStore(self.blocks)
        self.restore(snapshot or LayoutSnapshot.default())

    @classmethod
    def from_snapshot(cls, snapshot: LayoutSnapshot) -> Layout:
        return cls(snapshot)

    def snapshot(self) -> LayoutSnapshot:
        """Deep copy of the current state."""
        return LayoutSnapshot.create(
            blocks=self.blocks,
            stylobates=self.connections.stylobates,
            underground_connections=self.connections.underground_connections,
            parking_block_ids=self.connections.parking_block_ids,
        )

    def restore(self, snapshot: LayoutSnapshot) -> None:
        """Replace the current state with a copy of the snapshot."""
        self.blocks.replace_all(snapshot.blocks)
        self.connections.replace_all(
            snapshot.stylobates,
            snapshot.underground_connections,
            snapshot.parking_block_ids,
        )

    def add_block(self) -> Block:
        return self.blocks.add_block()

    def remove_block(self, block_id: int) -> Block | None:
        """Remove a block and every connector that references it.

        The blocks on either side become neighbours but no connector is
        created between them.

        Raises:
            LastBlockRemovalError: If it is the only block left
        """
        removed = self.blocks.remove_block(block_id)
        if removed is not None:
            self.connections.cascade_remove_block(block_id)
        return removed

    def remove_stylobate(self, from_block_id: int, to_block_id: int) -> bool:
        """Delete a stylobate whatever its floor count.

        Returns:
            True if a stylobate was removed, False if the pair had none
        """
        return self.connections.remove_stylobate(from_block_id, to_block_id)

    def rename_block(self, block_id: int, name: str) -> bool:
        """Rename a block and refresh the stylobate names next to it."""
        if not self.blocks.rename_block(block_id, name):
            return False
        self.connections.refresh_names()
        return True
