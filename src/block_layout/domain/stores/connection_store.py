"""Connection Store.

Owns stylobates, underground connections and the parking member set.
Blocks are referenced by id only; the block store stays the owner.
"""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from block_layout.domain.models.connection import Stylobate, stylobate_name
from block_layout.domain.stores.block_store import BlockStore
from block_layout.domain.value_objects import BlockPair

PARKING_BOTTOM_FLOOR = -2


def _pair_or_none(from_block_id: int, to_block_id: int) -> BlockPair | None:
    """Pair for a lookup; a block paired with itself has no connectors."""
    if from_block_id == to_block_id:
        return None
    return BlockPair(from_block_id, to_block_id)


class ConnectorChange(str, Enum):
    """What a connector click did."""

    NONE = "none"
    UNDERGROUND_ADDED = "underground_added"
    UNDERGROUND_REMOVED = "underground_removed"
    STYLOBATE_CREATED = "stylobate_created"
    STYLOBATE_GROWN = "stylobate_grown"
    STYLOBATE_SHRUNK = "stylobate_shrunk"
    STYLOBATE_REMOVED = "stylobate_removed"

    @property
    def changed(self) -> bool:
        return self is not ConnectorChange.NONE


class ConnectionStore:
    """Connectors between neighbouring blocks plus parking flags.

    A stylobate is present iff its pair is a key of the stylobate map;
    there is never a stored stylobate with zero floors. Underground
    connections store only their pair, their floor range is computed
    from the two blocks on demand.
    """

    def __init__(self, blocks: BlockStore) -> None:
        self._blocks = blocks
        self._stylobates: dict[BlockPair, Stylobate] = {}
        self._underground: set[BlockPair] = set()
        self._parking: set[int] = set()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def stylobates(self) -> tuple[Stylobate, ...]:
        return tuple(self._stylobates.values())

    @property
    def underground_connections(self) -> tuple[BlockPair, ...]:
        return tuple(sorted(self._underground))

    @property
    def parking_block_ids(self) -> frozenset[int]:
        return frozenset(self._parking)

    def stylobate(self, from_block_id: int, to_block_id: int) -> Stylobate | None:
        pair = _pair_or_none(from_block_id, to_block_id)
        return self._stylobates.get(pair) if pair is not None else None

    def has_underground(self, from_block_id: int, to_block_id: int) -> bool:
        return _pair_or_none(from_block_id, to_block_id) in self._underground

    def is_parking(self, block_id: int) -> bool:
        return block_id in self._parking

    def underground_covers(self, from_block_id: int, to_block_id: int, floor: int) -> bool:
        """Check if an underground connection spans the given floor.

        The span runs from the higher of the two bottom floors up to
        floor 0 and follows the blocks as they change.
        """
        if floor > 0 or not self.has_underground(from_block_id, to_block_id):
            return False
        left = self._blocks.get(from_block_id)
        right = self._blocks.get(to_block_id)
        if left is None or right is None:
            return False
        return floor >= max(left.bottom_floor, right.bottom_floor)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def replace_all(
        self,
        stylobates: Iterable[Stylobate],
        underground_connections: Iterable[BlockPair],
        parking_block_ids: Iterable[int],
    ) -> None:
        """Replace all connector state (used on load and reset)."""
        self._stylobates = {s.pair: s for s in stylobates}
        self._underground = set(underground_connections)
        self._parking = set(parking_block_ids)
        self.refresh_names()

    def toggle_underground(self, from_block_id: int, to_block_id: int) -> bool:
        """Create or remove the underground connection of a pair.

        Returns:
            True if toggled, False if the blocks are not neighbours
        """
        if not self._blocks.are_adjacent(from_block_id, to_block_id):
            return False
        pair = BlockPair(from_block_id, to_block_id)
        if pair in self._underground:
            self._underground.discard(pair)
        else:
            self._underground.add(pair)
        return True

    def toggle_parking_membership(self, block_id: int) -> bool:
        """Flip a block's parking flag and clamp its bottom floor.

        Joining: a block without underground floors gets two
        (bottom floor -2); an existing underground range is kept.
        Leaving: the underground range is dropped (bottom floor 1).
        Toggling twice therefore does not restore a bottom floor other
        than -2.

        Returns:
            True if toggled, False if the block is unknown
        """
        block = self._blocks.get(block_id)
        if block is None:
            return False
        if block_id in self._parking:
            self._parking.discard(block_id)
            if block.bottom_floor < 0:
                self._blocks.set_bottom_floor(block_id, max(1, block.bottom_floor))
        else:
            self._parking.add(block_id)
            if block.bottom_floor >= 1:
                self._blocks.set_bottom_floor(block_id, PARKING_BOTTOM_FLOOR)
        return True

    def apply_connector_click(self, from_block_id: int, to_block_id: int, floor: int) -> ConnectorChange:
        """Interpret a click on a connector cell.

        Floors 0 and below toggle the underground connection. Above
        ground only boundary cells act: floor 1 creates a stylobate or
        removes its lowest floor; the current top floor and the cell just
        above it add a floor. Every other click is ignored.

        Args:
            from_block_id: Left block of the pair
            to_block_id: Right block of the pair
            floor: Clicked floor

        Returns:
            The change that was applied
        """
        if not self._blocks.are_adjacent(from_block_id, to_block_id):
            return ConnectorChange.NONE

        if floor <= 0:
            self.toggle_underground(from_block_id, to_block_id)
            if self.has_underground(from_block_id, to_block_id):
                return ConnectorChange.UNDERGROUND_ADDED
            return ConnectorChange.UNDERGROUND_REMOVED

        pair = BlockPair(from_block_id, to_block_id)
        current = self._stylobates.get(pair)

        if current is None:
            if floor != 1:
                return ConnectorChange.NONE
            self._stylobates[pair] = Stylobate(
                from_block_id=from_block_id,
                to_block_id=to_block_id,
                floors=1,
                name=self._name_for(pair),
            )
            return ConnectorChange.STYLOBATE_CREATED

        if floor == 1:
            if current.floors == 1:
                del self._stylobates[pair]
                return ConnectorChange.STYLOBATE_REMOVED
            self._stylobates[pair] = current.with_floors(current.floors - 1)
            return ConnectorChange.STYLOBATE_SHRUNK

        if floor in (current.floors, current.floors + 1):
            self._stylobates[pair] = current.with_floors(current.floors + 1)
            return ConnectorChange.STYLOBATE_GROWN

        return ConnectorChange.NONE

    def remove_stylobate(self, from_block_id: int, to_block_id: int) -> bool:
        """Delete a stylobate outright."""
        pair = _pair_or_none(from_block_id, to_block_id)
        if pair is None:
            return False
        return self._stylobates.pop(pair, None) is not None

    def cascade_remove_block(self, block_id: int) -> int:
        """Drop everything that references a removed block.

        Returns:
            Number of connectors removed
        """
        stale_stylobates = [pair for pair in self._stylobates if pair.involves(block_id)]
        for pair in stale_stylobates:
            del self._stylobates[pair]
        stale_underground = {pair for pair in self._underground if pair.involves(block_id)}
        self._underground -= stale_underground
        self._parking.discard(block_id)
        return len(stale_stylobates) + len(stale_underground)

    def refresh_names(self) -> None:
        """Recompute stylobate display names from current block names."""
        self._stylobates = {
            pair: stylobate.renamed(self._name_for(pair))
            for pair, stylobate in self._stylobates.items()
        }

    def _name_for(self, pair: BlockPair) -> str:
        left = self._blocks.get(pair.from_block_id)
        right = self._blocks.get(pair.to_block_id)
        return stylobate_name(
            left.name if left else str(pair.from_block_id),
            right.name if right else str(pair.to_block_id),
        )
