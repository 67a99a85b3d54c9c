"""Block Store.

Owns the ordered list of blocks. The order is significant: two blocks
are neighbours (and may be connected) exactly when they sit next to
each other in this list.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from block_layout.domain.exceptions import LastBlockRemovalError
from block_layout.domain.models.block import Block
from block_layout.domain.value_objects import BlockPair


class BlockStore:
    """Ordered collection of blocks.

    Every mutation taking a block id is a no-op returning False when the
    id is unknown, so replayed UI events are harmless.
    """

    def __init__(self, blocks: Iterable[Block] = ()) -> None:
        self._blocks: list[Block] = [block.copy() for block in blocks]

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    def get(self, block_id: int) -> Block | None:
        """Find block by id."""
        for block in self._blocks:
            if block.id == block_id:
                return block
        return None

    def index_of(self, block_id: int) -> int | None:
        for index, block in enumerate(self._blocks):
            if block.id == block_id:
                return index
        return None

    def at(self, index: int) -> Block | None:
        """Block at a position, None when out of range."""
        if 0 <= index < len(self._blocks):
            return self._blocks[index]
        return None

    def adjacent_pairs(self) -> list[BlockPair]:
        """All neighbour pairs in layout order."""
        return [
            BlockPair(left.id, right.id)
            for left, right in zip(self._blocks, self._blocks[1:])
        ]

    def are_adjacent(self, from_block_id: int, to_block_id: int) -> bool:
        """Check that ``to_block_id`` directly follows ``from_block_id``."""
        index = self.index_of(from_block_id)
        if index is None:
            return False
        right = self.at(index + 1)
        return right is not None and right.id == to_block_id

    def replace_all(self, blocks: Iterable[Block]) -> None:
        """Replace the whole list with copies of the given blocks."""
        self._blocks = [block.copy() for block in blocks]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_block(self) -> Block:
        """Append a block with default floors 1..5.

        Returns:
            The new block
        """
        next_id = max((block.id for block in self._blocks), default=0) + 1
        block = Block.create(block_id=next_id, position=len(self._blocks) + 1)
        self._blocks.append(block)
        return block

    def remove_block(self, block_id: int) -> Block | None:
        """Remove a block.

        The caller is responsible for cascading the removal to
        connectors that reference the block.

        Args:
            block_id: Block to remove

        Returns:
            The removed block, or None if the id is unknown

        Raises:
            LastBlockRemovalError: If it is the only block left
        """
        index = self.index_of(block_id)
        if index is None:
            return None
        if len(self._blocks) == 1:
            raise LastBlockRemovalError(block_id)
        return self._blocks.pop(index)

    def rename_block(self, block_id: int, name: str) -> bool:
        block = self.get(block_id)
        if block is None or block.name == name:
            return False
        block.name = name
        return True

    def grow_top(self, block_id: int) -> bool:
        block = self.get(block_id)
        return block is not None and block.grow_top()

    def shrink_top(self, block_id: int) -> bool:
        block = self.get(block_id)
        return block is not None and block.shrink_top()

    def grow_bottom(self, block_id: int) -> bool:
        block = self.get(block_id)
        return block is not None and block.grow_bottom()

    def shrink_bottom(self, block_id: int) -> bool:
        block = self.get(block_id)
        return block is not None and block.shrink_bottom()

    def set_bottom_floor(self, block_id: int, floor: int) -> bool:
        """Clamp primitive used by parking membership changes."""
        block = self.get(block_id)
        return block is not None and block.set_bottom_floor(floor)

    def toggle_technical_floor(self, block_id: int, floor: int) -> bool:
        block = self.get(block_id)
        return block is not None and block.toggle_technical_floor(floor)
