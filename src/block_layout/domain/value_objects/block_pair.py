"""BlockPair Value Object.

Identifies the connector slot between two blocks that are neighbours in
the block ordering.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class BlockPair:
    """Ordered pair of block ids (left neighbour first).

    Adjacency is positional: a pair is only meaningful while
    ``from_block_id`` sits directly before ``to_block_id`` in the block
    ordering. Reordering blocks redefines which pairs exist.

    Example:
        >>> pair = BlockPair(1, 2)
        >>> pair.involves(2)
        True
        >>> str(pair)
        '1-2'
    """

    from_block_id: int
    to_block_id: int

    def __post_init__(self) -> None:
        if self.from_block_id == self.to_block_id:
            raise ValueError(f"A block cannot be paired with itself: {self.from_block_id}")

    def __str__(self) -> str:
        return f"{self.from_block_id}-{self.to_block_id}"

    def involves(self, block_id: int) -> bool:
        """Check whether either endpoint is the given block."""
        return block_id in (self.from_block_id, self.to_block_id)
