"""Range Calculator.

Global floor extent of a layout, used to size the grid.
"""
from __future__ import annotations

from collections.abc import Iterable

from block_layout.domain import Block, FloorExtent


class RangeCalculator:
    """Derives the vertical extent over all blocks."""

    @staticmethod
    def calculate(blocks: Iterable[Block]) -> FloorExtent:
        """Calculate max top floor and min bottom floor.

        Args:
            blocks: Blocks of the layout (never empty for a valid layout)

        Returns:
            FloorExtent covering every block

        Raises:
            ValueError: If no blocks are given
        """
        blocks = list(blocks)
        if not blocks:
            raise ValueError("Cannot calculate floor extent of an empty layout")
        return FloorExtent(
            max_top=max(block.top_floor for block in blocks),
            min_bottom=min(block.bottom_floor for block in blocks),
        )
