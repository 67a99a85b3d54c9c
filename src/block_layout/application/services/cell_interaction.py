"""Cell Interaction Engine.

Turns a single click on a grid cell into at most one layout mutation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from block_layout.application.services.grid_builder import GridBuilder, GridColumn
from block_layout.domain import Block, Layout
from block_layout.shared.logging import get_logger

logger = get_logger(__name__)


class ClickMode(str, Enum):
    """How a click on a block column is interpreted."""

    RANGE = "range"          # grow/shrink the floor range
    TECHNICAL = "technical"  # toggle a technical floor
    PARKING = "parking"      # toggle parking membership


@dataclass(frozen=True, slots=True)
class ClickOutcome:
    """Result of a click.

    Attributes:
        action: Name of the operation that was chosen ("none" if ignored)
        changed: Whether the layout actually changed
        column: Clicked column index
        floor: Clicked floor
    """

    action: str
    changed: bool
    column: int
    floor: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "changed": self.changed,
            "column": self.column,
            "floor": self.floor,
        }


class CellInteractionEngine:
    """Click interpreter for one layout.

    Block columns (even indices) act on the block's range in RANGE
    mode: the cell just above the top or just below the bottom grows the
    block, the top or bottom cell itself shrinks it. Interior cells are
    ignored. Connector columns (odd indices) always go through the
    connector click rules of the connection store, whatever the mode.
    """

    def __init__(self, layout: Layout) -> None:
        self._layout = layout

    def click(self, column: int, floor: int, mode: ClickMode = ClickMode.RANGE) -> ClickOutcome:
        """Apply a click.

        Args:
            column: Grid column index
            floor: Floor number of the clicked row
            mode: Interpretation for block columns

        Returns:
            ClickOutcome describing the applied mutation
        """
        columns = GridBuilder.columns(self._layout)
        if not 0 <= column < len(columns):
            logger.debug("Click outside grid ignored", column=column, floor=floor)
            return ClickOutcome("none", False, column, floor)

        target = columns[column]
        if target.is_block:
            action, changed = self._click_block(target, floor, mode)
        else:
            action, changed = self._click_connector(target, floor)

        logger.debug(
            "Cell click",
            column=column,
            floor=floor,
            mode=mode.value,
            action=action,
            changed=changed,
        )
        return ClickOutcome(action, changed, column, floor)

    def _click_block(self, column: GridColumn, floor: int, mode: ClickMode) -> tuple[str, bool]:
        block = self._layout.blocks.get(column.block_id) if column.block_id is not None else None
        if block is None:
            return "none", False

        if mode is ClickMode.TECHNICAL:
            return "toggle_technical_floor", self._layout.blocks.toggle_technical_floor(block.id, floor)
        if mode is ClickMode.PARKING:
            return "toggle_parking_membership", self._layout.connections.toggle_parking_membership(block.id)

        action = self._range_action(block, floor)
        if action is None:
            return "none", False
        return action, getattr(self._layout.blocks, action)(block.id)

    @staticmethod
    def _range_action(block: Block, floor: int) -> str | None:
        if floor == block.top_floor + 1:
            return "grow_top"
        if floor == block.bottom_floor - 1:
            return "grow_bottom"
        if block.top_floor == block.bottom_floor:
            return None
        if floor == block.top_floor:
            return "shrink_top"
        if floor == block.bottom_floor:
            return "shrink_bottom"
        return None

    def _click_connector(self, column: GridColumn, floor: int) -> tuple[str, bool]:
        if column.pair is None:
            return "none", False
        change = self._layout.connections.apply_connector_click(
            column.pair.from_block_id,
            column.pair.to_block_id,
            floor,
        )
        return change.value, change.changed
