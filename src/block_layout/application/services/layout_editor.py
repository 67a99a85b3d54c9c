"""Layout Editor Service.

One editing session over a project's layout: load, mutate, project the
grid and commit through a layout repository.
"""
from __future__ import annotations

from typing import Any

from block_layout.application.services.cell_interaction import (
    CellInteractionEngine,
    ClickMode,
    ClickOutcome,
)
from block_layout.application.services.change_tracker import ChangeTracker
from block_layout.application.services.grid_builder import Grid, GridBuilder
from block_layout.application.services.range_calculator import RangeCalculator
from block_layout.domain import (
    Block,
    FloorExtent,
    ILayoutRepository,
    LastBlockRemovalError,
    Layout,
    LayoutSnapshot,
    PersistenceFailureError,
)
from block_layout.shared.logging import get_logger
from block_layout.shared.result import Result, err, ok

logger = get_logger(__name__)


class LayoutEditorService:
    """Editing session for a single project layout.

    Usage:
        editor = await LayoutEditorService.open(project_id, repository)
        editor.click(column=1, floor=1)
        result = await editor.commit()
    """

    def __init__(self, project_id: str, repository: ILayoutRepository, snapshot: LayoutSnapshot) -> None:
        """Initialize service with an already loaded snapshot."""
        self._project_id = project_id
        self._repository = repository
        self._layout = Layout.from_snapshot(snapshot)
        self._engine = CellInteractionEngine(self._layout)
        self._tracker = ChangeTracker(self._layout)

    @classmethod
    async def open(cls, project_id: str, repository: ILayoutRepository) -> LayoutEditorService:
        """Load a project's layout and start a session.

        Args:
            project_id: Project identifier
            repository: Layout repository (the load/save collaborator)

        Returns:
            New LayoutEditorService
        """
        snapshot = await repository.load(project_id)
        logger.info("Layout loaded", project_id=project_id, block_count=len(snapshot.blocks))
        return cls(project_id, repository, snapshot)

    @property
    def project_id(self) -> str:
        return self._project_id

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def tracker(self) -> ChangeTracker:
        return self._tracker

    # -------------------------------------------------------------------------
    # Projection
    # -------------------------------------------------------------------------

    def grid(self) -> Grid:
        return GridBuilder.build(self._layout)

    def extent(self) -> FloorExtent:
        return RangeCalculator.calculate(self._layout.blocks)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def click(self, column: int, floor: int, mode: ClickMode = ClickMode.RANGE) -> ClickOutcome:
        return self._engine.click(column, floor, mode)

    def add_block(self) -> Block:
        block = self._layout.add_block()
        logger.debug("Block added", project_id=self._project_id, block_id=block.id)
        return block

    def remove_block(self, block_id: int) -> Block | None:
        """Remove a block with its connectors.

        Raises:
            LastBlockRemovalError: If it is the only block left
        """
        try:
            removed = self._layout.remove_block(block_id)
        except LastBlockRemovalError:
            logger.warning("Refused to remove last block", project_id=self._project_id, block_id=block_id)
            raise
        if removed is None:
            logger.debug("Remove of unknown block ignored", block_id=block_id)
        else:
            logger.debug("Block removed", project_id=self._project_id, block_id=block_id)
        return removed

    def rename_block(self, block_id: int, name: str) -> bool:
        changed = self._layout.rename_block(block_id, name)
        logger.debug("Block rename", block_id=block_id, name=name, changed=changed)
        return changed

    def toggle_parking(self, block_id: int) -> bool:
        changed = self._layout.connections.toggle_parking_membership(block_id)
        logger.debug("Parking membership toggle", block_id=block_id, changed=changed)
        return changed

    def remove_stylobate(self, from_block_id: int, to_block_id: int) -> bool:
        """Delete the stylobate between two neighbouring blocks, all floors at once."""
        removed = self._layout.remove_stylobate(from_block_id, to_block_id)
        logger.debug(
            "Stylobate removal",
            from_block_id=from_block_id,
            to_block_id=to_block_id,
            changed=removed,
        )
        return removed

    # -------------------------------------------------------------------------
    # Change tracking
    # -------------------------------------------------------------------------

    def is_dirty(self) -> bool:
        return self._tracker.is_dirty()

    def reset(self) -> None:
        self._tracker.reset()

    async def commit(self) -> Result[LayoutSnapshot, PersistenceFailureError]:
        """Save the current layout.

        Returns:
            Success with the committed snapshot, or Failure carrying the
            PersistenceFailureError (the edits are kept for a retry)
        """

        async def save(snapshot: LayoutSnapshot) -> None:
            await self._repository.save(self._project_id, snapshot)

        try:
            committed = await self._tracker.commit(save)
        except PersistenceFailureError as e:
            return err(e)
        return ok(committed)

    def status(self) -> dict[str, Any]:
        """Session summary for callers."""
        extent = self.extent()
        return {
            "project_id": self._project_id,
            "dirty": self.is_dirty(),
            "block_count": len(self._layout.blocks),
            "max_top": extent.max_top,
            "min_bottom": extent.min_bottom,
            "total_floors": extent.total_floors,
        }
