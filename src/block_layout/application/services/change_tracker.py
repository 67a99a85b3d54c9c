"""Change Tracker.

Keeps the last loaded or committed snapshot of a layout and compares it
with the live state.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable

from block_layout.domain import Layout, LayoutSnapshot, PersistenceFailureError
from block_layout.shared.logging import get_logger

logger = get_logger(__name__)

SaveCallback = Callable[[LayoutSnapshot], Awaitable[None]]


class ChangeTracker:
    """Dirty tracking, reset and commit for one layout.

    The baseline snapshot is taken once at construction (load) and
    replaced only by a successful commit.
    """

    def __init__(self, layout: Layout) -> None:
        self._layout = layout
        self._baseline = layout.snapshot()

    @property
    def baseline(self) -> LayoutSnapshot:
        """Copy of the last loaded or committed state."""
        return self._baseline.copy()

    def snapshot(self) -> LayoutSnapshot:
        """Make the current state the new baseline."""
        self._baseline = self._layout.snapshot()
        return self._baseline.copy()

    def is_dirty(self) -> bool:
        """Check if the layout differs structurally from the baseline."""
        return self._layout.snapshot() != self._baseline

    def reset(self) -> None:
        """Discard all changes since the baseline."""
        self._layout.restore(self._baseline)
        logger.debug("Layout reset to baseline")

    async def commit(self, save: SaveCallback) -> LayoutSnapshot:
        """Persist the current state through the save collaborator.

        The state is captured before ``save`` is awaited; on success that
        captured snapshot becomes the baseline, so edits made while the
        save was pending still count as changes.

        Args:
            save: Async callable persisting a snapshot

        Returns:
            The committed snapshot

        Raises:
            PersistenceFailureError: If save fails; the layout and the
                baseline are left untouched
        """
        pending = self._layout.snapshot()
        try:
            await save(pending.copy())
        except Exception as e:
            logger.error("Layout commit failed", error=str(e))
            raise PersistenceFailureError(str(e), {"error_type": type(e).__name__}) from e

        self._baseline = pending
        logger.info("Layout committed", block_count=len(pending.blocks))
        return pending.copy()
