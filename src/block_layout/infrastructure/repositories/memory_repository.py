"""In-memory Layout Repository.

Process-local ILayoutRepository for the ``memory`` storage mode and for
tests.
"""
from __future__ import annotations

from block_layout.domain import LayoutSnapshot


class InMemoryLayoutRepository:
    """Keeps snapshots in a dict keyed by project id."""

    def __init__(self, layouts: dict[str, LayoutSnapshot] | None = None) -> None:
        self._layouts: dict[str, LayoutSnapshot] = {
            project_id: snapshot.copy() for project_id, snapshot in (layouts or {}).items()
        }
        self._pending_failure: Exception | None = None
        self.save_count = 0

    async def exists(self, project_id: str) -> bool:
        return project_id in self._layouts

    async def load(self, project_id: str) -> LayoutSnapshot:
        """Stored layout, or the default layout for an unknown project."""
        stored = self._layouts.get(project_id)
        return stored.copy() if stored is not None else LayoutSnapshot.default()

    async def save(self, project_id: str, snapshot: LayoutSnapshot) -> None:
        """Store a snapshot.

        Raises:
            Exception: The failure registered with ``fail_next_save``
        """
        if self._pending_failure is not None:
            failure, self._pending_failure = self._pending_failure, None
            raise failure
        self._layouts[project_id] = snapshot.copy()
        self.save_count += 1

    def fail_next_save(self, error: Exception) -> None:
        """Make the next save raise ``error`` (simulates a backend outage)."""
        self._pending_failure = error

    def get(self, project_id: str) -> LayoutSnapshot | None:
        stored = self._layouts.get(project_id)
        return stored.copy() if stored is not None else None
