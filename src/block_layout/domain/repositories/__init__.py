"""Repository Interfaces (Protocols).

Defines the load/save contract for layouts without implementation details.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from block_layout.domain.models import LayoutSnapshot


@runtime_checkable
class ILayoutRepository(Protocol):
    """Repository interface for persisted layouts."""

    async def load(self, project_id: str) -> LayoutSnapshot: ...
    async def save(self, project_id: str, snapshot: LayoutSnapshot) -> None: ...
    async def exists(self, project_id: str) -> bool: ...
