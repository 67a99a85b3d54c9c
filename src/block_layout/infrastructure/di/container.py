"""Dependency Injection Container.

Holds the layout repository and the open editing sessions.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from block_layout.shared.config import settings
from block_layout.shared.logging import get_logger

if TYPE_CHECKING:
    from block_layout.application.services.layout_editor import LayoutEditorService
    from block_layout.domain import ILayoutRepository

logger = get_logger(__name__)


class Container:
    """Dependency Injection Container.

    Singleton container; one editing session per project id lives here
    for the lifetime of the process.
    """

    _instance: Container | None = None
    _initialized: bool = False

    def __new__(cls) -> Container:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize container (only once)."""
        if self._initialized:
            return

        self._initialized = True
        self._repository: ILayoutRepository | None = None
        self._editors: dict[str, LayoutEditorService] = {}

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton (for tests)."""
        cls._instance = None
        cls._initialized = False

    def get_repository(self) -> ILayoutRepository:
        """Get the configured layout repository.

        Returns:
            In-memory or database repository per ``settings.layout_storage``
        """
        if self._repository is None:
            if settings.layout_storage == "database":
                from block_layout.infrastructure.repositories.unit_of_work import (
                    DatabaseLayoutRepository,
                )
                self._repository = DatabaseLayoutRepository()
            else:
                from block_layout.infrastructure.repositories.memory_repository import (
                    InMemoryLayoutRepository,
                )
                self._repository = InMemoryLayoutRepository()
        return self._repository

    def set_repository(self, repository: ILayoutRepository) -> None:
        """Override the repository and drop open sessions."""
        self._repository = repository
        self._editors.clear()

    async def get_editor(self, project_id: str, *, reload: bool = False) -> LayoutEditorService:
        """Get the editing session of a project, opening it on first use.

        Args:
            project_id: Project identifier
            reload: Discard an open session and load again

        Returns:
            LayoutEditorService instance
        """
        from block_layout.application.services.layout_editor import LayoutEditorService

        if reload or project_id not in self._editors:
            self._editors[project_id] = await LayoutEditorService.open(
                project_id, self.get_repository()
            )
            logger.debug("Editing session opened", project_id=project_id, reload=reload)
        return self._editors[project_id]
