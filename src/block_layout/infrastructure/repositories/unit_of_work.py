"""Unit of Work Implementation.

Coordinates layout repository operations within a single database transaction.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from block_layout.domain import LayoutSnapshot
from block_layout.infrastructure.database.connection import get_session_factory


if TYPE_CHECKING:
    from block_layout.infrastructure.repositories.layout_repository import LayoutRepository


class UnitOfWork:
    """Unit of Work pattern implementation.

    Usage:
        async with UnitOfWork() as uow:
            await uow.layouts.save(project_id, snapshot)
            await uow.commit()

    On exception, the transaction is automatically rolled back.
    """

    def __init__(self, session: AsyncSession | None = None) -> None:
        """Initialize Unit of Work.

        Args:
            session: Optional existing session (for testing)
        """
        self._session = session
        self._owns_session = session is None
        self._layouts: LayoutRepository | None = None

    async def __aenter__(self) -> "UnitOfWork":
        """Enter async context, create session if needed."""
        if self._owns_session:
            self._session = get_session_factory()()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context, rollback on exception."""
        if exc_type is not None:
            await self.rollback()

        if self._owns_session and self._session is not None:
            await self._session.close()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not entered. Use 'async with UnitOfWork() as uow:'")
        return self._session

    @property
    def layouts(self) -> "LayoutRepository":
        """Get layout repository."""
        if self._layouts is None:
            from block_layout.infrastructure.repositories.layout_repository import (
                LayoutRepository,
            )
            self._layouts = LayoutRepository(self.session)
        return self._layouts

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


class DatabaseLayoutRepository:
    """ILayoutRepository backed by the database, one transaction per call."""

    async def exists(self, project_id: str) -> bool:
        async with UnitOfWork() as uow:
            return await uow.layouts.exists(project_id)

    async def load(self, project_id: str) -> LayoutSnapshot:
        async with UnitOfWork() as uow:
            return await uow.layouts.load(project_id)

    async def save(self, project_id: str, snapshot: LayoutSnapshot) -> None:
        async with UnitOfWork() as uow:
            await uow.layouts.save(project_id, snapshot)
            await uow.commit()
