"""Layout Repository Implementation.

SQLAlchemy-based storage of layout snapshots.
"""
from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from block_layout.domain import LayoutSnapshot
from block_layout.infrastructure.database.models import (
    BlockConnectionORM,
    BlockFloorMappingORM,
    LayoutBlockORM,
)
from block_layout.infrastructure.repositories.layout_mapper import (
    rows_to_snapshot,
    snapshot_to_rows,
)


class LayoutRepository:
    """SQLAlchemy implementation of layout storage within one session.

    Does not commit; the unit of work owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with session."""
        self._session = session

    async def exists(self, project_id: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(LayoutBlockORM)
            .where(LayoutBlockORM.project_id == project_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def load(self, project_id: str) -> LayoutSnapshot:
        """Load a project's layout.

        Args:
            project_id: Project identifier

        Returns:
            Stored layout, or the default single-block layout if the
            project has none yet
        """
        blocks = (
            await self._session.execute(
                select(
                    LayoutBlockORM.block_id,
                    LayoutBlockORM.position,
                    LayoutBlockORM.name,
                    LayoutBlockORM.bottom_floor,
                    LayoutBlockORM.top_floor,
                    LayoutBlockORM.is_parking,
                )
                .where(LayoutBlockORM.project_id == project_id)
                .order_by(LayoutBlockORM.position.asc())
            )
        ).mappings().all()

        if not blocks:
            return LayoutSnapshot.default()

        floors = (
            await self._session.execute(
                select(
                    BlockFloorMappingORM.block_id,
                    BlockFloorMappingORM.floor_number,
                    BlockFloorMappingORM.floor_type,
                ).where(BlockFloorMappingORM.project_id == project_id)
            )
        ).mappings().all()

        connections = (
            await self._session.execute(
                select(
                    BlockConnectionORM.from_block_id,
                    BlockConnectionORM.to_block_id,
                    BlockConnectionORM.connection_type,
                    BlockConnectionORM.floors_count,
                ).where(BlockConnectionORM.project_id == project_id)
            )
        ).mappings().all()

        return rows_to_snapshot(blocks, floors, connections)

    async def save(self, project_id: str, snapshot: LayoutSnapshot) -> None:
        """Replace all stored rows of a project with the snapshot."""
        await self.delete(project_id)

        rows = snapshot_to_rows(project_id, snapshot)
        self._session.add_all([LayoutBlockORM(**row) for row in rows.blocks])
        self._session.add_all([BlockFloorMappingORM(**row) for row in rows.floors])
        self._session.add_all([BlockConnectionORM(**row) for row in rows.connections])
        await self._session.flush()

    async def delete(self, project_id: str) -> None:
        """Remove every layout row of a project."""
        for orm in (BlockConnectionORM, BlockFloorMappingORM, LayoutBlockORM):
            await self._session.execute(delete(orm).where(orm.project_id == project_id))
