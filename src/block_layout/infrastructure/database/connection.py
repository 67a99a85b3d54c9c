"""Database connection management.

Async SQLAlchemy engine and session factory for the layout tables.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from block_layout.shared.config import Settings, settings


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(config: Settings) -> dict[str, Any]:
    """Engine keyword arguments for the configured URL.

    Pool sizing only applies to server databases; SQLite URLs do not
    take pool arguments.
    """
    options: dict[str, Any] = {"echo": config.database_echo}
    if not config.database_url.startswith("sqlite"):
        options.update(
            pool_size=config.database_pool_size,
            max_overflow=config.database_max_overflow,
            pool_timeout=config.database_pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return options


def get_engine(config: Settings | None = None) -> AsyncEngine:
    """Get or create the async database engine.

    Args:
        config: Settings to build the engine from (defaults to global settings)

    Returns:
        AsyncEngine instance
    """
    global _engine

    if _engine is None:
        config = config or settings
        _engine = create_async_engine(config.database_url, **_engine_options(config))

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


async def init_database() -> None:
    """Open the pool and check the connection.

    Call this at application startup when layouts are stored in the
    database.
    """
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(lambda _: None)


async def close_database() -> None:
    """Dispose of the engine. Call this at application shutdown."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None

