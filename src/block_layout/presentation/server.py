"""Block Layout MCP Server.

Main MCP server setup over stdio.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from mcp.server import Server
from mcp.server.stdio import stdio_server

from block_layout.presentation.tools import register_layout_tools
from block_layout.shared.config import settings
from block_layout.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured MCP Server instance
    """
    server = Server(settings.app_name)
    register_layout_tools(server)
    return server


@asynccontextmanager
async def lifespan() -> AsyncGenerator[None, None]:
    """Manage server lifecycle.

    Opens the database pool on startup when layouts are stored in the
    database, and closes it on shutdown.
    """
    logger.info(
        "Starting Block Layout MCP Server",
        version=settings.app_version,
        storage=settings.layout_storage,
    )

    use_database = settings.layout_storage == "database"
    if use_database:
        from block_layout.infrastructure.database.connection import init_database

        try:
            await init_database()
            logger.info("Database connection initialized")
        except Exception as e:
            logger.error("Failed to initialize database", error=str(e))
            raise

    try:
        yield
    finally:
        if use_database:
            from block_layout.infrastructure.database.connection import close_database

            await close_database()
            logger.info("Database connection closed")
        logger.info("Block Layout MCP Server stopped")


async def run_server() -> None:
    """Run the MCP server."""
    setup_logging()
    server = create_server()

    async with lifespan():
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main() -> None:
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
