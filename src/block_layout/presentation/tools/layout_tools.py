"""Layout MCP Tools.

Tools for editing a project's building layout grid.
"""
from __future__ import annotations

import json
from typing import Any

from mcp.server import Server
from mcp.types import TextContent, Tool

from block_layout.application.services.cell_interaction import ClickMode
from block_layout.domain import DomainError, EntityNotFoundError
from block_layout.infrastructure.di.container import Container
from block_layout.shared.logging import get_logger

logger = get_logger(__name__)

_PROJECT_ID = {
    "project_id": {
        "type": "string",
        "description": "Project identifier",
    },
}
_BLOCK_ID = {
    "block_id": {
        "type": "integer",
        "description": "Block id",
    },
}


def _json(payload: dict[str, Any]) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


def layout_tool_definitions() -> list[Tool]:
    """Tool schemas exposed by the server."""
    return [
        Tool(
            name="layout_load",
            description="Open (or reopen) the layout of a project. Returns the layout and its grid.",
            inputSchema={
                "type": "object",
                "properties": {
                    **_PROJECT_ID,
                    "reload": {
                        "type": "boolean",
                        "description": "Discard unsaved edits and load again",
                        "default": False,
                    },
                },
                "required": ["project_id"],
            },
        ),
        Tool(
            name="layout_grid",
            description="Get the floor grid of a project layout (top floor first).",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID},
                "required": ["project_id"],
            },
        ),
        Tool(
            name="layout_click",
            description=(
                "Click a grid cell. Even columns are blocks, odd columns are connectors "
                "between neighbouring blocks."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    **_PROJECT_ID,
                    "column": {"type": "integer", "description": "Grid column index"},
                    "floor": {"type": "integer", "description": "Floor number"},
                    "mode": {
                        "type": "string",
                        "enum": [mode.value for mode in ClickMode],
                        "description": "How block cells react to the click",
                        "default": ClickMode.RANGE.value,
                    },
                },
                "required": ["project_id", "column", "floor"],
            },
        ),
        Tool(
            name="layout_add_block",
            description="Append a block with floors 1..5.",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID},
                "required": ["project_id"],
            },
        ),
        Tool(
            name="layout_remove_block",
            description="Remove a block and its connectors. The last block cannot be removed.",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID, **_BLOCK_ID},
                "required": ["project_id", "block_id"],
            },
        ),
        Tool(
            name="layout_rename_block",
            description="Rename a block.",
            inputSchema={
                "type": "object",
                "properties": {
                    **_PROJECT_ID,
                    **_BLOCK_ID,
                    "name": {"type": "string", "description": "New block name"},
                },
                "required": ["project_id", "block_id", "name"],
            },
        ),
        Tool(
            name="layout_remove_stylobate",
            description="Delete the stylobate between two neighbouring blocks, whatever its height.",
            inputSchema={
                "type": "object",
                "properties": {
                    **_PROJECT_ID,
                    "from_block_id": {"type": "integer", "description": "Left block id"},
                    "to_block_id": {"type": "integer", "description": "Right block id"},
                },
                "required": ["project_id", "from_block_id", "to_block_id"],
            },
        ),
        Tool(
            name="layout_toggle_parking",
            description="Toggle underground parking membership of a block.",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID, **_BLOCK_ID},
                "required": ["project_id", "block_id"],
            },
        ),
        Tool(
            name="layout_status",
            description="Show whether the layout has unsaved changes and its floor extent.",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID},
                "required": ["project_id"],
            },
        ),
        Tool(
            name="layout_reset",
            description="Discard unsaved changes.",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID},
                "required": ["project_id"],
            },
        ),
        Tool(
            name="layout_save",
            description="Save the layout.",
            inputSchema={
                "type": "object",
                "properties": {**_PROJECT_ID},
                "required": ["project_id"],
            },
        ),
    ]


def register_layout_tools(server: Server) -> None:
    """Register layout MCP tools.

    Args:
        server: MCP Server instance
    """

    @server.list_tools()
    async def list_layout_tools() -> list[Tool]:
        """List available layout tools."""
        return layout_tool_definitions()

    @server.call_tool()
    async def call_layout_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle layout tool calls."""
        return await handle_layout_tool(name, arguments)


async def handle_layout_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Dispatch a tool call; errors are returned as payloads."""
    handler = _HANDLERS.get(name)
    if handler is None:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]
    try:
        return _json(await handler(arguments))
    except DomainError as e:
        logger.warning("Tool rejected", tool=name, error=str(e))
        return _json({"status": "error", "error": e.message, "details": e.details})
    except Exception as e:
        logger.error("Tool error", tool=name, error=str(e))
        return [TextContent(type="text", text=f"Error: {str(e)}")]


async def _load(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]), reload=bool(args.get("reload", False)))
    return {
        "status": "success",
        "layout": editor.layout.snapshot().to_dict(),
        "grid": editor.grid().to_dict(),
        **editor.status(),
    }


async def _grid(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    return {"status": "success", "grid": editor.grid().to_dict()}


async def _click(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    outcome = editor.click(
        int(args["column"]),
        int(args["floor"]),
        ClickMode(args.get("mode", ClickMode.RANGE.value)),
    )
    return {
        "status": "success",
        "outcome": outcome.to_dict(),
        "dirty": editor.is_dirty(),
        "grid": editor.grid().to_dict(),
    }


async def _add_block(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    block = editor.add_block()
    return {
        "status": "success",
        "block": {
            "id": block.id,
            "name": block.name,
            "bottom_floor": block.bottom_floor,
            "top_floor": block.top_floor,
        },
        "dirty": editor.is_dirty(),
    }


async def _remove_block(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    block_id = int(args["block_id"])
    removed = editor.remove_block(block_id)
    if removed is None:
        raise EntityNotFoundError("Block", block_id)
    return {"status": "success", "removed_block_id": removed.id, "dirty": editor.is_dirty()}


async def _rename_block(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    changed = editor.rename_block(int(args["block_id"]), str(args["name"]))
    return {"status": "success", "changed": changed, "dirty": editor.is_dirty()}


async def _remove_stylobate(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    from_block_id = int(args["from_block_id"])
    to_block_id = int(args["to_block_id"])
    if not editor.remove_stylobate(from_block_id, to_block_id):
        raise EntityNotFoundError("Stylobate", f"stylobate-{from_block_id}-{to_block_id}")
    return {"status": "success", "dirty": editor.is_dirty()}


async def _toggle_parking(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    block_id = int(args["block_id"])
    if not editor.toggle_parking(block_id):
        raise EntityNotFoundError("Block", block_id)
    return {
        "status": "success",
        "is_parking": editor.layout.connections.is_parking(block_id),
        "dirty": editor.is_dirty(),
    }


async def _status(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    return {"status": "success", **editor.status()}


async def _reset(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    editor.reset()
    return {"status": "success", **editor.status()}


async def _save(args: dict[str, Any]) -> dict[str, Any]:
    editor = await Container().get_editor(str(args["project_id"]))
    result = await editor.commit()
    if result.is_failure():
        raise result.error
    return {"status": "success", **editor.status()}


_HANDLERS = {
    "layout_load": _load,
    "layout_grid": _grid,
    "layout_click": _click,
    "layout_add_block": _add_block,
    "layout_remove_block": _remove_block,
    "layout_rename_block": _rename_block,
    "layout_remove_stylobate": _remove_stylobate,
    "layout_toggle_parking": _toggle_parking,
    "layout_status": _status,
    "layout_reset": _reset,
    "layout_save": _save,
}
