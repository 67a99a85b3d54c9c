"""MCP Tools registration."""
from __future__ import annotations

from block_layout.presentation.tools.layout_tools import (
    handle_layout_tool,
    layout_tool_definitions,
    register_layout_tools,
)

__all__ = [
    "handle_layout_tool",
    "layout_tool_definitions",
    "register_layout_tools",
]
