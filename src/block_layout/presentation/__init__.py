"""Presentation Layer.

MCP server exposing layout editing tools.
"""
from __future__ import annotations

from block_layout.presentation.server import create_server, main

__all__ = ["create_server", "main"]
