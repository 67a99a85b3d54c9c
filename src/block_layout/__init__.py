"""Block Layout.

Building-layout grid model for multi-block construction projects:
blocks with independent floor ranges, stylobates and underground
parking connections between neighbouring blocks, exposed over MCP.
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Block Layout Team"


def main() -> None:
    """Run the MCP server (console entry point)."""
    from block_layout.presentation import main as run

    run()


__all__ = ["main", "__version__"]
