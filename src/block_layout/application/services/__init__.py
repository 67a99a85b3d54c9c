"""Application services.

Layout projection and editing services.
"""
from __future__ import annotations

# Re-export services for convenient imports
# These will be available as:
#   from block_layout.application.services import GridBuilder

__all__ = [
    "CellInteractionEngine",
    "ChangeTracker",
    "ClickMode",
    "ClickOutcome",
    "Grid",
    "GridBuilder",
    "LayoutEditorService",
    "RangeCalculator",
]


def __getattr__(name: str):
    """Lazy imports for services."""
    if name in ("CellInteractionEngine", "ClickMode", "ClickOutcome"):
        from block_layout.application.services import cell_interaction
        return getattr(cell_interaction, name)
    elif name == "ChangeTracker":
        from block_layout.application.services.change_tracker import ChangeTracker
        return ChangeTracker
    elif name in ("Grid", "GridBuilder"):
        from block_layout.application.services import grid_builder
        return getattr(grid_builder, name)
    elif name == "LayoutEditorService":
        from block_layout.application.services.layout_editor import LayoutEditorService
        return LayoutEditorService
    elif name == "RangeCalculator":
        from block_layout.application.services.range_calculator import RangeCalculator
        return RangeCalculator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
