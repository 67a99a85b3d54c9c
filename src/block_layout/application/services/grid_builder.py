"""Grid Builder.

Projects a layout into a floor-by-column grid for rendering. Columns
alternate between blocks and the connector slots between neighbouring
blocks:

    block 0 | connector 0-1 | block 1 | connector 1-2 | block 2

Rows run from the highest top floor down to the lowest bottom floor.
The grid is a read-only value; rebuild it after every mutation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from block_layout.application.services.range_calculator import RangeCalculator
from block_layout.domain import BlockPair, CellCategory, FloorExtent, Layout


class ColumnKind(str, Enum):
    """Kind of grid column."""

    BLOCK = "block"
    CONNECTOR = "connector"


@dataclass(frozen=True, slots=True)
class GridColumn:
    """One grid column.

    Attributes:
        index: Position in the grid (blocks even, connectors odd)
        kind: Block or connector column
        label: Block name, stylobate name or empty
        block_id: Set for block columns
        pair: Set for connector columns
    """

    index: int
    kind: ColumnKind
    label: str = ""
    block_id: int | None = None
    pair: BlockPair | None = None

    @property
    def is_block(self) -> bool:
        return self.kind is ColumnKind.BLOCK

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "kind": self.kind.value,
            "label": self.label,
            "block_id": self.block_id,
            "pair": str(self.pair) if self.pair else None,
        }


@dataclass(frozen=True, slots=True)
class GridCell:
    column: int
    floor: int
    category: CellCategory

    @property
    def is_occupied(self) -> bool:
        return self.category.is_occupied


@dataclass(frozen=True, slots=True)
class GridRow:
    floor: int
    cells: tuple[GridCell, ...]


@dataclass(frozen=True)
class Grid:
    """Renderable projection of a layout."""

    extent: FloorExtent
    columns: tuple[GridColumn, ...]
    rows: tuple[GridRow, ...]

    def column(self, index: int) -> GridColumn | None:
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def cell(self, column: int, floor: int) -> GridCell | None:
        """Find the cell at a column and floor, None outside the grid."""
        if floor not in self.extent or self.column(column) is None:
            return None
        row = self.rows[self.extent.max_top - floor]
        return row.cells[column]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "max_top": self.extent.max_top,
            "min_bottom": self.extent.min_bottom,
            "total_floors": self.extent.total_floors,
            "columns": [column.to_dict() for column in self.columns],
            "rows": [
                {
                    "floor": row.floor,
                    "cells": [cell.category.value for cell in row.cells],
                }
                for row in self.rows
            ],
        }


class GridBuilder:
    """Builds the grid for a layout."""

    @staticmethod
    def columns(layout: Layout) -> tuple[GridColumn, ...]:
        """Column descriptors in grid order."""
        columns: list[GridColumn] = []
        blocks = layout.blocks.blocks
        for position, block in enumerate(blocks):
            columns.append(
                GridColumn(
                    index=len(columns),
                    kind=ColumnKind.BLOCK,
                    label=block.name,
                    block_id=block.id,
                )
            )
            if position + 1 < len(blocks):
                pair = BlockPair(block.id, blocks[position + 1].id)
                stylobate = layout.connections.stylobate(pair.from_block_id, pair.to_block_id)
                columns.append(
                    GridColumn(
                        index=len(columns),
                        kind=ColumnKind.CONNECTOR,
                        label=stylobate.name if stylobate else "",
                        pair=pair,
                    )
                )
        return tuple(columns)

    @classmethod
    def build(cls, layout: Layout) -> Grid:
        """Project the layout into a grid.

        Args:
            layout: Layout to project

        Returns:
            Grid with one row per floor, top floor first
        """
        extent = RangeCalculator.calculate(layout.blocks)
        columns = cls.columns(layout)
        rows = tuple(
            GridRow(
                floor=floor,
                cells=tuple(
                    GridCell(column.index, floor, cls._categorize(layout, column, floor))
                    for column in columns
                ),
            )
            for floor in extent.floors_top_down()
        )
        return Grid(extent=extent, columns=columns, rows=rows)

    @staticmethod
    def _categorize(layout: Layout, column: GridColumn, floor: int) -> CellCategory:
        connections = layout.connections

        if column.block_id is not None:
            block = layout.blocks.get(column.block_id)
            if block is None or not block.contains_floor(floor):
                return CellCategory.EMPTY
            return CellCategory.for_block_floor(
                floor,
                is_technical=floor in block.technical_floors,
                is_parking=connections.is_parking(block.id),
            )

        if column.pair is None:
            return CellCategory.EMPTY
        left, right = column.pair.from_block_id, column.pair.to_block_id
        stylobate = connections.stylobate(left, right)
        if stylobate is not None and stylobate.contains_floor(floor):
            return CellCategory.STYLOBATE
        if connections.underground_covers(left, right, floor):
            return CellCategory.UNDERGROUND
        return CellCategory.EMPTY
