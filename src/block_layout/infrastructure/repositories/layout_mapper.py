"""Layout row mapping.

Converts between a LayoutSnapshot and the rows of the three layout
tables. Kept free of SQLAlchemy so it can be used and tested on plain
mappings.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from block_layout.domain import (
    Block,
    BlockPair,
    CellCategory,
    FloorType,
    LayoutSnapshot,
    Stylobate,
    ValidationError,
)
from block_layout.domain.models import stylobate_name

CONNECTION_STYLOBATE = FloorType.STYLOBATE.value
CONNECTION_UNDERGROUND = FloorType.UNDERGROUND_PARKING.value


@dataclass
class LayoutRows:
    """Table rows of one project layout."""

    blocks: list[dict[str, Any]] = field(default_factory=list)
    floors: list[dict[str, Any]] = field(default_factory=list)
    connections: list[dict[str, Any]] = field(default_factory=list)


def floor_type_for(block: Block, floor: int, *, is_parking: bool) -> FloorType:
    """Persisted type of one block floor (same rules as the grid)."""
    category = CellCategory.for_block_floor(
        floor,
        is_technical=floor in block.technical_floors,
        is_parking=is_parking,
    )
    return FloorType.from_category(category)


def snapshot_to_rows(project_id: str, snapshot: LayoutSnapshot) -> LayoutRows:
    """Flatten a snapshot into table rows.

    Args:
        project_id: Owning project
        snapshot: Layout to store

    Returns:
        LayoutRows ready for insertion
    """
    rows = LayoutRows()

    for position, block in enumerate(snapshot.blocks):
        is_parking = block.id in snapshot.parking_block_ids
        rows.blocks.append({
            "project_id": project_id,
            "block_id": block.id,
            "position": position,
            "name": block.name,
            "bottom_floor": block.bottom_floor,
            "top_floor": block.top_floor,
            "is_parking": is_parking,
        })
        for floor in range(block.bottom_floor, block.top_floor + 1):
            rows.floors.append({
                "project_id": project_id,
                "block_id": block.id,
                "floor_number": floor,
                "floor_type": floor_type_for(block, floor, is_parking=is_parking).value,
            })

    for stylobate in snapshot.stylobates:
        rows.connections.append({
            "project_id": project_id,
            "from_block_id": stylobate.from_block_id,
            "to_block_id": stylobate.to_block_id,
            "connection_type": CONNECTION_STYLOBATE,
            "floors_count": stylobate.floors,
        })
    for pair in snapshot.underground_connections:
        rows.connections.append({
            "project_id": project_id,
            "from_block_id": pair.from_block_id,
            "to_block_id": pair.to_block_id,
            "connection_type": CONNECTION_UNDERGROUND,
            "floors_count": 0,
        })

    return rows


def rows_to_snapshot(
    blocks: Iterable[Mapping[str, Any]],
    floors: Iterable[Mapping[str, Any]],
    connections: Iterable[Mapping[str, Any]],
) -> LayoutSnapshot:
    """Rebuild a snapshot from table rows.

    Technical floors come from the floor rows; everything else about a
    block comes from its block row.

    Raises:
        ValidationError: If the rows describe an invalid layout
    """
    technical: dict[int, set[int]] = {}
    for row in floors:
        if row["floor_type"] == FloorType.TECHNICAL.value:
            technical.setdefault(row["block_id"], set()).add(row["floor_number"])

    block_rows = sorted(blocks, key=lambda row: row["position"])
    domain_blocks = [
        Block(
            id=row["block_id"],
            name=row["name"],
            bottom_floor=row["bottom_floor"],
            top_floor=row["top_floor"],
            technical_floors=technical.get(row["block_id"], set()),
        )
        for row in block_rows
    ]
    parking = [row["block_id"] for row in block_rows if row["is_parking"]]
    names = {block.id: block.name for block in domain_blocks}

    stylobates: list[Stylobate] = []
    underground: list[BlockPair] = []
    for row in connections:
        if row["connection_type"] == CONNECTION_STYLOBATE:
            pair = _connection_pair(row)
            stylobates.append(
                Stylobate(
                    from_block_id=pair.from_block_id,
                    to_block_id=pair.to_block_id,
                    floors=row["floors_count"],
                    name=stylobate_name(
                        names.get(pair.from_block_id, ""),
                        names.get(pair.to_block_id, ""),
                    ),
                )
            )
        elif row["connection_type"] == CONNECTION_UNDERGROUND:
            underground.append(_connection_pair(row))
        else:
            raise ValidationError("connection_type", "unknown connection type", row["connection_type"])

    return LayoutSnapshot.create(domain_blocks, stylobates, underground, parking)


def _connection_pair(row: Mapping[str, Any]) -> BlockPair:
    try:
        return BlockPair(row["from_block_id"], row["to_block_id"])
    except ValueError as e:
        raise ValidationError("connections", str(e), dict(row)) from e
