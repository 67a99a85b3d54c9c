"""Cell and floor classifications.

CellCategory is what the grid shows for a (column, floor) cell.
FloorType is the persisted classification of a floor row.
"""
from __future__ import annotations

from enum import Enum


class CellCategory(str, Enum):
    """Category of a single grid cell."""

    ROOF = "roof"
    TECHNICAL = "technical"
    TYPICAL = "typical"
    PARKING = "parking"
    STYLOBATE = "stylobate"
    UNDERGROUND = "underground"
    EMPTY = "empty"

    @classmethod
    def for_block_floor(cls, floor: int, *, is_technical: bool, is_parking: bool) -> CellCategory:
        """Classify an occupied floor of a block column.

        Priority: floor 0 is the roof line, then technical floors, then
        typical above ground. Below ground a floor is parking only when
        the block is a parking member.

        Args:
            floor: Floor number
            is_technical: Floor is in the block's technical set
            is_parking: Block is a parking member

        Returns:
            Matching CellCategory
        """
        if floor == 0:
            return cls.ROOF
        if is_technical:
            return cls.TECHNICAL
        if floor > 0:
            return cls.TYPICAL
        return cls.PARKING if is_parking else cls.TYPICAL

    @property
    def is_occupied(self) -> bool:
        """Check if the cell holds any building volume."""
        return self is not CellCategory.EMPTY


class FloorType(str, Enum):
    """Persisted floor/connection type (block_floor_mapping.floor_type)."""

    UNDERGROUND_PARKING = "underground_parking"
    TYPICAL = "typical"
    TECHNICAL = "technical"
    STYLOBATE = "stylobate"
    ROOF = "roof"

    @classmethod
    def from_category(cls, category: CellCategory) -> FloorType:
        """Map a grid cell category to its persisted floor type.

        Raises:
            ValueError: For empty cells, which are never persisted
        """
        mapping = {
            CellCategory.ROOF: cls.ROOF,
            CellCategory.TECHNICAL: cls.TECHNICAL,
            CellCategory.TYPICAL: cls.TYPICAL,
            CellCategory.PARKING: cls.UNDERGROUND_PARKING,
            CellCategory.STYLOBATE: cls.STYLOBATE,
            CellCategory.UNDERGROUND: cls.UNDERGROUND_PARKING,
        }
        try:
            return mapping[category]
        except KeyError:
            raise ValueError(f"Cell category has no floor type: {category.value}") from None
