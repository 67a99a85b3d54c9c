"""Block Domain Entity.

A block is one tower of the project with its own floor range.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from block_layout.domain.exceptions import ValidationError

DEFAULT_BOTTOM_FLOOR = 1
DEFAULT_TOP_FLOOR = 5


@dataclass
class Block:
    """Building block (tower) with an independent floor range.

    Floors may be negative (below ground). Floor 0 is the ground/roof
    line between underground and above-ground levels.

    Attributes:
        id: Session-stable identifier
        name: Display name, editable by the user
        bottom_floor: Lowest floor (inclusive)
        top_floor: Highest floor (inclusive), never below bottom_floor
        technical_floors: Mechanical floors, all in 1..top_floor
    """

    id: int
    name: str
    bottom_floor: int = DEFAULT_BOTTOM_FLOOR
    top_floor: int = DEFAULT_TOP_FLOOR
    technical_floors: set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        """Validate floor range and technical floors."""
        if self.top_floor < self.bottom_floor:
            raise ValidationError(
                "top_floor",
                f"must not be below bottom_floor {self.bottom_floor}",
                self.top_floor,
            )
        self.technical_floors = set(self.technical_floors)
        invalid = sorted(f for f in self.technical_floors if not self._may_be_technical(f))
        if invalid:
            raise ValidationError(
                "technical_floors",
                f"must lie within 1..{self.top_floor} and the block range",
                invalid,
            )

    @classmethod
    def create(cls, block_id: int, position: int) -> Block:
        """Factory method for a new default block.

        Args:
            block_id: Identifier for the new block
            position: 1-based position used in the default name

        Returns:
            Block spanning the default floors 1..5
        """
        return cls(id=block_id, name=f"Block {position}")

    @property
    def floor_count(self) -> int:
        return self.top_floor - self.bottom_floor + 1

    def contains_floor(self, floor: int) -> bool:
        """Check if the floor lies in the block's range."""
        return self.bottom_floor <= floor <= self.top_floor

    def copy(self) -> Block:
        """Deep copy (the technical floor set is not shared)."""
        return Block(
            id=self.id,
            name=self.name,
            bottom_floor=self.bottom_floor,
            top_floor=self.top_floor,
            technical_floors=set(self.technical_floors),
        )

    # -------------------------------------------------------------------------
    # Range mutations
    # -------------------------------------------------------------------------

    def grow_top(self) -> bool:
        self.top_floor += 1
        return True

    def shrink_top(self) -> bool:
        if self.top_floor - 1 < self.bottom_floor:
            return False
        self.top_floor -= 1
        self._prune_technical_floors()
        return True

    def grow_bottom(self) -> bool:
        self.bottom_floor -= 1
        return True

    def shrink_bottom(self) -> bool:
        if self.bottom_floor + 1 > self.top_floor:
            return False
        self.bottom_floor += 1
        self._prune_technical_floors()
        return True

    def set_bottom_floor(self, floor: int) -> bool:
        """Move the bottom floor to an absolute value.

        The top floor is lifted along when the new bottom would pass it.

        Args:
            floor: New bottom floor

        Returns:
            True if the range changed
        """
        if floor == self.bottom_floor:
            return False
        self.bottom_floor = floor
        if self.top_floor < floor:
            self.top_floor = floor
        self._prune_technical_floors()
        return True

    def toggle_technical_floor(self, floor: int) -> bool:
        """Add or remove a technical floor.

        Args:
            floor: Floor to toggle

        Returns:
            True if the set changed, False for floors that cannot be
            technical (ground, underground or outside the range)
        """
        if not self._may_be_technical(floor):
            return False
        if floor in self.technical_floors:
            self.technical_floors.discard(floor)
        else:
            self.technical_floors.add(floor)
        return True

    def _may_be_technical(self, floor: int) -> bool:
        return floor > 0 and self.contains_floor(floor)

    def _prune_technical_floors(self) -> None:
        self.technical_floors = {f for f in self.technical_floors if self._may_be_technical(f)}
