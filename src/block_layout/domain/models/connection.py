"""Connection Domain Entities.

Stylobates join two neighbouring blocks above ground. Underground
connections have no entity of their own: a BlockPair in the connection
store is the whole record, its floor range is derived from the blocks.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace

from block_layout.domain.exceptions import ValidationError
from block_layout.domain.value_objects import BlockPair

_NUMERIC_NAME = re.compile(r"^\d+$")


def short_block_name(name: str) -> str:
    """Abbreviate a block name for connector labels.

    Numeric names are kept whole, anything else is cut to three
    characters.

    Example:
        >>> short_block_name("12")
        '12'
        >>> short_block_name("Tower A")
        'Tow'
    """
    if _NUMERIC_NAME.match(name):
        return name
    return name[:3]


def stylobate_name(from_name: str, to_name: str) -> str:
    """Display name of the stylobate between two blocks."""
    # short forms on purpose: "Stylobate Tow-Cen", never the full block names
    return f"Stylobate {short_block_name(from_name)}-{short_block_name(to_name)}"


@dataclass(frozen=True, slots=True)
class Stylobate:
    """Shared low-rise volume between two neighbouring blocks.

    A stylobate always starts at floor 1 and spans ``floors`` levels.
    There is no zero-floor stylobate: removing the last floor removes
    the stylobate itself.

    Attributes:
        from_block_id: Left block of the pair
        to_block_id: Right block of the pair
        floors: Number of floors, at least 1
        name: Display name derived from the block names
    """

    from_block_id: int
    to_block_id: int
    floors: int = 1
    name: str = ""

    def __post_init__(self) -> None:
        """Validate floor count."""
        if self.floors < 1:
            raise ValidationError("floors", "stylobate needs at least one floor", self.floors)

    @property
    def id(self) -> str:
        return f"stylobate-{self.from_block_id}-{self.to_block_id}"

    @property
    def pair(self) -> BlockPair:
        return BlockPair(self.from_block_id, self.to_block_id)

    @property
    def bottom_floor(self) -> int:
        return 1

    @property
    def top_floor(self) -> int:
        return self.floors

    def contains_floor(self, floor: int) -> bool:
        return 0 < floor <= self.floors

    def with_floors(self, floors: int) -> Stylobate:
        """Copy with a new floor count (validated)."""
        return replace(self, floors=floors)

    def renamed(self, name: str) -> Stylobate:
        return replace(self, name=name)
