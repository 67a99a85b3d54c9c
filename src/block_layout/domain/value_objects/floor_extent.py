"""FloorExtent Value Object."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FloorExtent:
    """Global vertical extent of a layout.

    Attributes:
        max_top: Highest top floor over all blocks
        min_bottom: Lowest bottom floor over all blocks
    """

    max_top: int
    min_bottom: int

    def __post_init__(self) -> None:
        if self.max_top < self.min_bottom:
            raise ValueError(
                f"Invalid floor extent: top {self.max_top} below bottom {self.min_bottom}"
            )

    @property
    def total_floors(self) -> int:
        """Number of floor rows between min_bottom and max_top inclusive."""
        return self.max_top - self.min_bottom + 1

    def floors_top_down(self) -> range:
        """Floor numbers from max_top down to min_bottom."""
        return range(self.max_top, self.min_bottom - 1, -1)

    def __contains__(self, floor: object) -> bool:
        return isinstance(floor, int) and self.min_bottom <= floor <= self.max_top
