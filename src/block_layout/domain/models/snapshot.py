"""Layout Snapshot.

Point-in-time copy of a whole layout: what is loaded, saved and
compared for change tracking.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from block_layout.domain.exceptions import ValidationError
from block_layout.domain.models.block import Block
from block_layout.domain.models.connection import Stylobate, stylobate_name
from block_layout.domain.value_objects import BlockPair


@dataclass(frozen=True)
class LayoutSnapshot:
    """Deep, normalised copy of blocks, connections and parking flags.

    Two snapshots are equal exactly when the layouts they describe are
    structurally equal: connector collections are sorted by pair so the
    order in which connectors were created does not matter. Block order
    does matter, since it defines adjacency.

    The container is frozen but its blocks are mutable Block entities.
    Holders that hand a snapshot to other code pass ``copy()``, so no
    caller can reach a stored or baseline snapshot's blocks.

    Attributes:
        blocks: Blocks in layout order
        stylobates: Stylobates sorted by block pair
        underground_connections: Underground links sorted by block pair
        parking_block_ids: Ids of parking member blocks
    """

    blocks: tuple[Block, ...]
    stylobates: tuple[Stylobate, ...] = ()
    underground_connections: tuple[BlockPair, ...] = ()
    parking_block_ids: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        self.validate()

    def copy(self) -> LayoutSnapshot:
        """Deep copy; the blocks are not shared with this snapshot."""
        return LayoutSnapshot.create(
            self.blocks,
            self.stylobates,
            self.underground_connections,
            self.parking_block_ids,
        )

    @classmethod
    def create(
        cls,
        blocks: Iterable[Block],
        stylobates: Iterable[Stylobate] = (),
        underground_connections: Iterable[BlockPair] = (),
        parking_block_ids: Iterable[int] = (),
    ) -> LayoutSnapshot:
        """Factory method that copies and normalises its inputs.

        Returns:
            New validated LayoutSnapshot
        """
        return cls(
            blocks=tuple(block.copy() for block in blocks),
            stylobates=tuple(sorted(stylobates, key=lambda s: s.pair)),
            underground_connections=tuple(sorted(set(underground_connections))),
            parking_block_ids=frozenset(parking_block_ids),
        )

    @classmethod
    def default(cls) -> LayoutSnapshot:
        """Layout of a project that has no saved layout yet."""
        return cls.create([Block.create(block_id=1, position=1)])

    @classmethod
    def from_project_blocks(cls, records: Iterable[Mapping[str, Any]]) -> LayoutSnapshot:
        """Build an initial layout from a project's block list.

        Blocks get ids by position (1, 2, ...). A reversed floor range is
        accepted and normalised.

        Args:
            records: Mappings with ``name``, ``bottom_floor``, ``top_floor``

        Returns:
            LayoutSnapshot without connectors or parking
        """
        blocks = []
        for index, record in enumerate(records):
            bottom = int(record.get("bottom_floor", 1))
            top = int(record.get("top_floor", bottom))
            blocks.append(
                Block(
                    id=index + 1,
                    name=str(record.get("name") or f"Block {index + 1}"),
                    bottom_floor=min(bottom, top),
                    top_floor=max(bottom, top),
                )
            )
        return cls.create(blocks)

    def validate(self) -> None:
        """Check the cross-entity invariants.

        Raises:
            ValidationError: If any invariant is violated
        """
        if not self.blocks:
            raise ValidationError("blocks", "a layout needs at least one block", [])

        ids = [block.id for block in self.blocks]
        if len(set(ids)) != len(ids):
            raise ValidationError("blocks", "block ids must be unique", ids)

        adjacent = {BlockPair(a, b) for a, b in zip(ids, ids[1:])}

        stylobate_pairs = [s.pair for s in self.stylobates]
        if len(set(stylobate_pairs)) != len(stylobate_pairs):
            raise ValidationError("stylobates", "one stylobate per block pair", [str(p) for p in stylobate_pairs])
        for pair in stylobate_pairs:
            if pair not in adjacent:
                raise ValidationError("stylobates", "stylobate must join neighbouring blocks", str(pair))

        if len(set(self.underground_connections)) != len(self.underground_connections):
            raise ValidationError(
                "underground_connections",
                "one connection per block pair",
                [str(p) for p in self.underground_connections],
            )
        for pair in self.underground_connections:
            if pair not in adjacent:
                raise ValidationError(
                    "underground_connections",
                    "connection must join neighbouring blocks",
                    str(pair),
                )

        unknown = sorted(self.parking_block_ids - set(ids))
        if unknown:
            raise ValidationError("parking_block_ids", "unknown block ids", unknown)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "blocks": [
                {
                    "id": block.id,
                    "name": block.name,
                    "bottom_floor": block.bottom_floor,
                    "top_floor": block.top_floor,
                    "technical_floors": sorted(block.technical_floors),
                }
                for block in self.blocks
            ],
            "stylobates": [
                {
                    "id": s.id,
                    "name": s.name,
                    "from_block_id": s.from_block_id,
                    "to_block_id": s.to_block_id,
                    "floors": s.floors,
                }
                for s in self.stylobates
            ],
            "underground_parking": {
                "block_ids": sorted(self.parking_block_ids),
                "connections": [
                    {"from_block_id": p.from_block_id, "to_block_id": p.to_block_id}
                    for p in self.underground_connections
                ],
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutSnapshot:
        """Parse a snapshot from its dict form.

        Stylobate names are recomputed from the block names.

        Args:
            data: Output of ``to_dict`` (or JSON decoded from it)

        Returns:
            Validated LayoutSnapshot

        Raises:
            ValidationError: On missing keys or invariant violations
        """
        try:
            blocks = [
                Block(
                    id=int(item["id"]),
                    name=str(item["name"]),
                    bottom_floor=int(item["bottom_floor"]),
                    top_floor=int(item["top_floor"]),
                    technical_floors={int(f) for f in item.get("technical_floors", [])},
                )
                for item in data["blocks"]
            ]
            names = {block.id: block.name for block in blocks}
            stylobates = [
                Stylobate(
                    from_block_id=int(item["from_block_id"]),
                    to_block_id=int(item["to_block_id"]),
                    floors=int(item["floors"]),
                    name=stylobate_name(
                        names.get(int(item["from_block_id"]), ""),
                        names.get(int(item["to_block_id"]), ""),
                    ),
                )
                for item in data.get("stylobates", [])
            ]
            parking = data.get("underground_parking", {})
            connections = [
                BlockPair(int(item["from_block_id"]), int(item["to_block_id"]))
                for item in parking.get("connections", [])
            ]
            parking_ids = [int(block_id) for block_id in parking.get("block_ids", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError("snapshot", f"malformed layout data: {e}", None) from e

        return cls.create(blocks, stylobates, connections, parking_ids)
