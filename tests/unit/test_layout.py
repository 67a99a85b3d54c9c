"""Tests for the Layout aggregate and LayoutSnapshot."""
from __future__ import annotations

import pytest

from block_layout.domain import (
    Block,
    BlockPair,
    LastBlockRemovalError,
    Layout,
    LayoutSnapshot,
    Stylobate,
    ValidationError,
)


class TestLayoutAggregate:
    """Tests for cross-store operations."""

    def test_default_layout(self) -> None:
        layout = Layout()
        assert [(b.id, b.name, b.bottom_floor, b.top_floor) for b in layout.blocks] == [
            (1, "Block 1", 1, 5)
        ]

    def test_delete_middle_block(self, three_block_layout: Layout) -> None:
        """Test cascade on both sides and no auto-created connector."""
        removed = three_block_layout.remove_block(2)

        assert removed is not None and removed.id == 2
        connections = three_block_layout.connections
        assert connections.stylobates == ()
        assert connections.underground_connections == ()
        assert three_block_layout.blocks.are_adjacent(1, 3)
        assert connections.stylobate(1, 3) is None
        assert not connections.has_underground(1, 3)
        assert connections.parking_block_ids == frozenset({1, 3})

    def test_new_neighbours_can_be_connected(self, three_block_layout: Layout) -> None:
        three_block_layout.remove_block(2)
        three_block_layout.connections.apply_connector_click(1, 3, 1)
        assert three_block_layout.connections.stylobate(1, 3).name == "Stylobate 1-3"

    def test_remove_last_block_keeps_state(self) -> None:
        layout = Layout()
        before = layout.snapshot()
        with pytest.raises(LastBlockRemovalError):
            layout.remove_block(1)
        assert layout.snapshot() == before

    def test_remove_unknown_block_is_noop(self, three_block_layout: Layout) -> None:
        before = three_block_layout.snapshot()
        assert three_block_layout.remove_block(42) is None
        assert three_block_layout.snapshot() == before

    def test_rename_refreshes_stylobate_names(self, three_block_layout: Layout) -> None:
        """Test that renaming a block renames the stylobates on both sides."""
        assert three_block_layout.rename_block(2, "Central")

        connections = three_block_layout.connections
        assert connections.stylobate(1, 2).name == "Stylobate 1-Cen"
        assert connections.stylobate(2, 3).name == "Stylobate Cen-3"

    def test_rename_unknown_block_is_noop(self, three_block_layout: Layout) -> None:
        assert not three_block_layout.rename_block(42, "Ghost")

    def test_restore_round_trip(self, three_block_layout: Layout) -> None:
        snapshot = three_block_layout.snapshot()
        three_block_layout.add_block()
        three_block_layout.blocks.grow_top(1)
        three_block_layout.restore(snapshot)
        assert three_block_layout.snapshot() == snapshot


class TestLayoutSnapshot:
    """Tests for LayoutSnapshot validation and serialization."""

    def test_snapshot_is_deep_copy(self, three_block_layout: Layout) -> None:
        snapshot = three_block_layout.snapshot()
        three_block_layout.blocks.get(2).technical_floors.add(5)
        assert snapshot.blocks[1].technical_floors == {12}

    def test_connector_order_does_not_matter(self) -> None:
        blocks = [Block(id=1, name="1"), Block(id=2, name="2"), Block(id=3, name="3")]
        first = LayoutSnapshot.create(
            blocks, underground_connections=[BlockPair(2, 3), BlockPair(1, 2)]
        )
        second = LayoutSnapshot.create(
            blocks, underground_connections=[BlockPair(1, 2), BlockPair(2, 3)]
        )
        assert first == second

    def test_dict_round_trip(self, three_block_snapshot: LayoutSnapshot) -> None:
        data = three_block_snapshot.to_dict()
        assert data["underground_parking"]["block_ids"] == [1, 3]
        assert data["stylobates"][0]["id"] == "stylobate-1-2"
        assert LayoutSnapshot.from_dict(data) == Layout(three_block_snapshot).snapshot()

    def test_empty_layout_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one block"):
            LayoutSnapshot.create([])

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unique"):
            LayoutSnapshot.create([Block(id=1, name="A"), Block(id=1, name="B")])

    def test_non_adjacent_stylobate_rejected(self) -> None:
        blocks = [Block(id=1, name="A"), Block(id=2, name="B"), Block(id=3, name="C")]
        with pytest.raises(ValidationError, match="neighbouring"):
            LayoutSnapshot.create(blocks, stylobates=[Stylobate(1, 3)])

    def test_unknown_parking_block_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unknown block ids"):
            LayoutSnapshot.create([Block(id=1, name="A")], parking_block_ids=[2])

    def test_from_dict_malformed(self) -> None:
        with pytest.raises(ValidationError, match="malformed"):
            LayoutSnapshot.from_dict({"blocks": [{"id": 1}]})

    def test_from_project_blocks(self) -> None:
        """Test ids by position and normalised reversed ranges."""
        snapshot = LayoutSnapshot.from_project_blocks([
            {"name": "North", "bottom_floor": -2, "top_floor": 17},
            {"name": "South", "bottom_floor": 9, "top_floor": 1},
        ])
        assert [(b.id, b.name, b.bottom_floor, b.top_floor) for b in snapshot.blocks] == [
            (1, "North", -2, 17),
            (2, "South", 1, 9),
        ]
        assert snapshot.stylobates == ()
        assert snapshot.parking_block_ids == frozenset()


class TestRemoveStylobate:
    """Tests for deleting a stylobate outright."""

    def test_removes_all_floors(self, three_block_layout: Layout) -> None:
        assert three_block_layout.remove_stylobate(1, 2)
        connections = three_block_layout.connections
        assert connections.stylobate(1, 2) is None
        assert connections.stylobate(2, 3) is not None
        assert connections.has_underground(1, 2)

    def test_missing_stylobate_is_noop(self, two_block_layout: Layout) -> None:
        before = two_block_layout.snapshot()
        assert not two_block_layout.remove_stylobate(1, 2)
        assert two_block_layout.snapshot() == before
