"""Tests for the connection store: connector clicks, underground links, parking."""
from __future__ import annotations

import pytest

from block_layout.domain import (
    Block,
    BlockPair,
    ConnectorChange,
    Layout,
    LayoutSnapshot,
    Stylobate,
    ValidationError,
)
from block_layout.domain.models import short_block_name, stylobate_name


class TestConnectorClickStylobate:
    """Tests for clicks above ground on a connector column."""

    def test_floor_one_creates_then_removes(self, two_block_layout: Layout) -> None:
        """Test the floor-1 round trip back to no stylobate."""
        connections = two_block_layout.connections

        assert connections.apply_connector_click(1, 2, 1) is ConnectorChange.STYLOBATE_CREATED
        stylobate = connections.stylobate(1, 2)
        assert stylobate is not None
        assert stylobate.floors == 1
        assert (stylobate.bottom_floor, stylobate.top_floor) == (1, 1)

        assert connections.apply_connector_click(1, 2, 1) is ConnectorChange.STYLOBATE_REMOVED
        assert connections.stylobate(1, 2) is None
        assert connections.stylobates == ()

    def test_cannot_originate_above_floor_one(self, two_block_layout: Layout) -> None:
        change = two_block_layout.connections.apply_connector_click(1, 2, 3)
        assert change is ConnectorChange.NONE
        assert two_block_layout.connections.stylobate(1, 2) is None

    def test_grow_at_top_and_one_above(self, two_block_layout: Layout) -> None:
        """Test that the top cell and the cell above it both add a floor."""
        connections = two_block_layout.connections
        connections.apply_connector_click(1, 2, 1)

        assert connections.apply_connector_click(1, 2, 2) is ConnectorChange.STYLOBATE_GROWN
        assert connections.stylobate(1, 2).floors == 2
        assert connections.apply_connector_click(1, 2, 2) is ConnectorChange.STYLOBATE_GROWN
        assert connections.stylobate(1, 2).floors == 3
        assert connections.apply_connector_click(1, 2, 4) is ConnectorChange.STYLOBATE_GROWN
        assert connections.stylobate(1, 2).floors == 4

    def test_floor_one_shrinks_tall_stylobate(self, two_block_layout: Layout) -> None:
        connections = two_block_layout.connections
        connections.apply_connector_click(1, 2, 1)
        connections.apply_connector_click(1, 2, 2)

        assert connections.apply_connector_click(1, 2, 1) is ConnectorChange.STYLOBATE_SHRUNK
        assert connections.stylobate(1, 2).floors == 1

    @pytest.mark.parametrize("floor", [2, 3, 6, 9])
    def test_non_boundary_clicks_ignored(self, two_block_layout: Layout, floor: int) -> None:
        """Test that clicks inside or far above a 4-floor stylobate do nothing."""
        connections = two_block_layout.connections
        connections.replace_all([Stylobate(1, 2, floors=4)], [], [])

        assert connections.apply_connector_click(1, 2, floor) is ConnectorChange.NONE
        assert connections.stylobate(1, 2).floors == 4

    def test_non_adjacent_pair_ignored(self, two_block_layout: Layout) -> None:
        connections = two_block_layout.connections
        assert connections.apply_connector_click(2, 1, 1) is ConnectorChange.NONE
        assert connections.apply_connector_click(1, 9, 0) is ConnectorChange.NONE
        assert connections.stylobates == ()
        assert connections.underground_connections == ()

    def test_zero_floor_stylobate_not_representable(self) -> None:
        with pytest.raises(ValidationError, match="floors"):
            Stylobate(1, 2, floors=0)


class TestConnectorClickUnderground:
    """Tests for clicks at or below ground on a connector column."""

    @pytest.mark.parametrize("floor", [0, -1, -7])
    def test_toggle(self, two_block_layout: Layout, floor: int) -> None:
        """Test the binary toggle, independent of the blocks' ranges."""
        connections = two_block_layout.connections

        assert connections.apply_connector_click(1, 2, floor) is ConnectorChange.UNDERGROUND_ADDED
        assert connections.has_underground(1, 2)
        assert connections.apply_connector_click(1, 2, floor) is ConnectorChange.UNDERGROUND_REMOVED
        assert not connections.has_underground(1, 2)

    def test_underground_independent_of_stylobate(self, two_block_layout: Layout) -> None:
        connections = two_block_layout.connections
        connections.apply_connector_click(1, 2, 1)
        connections.apply_connector_click(1, 2, -1)

        assert connections.stylobate(1, 2) is not None
        assert connections.underground_connections == (BlockPair(1, 2),)

    def test_extent_is_derived_from_blocks(self, two_block_layout: Layout) -> None:
        """Test that coverage follows the higher bottom floor of the pair."""
        connections = two_block_layout.connections
        connections.toggle_underground(1, 2)
        assert not connections.underground_covers(1, 2, 0)

        two_block_layout.blocks.grow_bottom(1)
        two_block_layout.blocks.grow_bottom(1)
        two_block_layout.blocks.grow_bottom(2)
        # A: -1..5, B: 0..5
        assert connections.underground_covers(1, 2, 0)
        assert not connections.underground_covers(1, 2, -1)
        assert not connections.underground_covers(1, 2, 1)


class TestParkingMembership:
    """Tests for toggle_parking_membership clamping."""

    def test_join_above_ground_block_gets_two_levels(self, two_block_layout: Layout) -> None:
        connections = two_block_layout.connections
        assert connections.toggle_parking_membership(1)
        assert connections.is_parking(1)
        assert two_block_layout.blocks.get(1).bottom_floor == -2

    def test_toggle_twice_is_not_value_idempotent(self) -> None:
        """Test the documented clamp values: -3 -> -3 -> 1 -> -2."""
        layout = Layout(LayoutSnapshot.create([Block(id=1, name="A", bottom_floor=-3, top_floor=5)]))
        connections = layout.connections
        block = layout.blocks.get(1)

        connections.toggle_parking_membership(1)
        assert connections.is_parking(1)
        assert block.bottom_floor == -3

        connections.toggle_parking_membership(1)
        assert not connections.is_parking(1)
        assert block.bottom_floor == 1

        connections.toggle_parking_membership(1)
        assert connections.is_parking(1)
        assert block.bottom_floor == -2

    def test_leave_lifts_fully_underground_block(self) -> None:
        """Test that leaving keeps top >= bottom for a block with no floors above ground."""
        layout = Layout(
            LayoutSnapshot.create(
                [Block(id=1, name="P", bottom_floor=-3, top_floor=-1)],
                parking_block_ids=[1],
            )
        )
        layout.connections.toggle_parking_membership(1)
        block = layout.blocks.get(1)
        assert (block.bottom_floor, block.top_floor) == (1, 1)

    def test_unknown_block_is_noop(self, two_block_layout: Layout) -> None:
        assert not two_block_layout.connections.toggle_parking_membership(99)
        assert two_block_layout.connections.parking_block_ids == frozenset()


class TestCascadeAndNames:
    """Tests for cascade removal and stylobate naming."""

    def test_cascade_removes_references(self, three_block_layout: Layout) -> None:
        removed = three_block_layout.connections.cascade_remove_block(1)
        assert removed == 2
        assert three_block_layout.connections.stylobate(1, 2) is None
        assert not three_block_layout.connections.has_underground(1, 2)
        assert not three_block_layout.connections.is_parking(1)
        assert three_block_layout.connections.stylobate(2, 3) is not None

    @pytest.mark.parametrize(
        "name,expected",
        [("12", "12"), ("Tower A", "Tow"), ("B", "B"), ("1A", "1A")],
    )
    def test_short_block_name(self, name: str, expected: str) -> None:
        assert short_block_name(name) == expected

    def test_stylobate_name(self) -> None:
        assert stylobate_name("1", "North") == "Stylobate 1-Nor"

    def test_new_stylobate_is_named(self, two_block_layout: Layout) -> None:
        two_block_layout.connections.apply_connector_click(1, 2, 1)
        stylobate = two_block_layout.connections.stylobate(1, 2)
        assert stylobate.name == "Stylobate A-B"
        assert stylobate.id == "stylobate-1-2"


class TestSelfPairQueries:
    """Tests for lookups that name the same block on both sides."""

    def test_self_pair_queries_are_quiet(self, two_block_layout: Layout) -> None:
        connections = two_block_layout.connections
        assert connections.stylobate(1, 1) is None
        assert not connections.has_underground(1, 1)
        assert not connections.underground_covers(1, 1, 0)
        assert not connections.remove_stylobate(2, 2)
        assert connections.apply_connector_click(1, 1, 1) is ConnectorChange.NONE
