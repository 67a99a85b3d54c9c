"""Tests for the CellInteractionEngine."""
from __future__ import annotations

import pytest

from block_layout.application.services.cell_interaction import CellInteractionEngine, ClickMode
from block_layout.domain import Block, Layout, LayoutSnapshot


@pytest.fixture
def engine(two_block_layout: Layout) -> CellInteractionEngine:
    return CellInteractionEngine(two_block_layout)


class TestBlockColumnRange:
    """Tests for RANGE mode clicks on block columns."""

    @pytest.mark.parametrize(
        "floor,action,expected_range",
        [
            (6, "grow_top", (1, 6)),
            (0, "grow_bottom", (0, 5)),
            (5, "shrink_top", (1, 4)),
            (1, "shrink_bottom", (2, 5)),
        ],
    )
    def test_boundary_clicks(
        self,
        engine: CellInteractionEngine,
        two_block_layout: Layout,
        floor: int,
        action: str,
        expected_range: tuple[int, int],
    ) -> None:
        """Test each boundary cell maps to one range mutation."""
        outcome = engine.click(0, floor)
        block = two_block_layout.blocks.get(1)
        assert outcome.action == action
        assert outcome.changed
        assert (block.bottom_floor, block.top_floor) == expected_range

    @pytest.mark.parametrize("floor", [2, 3, 4, 7, -1])
    def test_other_cells_ignored(self, engine: CellInteractionEngine, two_block_layout: Layout, floor: int) -> None:
        before = two_block_layout.snapshot()
        outcome = engine.click(0, floor)
        assert outcome.action == "none"
        assert not outcome.changed
        assert two_block_layout.snapshot() == before

    def test_single_floor_block_cannot_shrink(self) -> None:
        layout = Layout(LayoutSnapshot.create([Block(id=1, name="A", bottom_floor=2, top_floor=2)]))
        outcome = CellInteractionEngine(layout).click(0, 2)
        assert not outcome.changed
        assert layout.blocks.get(1).floor_count == 1

    def test_second_block_column(self, engine: CellInteractionEngine, two_block_layout: Layout) -> None:
        engine.click(2, 6)
        assert two_block_layout.blocks.get(2).top_floor == 6
        assert two_block_layout.blocks.get(1).top_floor == 5


class TestBlockColumnModes:
    """Tests for TECHNICAL and PARKING mode clicks."""

    def test_technical_mode(self, engine: CellInteractionEngine, two_block_layout: Layout) -> None:
        outcome = engine.click(0, 3, ClickMode.TECHNICAL)
        assert outcome.action == "toggle_technical_floor"
        assert two_block_layout.blocks.get(1).technical_floors == {3}

        engine.click(0, 3, ClickMode.TECHNICAL)
        assert two_block_layout.blocks.get(1).technical_floors == set()

    def test_technical_mode_below_ground_ignored(self, engine: CellInteractionEngine) -> None:
        assert not engine.click(0, 0, ClickMode.TECHNICAL).changed

    def test_parking_mode(self, engine: CellInteractionEngine, two_block_layout: Layout) -> None:
        outcome = engine.click(2, 4, ClickMode.PARKING)
        assert outcome.action == "toggle_parking_membership"
        assert two_block_layout.connections.is_parking(2)
        assert two_block_layout.blocks.get(2).bottom_floor == -2


class TestConnectorColumn:
    """Tests for clicks on connector columns."""

    def test_stylobate_and_underground_round_trip(self, engine: CellInteractionEngine, two_block_layout: Layout) -> None:
        """Test stylobate and underground round trips on one connector."""
        connections = two_block_layout.connections

        assert engine.click(1, 1).action == "stylobate_created"
        assert connections.stylobate(1, 2).floors == 1
        assert engine.click(1, 1).action == "stylobate_removed"
        assert connections.stylobate(1, 2) is None

        assert engine.click(1, -1).action == "underground_added"
        assert connections.has_underground(1, 2)
        assert engine.click(1, -1).action == "underground_removed"
        assert not connections.has_underground(1, 2)

    def test_mode_ignored_on_connectors(self, engine: CellInteractionEngine, two_block_layout: Layout) -> None:
        assert engine.click(1, 1, ClickMode.TECHNICAL).action == "stylobate_created"
        assert not two_block_layout.connections.is_parking(1)

    @pytest.mark.parametrize("column", [-1, 3, 10])
    def test_click_outside_grid(self, engine: CellInteractionEngine, column: int) -> None:
        outcome = engine.click(column, 1)
        assert outcome.action == "none"
        assert not outcome.changed

    def test_outcome_to_dict(self, engine: CellInteractionEngine) -> None:
        assert engine.click(1, 1).to_dict() == {
            "action": "stylobate_created",
            "changed": True,
            "column": 1,
            "floor": 1,
        }
