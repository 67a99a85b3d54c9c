"""Tests for the block store and Block entity."""
from __future__ import annotations

import pytest

from block_layout.domain import Block, BlockPair, BlockStore, LastBlockRemovalError, ValidationError


@pytest.fixture
def store() -> BlockStore:
    return BlockStore([
        Block(id=1, name="A", bottom_floor=1, top_floor=5),
        Block(id=2, name="B", bottom_floor=-1, top_floor=3, technical_floors={2}),
    ])


class TestBlock:
    """Tests for Block validation."""

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="top_floor"):
            Block(id=1, name="A", bottom_floor=3, top_floor=2)

    @pytest.mark.parametrize("floor", [0, -1, 6])
    def test_invalid_technical_floor_rejected(self, floor: int) -> None:
        """Test that technical floors must be positive and inside the range."""
        with pytest.raises(ValidationError, match="technical_floors"):
            Block(id=1, name="A", bottom_floor=-2, top_floor=5, technical_floors={floor})

    def test_copy_does_not_share_technical_floors(self) -> None:
        block = Block(id=1, name="A", technical_floors={2})
        clone = block.copy()
        clone.technical_floors.add(3)
        assert block.technical_floors == {2}
        assert clone == Block(id=1, name="A", technical_floors={2, 3})


class TestAddBlock:
    """Tests for add_block."""

    def test_add_block_defaults(self, store: BlockStore) -> None:
        """Test new block id, name and floor range."""
        block = store.add_block()
        assert block.id == 3
        assert block.name == "Block 3"
        assert (block.bottom_floor, block.top_floor) == (1, 5)
        assert block.technical_floors == set()
        assert store.blocks[-1] is block

    def test_add_block_uses_max_id(self) -> None:
        """Test that ids continue from the highest id, not the count."""
        store = BlockStore([Block(id=7, name="X")])
        block = store.add_block()
        assert block.id == 8
        assert block.name == "Block 2"


class TestRemoveBlock:
    """Tests for remove_block."""

    def test_remove_returns_block(self, store: BlockStore) -> None:
        removed = store.remove_block(1)
        assert removed is not None
        assert removed.name == "A"
        assert [b.id for b in store] == [2]

    def test_remove_unknown_is_noop(self, store: BlockStore) -> None:
        assert store.remove_block(99) is None
        assert len(store) == 2

    def test_remove_last_block_rejected(self) -> None:
        """Test that the sole block cannot be removed and nothing changes."""
        store = BlockStore([Block(id=1, name="A", bottom_floor=-1, top_floor=4)])
        before = [b.copy() for b in store]

        with pytest.raises(LastBlockRemovalError) as exc_info:
            store.remove_block(1)

        assert exc_info.value.invariant == "at_least_one_block"
        assert list(store) == before


class TestRangeMutations:
    """Tests for grow/shrink operations."""

    def test_grow_and_shrink_top(self, store: BlockStore) -> None:
        assert store.grow_top(1)
        assert store.get(1).top_floor == 6
        assert store.shrink_top(1)
        assert store.get(1).top_floor == 5

    def test_grow_and_shrink_bottom(self, store: BlockStore) -> None:
        assert store.grow_bottom(1)
        assert store.get(1).bottom_floor == 0
        assert store.shrink_bottom(1)
        assert store.get(1).bottom_floor == 1

    def test_shrink_cannot_cross_opposite_bound(self) -> None:
        """Test that a single-floor block cannot shrink further."""
        store = BlockStore([Block(id=1, name="A", bottom_floor=3, top_floor=3)])
        assert not store.shrink_top(1)
        assert not store.shrink_bottom(1)
        assert (store.get(1).bottom_floor, store.get(1).top_floor) == (3, 3)

    def test_shrink_top_drops_technical_floor(self, store: BlockStore) -> None:
        """Test that shrinking below a technical floor removes it."""
        assert store.shrink_top(2)
        assert store.get(2).technical_floors == {2}
        assert store.shrink_top(2)
        assert store.get(2).top_floor == 1
        assert store.get(2).technical_floors == set()

    def test_unknown_block_is_noop(self, store: BlockStore) -> None:
        assert not store.grow_top(99)
        assert not store.shrink_bottom(99)
        assert not store.toggle_technical_floor(99, 1)


class TestTechnicalFloors:
    """Tests for toggle_technical_floor."""

    def test_toggle_on_and_off(self, store: BlockStore) -> None:
        assert store.toggle_technical_floor(1, 3)
        assert store.get(1).technical_floors == {3}
        assert store.toggle_technical_floor(1, 3)
        assert store.get(1).technical_floors == set()

    @pytest.mark.parametrize("floor", [0, -1, 6])
    def test_toggle_outside_allowed_floors_is_noop(self, store: BlockStore, floor: int) -> None:
        block = Block(id=5, name="C", bottom_floor=-2, top_floor=5)
        store.replace_all([block])
        assert not store.toggle_technical_floor(5, floor)
        assert store.get(5).technical_floors == set()


class TestAdjacency:
    """Tests for positional adjacency."""

    def test_adjacent_pairs_follow_order(self, store: BlockStore) -> None:
        store.add_block()
        assert store.adjacent_pairs() == [BlockPair(1, 2), BlockPair(2, 3)]

    def test_are_adjacent_is_ordered(self, store: BlockStore) -> None:
        assert store.are_adjacent(1, 2)
        assert not store.are_adjacent(2, 1)
        assert not store.are_adjacent(1, 99)

    def test_rename(self, store: BlockStore) -> None:
        assert store.rename_block(1, "Tower")
        assert store.get(1).name == "Tower"
        assert not store.rename_block(99, "Ghost")
