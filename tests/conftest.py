"""Pytest configuration and fixtures."""
from __future__ import annotations

from typing import Generator

import pytest

from block_layout.domain import Block, BlockPair, Layout, LayoutSnapshot, Stylobate
from block_layout.infrastructure.di.container import Container
from block_layout.infrastructure.repositories.memory_repository import InMemoryLayoutRepository
from block_layout.shared.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with in-memory layout storage."""
    return Settings(
        layout_storage="memory",
        database_echo=False,
        log_level="DEBUG",
    )


@pytest.fixture
def two_block_layout() -> Layout:
    """Two blocks A and B, both spanning floors 1..5."""
    return Layout(
        LayoutSnapshot.create([
            Block(id=1, name="A", bottom_floor=1, top_floor=5),
            Block(id=2, name="B", bottom_floor=1, top_floor=5),
        ])
    )


@pytest.fixture
def three_block_snapshot() -> LayoutSnapshot:
    """Three blocks with stylobates and underground links on both pairs."""
    return LayoutSnapshot.create(
        blocks=[
            Block(id=1, name="1", bottom_floor=-2, top_floor=9),
            Block(id=2, name="2", bottom_floor=-1, top_floor=12, technical_floors={12}),
            Block(id=3, name="3", bottom_floor=-2, top_floor=7),
        ],
        stylobates=[
            Stylobate(from_block_id=1, to_block_id=2, floors=2),
            Stylobate(from_block_id=2, to_block_id=3, floors=1),
        ],
        underground_connections=[BlockPair(1, 2), BlockPair(2, 3)],
        parking_block_ids=[1, 3],
    )


@pytest.fixture
def three_block_layout(three_block_snapshot: LayoutSnapshot) -> Layout:
    return Layout(three_block_snapshot)


@pytest.fixture
def memory_repository() -> InMemoryLayoutRepository:
    return InMemoryLayoutRepository()


@pytest.fixture
def container(memory_repository: InMemoryLayoutRepository) -> Generator[Container, None, None]:
    """Fresh singleton container wired to the in-memory repository."""
    Container.reset_instance()
    instance = Container()
    instance.set_repository(memory_repository)
    yield instance
    Container.reset_instance()
