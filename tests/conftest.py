"""
Shared pytest fixtures for the labyrinth tests.

This module provides:
- sample_catalog_data: Minimal CatalogData for fast unit tests
- stub_catalog: Deterministic room provider recording its calls
- state_manager / interpreter: A fresh session's core objects
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from labyrinth.engine.console import ConsoleHistory, GameSlots  # noqa: E402
from labyrinth.engine.interpreter import CommandInterpreter  # noqa: E402
from labyrinth.engine.state import LabyrinthStateManager  # noqa: E402
from labyrinth.models.catalog import (  # noqa: E402
    Catalog,
    CatalogData,
    EnemyTemplate,
    RoomDescriptor,
    RoomTemplate,
)
from labyrinth.models.labyrinth import GameState, Movement, RoomType  # noqa: E402
from tests.mocks.catalog import StubRoomCatalog  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def sample_catalog() -> Catalog:
    """Create a minimal Catalog configuration for testing."""
    return Catalog(
        name="Test Catalog",
        description="A simple catalog for unit testing",
        tutorial=["Welcome, tester.", "Type continue."],
        room_weights={
            RoomType.EMPTY: 1.0,
            RoomType.ENEMY: 1.0,
            RoomType.ITEM: 1.0,
            RoomType.NARRATIVE: 1.0,
        },
    )


@pytest.fixture
def sample_rooms() -> dict[str, RoomTemplate]:
    """Create one room template per room type."""
    return {
        "hallway": RoomTemplate(
            type=RoomType.EMPTY,
            name="Hallway",
            narrative="A plain hallway.",
            directions=[Movement.FORWARD, Movement.RIGHT],
        ),
        "goblin_den": RoomTemplate(
            type=RoomType.ENEMY,
            name="Goblin Den",
            enemy="goblin",
        ),
        "nook": RoomTemplate(
            type=RoomType.ITEM,
            name="Treasure Nook",
            item="test gem",
        ),
        "mural": RoomTemplate(
            type=RoomType.NARRATIVE,
            name="Mural Room",
            narrative="A mural of the labyrinth's builders.",
        ),
    }


@pytest.fixture
def sample_enemies() -> dict[str, EnemyTemplate]:
    """Create a single enemy template."""
    return {
        "goblin": EnemyTemplate(name="Goblin", health=2.0, damage=1.0),
    }


@pytest.fixture
def sample_catalog_data(
    sample_catalog: Catalog,
    sample_rooms: dict[str, RoomTemplate],
    sample_enemies: dict[str, EnemyTemplate],
) -> CatalogData:
    """Create complete CatalogData for testing."""
    return CatalogData(
        catalog=sample_catalog,
        rooms=sample_rooms,
        enemies=sample_enemies,
    )


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def stub_catalog() -> StubRoomCatalog:
    """Create a stub catalog with nothing queued (sentinel rooms only)."""
    return StubRoomCatalog()


@pytest.fixture
def history() -> ConsoleHistory:
    return ConsoleHistory()


@pytest.fixture
def slots() -> GameSlots:
    slots = GameSlots()
    slots.claim()
    return slots


@pytest.fixture
def state_manager() -> LabyrinthStateManager:
    """Create a state manager for a fresh session (in the tutorial)."""
    return LabyrinthStateManager()


@pytest.fixture
def interpreter(
    stub_catalog: StubRoomCatalog,
    history: ConsoleHistory,
    slots: GameSlots,
) -> CommandInterpreter:
    """Create an interpreter wired to the stub catalog."""
    return CommandInterpreter(stub_catalog, history, slots)


@pytest.fixture
def enter_room(
    state_manager: LabyrinthStateManager,
) -> Callable[[RoomDescriptor], LabyrinthStateManager]:
    """Factory putting the session in EXPLORING inside a given room.

    The room is produced through a private stub so the shared
    stub_catalog's call history stays empty.

    Usage:
        def test_something(enter_room):
            manager = enter_room(enemy_room())
    """

    def _enter(room: RoomDescriptor) -> LabyrinthStateManager:
        state_manager.get_state().game_state = GameState.EXPLORING
        state_manager.next_turn(StubRoomCatalog([room]))
        return state_manager

    return _enter
