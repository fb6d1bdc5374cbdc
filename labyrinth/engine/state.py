"""
Labyrinth state management.

This module holds the game state machine: the only place the session's
GameState changes, and the single owner of the EngineState.

States:
    TUTORIAL --continue--> EXPLORING
    any --tutorial--> TUTORIAL

Leaving the labyrinth (ragequit) is a reset plus a notification to the
session lifecycle, not a state of its own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from labyrinth.engine.turn import TurnGenerator
from labyrinth.models.labyrinth import EngineState, GameState

if TYPE_CHECKING:
    from labyrinth.engine.protocols import RoomCatalogProvider
    from labyrinth.models.catalog import RoomDescriptor

logger = logging.getLogger(__name__)


class LabyrinthStateManager:
    """Manages the engine state of one labyrinth session.

    Attributes:
        turn_generator: Produces new rooms on turn advances

    Example:
        >>> manager = LabyrinthStateManager()
        >>> manager.get_state().game_state
        <GameState.TUTORIAL: 'tutorial'>
        >>> manager.begin_exploring(catalog)
        >>> manager.get_state().game_state
        <GameState.EXPLORING: 'exploring'>
    """

    def __init__(self, turn_generator: TurnGenerator | None = None):
        """Initialize a new session state in the tutorial.

        Args:
            turn_generator: Optional generator override (for tests)
        """
        self.turn_generator = turn_generator or TurnGenerator()
        self._state = EngineState()

    def get_state(self) -> EngineState:
        """Get the current engine state."""
        return self._state

    @property
    def game_state(self) -> GameState:
        return self._state.game_state

    def begin_exploring(self, catalog: "RoomCatalogProvider") -> "RoomDescriptor":
        """Leave the tutorial and generate the first room.

        Args:
            catalog: Provider of the next room

        Returns:
            The descriptor of the first room
        """
        self._state.game_state = GameState.EXPLORING
        logger.info("Tutorial finished, exploring the labyrinth")
        return self.next_turn(catalog)

    def next_turn(self, catalog: "RoomCatalogProvider") -> "RoomDescriptor":
        """Generate the next room without changing the GameState.

        Both display flags are cleared by the turn generator.

        Args:
            catalog: Provider of the next room

        Returns:
            The descriptor of the new room
        """
        return self.turn_generator.advance_turn(self._state, catalog)

    def damage_enemy(self, amount: float) -> float:
        """Damage the enemy of the current room.

        Defeat is not checked here; whoever inspects the enemy afterwards
        decides what a defeat means.

        Args:
            amount: Health to remove

        Returns:
            The enemy's remaining health

        Raises:
            ValueError: If the current room holds no enemy
        """
        enemy = self._state.enemy
        if enemy is None:
            raise ValueError("There is no enemy to damage in this room")

        enemy.health -= amount
        self._state.flags.clear()
        logger.debug(f"{enemy.name} took {amount} damage, {enemy.health} left")
        return enemy.health

    def enter_tutorial(self) -> None:
        """Force the tutorial, keeping the current room.

        Only the info-shown flag is cleared; wait_for_continue is left
        untouched.
        """
        self._state.game_state = GameState.TUTORIAL
        self._state.flags.has_shown_turn_infos = False

    def refresh_infos(self) -> None:
        """Request the current turn's description to be shown again."""
        self._state.flags.has_shown_turn_infos = False

    def mark_infos_shown(self, wait_for_continue: bool = False) -> None:
        """Record that the current turn's description was shown.

        Args:
            wait_for_continue: Whether the session now waits on `continue`
        """
        self._state.flags.has_shown_turn_infos = True
        self._state.flags.wait_for_continue = wait_for_continue

    def reset(self) -> None:
        """Restore the initial configuration of a new session."""
        self._state.reset()
        logger.info("Labyrinth state reset")
