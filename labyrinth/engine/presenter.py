"""
Turn descriptions for the labyrinth engine.

The presenter turns the current EngineState into the lines describing
where the player stands. It is gated by the info-shown flag: a
description is produced once per turn, or again after `infos`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.models.labyrinth import GameState, RoomType

if TYPE_CHECKING:
    from labyrinth.engine.state import LabyrinthStateManager
    from labyrinth.models.labyrinth import EngineState

DEFAULT_TUTORIAL = [
    "Welcome to the Labyrinth!",
    "Each turn you stand in a room. Walk on with 'go <direction>',",
    "fight what blocks your way with 'attack', or 'skip' past it.",
]


class TurnPresenter:
    """Describes the current turn once.

    Attributes:
        tutorial: Lines shown while in the tutorial

    Example:
        >>> presenter = TurnPresenter(catalog_data.catalog.tutorial)
        >>> presenter.present(state_manager)
        ['Welcome to the Labyrinth!', ...]
        >>> presenter.present(state_manager)
        []
    """

    def __init__(self, tutorial: list[str] | None = None):
        self.tutorial = list(tutorial) if tutorial else list(DEFAULT_TUTORIAL)

    def present(self, state_manager: "LabyrinthStateManager") -> list[str]:
        """Describe the current turn unless it was already shown.

        Args:
            state_manager: State machine of the session

        Returns:
            Lines describing the turn (empty if already shown)
        """
        state = state_manager.get_state()
        if state.flags.has_shown_turn_infos:
            return []

        if state.game_state == GameState.TUTORIAL:
            state_manager.mark_infos_shown(wait_for_continue=True)
            return self.tutorial + ["Type 'continue' to enter the labyrinth."]

        lines = self.describe_room(state)
        state_manager.mark_infos_shown()
        return lines

    def describe_room(self, state: "EngineState") -> list[str]:
        """Build the description of the current room"""
        lines = [f"=== Room {state.turn_count}: {state.room_name or 'Unnamed room'} ==="]
        if state.narrative:
            lines.append(state.narrative)

        if state.room_type == RoomType.ENEMY and state.enemy is not None:
            enemy = state.enemy
            lines.append(
                f"A {enemy.name} blocks the way! ({enemy.health:g}/{enemy.max_health:g} HP)"
            )
            lines.append("Type 'attack' to fight it or 'skip' to run past it.")
        elif state.room_type == RoomType.ITEM:
            lines.append(f"You spot a {state.item or 'strange object'} on the ground.")
            lines.append("Type 'skip' to move on.")
        elif state.next_directions.is_empty():
            lines.append("There is no way out of here...")
        else:
            paths = ", ".join(m.value.upper() for m in state.next_directions.ordered())
            lines.append(f"Paths: {paths}")
            lines.append("Type 'go <direction>' to move on.")

        return lines
