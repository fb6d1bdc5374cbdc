"""
Session state models for the labyrinth engine.

This module defines the authoritative mutable state of one play session
and the small value types it is built from.

Key concepts:
    - GameState: Which top-level mode the session is in
    - RoomType: What kind of room the player currently stands in
    - Movement / DirectionSet: Where the player may go from here
    - TurnFlags: Turn-scoped display flags, orthogonal to the room
    - EngineState: Aggregate root owning all of the above

Example:
    >>> state = EngineState()
    >>> state.game_state == GameState.TUTORIAL
    True
    >>> state.next_directions.can_go_direction(Movement.FORWARD)
    False
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GameState(str, Enum):
    """Top-level mode of a labyrinth session.

    Leaving the labyrinth (ragequit) ends the session entirely and is
    not represented here.
    """

    TUTORIAL = "tutorial"
    EXPLORING = "exploring"


class RoomType(str, Enum):
    """Kind of room the player occupies.

    The room type decides which commands make sense:
        - ENEMY: attack or skip
        - ITEM: skip
        - EMPTY, NARRATIVE: go <direction>
    """

    EMPTY = "empty"  # Plain corridor or junction
    ENEMY = "enemy"
    ITEM = "item"
    NARRATIVE = "narrative"  # Story text, carved into the walls or spoken


class Movement(str, Enum):
    """Relative directions the player can take."""

    FORWARD = "forward"
    LEFT = "left"
    RIGHT = "right"


class DirectionSet(BaseModel):
    """Movements available from the current room."""

    directions: set[Movement] = Field(default_factory=set)

    def can_go_direction(self, movement: Movement) -> bool:
        """Check whether the player may move in the given direction."""
        return movement in self.directions

    def is_empty(self) -> bool:
        return not self.directions

    def ordered(self) -> list[Movement]:
        """Directions in FORWARD, LEFT, RIGHT order (for display)."""
        return [m for m in Movement if m in self.directions]


class Enemy(BaseModel):
    """Enemy occupying the current room"""

    name: str
    health: float
    max_health: float
    damage: float = 0.0

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0


class TurnFlags(BaseModel):
    """Turn-scoped display flags.

    Attributes:
        has_shown_turn_infos: The description of the current turn has
            already been shown to the player
        wait_for_continue: The session is blocked on an explicit
            `continue` from the player
    """

    has_shown_turn_infos: bool = False
    wait_for_continue: bool = False

    def clear(self) -> None:
        """Reset both flags to their "needs refresh" value."""
        self.has_shown_turn_infos = False
        self.wait_for_continue = False


class EngineState(BaseModel):
    """Authoritative state of one labyrinth session.

    Only the state manager and the turn generator mutate it.

    Attributes:
        game_state: Current top-level mode
        room_type: Type of the current room
        enemy: Enemy in the current room (ENEMY rooms only)
        next_directions: Movements legal from the current room
        flags: Turn-scoped display flags
        turn_count: Number of turns generated so far
        room_name: Display name of the current room
        narrative: Story text attached to the current room
        item: Item lying in the current room (ITEM rooms only)
    """

    game_state: GameState = GameState.TUTORIAL
    room_type: RoomType = RoomType.EMPTY
    enemy: Enemy | None = None
    next_directions: DirectionSet = Field(default_factory=DirectionSet)
    flags: TurnFlags = Field(default_factory=TurnFlags)
    turn_count: int = 0
    room_name: str = ""
    narrative: str = ""
    item: str | None = None

    def reset(self) -> None:
        """Restore the initial configuration in place."""
        initial = EngineState()
        for name in type(self).model_fields:
            setattr(self, name, getattr(initial, name))
