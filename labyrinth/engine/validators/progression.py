"""
Progression validators for the labyrinth engine.

These cover the commands that move the session forward without a
direction: `continue` out of the tutorial and `skip` past a room.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.models.labyrinth import GameState, RoomType
from labyrinth.models.validation import RejectionCode, ValidationResult, valid_result, invalid_result

if TYPE_CHECKING:
    from labyrinth.engine.parser import ParsedCommand
    from labyrinth.models.labyrinth import EngineState


class ContinueValidator:
    """Validates `continue`: only the tutorial can be continued."""

    def validate(
        self,
        command: "ParsedCommand",
        state: "EngineState",
    ) -> ValidationResult:
        if state.game_state != GameState.TUTORIAL:
            return invalid_result(
                code=RejectionCode.WRONG_STATE,
                reason="There is nothing to continue...",
            )
        return valid_result()


class SkipValidator:
    """Validates `skip`.

    Rooms can be skipped while exploring when they hold an enemy or an
    item. Callers show nothing for a rejected skip.
    """

    SKIPPABLE_ROOMS = (RoomType.ENEMY, RoomType.ITEM)

    def validate(
        self,
        command: "ParsedCommand",
        state: "EngineState",
    ) -> ValidationResult:
        if state.game_state != GameState.EXPLORING:
            return invalid_result(
                code=RejectionCode.WRONG_STATE,
                reason="Nothing to skip while in the tutorial.",
            )
        if state.room_type not in self.SKIPPABLE_ROOMS:
            return invalid_result(
                code=RejectionCode.WRONG_ROOM,
                reason=f"A {state.room_type.value} room cannot be skipped.",
            )
        return valid_result(room_type=state.room_type)
