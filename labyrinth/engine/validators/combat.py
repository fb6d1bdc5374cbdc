"""
Combat validator for the labyrinth engine.

Attacks only make sense when an enemy shares the room.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.models.labyrinth import RoomType
from labyrinth.models.validation import RejectionCode, ValidationResult, valid_result, invalid_result

if TYPE_CHECKING:
    from labyrinth.engine.parser import ParsedCommand
    from labyrinth.models.labyrinth import EngineState


class AttackValidator:
    """Validates `attack` commands.

    An attack is legal only in an ENEMY room. The rejection is phrased as
    the player punching the wall, with a second line of flavour.
    """

    def validate(
        self,
        command: "ParsedCommand",
        state: "EngineState",
    ) -> ValidationResult:
        """Validate an attack command.

        Args:
            command: The parsed `attack` command
            state: Current engine state

        Returns:
            ValidationResult with the enemy in context if valid
        """
        if state.room_type != RoomType.ENEMY or state.enemy is None:
            return invalid_result(
                code=RejectionCode.WRONG_ROOM,
                reason="You punch... uh... the wall!",
                hint="In frustration, you see there is nothing else to punch here!",
            )

        return valid_result(enemy=state.enemy.name)
