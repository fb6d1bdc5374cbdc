"""
Movement validator for the labyrinth engine.

This module validates `go <direction>` commands, checking that a
direction was given, that it parses, and that the current room has a
path that way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labyrinth.engine.parser import DirectionParser
from labyrinth.models.validation import RejectionCode, ValidationResult, valid_result, invalid_result

if TYPE_CHECKING:
    from labyrinth.engine.parser import ParsedCommand
    from labyrinth.models.labyrinth import EngineState


GO_USAGE = "Usage: go <direction>, valid: (FORWARD, LEFT, RIGHT)"


class MovementValidator:
    """Validates `go` commands against the current DirectionSet.

    Checks:
        1. A direction argument is present
        2. The argument names a known direction
        3. The direction is open from the current room

    Returns ValidationResult with:
        - valid=True: includes the parsed movement as context["direction"]
        - valid=False: includes rejection code, reason and usage hint

    Example:
        >>> validator = MovementValidator()
        >>> result = validator.validate(command, state)
        >>> if result.valid:
        ...     movement = result.context["direction"]
    """

    def __init__(self, direction_parser: DirectionParser | None = None):
        self.direction_parser = direction_parser or DirectionParser()

    def validate(
        self,
        command: "ParsedCommand",
        state: "EngineState",
    ) -> ValidationResult:
        """Validate a movement command.

        Args:
            command: The parsed `go` command
            state: Current engine state

        Returns:
            ValidationResult indicating success or failure with reason
        """
        if not command.args:
            return invalid_result(
                code=RejectionCode.MISSING_ARGUMENT,
                reason="You specified no direction...",
                hint=GO_USAGE,
            )

        movement = self.direction_parser.parse(command.args[0])
        if movement is None:
            return invalid_result(
                code=RejectionCode.INVALID_ARGUMENT,
                reason="Please enter a valid direction...",
                hint=GO_USAGE,
                token=command.args[0],
            )

        if not state.next_directions.can_go_direction(movement):
            return invalid_result(
                code=RejectionCode.NO_EXIT,
                reason="There is no path in this direction...",
                direction=movement,
            )

        return valid_result(direction=movement)
