"""
Validation models for the labyrinth engine.

ValidationResult represents the outcome of checking a command against
the current session state. It indicates whether the command is allowed
and carries the player-facing explanation when it is not.

Example:
    >>> # Successful validation
    >>> result = valid_result(direction=Movement.LEFT)

    >>> # Failed validation
    >>> result = invalid_result(
    ...     code=RejectionCode.NO_EXIT,
    ...     reason="There is no path in this direction...",
    ... )
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class RejectionCode(str, Enum):
    """Why a command was rejected.

    Categories:
        Malformed input: MISSING_ARGUMENT, INVALID_ARGUMENT
        Precondition: WRONG_STATE, WRONG_ROOM, NO_EXIT
    """

    # Malformed input
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"

    # Precondition violations
    WRONG_STATE = "wrong_state"  # Command not available in this GameState
    WRONG_ROOM = "wrong_room"  # Command not available in this RoomType
    NO_EXIT = "no_exit"  # Direction not in the current DirectionSet


class ValidationResult(BaseModel):
    """Result of validating a command against the session state.

    Attributes:
        valid: Whether the command is allowed
        rejection_code: Code indicating why validation failed (if invalid)
        rejection_reason: Player-facing reason for failure (if invalid)
        context: Values resolved during validation (parsed direction, ...)
        hint: Optional follow-up line for the player (usage, flavour)
    """

    valid: bool

    # Rejection details (required if valid=False)
    rejection_code: RejectionCode | None = None
    rejection_reason: str | None = None

    context: dict[str, object] = Field(default_factory=dict)

    hint: str | None = None

    @model_validator(mode="after")
    def check_rejection_fields(self) -> "ValidationResult":
        """Ensure rejection fields are present when valid=False."""
        if not self.valid:
            if self.rejection_code is None:
                raise ValueError("rejection_code is required when valid=False")
            if self.rejection_reason is None:
                raise ValueError("rejection_reason is required when valid=False")
        return self

    def to_messages(self) -> list[str]:
        """Convert a rejection into the lines shown to the player.

        Raises:
            ValueError: If called on a valid result
        """
        if self.valid:
            raise ValueError("Cannot create rejection messages from valid result")

        assert self.rejection_reason is not None

        messages = [self.rejection_reason]
        if self.hint:
            messages.append(self.hint)
        return messages


# Convenience factory functions


def valid_result(**context: object) -> ValidationResult:
    """Create a successful ValidationResult.

    Example:
        >>> result = valid_result(direction=Movement.FORWARD)
        >>> assert result.valid
    """
    return ValidationResult(valid=True, context=dict(context))


def invalid_result(
    code: RejectionCode,
    reason: str,
    hint: str | None = None,
    **context: object,
) -> ValidationResult:
    """Create a failed ValidationResult.

    Args:
        code: The rejection code
        reason: Player-facing reason for rejection
        hint: Optional second line for the player
        **context: Additional context to include

    Returns:
        ValidationResult with valid=False
    """
    return ValidationResult(
        valid=False,
        rejection_code=code,
        rejection_reason=reason,
        hint=hint,
        context=dict(context),
    )
