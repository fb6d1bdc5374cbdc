"""
Rule-based parsing for labyrinth commands.

This module turns raw console input into a verb and its arguments, and
turns direction tokens into Movement values. It does no validation
against the session state; that is the job of the validators.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from labyrinth.models.labyrinth import Movement


class ParsedCommand(BaseModel):
    """A raw command split into its verb and arguments.

    Attributes:
        raw_input: The original input string
        verb: First whitespace-separated token
        args: Remaining tokens, in order
    """

    raw_input: str
    verb: str
    args: list[str] = Field(default_factory=list)

    @property
    def echo(self) -> str:
        """The input as shown back to the player."""
        return f"> {self.raw_input.strip()}"


class CommandParser:
    """Split raw input into a ParsedCommand.

    Example:
        >>> parser = CommandParser()
        >>> command = parser.parse("go  left")
        >>> command.verb, command.args
        ('go', ['left'])
        >>> parser.parse("") is None
        True
    """

    def parse(self, raw_input: str) -> ParsedCommand | None:
        """Parse raw input.

        Args:
            raw_input: The raw command string

        Returns:
            ParsedCommand, or None if the input holds no tokens
        """
        tokens = raw_input.split()
        if not tokens:
            return None
        return ParsedCommand(raw_input=raw_input, verb=tokens[0], args=tokens[1:])


class DirectionParser:
    """Parse direction tokens into Movement values.

    Parsing is case-insensitive and total: an unknown token yields None,
    never an exception.

    Supported patterns:
        - Forward: forward, f, fwd, ahead, straight
        - Left: left, l
        - Right: right, r

    Example:
        >>> DirectionParser().parse("FORWARD")
        <Movement.FORWARD: 'forward'>
        >>> DirectionParser().parse("up") is None
        True
    """

    DIRECTION_PATTERNS: dict[str, Movement] = {
        r"^(forward|f|fwd|ahead|straight)$": Movement.FORWARD,
        r"^(left|l)$": Movement.LEFT,
        r"^(right|r)$": Movement.RIGHT,
    }

    def parse(self, token: str) -> Movement | None:
        """Parse a direction token.

        Args:
            token: The raw direction token

        Returns:
            The matching Movement, or None if not recognized
        """
        normalized = token.lower().strip()

        for pattern, movement in self.DIRECTION_PATTERNS.items():
            if re.match(pattern, normalized):
                return movement

        return None
