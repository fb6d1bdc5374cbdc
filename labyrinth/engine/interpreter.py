"""
Command interpreter for the labyrinth engine.

This module maps one raw console command onto the state machine and
returns the lines to display. Nothing here raises on bad input: malformed
commands and commands that are illegal in the current state become
messages (or, for `skip`, silence).

Processing steps:
    1. Empty input: no output, no mutation
    2. Split into verb and arguments
    3. Echo the input, except for `clear`
    4. Dispatch on the exact verb
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from labyrinth.engine.help import HELP_USAGE, display_help, parse_page_number
from labyrinth.engine.parser import CommandParser, ParsedCommand
from labyrinth.engine.validators import (
    AttackValidator,
    ContinueValidator,
    MovementValidator,
    SkipValidator,
)

if TYPE_CHECKING:
    from labyrinth.engine.protocols import (
        DisplayHistory,
        RoomCatalogProvider,
        SessionLifecycle,
    )
    from labyrinth.engine.state import LabyrinthStateManager

logger = logging.getLogger(__name__)

ATTACK_DAMAGE = 1.0

CLEAR_VERB = "clear"


class CommandInterpreter:
    """Interprets player commands for one labyrinth session.

    The session's collaborators are passed in explicitly; the interpreter
    holds no state of its own besides them and the `abandoned` flag.

    Attributes:
        catalog: Provider of new rooms on turn advances
        history: Console scrollback, cleared by `clear`
        lifecycle: Notified when the player ragequits
        abandoned: Set once the player ragequit; the session is over

    Example:
        >>> interpreter = CommandInterpreter(catalog, history, lifecycle)
        >>> interpreter.handle("go left", state_manager)
        ['> go left']
    """

    def __init__(
        self,
        catalog: "RoomCatalogProvider",
        history: "DisplayHistory",
        lifecycle: "SessionLifecycle",
    ):
        self.catalog = catalog
        self.history = history
        self.lifecycle = lifecycle
        self.abandoned = False

        self.parser = CommandParser()
        self._movement_validator = MovementValidator()
        self._attack_validator = AttackValidator()
        self._continue_validator = ContinueValidator()
        self._skip_validator = SkipValidator()

        self._handlers: dict[
            str, Callable[[ParsedCommand, "LabyrinthStateManager"], list[str]]
        ] = {
            CLEAR_VERB: self._handle_clear,
            "help": self._handle_help,
            "ragequit": self._handle_ragequit,
            "tutorial": self._handle_tutorial,
            "infos": self._handle_infos,
            "continue": self._handle_continue,
            "skip": self._handle_skip,
            "go": self._handle_go,
            "attack": self._handle_attack,
        }

    @property
    def verbs(self) -> list[str]:
        """Verbs this interpreter understands."""
        return list(self._handlers)

    def handle(
        self,
        raw_command: str,
        state_manager: "LabyrinthStateManager",
    ) -> list[str]:
        """Process one raw command.

        Args:
            raw_command: The command as typed by the player
            state_manager: State machine of the session

        Returns:
            Ordered lines to display
        """
        command = self.parser.parse(raw_command)
        if command is None:
            return []

        messages: list[str] = []
        if command.verb != CLEAR_VERB:
            messages.append(command.echo)

        handler = self._handlers.get(command.verb)
        if handler is None:
            logger.debug(f"Unknown verb: {command.verb!r}")
            messages.append(f"I didn't understand the command: \"{command.verb}\"")
            return messages

        logger.debug(f"Handling {command.verb!r} with args {command.args}")
        messages.extend(handler(command, state_manager))
        return messages

    def _handle_clear(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        self.history.clear()
        return []

    def _handle_help(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        if not command.args:
            return [display_help(1)]

        page_number = parse_page_number(command.args[0])
        if page_number is None:
            return [f"Invalid help page: \"{command.args[0]}\"", HELP_USAGE]
        return [display_help(page_number)]

    def _handle_ragequit(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        messages = ["Quitting Labyrinth..."]
        state_manager.reset()
        self.lifecycle.abandon_session()
        self.abandoned = True
        return messages

    def _handle_tutorial(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        state_manager.enter_tutorial()
        return []

    def _handle_infos(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        state_manager.refresh_infos()
        return []

    def _handle_continue(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        result = self._continue_validator.validate(command, state_manager.get_state())
        if not result.valid:
            return result.to_messages()

        state_manager.begin_exploring(self.catalog)
        return []

    def _handle_skip(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        result = self._skip_validator.validate(command, state_manager.get_state())
        if not result.valid:
            # Rejected skips are silent
            logger.debug(f"Skip ignored: {result.rejection_reason}")
            return []

        messages = ["Skipping room..."]
        state_manager.next_turn(self.catalog)
        return messages

    def _handle_go(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        result = self._movement_validator.validate(command, state_manager.get_state())
        if not result.valid:
            return result.to_messages()

        state_manager.next_turn(self.catalog)
        return []

    def _handle_attack(self, command: ParsedCommand, state_manager: "LabyrinthStateManager") -> list[str]:
        result = self._attack_validator.validate(command, state_manager.get_state())
        if not result.valid:
            return result.to_messages()

        messages = ["Attacking the enemy for 1 (one) damage"]
        state_manager.damage_enemy(ATTACK_DAMAGE)
        return messages
