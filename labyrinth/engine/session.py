"""
Labyrinth session driver.

This module wires the interpreter, the state machine and the presenter
into one play session, and is the consumer that acts on enemy defeat:
the interpreter only lowers enemy health, the session notices when it
reaches zero and moves the player on.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from typing import TYPE_CHECKING

from labyrinth.engine.console import ConsoleHistory, GameSlots
from labyrinth.engine.interpreter import CommandInterpreter
from labyrinth.engine.presenter import TurnPresenter
from labyrinth.engine.protocols import ConsoleFocus
from labyrinth.engine.state import LabyrinthStateManager
from labyrinth.models.labyrinth import RoomType

if TYPE_CHECKING:
    from labyrinth.engine.protocols import (
        DisplayHistory,
        RoomCatalogProvider,
        SessionLifecycle,
    )
    from labyrinth.models.labyrinth import EngineState

logger = logging.getLogger(__name__)


class LabyrinthSession:
    """One play-through of the labyrinth.

    Attributes:
        session_id: Unique identifier for this session
        catalog: Provider of rooms, held for the session's lifetime
        history: Console scrollback receiving every displayed line
        lifecycle: Console focus tracker, notified on ragequit
        state_manager: The session's state machine
        interpreter: Verb dispatch for player commands
        presenter: Turn descriptions

    Example:
        >>> session = LabyrinthSession(RandomRoomCatalog(catalog_data, seed=1))
        >>> session.start()
        ['Welcome to the Labyrinth!', ...]
        >>> session.process("continue")
        ['> continue', '=== Room 1: ... ===', ...]
    """

    def __init__(
        self,
        catalog: "RoomCatalogProvider",
        history: "DisplayHistory | None" = None,
        lifecycle: "SessionLifecycle | None" = None,
        *,
        tutorial: list[str] | None = None,
        state_manager: LabyrinthStateManager | None = None,
    ):
        self.session_id = str(uuid.uuid4())
        self.catalog = catalog
        self.history = history if history is not None else ConsoleHistory()
        self.lifecycle = lifecycle if lifecycle is not None else GameSlots()
        self.state_manager = state_manager or LabyrinthStateManager()
        self.interpreter = CommandInterpreter(catalog, self.history, self.lifecycle)
        self.presenter = TurnPresenter(tutorial)

    def get_state(self) -> "EngineState":
        return self.state_manager.get_state()

    @property
    def is_active(self) -> bool:
        """Whether the player is still in the labyrinth (no ragequit yet)."""
        return not self.interpreter.abandoned

    def start(self) -> list[str]:
        """Claim the console and describe the opening situation.

        The focus is only claimed when the lifecycle supports it.

        Returns:
            The opening lines
        """
        if isinstance(self.lifecycle, ConsoleFocus):
            self.lifecycle.claim()
        logger.info(f"Labyrinth session {self.session_id} started")
        return self._display(self.presenter.present(self.state_manager))

    def process(self, raw_command: str) -> list[str]:
        """Process one command and describe what changed.

        Once the player has ragequit, commands are dropped.

        Args:
            raw_command: The command as typed by the player

        Returns:
            Ordered lines to display
        """
        if not self.is_active:
            logger.debug(f"Dropping command after ragequit: {raw_command!r}")
            return []

        lines = self.interpreter.handle(raw_command, self.state_manager)

        if not self.is_active:
            logger.info(f"Labyrinth session {self.session_id} ended")
            return self._display(lines)

        lines.extend(self._resolve_defeat())
        lines.extend(self.presenter.present(self.state_manager))
        return self._display(lines)

    def process_batch(self, commands: Iterable[str]) -> list[str]:
        """Drain a queue of commands in arrival order.

        Empty commands are skipped and draining continues. Commands queued
        after a ragequit are dropped, since the console no longer belongs
        to the labyrinth.

        Args:
            commands: Raw commands, oldest first

        Returns:
            All displayed lines, in order
        """
        lines: list[str] = []
        for raw_command in commands:
            if not raw_command.strip():
                logger.debug("Skipping empty command")
                continue
            lines.extend(self.process(raw_command))
        return lines

    def _resolve_defeat(self) -> list[str]:
        """Move on when the current enemy has been beaten"""
        state = self.state_manager.get_state()
        if state.room_type != RoomType.ENEMY or state.enemy is None:
            return []
        if not state.enemy.is_defeated:
            return []

        name = state.enemy.name
        logger.debug(f"{name} defeated on turn {state.turn_count}")
        self.state_manager.next_turn(self.catalog)
        return [f"The {name} has been defeated!"]

    def _display(self, lines: list[str]) -> list[str]:
        for line in lines:
            self.history.push(line)
        return lines
