"""
Console collaborators for the labyrinth engine.

- ConsoleHistory: The scrollback of lines shown to the player
- GameSlots: Tracks which minigame currently owns the console
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ConsoleHistory:
    """Scrollback of displayed lines.

    Implements the DisplayHistory protocol.
    """

    def __init__(self, max_lines: int = 500):
        self.max_lines = max_lines
        self.messages: list[str] = []

    def push(self, message: str) -> None:
        """Append one displayed line, dropping the oldest beyond max_lines."""
        self.messages.append(message)
        if len(self.messages) > self.max_lines:
            del self.messages[: len(self.messages) - self.max_lines]

    def clear(self) -> None:
        self.messages.clear()


class GameSlots:
    """Tracks which minigame owns the console focus.

    Implements the SessionLifecycle protocol for the labyrinth slot.

    Attributes:
        active: Name of the minigame holding focus, or None for the host console
        abandoned: Names of minigames the player quit, in order
    """

    def __init__(self, slot_name: str = "labyrinth"):
        self.slot_name = slot_name
        self.active: str | None = None
        self.abandoned: list[str] = []

    def claim(self) -> None:
        """Give the console focus to this slot."""
        self.active = self.slot_name
        logger.info(f"Console focus given to '{self.slot_name}'")

    @property
    def is_active(self) -> bool:
        return self.active == self.slot_name

    def abandon_session(self) -> None:
        """Release the focus after the player ragequit."""
        if self.active == self.slot_name:
            self.active = None
        self.abandoned.append(self.slot_name)
        logger.info(f"Minigame '{self.slot_name}' abandoned")
