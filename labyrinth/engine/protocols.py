"""
Protocol definitions for the labyrinth engine.

The engine core talks to its surroundings only through these
interfaces. Using protocols keeps the collaborators swappable:

- RoomCatalogProvider: Where the next room comes from
- DisplayHistory: The console's scrollback, cleared by `clear`
- SessionLifecycle: Whatever tracks which minigame owns the console
- ConsoleFocus: Lifecycles that can also hand the focus to the labyrinth

Component Flow:
    Raw command -> CommandInterpreter -> validators
                          |
                          v (if valid)
                   TurnGenerator -> RoomCatalogProvider.next_room()
                          |
                          v
                   EngineState updated, messages returned
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from labyrinth.models.catalog import RoomDescriptor
    from labyrinth.models.labyrinth import EngineState


@runtime_checkable
class RoomCatalogProvider(Protocol):
    """Protocol for supplying the room of the next turn.

    Providers must always return a room. An empty or final room is
    itself a legitimate RoomDescriptor, never a failure.

    Example implementations:
        - RandomRoomCatalog: Weighted random rooms from a YAML catalog
        - StubRoomCatalog (tests): Returns a fixed sentinel room
    """

    def next_room(self, state: "EngineState") -> "RoomDescriptor":
        """Produce the room for the next turn.

        Args:
            state: Current engine state, for progress-dependent rooms

        Returns:
            RoomDescriptor for the next turn
        """
        ...


@runtime_checkable
class DisplayHistory(Protocol):
    """Protocol for the console's accumulated display lines."""

    def push(self, message: str) -> None:
        """Record one displayed line."""
        ...

    def clear(self) -> None:
        """Forget every line shown so far."""
        ...


@runtime_checkable
class SessionLifecycle(Protocol):
    """Protocol for the collaborator tracking console focus.

    The labyrinth notifies it when the player abandons the game so
    that focus returns to the host console.
    """

    def abandon_session(self) -> None:
        """Mark the labyrinth slot as abandoned."""
        ...


@runtime_checkable
class ConsoleFocus(Protocol):
    """Protocol for lifecycles that hand the console focus to a minigame.

    Optional on top of SessionLifecycle; a session claims the focus on
    start only when its lifecycle supports it.
    """

    def claim(self) -> None:
        """Give the console focus to the labyrinth."""
        ...
