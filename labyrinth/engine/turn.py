"""
Turn generation for the labyrinth engine.

A turn is one discrete advance of the labyrinth: a new room is drawn
from the catalog and written over the session state. The generator
performs no validation; callers only invoke it for legal transitions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from labyrinth.engine.protocols import RoomCatalogProvider
    from labyrinth.models.catalog import RoomDescriptor
    from labyrinth.models.labyrinth import EngineState

logger = logging.getLogger(__name__)


class TurnGenerator:
    """Produces the next turn of a session.

    Each call consumes one unit of game progress, so two calls in a row
    produce two independent rooms.

    Example:
        >>> generator = TurnGenerator()
        >>> room = generator.advance_turn(state, catalog)
        >>> state.room_type == room.room_type
        True
    """

    def advance_turn(
        self,
        state: "EngineState",
        catalog: "RoomCatalogProvider",
    ) -> "RoomDescriptor":
        """Advance the session by one turn.

        Effects, in order:
            1. Query the catalog for the next room
            2. Overwrite room type, enemy, directions and room content
            3. Clear both turn-scoped display flags
            4. Count the turn

        Args:
            state: Engine state to mutate in place
            catalog: Provider of the next room

        Returns:
            The RoomDescriptor the new turn was built from
        """
        room = catalog.next_room(state)

        state.room_type = room.room_type
        state.enemy = room.enemy.model_copy() if room.enemy else None
        state.next_directions = room.directions.model_copy(deep=True)
        state.room_name = room.name
        state.narrative = room.narrative or ""
        state.item = room.item

        state.flags.clear()
        state.turn_count += 1

        logger.debug(
            f"Turn {state.turn_count}: {room.room_type.value} room '{room.name}', "
            f"directions={[m.value for m in state.next_directions.ordered()]}"
        )
        return room
