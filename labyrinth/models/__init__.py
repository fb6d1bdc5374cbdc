"""Pydantic models for the labyrinth engine"""

from labyrinth.models.labyrinth import (
    DirectionSet,
    Enemy,
    EngineState,
    GameState,
    Movement,
    RoomType,
    TurnFlags,
)
from labyrinth.models.catalog import (
    Catalog,
    CatalogData,
    EnemyTemplate,
    RoomDescriptor,
    RoomTemplate,
)
from labyrinth.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)

__all__ = [
    # Session state
    "DirectionSet",
    "Enemy",
    "EngineState",
    "GameState",
    "Movement",
    "RoomType",
    "TurnFlags",
    # Catalog models
    "Catalog",
    "CatalogData",
    "EnemyTemplate",
    "RoomDescriptor",
    "RoomTemplate",
    # Validation models
    "RejectionCode",
    "ValidationResult",
    "invalid_result",
    "valid_result",
]
