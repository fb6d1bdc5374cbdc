"""
Catalog schema models - Pydantic models for YAML room catalogs
"""

from pydantic import BaseModel, Field

from labyrinth.models.labyrinth import DirectionSet, Enemy, Movement, RoomType


class EnemyTemplate(BaseModel):
    """Enemy definition from enemies.yaml"""
    name: str
    health: float = 3.0
    damage: float = 1.0
    description: str = ""

    def spawn(self) -> Enemy:
        """Create a fresh enemy at full health"""
        return Enemy(
            name=self.name,
            health=self.health,
            max_health=self.health,
            damage=self.damage,
        )


class RoomTemplate(BaseModel):
    """Room definition from rooms.yaml"""
    type: RoomType
    name: str
    narrative: str = ""
    enemy: str | None = None         # Enemy template ID (ENEMY rooms)
    item: str | None = None          # Item name (ITEM rooms)
    directions: list[Movement] | None = None  # Fixed exits, random when unset
    weight: float = 1.0


class Catalog(BaseModel):
    """Main catalog definition from catalog.yaml"""
    name: str
    description: str = ""
    tutorial: list[str] = Field(default_factory=list)
    room_weights: dict[RoomType, float] = Field(
        default_factory=lambda: {
            RoomType.EMPTY: 3.0,
            RoomType.ENEMY: 2.0,
            RoomType.ITEM: 1.0,
            RoomType.NARRATIVE: 1.0,
        }
    )


class RoomDescriptor(BaseModel):
    """A concrete room produced for the next turn"""
    room_type: RoomType
    name: str = ""
    enemy: Enemy | None = None
    narrative: str | None = None
    item: str | None = None
    directions: DirectionSet = Field(default_factory=DirectionSet)


class CatalogData(BaseModel):
    """Complete loaded catalog data"""
    catalog: Catalog
    rooms: dict[str, RoomTemplate]
    enemies: dict[str, EnemyTemplate]

    def get_room(self, room_id: str) -> RoomTemplate | None:
        """Get a room template by ID"""
        return self.rooms.get(room_id)

    def get_enemy(self, enemy_id: str) -> EnemyTemplate | None:
        """Get an enemy template by ID"""
        return self.enemies.get(enemy_id)

    def get_rooms_of_type(self, room_type: RoomType) -> dict[str, RoomTemplate]:
        """Get all room templates of a given type"""
        return {
            room_id: room
            for room_id, room in self.rooms.items()
            if room.type == room_type
        }
