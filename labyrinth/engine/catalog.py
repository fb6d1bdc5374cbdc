"""
Room catalogs - Load YAML catalogs and draw rooms from them
"""

import logging
import random
from pathlib import Path

import yaml

from labyrinth import config
from labyrinth.models.catalog import (
    Catalog,
    CatalogData,
    EnemyTemplate,
    RoomDescriptor,
    RoomTemplate,
)
from labyrinth.models.labyrinth import DirectionSet, EngineState, Movement, RoomType

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads room catalogs from YAML files"""

    def __init__(self, catalogs_dir: str | Path | None = None):
        """Initialize with catalogs directory path"""
        if catalogs_dir is None:
            catalogs_dir = config.get_catalogs_dir()
        self.catalogs_dir = Path(catalogs_dir)

    def list_catalogs(self) -> list[dict]:
        """List available catalogs with metadata"""
        catalogs = []

        if not self.catalogs_dir.exists():
            return catalogs

        for catalog_path in sorted(self.catalogs_dir.iterdir()):
            catalog_yaml = catalog_path / "catalog.yaml"
            if not catalog_path.is_dir() or not catalog_yaml.exists():
                continue
            try:
                with open(catalog_yaml) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                logger.warning(f"Skipping unreadable catalog {catalog_path.name}: {e}")
                continue
            catalogs.append({
                "id": catalog_path.name,
                "name": data.get("name", catalog_path.name),
                "description": data.get("description", ""),
            })

        return catalogs

    def load_catalog(self, catalog_id: str, validate: bool = True) -> CatalogData:
        """
        Load a complete catalog from YAML files.

        Args:
            catalog_id: The catalog identifier (folder name in catalogs/)
            validate: Whether to validate the catalog on load (default True)

        Returns:
            CatalogData with all rooms and enemies

        Raises:
            FileNotFoundError: If catalog doesn't exist
            ValueError: If validation fails and validate=True
        """
        catalog_path = self.catalogs_dir / catalog_id

        if not catalog_path.exists():
            raise FileNotFoundError(
                f"Catalog '{catalog_id}' not found at {catalog_path}"
            )

        catalog = self._load_catalog_yaml(catalog_path / "catalog.yaml")
        rooms = self._load_rooms_yaml(catalog_path / "rooms.yaml")
        enemies = self._load_enemies_yaml(catalog_path / "enemies.yaml")

        catalog_data = CatalogData(catalog=catalog, rooms=rooms, enemies=enemies)

        if validate:
            from labyrinth.engine.validator import CatalogValidator
            validator = CatalogValidator(catalog_data, catalog_id)
            result = validator.validate()

            for warning in result.warnings:
                logger.warning(f"Catalog '{catalog_id}': {warning}")

            if not result.is_valid:
                error_list = "\n  - ".join(result.errors)
                raise ValueError(
                    f"Catalog '{catalog_id}' validation failed with {len(result.errors)} error(s):\n  - {error_list}"
                )

        logger.info(
            f"Loaded catalog '{catalog_id}': {len(rooms)} room(s), {len(enemies)} enemy template(s)"
        )
        return catalog_data

    def _load_catalog_yaml(self, path: Path) -> Catalog:
        """Load catalog.yaml"""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        tutorial = data.get("tutorial", [])
        if isinstance(tutorial, str):
            tutorial = tutorial.strip().splitlines()

        catalog = Catalog(
            name=data.get("name", path.parent.name),
            description=data.get("description", ""),
            tutorial=tutorial,
        )
        if "room_weights" in data:
            catalog.room_weights = {
                RoomType(room_type): float(weight)
                for room_type, weight in data["room_weights"].items()
            }
        return catalog

    def _load_rooms_yaml(self, path: Path) -> dict[str, RoomTemplate]:
        """Load rooms.yaml"""
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        rooms = {}
        for room_id, room_data in data.items():
            directions = room_data.get("directions")
            if directions is not None:
                directions = [Movement(d.lower()) for d in directions]

            rooms[room_id] = RoomTemplate(
                type=RoomType(room_data.get("type", "empty")),
                name=room_data.get("name", room_id),
                narrative=(room_data.get("narrative") or "").strip(),
                enemy=room_data.get("enemy"),
                item=room_data.get("item"),
                directions=directions,
                weight=room_data.get("weight", 1.0),
            )

        return rooms

    def _load_enemies_yaml(self, path: Path) -> dict[str, EnemyTemplate]:
        """Load enemies.yaml"""
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        enemies = {}
        for enemy_id, enemy_data in data.items():
            enemies[enemy_id] = EnemyTemplate(
                name=enemy_data.get("name", enemy_id),
                health=enemy_data.get("health", 3.0),
                damage=enemy_data.get("damage", 1.0),
                description=enemy_data.get("description", ""),
            )

        return enemies


class RandomRoomCatalog:
    """Draws weighted random rooms from a loaded catalog.

    Implements the RoomCatalogProvider protocol. The room type is picked
    by the catalog's room weights, then a template of that type by its
    own weight. The first turn of a session never holds an enemy.

    Example:
        >>> catalog = RandomRoomCatalog(CatalogLoader().load_catalog("default"), seed=7)
        >>> room = catalog.next_room(EngineState())
        >>> room.room_type != RoomType.ENEMY
        True
    """

    # Room types the player leaves by walking; the others are left by
    # dealing with their content or skipping it
    WALKABLE_TYPES = (RoomType.EMPTY, RoomType.NARRATIVE)

    def __init__(self, catalog_data: CatalogData, seed: int | None = None):
        self.catalog_data = catalog_data
        self.rng = random.Random(seed)

    def next_room(self, state: EngineState) -> RoomDescriptor:
        """Draw the room for the next turn"""
        room_type = self._pick_room_type(state)
        if room_type is None:
            logger.warning("Catalog has no usable rooms, falling back to an empty corridor")
            return RoomDescriptor(
                room_type=RoomType.EMPTY,
                name="Corridor",
                directions=DirectionSet(directions=set(Movement)),
            )

        templates = self.catalog_data.get_rooms_of_type(room_type)
        room_ids = [r for r in templates if templates[r].weight > 0]
        room_id = self.rng.choices(
            room_ids, weights=[templates[r].weight for r in room_ids]
        )[0]
        template = templates[room_id]

        enemy = None
        if template.enemy:
            enemy_template = self.catalog_data.get_enemy(template.enemy)
            if enemy_template:
                enemy = enemy_template.spawn()

        return RoomDescriptor(
            room_type=template.type,
            name=template.name,
            enemy=enemy,
            narrative=template.narrative or None,
            item=template.item,
            directions=self._pick_directions(template),
        )

    def _pick_room_type(self, state: EngineState) -> RoomType | None:
        """Pick a room type among those with drawable templates and positive weight"""
        candidates = []
        weights = []
        for room_type, weight in self.catalog_data.catalog.room_weights.items():
            if weight <= 0:
                continue
            templates = self.catalog_data.get_rooms_of_type(room_type).values()
            if sum(room.weight for room in templates if room.weight > 0) <= 0:
                continue
            if room_type == RoomType.ENEMY and state.turn_count == 0:
                continue
            candidates.append(room_type)
            weights.append(weight)

        if not candidates:
            return None
        return self.rng.choices(candidates, weights=weights)[0]

    def _pick_directions(self, template: RoomTemplate) -> DirectionSet:
        """Fixed exits from the template, or a random non-empty subset"""
        if template.type not in self.WALKABLE_TYPES:
            return DirectionSet()
        if template.directions:
            return DirectionSet(directions=set(template.directions))

        movements = list(Movement)
        count = self.rng.randint(1, len(movements))
        return DirectionSet(directions=set(self.rng.sample(movements, count)))
