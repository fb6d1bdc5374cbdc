"""
Catalog Validator - Validates consistency of YAML room catalogs

Checks:
- Enemy references: enemy rooms point at existing enemy templates
- Room content: each room type carries exactly the content it needs
- Weights: every weighted room type has a template that can be drawn
- Orphan detection: enemy templates no room uses (warnings)
"""

from dataclasses import dataclass, field
from pathlib import Path

from labyrinth.engine.catalog import CatalogLoader
from labyrinth.models.catalog import CatalogData
from labyrinth.models.labyrinth import RoomType


@dataclass
class CatalogValidationResult:
    """Result of catalog validation"""

    catalog_id: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Catalog is valid if there are no errors (warnings are OK)"""
        return len(self.errors) == 0

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)


class CatalogValidator:
    """Validates room catalog consistency"""

    def __init__(self, catalog_data: CatalogData, catalog_id: str):
        self.catalog_data = catalog_data
        self.catalog_id = catalog_id
        self.result = CatalogValidationResult(catalog_id=catalog_id)

    def validate(self) -> CatalogValidationResult:
        """Run all validation checks"""
        self._validate_enemy_references()
        self._validate_room_content()
        self._validate_enemy_templates()
        self._validate_weights()
        self._detect_orphan_enemies()

        return self.result

    def _validate_enemy_references(self):
        """Check that every referenced enemy template exists"""
        valid_enemies = set(self.catalog_data.enemies.keys())

        for room_id, room in self.catalog_data.rooms.items():
            if room.enemy and room.enemy not in valid_enemies:
                self.result.add_error(
                    f"Room '{room_id}' references invalid enemy '{room.enemy}'"
                )

    def _validate_room_content(self):
        """Check that each room carries the content its type needs"""
        for room_id, room in self.catalog_data.rooms.items():
            if room.type == RoomType.ENEMY and not room.enemy:
                self.result.add_error(f"Enemy room '{room_id}' has no enemy")
            if room.type != RoomType.ENEMY and room.enemy:
                self.result.add_error(
                    f"Room '{room_id}' of type '{room.type.value}' cannot hold an enemy"
                )
            if room.type == RoomType.ITEM and not room.item:
                self.result.add_error(f"Item room '{room_id}' has no item")
            if room.type == RoomType.NARRATIVE and not room.narrative:
                self.result.add_warning(f"Narrative room '{room_id}' has no narrative text")
            if room.directions is not None:
                if room.type in (RoomType.ENEMY, RoomType.ITEM):
                    self.result.add_error(
                        f"Room '{room_id}' of type '{room.type.value}' cannot declare directions"
                    )
                elif not room.directions:
                    self.result.add_error(
                        f"Room '{room_id}' declares an empty direction list"
                    )
            if room.weight <= 0:
                self.result.add_warning(
                    f"Room '{room_id}' has weight {room.weight} and will never be drawn"
                )

    def _validate_enemy_templates(self):
        """Check enemy stats are usable"""
        for enemy_id, enemy in self.catalog_data.enemies.items():
            if enemy.health <= 0:
                self.result.add_error(
                    f"Enemy '{enemy_id}' has non-positive health {enemy.health}"
                )

    def _validate_weights(self):
        """Check weighted room types can actually be drawn"""
        drawable = 0
        for room_type, weight in self.catalog_data.catalog.room_weights.items():
            if weight <= 0:
                continue
            templates = self.catalog_data.get_rooms_of_type(room_type)
            if not templates:
                self.result.add_error(
                    f"Room type '{room_type.value}' has weight {weight} but no room templates"
                )
            elif not any(room.weight > 0 for room in templates.values()):
                self.result.add_error(
                    f"Room type '{room_type.value}' has weight {weight} but no room template with positive weight"
                )
            else:
                drawable += 1

        if drawable == 0:
            self.result.add_error("Catalog has no drawable room type")

    def _detect_orphan_enemies(self):
        """Detect enemy templates no room uses (warnings only)"""
        used = {room.enemy for room in self.catalog_data.rooms.values() if room.enemy}
        for enemy_id in self.catalog_data.enemies:
            if enemy_id not in used:
                self.result.add_warning(
                    f"Enemy '{enemy_id}' is defined but no room uses it"
                )


def validate_catalog(
    catalog_id: str, catalogs_dir: str | Path | None = None
) -> CatalogValidationResult:
    """
    Validate a catalog definition for consistency.

    Args:
        catalog_id: The catalog identifier (folder name in catalogs/)
        catalogs_dir: Optional path to catalogs directory

    Returns:
        CatalogValidationResult with errors and warnings
    """
    loader = CatalogLoader(catalogs_dir)
    catalog_data = loader.load_catalog(catalog_id, validate=False)

    validator = CatalogValidator(catalog_data, catalog_id)
    return validator.validate()
