"""Base enums and shared constants for kitchen configuration schemas.

Enums are imported directly from the domain layer (they are ``str`` enums,
so they validate from and serialize to their JSON values) and aliased here
under their configuration names.
"""

from kitchens.domain.value_objects import ModuleCategory, ObstacleType, RoomShape

# Supported schema versions for configuration files
# Version 1.0: Room walls, obstacles and inline catalog
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

ObstacleTypeConfig = ObstacleType
ModuleCategoryConfig = ModuleCategory
RoomShapeConfig = RoomShape

__all__ = [
    "ModuleCategoryConfig",
    "ObstacleTypeConfig",
    "RoomShapeConfig",
    "SUPPORTED_VERSIONS",
]
