"""Domain layer - core business logic."""

from .catalog import DEFAULT_CATALOG, Catalog
from .entities import Obstacle, Room, RoomGeometryError, Wall
from .services import (
    BudgetAggregator,
    KitchenLayoutSolver,
    calculate_budget,
    generate_layout,
)
from .value_objects import (
    Budget,
    BudgetLine,
    CatalogModule,
    LayoutResult,
    ModuleCategory,
    ObstacleType,
    PlacedModule,
    RoomShape,
    Zone,
)

__all__ = [
    "Budget",
    "BudgetAggregator",
    "BudgetLine",
    "Catalog",
    "CatalogModule",
    "DEFAULT_CATALOG",
    "KitchenLayoutSolver",
    "LayoutResult",
    "ModuleCategory",
    "Obstacle",
    "ObstacleType",
    "PlacedModule",
    "Room",
    "RoomGeometryError",
    "RoomShape",
    "Wall",
    "Zone",
    "calculate_budget",
    "generate_layout",
]
