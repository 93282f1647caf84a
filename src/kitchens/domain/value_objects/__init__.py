"""Value objects for the kitchen domain.

This module provides immutable data types used throughout the kitchen
layout system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Obstacle classification
from ._obstacles import (
    ANCHOR_OBSTACLE_ORDER,
    BLOCKING_OBSTACLE_TYPES,
    DEFAULT_OBSTACLE_WIDTHS,
    POINT_OBSTACLE_TYPES,
    ObstacleType,
)

# Wall-axis intervals
from ._zones import Zone

# Catalog and placement
from ._modules import (
    CatalogModule,
    HardwareItem,
    LinealRate,
    ModuleCategory,
    PlacedModule,
)

# Pricing
from ._budget import Budget, BudgetLine

# Layout
from ._layout import ROOM_SHAPE_WALL_COUNTS, LayoutResult, RoomShape

__all__ = [
    # Obstacles
    "ANCHOR_OBSTACLE_ORDER",
    "BLOCKING_OBSTACLE_TYPES",
    "DEFAULT_OBSTACLE_WIDTHS",
    "POINT_OBSTACLE_TYPES",
    "ObstacleType",
    # Zones
    "Zone",
    # Catalog and placement
    "CatalogModule",
    "HardwareItem",
    "LinealRate",
    "ModuleCategory",
    "PlacedModule",
    # Pricing
    "Budget",
    "BudgetLine",
    # Layout
    "ROOM_SHAPE_WALL_COUNTS",
    "LayoutResult",
    "RoomShape",
]
