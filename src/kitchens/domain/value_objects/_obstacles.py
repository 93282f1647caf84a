"""Obstacle classification value objects."""

from __future__ import annotations

from enum import Enum


class ObstacleType(str, Enum):
    """Types of fixed features found on a kitchen wall.

    Attributes:
        WINDOW: Window opening. Blocks only upper (wall) modules.
        DOOR: Door opening. Blocks all furniture across its width.
        COLUMN: Structural column. Blocks all furniture across its width.
        WATER_POINT: Plumbing stub. A sink module is centered on it.
        SMOKE_OUTLET: Extraction outlet. An oven module is centered on it.
    """

    WINDOW = "window"
    DOOR = "door"
    COLUMN = "column"
    WATER_POINT = "water_point"
    SMOKE_OUTLET = "smoke_outlet"

    @property
    def is_blocking(self) -> bool:
        """Whether the obstacle blocks floor furniture across its width."""
        return self in BLOCKING_OBSTACLE_TYPES

    @property
    def is_point(self) -> bool:
        """Whether the obstacle is a zero-width point feature."""
        return self in POINT_OBSTACLE_TYPES

    @property
    def display_name(self) -> str:
        """Human readable name used in diagnostics."""
        return self.value.replace("_", " ")


BLOCKING_OBSTACLE_TYPES: frozenset[ObstacleType] = frozenset(
    {ObstacleType.DOOR, ObstacleType.COLUMN}
)

POINT_OBSTACLE_TYPES: frozenset[ObstacleType] = frozenset(
    {ObstacleType.WATER_POINT, ObstacleType.SMOKE_OUTLET}
)

# Anchors are placed in this order on every wall
ANCHOR_OBSTACLE_ORDER: tuple[ObstacleType, ...] = (
    ObstacleType.WATER_POINT,
    ObstacleType.SMOKE_OUTLET,
)

# Widths in millimeters used when a room description omits them
DEFAULT_OBSTACLE_WIDTHS: dict[ObstacleType, int] = {
    ObstacleType.WINDOW: 1200,
    ObstacleType.DOOR: 800,
    ObstacleType.COLUMN: 300,
    ObstacleType.WATER_POINT: 0,
    ObstacleType.SMOKE_OUTLET: 0,
}
