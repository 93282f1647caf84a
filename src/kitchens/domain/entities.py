"""Room description entities consumed by the layout solver."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import ObstacleType, RoomShape, Zone


class RoomGeometryError(ValueError):
    """Raised when a room description is structurally malformed."""


@dataclass(frozen=True)
class Obstacle:
    """A fixed feature on a wall.

    Obstacles are positioned by their center along the wall. Point
    obstacles (water points, smoke outlets) have zero width.

    Attributes:
        obstacle_id: Caller-supplied identifier.
        obstacle_type: The type of obstacle.
        position: Center offset from the wall origin in millimeters.
        width: Width along the wall in millimeters.
    """

    obstacle_id: str
    obstacle_type: ObstacleType
    position: float
    width: float = 0

    def __post_init__(self) -> None:
        """Validate obstacle position and width."""
        if self.position < 0:
            raise RoomGeometryError("Obstacle position must be non-negative")
        if self.width < 0:
            raise RoomGeometryError("Obstacle width must be non-negative")
        if self.obstacle_type.is_point and self.width != 0:
            raise RoomGeometryError(
                f"Point obstacle '{self.obstacle_type.value}' must have zero width"
            )

    @property
    def start(self) -> float:
        """Left edge of the obstacle."""
        return self.position - self.width / 2

    @property
    def end(self) -> float:
        """Right edge of the obstacle."""
        return self.position + self.width / 2

    def to_zone(self) -> Zone:
        """Interval covered by the obstacle, split symmetrically around its center."""
        return Zone(start=self.start, end=self.end)


@dataclass(frozen=True)
class Wall:
    """A straight wall where modules can be placed.

    Attributes:
        wall_id: Wall identifier.
        length: Length in millimeters.
        obstacles: Obstacles on the wall, in declaration order.
    """

    wall_id: str
    length: int
    obstacles: tuple[Obstacle, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.wall_id:
            raise RoomGeometryError("Wall id must not be empty")
        if self.length <= 0:
            raise RoomGeometryError(
                f"Wall '{self.wall_id}' length must be positive"
            )
        for obstacle in self.obstacles:
            if obstacle.position > self.length:
                raise RoomGeometryError(
                    f"Obstacle '{obstacle.obstacle_id}' lies beyond the end "
                    f"of wall '{self.wall_id}'"
                )

    def obstacles_of_type(self, obstacle_type: ObstacleType) -> list[Obstacle]:
        """Obstacles of the given type, in declaration order."""
        return [o for o in self.obstacles if o.obstacle_type == obstacle_type]


@dataclass(frozen=True)
class Room:
    """Room description: a shape tag plus its walls.

    The first wall is the primary wall. For angled shapes the second wall
    meets the primary wall at the shared origin corner.
    """

    shape: RoomShape
    walls: tuple[Wall, ...]

    def __post_init__(self) -> None:
        if len(self.walls) != self.shape.wall_count:
            raise RoomGeometryError(
                f"{self.shape.value} room requires {self.shape.wall_count} "
                f"wall(s), got {len(self.walls)}"
            )
        ids = [w.wall_id for w in self.walls]
        if len(set(ids)) != len(ids):
            raise RoomGeometryError("Wall ids must be unique")

    @property
    def primary_wall(self) -> Wall:
        """The wall every room shape has."""
        return self.walls[0]

    @property
    def corner_walls(self) -> tuple[Wall, Wall] | None:
        """The two walls meeting at the origin corner, if the shape has one."""
        if not self.shape.has_corner:
            return None
        return self.walls[0], self.walls[1]

    def get_wall(self, wall_id: str) -> Wall | None:
        """Find a wall by id."""
        for wall in self.walls:
            if wall.wall_id == wall_id:
                return wall
        return None
