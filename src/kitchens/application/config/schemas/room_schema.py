"""Room geometry configuration schemas.

This module contains the wall and obstacle configuration models. Obstacle
widths and identifiers may be omitted; they are filled in from per-type
defaults and the owning wall's id respectively.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from kitchens.application.config.schemas.base import ObstacleTypeConfig
from kitchens.domain.value_objects import DEFAULT_OBSTACLE_WIDTHS


class ObstacleConfig(BaseModel):
    """Configuration for a wall obstacle.

    Attributes:
        id: Obstacle identifier (defaults to "<wall id>-obs-<n>")
        type: The type of obstacle (window, door, column, water_point,
            smoke_outlet)
        position: Center of the obstacle, in millimeters from the wall origin
        width: Obstacle width in millimeters (defaults per type; always 0
            for water points and smoke outlets)
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    type: ObstacleTypeConfig
    position: float = Field(ge=0, description="Center offset from wall origin (mm)")
    width: float | None = Field(default=None, ge=0, description="Width (mm)")

    @model_validator(mode="after")
    def apply_default_width(self) -> "ObstacleConfig":
        """Fill in the type's default width and reject widths on point obstacles."""
        if self.type.is_point:
            if self.width not in (None, 0):
                raise ValueError(
                    f"{self.type.value} obstacles are points and cannot have a width"
                )
            self.width = 0
        elif self.width is None:
            self.width = DEFAULT_OBSTACLE_WIDTHS[self.type]
        return self


class WallConfig(BaseModel):
    """Configuration for a wall of the room.

    Attributes:
        id: Wall identifier (e.g. "wall-A")
        length: Length along the wall in millimeters
        obstacles: Obstacles on the wall
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Wall identifier")
    length: int = Field(..., gt=0, description="Wall length in millimeters")
    obstacles: list[ObstacleConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_obstacles(self) -> "WallConfig":
        """Assign missing obstacle ids and keep obstacles on the wall."""
        for index, obstacle in enumerate(self.obstacles, start=1):
            if obstacle.id is None:
                obstacle.id = f"{self.id}-obs-{index}"
            if obstacle.position > self.length:
                raise ValueError(
                    f"obstacle '{obstacle.id}' at {obstacle.position}mm lies "
                    f"beyond the wall length ({self.length}mm)"
                )
        ids = [o.id for o in self.obstacles]
        if len(set(ids)) != len(ids):
            raise ValueError(f"obstacle ids on wall '{self.id}' must be unique")
        return self
