"""Root configuration schema.

This module contains the root KitchenConfiguration model describing a room
(shape and walls) and an optional inline catalog.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from kitchens.application.config.schemas.base import (
    RoomShapeConfig,
    SUPPORTED_VERSIONS,
)
from kitchens.application.config.schemas.catalog_schema import CatalogConfig
from kitchens.application.config.schemas.room_schema import WallConfig


class KitchenConfiguration(BaseModel):
    """Root configuration model for a kitchen room description.

    Attributes:
        schema_version: Configuration schema version
        shape: LINEAR, L-SHAPED or U-SHAPED
        walls: Walls in declaration order; the first is the primary wall
        catalog: Optional catalog overriding the built-in one
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    shape: RoomShapeConfig = RoomShapeConfig.LINEAR
    walls: list[WallConfig] = Field(..., min_length=1, max_length=3)
    catalog: CatalogConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_walls(self) -> "KitchenConfiguration":
        """Check the wall count against the shape and wall id uniqueness."""
        expected = self.shape.wall_count
        if len(self.walls) != expected:
            raise ValueError(
                f"{self.shape.value} room requires {expected} wall(s), "
                f"got {len(self.walls)}"
            )
        ids = [w.id for w in self.walls]
        if len(set(ids)) != len(ids):
            raise ValueError("wall ids must be unique")
        return self
