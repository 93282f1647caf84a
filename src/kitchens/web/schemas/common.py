"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class ModuleCategoryEnum(str, Enum):
    """Module category options."""

    BASE = "base"
    WALL = "wall"
    TALL = "tall"


class AnchorTypeEnum(str, Enum):
    """Point obstacle types a module can bind to."""

    WATER_POINT = "water_point"
    SMOKE_OUTLET = "smoke_outlet"


class PlacedModuleSchema(BaseModel):
    """A module placed on a wall or corner junction."""

    ref: str = Field(..., min_length=1, description="Catalog reference")
    category: ModuleCategoryEnum = Field(..., description="Module category")
    wall_id: str = Field(..., description="Owning wall or corner junction id")
    position: float = Field(..., ge=0, description="Start offset in millimeters")
    width: int = Field(..., gt=0, description="Width in millimeters")
    label: str = Field(default="", description="Display label")
    price: float = Field(..., ge=0, description="Unit price")
    anchor: AnchorTypeEnum | None = Field(
        default=None, description="Obstacle type the module is bound to"
    )
    corner: bool = Field(default=False, description="Whether this is the corner module")
