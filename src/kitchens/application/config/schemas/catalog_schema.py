"""Catalog configuration schemas.

A catalog file (or the inline ``catalog`` object of a room file) replaces
the built-in catalog, so prices and module sets can change without code
changes.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from kitchens.application.config.schemas.base import (
    ModuleCategoryConfig,
    ObstacleTypeConfig,
)


class CatalogModuleConfig(BaseModel):
    """Configuration for a catalog module.

    Attributes:
        ref: Unique reference code
        label: Display label
        category: base, wall or tall
        width: Width in millimeters
        depth: Depth in millimeters
        price: Unit price
        anchor: Obstacle type the module binds to (water_point or smoke_outlet)
        corner: True for the square corner module
    """

    model_config = ConfigDict(extra="forbid")

    ref: str = Field(..., min_length=1)
    label: str
    category: ModuleCategoryConfig
    width: int = Field(..., gt=0)
    depth: int = Field(..., gt=0)
    price: float = Field(..., ge=0)
    anchor: ObstacleTypeConfig | None = None
    corner: bool = False

    @model_validator(mode="after")
    def validate_flags(self) -> "CatalogModuleConfig":
        """Check anchor and corner constraints."""
        if self.anchor is not None and not self.anchor.is_point:
            raise ValueError(
                "anchor must be 'water_point' or 'smoke_outlet', "
                f"got '{self.anchor.value}'"
            )
        if self.corner:
            if self.anchor is not None:
                raise ValueError("corner module cannot be anchored")
            if self.width != self.depth:
                raise ValueError("corner module must be square (width == depth)")
        return self


class HardwareConfig(BaseModel):
    """Hardware kind charged per placed module."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(..., min_length=1)
    label: str
    price: float = Field(..., ge=0)
    per_module: int = Field(default=1, ge=0)


class LinealRateConfig(BaseModel):
    """Rate charged per meter of base modules."""

    model_config = ConfigDict(extra="forbid")

    label: str
    price_per_meter: float = Field(..., ge=0)


class LinealsConfig(BaseModel):
    """Countertop and plinth rates."""

    model_config = ConfigDict(extra="forbid")

    countertop: LinealRateConfig
    plinth: LinealRateConfig


class CatalogConfig(BaseModel):
    """Complete catalog: modules, hardware and lineal rates."""

    model_config = ConfigDict(extra="forbid")

    modules: list[CatalogModuleConfig] = Field(..., min_length=1)
    hardware: list[HardwareConfig] = Field(default_factory=list)
    lineals: LinealsConfig

    @model_validator(mode="after")
    def validate_modules(self) -> "CatalogConfig":
        """Check ref uniqueness and the single-corner rule."""
        refs = [m.ref for m in self.modules]
        duplicates = sorted({r for r in refs if refs.count(r) > 1})
        if duplicates:
            raise ValueError(f"duplicate module refs: {', '.join(duplicates)}")
        if sum(1 for m in self.modules if m.corner) > 1:
            raise ValueError("at most one corner module is allowed")
        keys = [h.key for h in self.hardware]
        if len(set(keys)) != len(keys):
            raise ValueError("hardware keys must be unique")
        return self
