"""Catalog module and placement value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._obstacles import ObstacleType


class ModuleCategory(str, Enum):
    """Vertical level a kitchen module occupies.

    Attributes:
        BASE: Floor-level module under the countertop.
        WALL: Upper module hung on the wall.
        TALL: Full-height column module.
    """

    BASE = "base"
    WALL = "wall"
    TALL = "tall"

    @property
    def is_floor(self) -> bool:
        """Whether the module stands on the floor (base or tall)."""
        return self is not ModuleCategory.WALL


@dataclass(frozen=True)
class CatalogModule:
    """A placeable module definition from the catalog.

    Attributes:
        ref: Unique reference code (e.g. "B60").
        label: Display label.
        category: Vertical level of the module.
        width: Width along the wall in millimeters.
        depth: Depth away from the wall in millimeters.
        price: Unit price.
        anchor_type: Obstacle type this module binds to instead of being
            placed freely, if any.
        is_corner: True for the single square module used at the junction
            of two walls.
    """

    ref: str
    label: str
    category: ModuleCategory
    width: int
    depth: int
    price: float
    anchor_type: ObstacleType | None = None
    is_corner: bool = False

    def __post_init__(self) -> None:
        if not self.ref:
            raise ValueError("Module ref must not be empty")
        if self.width <= 0 or self.depth <= 0:
            raise ValueError("Module dimensions must be positive")
        if self.price < 0:
            raise ValueError("Module price must be non-negative")
        if self.is_corner and self.width != self.depth:
            raise ValueError("Corner module must be square")
        if self.is_corner and self.anchor_type is not None:
            raise ValueError("Corner module cannot be anchored")

    @property
    def is_free(self) -> bool:
        """Whether greedy fill may choose this module."""
        return self.anchor_type is None and not self.is_corner


@dataclass(frozen=True)
class HardwareItem:
    """Fixed hardware cost charged per placed module.

    Attributes:
        key: Reference used in budget lines (e.g. "HANDLE").
        label: Display label.
        price: Unit price of one hardware set.
        per_module: Number of sets charged per placed module.
    """

    key: str
    label: str
    price: float
    per_module: int = 1

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Hardware price must be non-negative")
        if self.per_module < 0:
            raise ValueError("Hardware multiplier must be non-negative")


@dataclass(frozen=True)
class LinealRate:
    """Cost charged per linear meter of floor modules."""

    key: str
    label: str
    price_per_meter: float

    def __post_init__(self) -> None:
        if self.price_per_meter < 0:
            raise ValueError("Price per meter must be non-negative")


@dataclass(frozen=True)
class PlacedModule:
    """A catalog module positioned along a wall.

    Attributes:
        ref: Catalog reference code.
        category: Vertical level of the module.
        wall_id: Owning wall identifier, or the synthetic corner junction
            identifier for the corner module.
        position: Start offset along the wall in millimeters.
        width: Width along the wall in millimeters.
        label: Display label.
        price: Unit price.
        anchor: Obstacle type the module was centered on, if any.
        corner: True for the corner module.
    """

    ref: str
    category: ModuleCategory
    wall_id: str
    position: float
    width: int
    label: str
    price: float
    anchor: ObstacleType | None = None
    corner: bool = False

    @property
    def end(self) -> float:
        """Offset one past the module's last millimeter."""
        return self.position + self.width

    @classmethod
    def from_catalog(
        cls,
        module: CatalogModule,
        wall_id: str,
        position: float,
        anchor: ObstacleType | None = None,
    ) -> PlacedModule:
        """Create a placement of ``module`` at ``position`` on ``wall_id``."""
        return cls(
            ref=module.ref,
            category=module.category,
            wall_id=wall_id,
            position=position,
            width=module.width,
            label=module.label,
            price=module.price,
            anchor=anchor,
            corner=module.is_corner,
        )
