"""Kitchen module catalog and pricing constants.

The catalog is read-only configuration shared by the solver and the budget
aggregator. ``DEFAULT_CATALOG`` is used unless a caller supplies another one
(see ``kitchens.application.config`` for loading catalogs from JSON).
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import (
    CatalogModule,
    HardwareItem,
    LinealRate,
    ModuleCategory,
    ObstacleType,
)

__all__ = ["Catalog", "DEFAULT_CATALOG"]


@dataclass(frozen=True)
class Catalog:
    """Immutable table of placeable modules plus hardware and lineal rates.

    Attributes:
        modules: Module definitions in declaration order. Declaration order
            breaks width ties during greedy fill.
        hardware: Hardware kinds charged per placed module.
        countertop: Countertop rate per meter of base modules.
        plinth: Plinth rate per meter of base modules.
    """

    modules: tuple[CatalogModule, ...]
    hardware: tuple[HardwareItem, ...]
    countertop: LinealRate
    plinth: LinealRate

    def __post_init__(self) -> None:
        refs = [m.ref for m in self.modules]
        if len(set(refs)) != len(refs):
            raise ValueError("Catalog module refs must be unique")
        if sum(1 for m in self.modules if m.is_corner) > 1:
            raise ValueError("Catalog may define at most one corner module")
        for module in self.modules:
            if module.anchor_type is not None and not module.anchor_type.is_point:
                raise ValueError(
                    f"Module '{module.ref}' cannot bind to "
                    f"'{module.anchor_type.value}' obstacles"
                )

    def get_module(self, ref: str) -> CatalogModule | None:
        """Get a module by reference code."""
        for module in self.modules:
            if module.ref == ref:
                return module
        return None

    def anchor_module(self, obstacle_type: ObstacleType) -> CatalogModule | None:
        """First module declared to bind to ``obstacle_type``."""
        for module in self.modules:
            if module.anchor_type == obstacle_type:
                return module
        return None

    @property
    def corner_module(self) -> CatalogModule | None:
        """The square corner module, if the catalog has one."""
        for module in self.modules:
            if module.is_corner:
                return module
        return None

    def base_modules_by_width(self) -> list[CatalogModule]:
        """Freely placeable base modules, widest first.

        The sort is stable, so equal widths keep declaration order.
        """
        return sorted(
            (
                m
                for m in self.modules
                if m.category == ModuleCategory.BASE and m.is_free
            ),
            key=lambda m: -m.width,
        )

    def wall_modules_by_width(self) -> list[CatalogModule]:
        """Upper modules, widest first."""
        return sorted(
            (m for m in self.modules if m.category == ModuleCategory.WALL),
            key=lambda m: -m.width,
        )


DEFAULT_CATALOG = Catalog(
    modules=(
        # Base modules
        CatalogModule("B15", "Base 15", ModuleCategory.BASE, 150, 600, 25),
        CatalogModule("B30", "Base 30", ModuleCategory.BASE, 300, 600, 35),
        CatalogModule("B45", "Base 45", ModuleCategory.BASE, 450, 600, 42),
        CatalogModule("B60", "Base 60", ModuleCategory.BASE, 600, 600, 50),
        CatalogModule("B90", "Base 90", ModuleCategory.BASE, 900, 600, 72),
        CatalogModule("B120", "Base 120", ModuleCategory.BASE, 1200, 600, 95),
        # Special base modules
        CatalogModule(
            "SINK60",
            "Sink",
            ModuleCategory.BASE,
            600,
            600,
            65,
            anchor_type=ObstacleType.WATER_POINT,
        ),
        CatalogModule(
            "OVEN60",
            "Oven",
            ModuleCategory.BASE,
            600,
            600,
            60,
            anchor_type=ObstacleType.SMOKE_OUTLET,
        ),
        CatalogModule(
            "CORNER90", "Corner L", ModuleCategory.BASE, 930, 930, 110, is_corner=True
        ),
        # Wall modules
        CatalogModule("A15", "Wall 15", ModuleCategory.WALL, 150, 350, 22),
        CatalogModule("A30", "Wall 30", ModuleCategory.WALL, 300, 350, 30),
        CatalogModule("A45", "Wall 45", ModuleCategory.WALL, 450, 350, 38),
        CatalogModule("A60", "Wall 60", ModuleCategory.WALL, 600, 350, 45),
        CatalogModule("A90", "Wall 90", ModuleCategory.WALL, 900, 350, 65),
        CatalogModule("A120", "Wall 120", ModuleCategory.WALL, 1200, 350, 85),
        # Tall modules
        CatalogModule("T60", "Tall 60", ModuleCategory.TALL, 600, 600, 120),
    ),
    hardware=(
        HardwareItem("HANDLE", "Handle", 5, 1),
        HardwareItem("LEGS", "Legs (x4)", 4, 1),
        HardwareItem("HINGES", "Hinges (x2)", 3, 1),
    ),
    countertop=LinealRate("COUNTERTOP", "Countertop", 85),
    plinth=LinealRate("PLINTH", "Plinth", 15),
)
