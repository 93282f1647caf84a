"""Adapters between configuration schemas and domain objects.

This module converts validated Pydantic configuration models into the
immutable domain entities consumed by the solver and the aggregator, and
converts catalogs back into their configuration form for display and export.
"""

from kitchens.application.config.schemas import (
    CatalogConfig,
    CatalogModuleConfig,
    HardwareConfig,
    KitchenConfiguration,
    LinealRateConfig,
    LinealsConfig,
    WallConfig,
)
from kitchens.domain.catalog import DEFAULT_CATALOG, Catalog
from kitchens.domain.entities import Obstacle, Room, Wall
from kitchens.domain.value_objects import CatalogModule, HardwareItem, LinealRate


def config_to_wall(wall_config: WallConfig) -> Wall:
    """Convert a wall configuration to a Wall entity."""
    return Wall(
        wall_id=wall_config.id,
        length=wall_config.length,
        obstacles=tuple(
            Obstacle(
                # Ids are assigned by WallConfig validation
                obstacle_id=obs.id or "",
                obstacle_type=obs.type,
                position=obs.position,
                width=obs.width or 0,
            )
            for obs in wall_config.obstacles
        ),
    )


def config_to_room(config: KitchenConfiguration) -> Room:
    """Convert a KitchenConfiguration to a Room entity.

    Raises:
        RoomGeometryError: If the room is structurally malformed. Validated
            configurations never trigger this.
    """
    return Room(
        shape=config.shape,
        walls=tuple(config_to_wall(w) for w in config.walls),
    )


def config_to_catalog(catalog_config: CatalogConfig | None) -> Catalog:
    """Convert a catalog configuration to a Catalog.

    Returns DEFAULT_CATALOG when no configuration is given.
    """
    if catalog_config is None:
        return DEFAULT_CATALOG

    modules = tuple(
        CatalogModule(
            ref=m.ref,
            label=m.label,
            category=m.category,
            width=m.width,
            depth=m.depth,
            price=m.price,
            anchor_type=m.anchor,
            is_corner=m.corner,
        )
        for m in catalog_config.modules
    )
    hardware = tuple(
        HardwareItem(key=h.key, label=h.label, price=h.price, per_module=h.per_module)
        for h in catalog_config.hardware
    )
    lineals = catalog_config.lineals
    return Catalog(
        modules=modules,
        hardware=hardware,
        countertop=LinealRate(
            "COUNTERTOP", lineals.countertop.label, lineals.countertop.price_per_meter
        ),
        plinth=LinealRate("PLINTH", lineals.plinth.label, lineals.plinth.price_per_meter),
    )


def catalog_to_config(catalog: Catalog) -> CatalogConfig:
    """Convert a Catalog back to its configuration form."""
    return CatalogConfig(
        modules=[
            CatalogModuleConfig(
                ref=m.ref,
                label=m.label,
                category=m.category,
                width=m.width,
                depth=m.depth,
                price=m.price,
                anchor=m.anchor_type,
                corner=m.is_corner,
            )
            for m in catalog.modules
        ],
        hardware=[
            HardwareConfig(
                key=h.key, label=h.label, price=h.price, per_module=h.per_module
            )
            for h in catalog.hardware
        ],
        lineals=LinealsConfig(
            countertop=LinealRateConfig(
                label=catalog.countertop.label,
                price_per_meter=catalog.countertop.price_per_meter,
            ),
            plinth=LinealRateConfig(
                label=catalog.plinth.label,
                price_per_meter=catalog.plinth.price_per_meter,
            ),
        ),
    )


def resolve_catalog(
    config: KitchenConfiguration, override: CatalogConfig | None = None
) -> Catalog:
    """Pick the catalog for a solve.

    An explicitly supplied catalog wins over the room file's inline catalog,
    which wins over the built-in one.
    """
    return config_to_catalog(override or config.catalog)
