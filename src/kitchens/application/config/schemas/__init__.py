"""Pydantic schemas for kitchen configuration files."""

from kitchens.application.config.schemas.base import (
    ModuleCategoryConfig,
    ObstacleTypeConfig,
    RoomShapeConfig,
    SUPPORTED_VERSIONS,
)
from kitchens.application.config.schemas.catalog_schema import (
    CatalogConfig,
    CatalogModuleConfig,
    HardwareConfig,
    LinealRateConfig,
    LinealsConfig,
)
from kitchens.application.config.schemas.room_schema import ObstacleConfig, WallConfig
from kitchens.application.config.schemas.root import KitchenConfiguration

__all__ = [
    "CatalogConfig",
    "CatalogModuleConfig",
    "HardwareConfig",
    "KitchenConfiguration",
    "LinealRateConfig",
    "LinealsConfig",
    "ModuleCategoryConfig",
    "ObstacleConfig",
    "ObstacleTypeConfig",
    "RoomShapeConfig",
    "SUPPORTED_VERSIONS",
    "WallConfig",
]
