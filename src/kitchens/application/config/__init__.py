"""Configuration schema and loading system for kitchen room descriptions.

This package provides JSON-based configuration loading and validation for
room descriptions and module catalogs. It includes Pydantic models for
schema validation, a loader with comprehensive error handling, adapters to
domain objects, and layout advisory checks.

Example:
    >>> from pathlib import Path
    >>> from kitchens.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-kitchen.json"))
    ...     print(f"{config.shape.value}: {len(config.walls)} wall(s)")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from kitchens.application.config.adapter import (
    catalog_to_config,
    config_to_catalog,
    config_to_room,
    config_to_wall,
    resolve_catalog,
)
from kitchens.application.config.loader import (
    ConfigError,
    load_catalog,
    load_catalog_from_dict,
    load_config,
    load_config_from_dict,
)
from kitchens.application.config.schemas import (
    CatalogConfig,
    CatalogModuleConfig,
    HardwareConfig,
    KitchenConfiguration,
    LinealRateConfig,
    LinealsConfig,
    ObstacleConfig,
    SUPPORTED_VERSIONS,
    WallConfig,
)
from kitchens.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schemas
    "CatalogConfig",
    "CatalogModuleConfig",
    "HardwareConfig",
    "KitchenConfiguration",
    "LinealRateConfig",
    "LinealsConfig",
    "ObstacleConfig",
    "SUPPORTED_VERSIONS",
    "WallConfig",
    # Loading
    "ConfigError",
    "load_catalog",
    "load_catalog_from_dict",
    "load_config",
    "load_config_from_dict",
    # Adapters
    "catalog_to_config",
    "config_to_catalog",
    "config_to_room",
    "config_to_wall",
    "resolve_catalog",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
