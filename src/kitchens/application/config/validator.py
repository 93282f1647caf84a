"""Validation structures and layout advisory checks.

This module provides validation result structures and advisory checks for
kitchen room descriptions. Schema errors are reported by the loader; the
checks here look at the geometry a valid file describes and at the conflicts
the solver would report for it.
"""

from dataclasses import dataclass, field
from typing import Any

from kitchens.application.config.adapter import config_to_room, resolve_catalog
from kitchens.application.config.schemas import CatalogConfig, KitchenConfiguration
from kitchens.domain import Catalog, LayoutResult
from kitchens.domain.entities import RoomGeometryError
from kitchens.domain.services import (
    CornerPlacementService,
    KitchenLayoutSolver,
    build_blocked_zones,
    find_free_segments,
    format_mm,
)


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "walls[0].length")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the configuration has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_obstacle_extents(
    config: KitchenConfiguration, result: ValidationResult
) -> None:
    """Warn about blocking obstacles that reach past either end of their wall."""
    for wi, wall in enumerate(config.walls):
        for oi, obstacle in enumerate(wall.obstacles):
            if not obstacle.type.is_blocking:
                continue
            half = (obstacle.width or 0) / 2
            if obstacle.position - half < 0 or obstacle.position + half > wall.length:
                result.add_warning(
                    path=f"walls[{wi}].obstacles[{oi}]",
                    message=(
                        f"{obstacle.type.value} extends past the end of "
                        f"wall '{wall.id}'"
                    ),
                    suggestion="Check the obstacle position and width",
                )


def check_fillable_walls(
    config: KitchenConfiguration,
    result: ValidationResult,
    layout: LayoutResult,
    catalog: Catalog,
) -> None:
    """Warn about walls left without floor modules despite having free space.

    Free space is what remains after doors, columns and the corner module's
    reservation. A wall whose free space is all narrower than the narrowest
    base module gets nothing from the solver.
    """
    candidates = catalog.base_modules_by_width()
    if not candidates:
        result.add_warning(
            path="catalog.modules",
            message="catalog has no freely placeable base modules",
        )
        return
    narrowest = min(m.width for m in candidates)

    room = config_to_room(config)
    reserved = CornerPlacementService(catalog).reservations(room)
    for wi, wall in enumerate(room.walls):
        if any(m.category.is_floor for m in layout.modules_on_wall(wall.wall_id)):
            continue
        occupied = build_blocked_zones(wall.obstacles)
        if wall.wall_id in reserved:
            occupied.append(reserved[wall.wall_id])
        if not find_free_segments(wall.length, occupied):
            continue
        result.add_warning(
            path=f"walls[{wi}]",
            message=(
                f"no free segment on wall '{wall.wall_id}' is wide enough "
                f"for a {format_mm(narrowest)}mm module"
            ),
        )


def check_layout_conflicts(result: ValidationResult, layout: LayoutResult) -> None:
    """Report the conflicts the solver records for this room as warnings."""
    for diagnostic in layout.diagnostics:
        result.add_warning(
            path="layout",
            message=diagnostic,
            suggestion="Move the obstacle or the blocking door/column",
        )


def validate_config(
    config: KitchenConfiguration, catalog_override: CatalogConfig | None = None
) -> ValidationResult:
    """Perform full validation of a loaded configuration.

    Args:
        config: A schema-valid room description.
        catalog_override: Catalog to use instead of the room's own.

    Returns:
        ValidationResult with errors and advisory warnings.
    """
    result = ValidationResult()

    try:
        room = config_to_room(config)
    except RoomGeometryError as e:
        return result.add_error(path="walls", message=str(e))

    catalog = resolve_catalog(config, catalog_override)
    layout = KitchenLayoutSolver(catalog).solve(room)

    check_obstacle_extents(config, result)
    check_fillable_walls(config, result, layout, catalog)
    check_layout_conflicts(result, layout)
    return result
