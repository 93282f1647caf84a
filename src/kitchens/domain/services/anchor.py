"""Placement of modules bound to fixed-position obstacles."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..catalog import DEFAULT_CATALOG, Catalog
from ..value_objects import ANCHOR_OBSTACLE_ORDER, PlacedModule, Zone
from .zones import is_conflict

if TYPE_CHECKING:
    from ..entities import Obstacle, Wall

logger = logging.getLogger(__name__)

__all__ = ["AnchorPlacementService", "format_mm"]


def format_mm(value: float) -> str:
    """Format a millimeter offset, dropping a zero fractional part."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class AnchorPlacementService:
    """Centers anchor modules (sink, oven) on their obstacles.

    Each anchor is checked independently: a conflict is recorded as a
    diagnostic and only that anchor is skipped.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def place(
        self,
        wall: Wall,
        blocked: Sequence[Zone],
        reserved: Sequence[Zone] = (),
    ) -> tuple[list[PlacedModule], list[str]]:
        """Place every anchor module a wall's obstacles call for.

        Water points are processed first, then smoke outlets, each in
        declaration order.

        Args:
            wall: The wall to place anchors on.
            blocked: Blocked zones on the wall (doors, columns).
            reserved: Space already claimed on the wall before anchors are
                placed, such as the corner module's footprint.

        Returns:
            Tuple of (placed anchors, diagnostics).
        """
        placed: list[PlacedModule] = []
        diagnostics: list[str] = []
        occupied: list[Zone] = [*blocked, *reserved]

        for obstacle_type in ANCHOR_OBSTACLE_ORDER:
            for obstacle in wall.obstacles_of_type(obstacle_type):
                module, problem = self._try_place(wall, obstacle, occupied)
                if problem is not None:
                    logger.warning(problem)
                    diagnostics.append(problem)
                    continue
                placed.append(module)
                occupied.append(Zone(start=module.position, end=module.end))

        logger.debug(
            f"Wall {wall.wall_id}: {len(placed)} anchor(s) placed, "
            f"{len(diagnostics)} conflict(s)"
        )
        return placed, diagnostics

    def _try_place(
        self,
        wall: Wall,
        obstacle: Obstacle,
        occupied: Sequence[Zone],
    ) -> tuple[PlacedModule | None, str | None]:
        """Try to center the bound module on ``obstacle``.

        Returns:
            Tuple of (placement, None) on success or (None, diagnostic).
        """
        obstacle_type = obstacle.obstacle_type
        where = f"{wall.wall_id} (pos {format_mm(obstacle.position)}mm)"

        module = self.catalog.anchor_module(obstacle_type)
        if module is None:
            return None, (
                f"Conflict: no catalog module binds to the "
                f"{obstacle_type.display_name} on {where}."
            )

        start = obstacle.position - module.width / 2
        end = start + module.width

        if is_conflict(start, end, occupied):
            return None, (
                f"Conflict: the {obstacle_type.display_name} on {where} "
                f"is obstructed."
            )

        if start < 0 or end > wall.length:
            return None, f"Conflict: {module.label} does not fit on {where}."

        return (
            PlacedModule.from_catalog(
                module, wall.wall_id, start, anchor=obstacle_type
            ),
            None,
        )
