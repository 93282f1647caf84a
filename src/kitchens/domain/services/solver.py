"""Kitchen layout solver.

Runs the placement phases in a fixed order over the walls of a room:

1. Anchor placement (sinks on water points, ovens on smoke outlets)
2. Corner placement (angled rooms only)
3. Greedy fill of the remaining free segments with base modules
4. Wall-mirror placement of upper modules, skipping under windows

The solver is a pure function of the room and the catalog: it keeps no
state between calls and never mutates its inputs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..catalog import DEFAULT_CATALOG, Catalog
from ..value_objects import LayoutResult, ModuleCategory, PlacedModule, Zone
from .anchor import AnchorPlacementService
from .corner import CornerPlacementService
from .greedy_fill import GreedyFillService
from .wall_mirror import WallMirrorService
from .zones import build_blocked_zones

if TYPE_CHECKING:
    from ..entities import Room

logger = logging.getLogger(__name__)

__all__ = ["KitchenLayoutSolver", "generate_layout"]


class KitchenLayoutSolver:
    """Selects and positions catalog modules along the walls of a room.

    Attributes:
        catalog: Catalog shared by every placement phase.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        anchor_service: AnchorPlacementService | None = None,
        corner_service: CornerPlacementService | None = None,
        fill_service: GreedyFillService | None = None,
        mirror_service: WallMirrorService | None = None,
    ) -> None:
        self.catalog = catalog or DEFAULT_CATALOG
        self.anchor_service = anchor_service or AnchorPlacementService(self.catalog)
        self.corner_service = corner_service or CornerPlacementService(self.catalog)
        self.fill_service = fill_service or GreedyFillService(self.catalog)
        self.mirror_service = mirror_service or WallMirrorService(self.catalog)

    def solve(self, room: Room) -> LayoutResult:
        """Compute the placement for a room.

        Ordinary conflicts never raise: each one is recorded as a diagnostic
        and the affected anchor is left out.

        Args:
            room: The room description.

        Returns:
            LayoutResult with placements and diagnostics in stable order.
        """
        placed: list[PlacedModule] = []
        diagnostics: list[str] = []

        blocked = {wall.wall_id: build_blocked_zones(wall.obstacles) for wall in room.walls}
        reserved = self.corner_service.reservations(room)

        for wall in room.walls:
            corner_zone = reserved.get(wall.wall_id)
            anchors, problems = self.anchor_service.place(
                wall,
                blocked[wall.wall_id],
                reserved=[corner_zone] if corner_zone is not None else [],
            )
            placed.extend(anchors)
            diagnostics.extend(problems)

        corner = self.corner_service.place(room)
        if corner is not None:
            placed.append(corner)

        for wall in room.walls:
            occupied: list[Zone] = [
                *blocked[wall.wall_id],
                *(
                    Zone(start=m.position, end=m.end)
                    for m in placed
                    if m.wall_id == wall.wall_id and m.category.is_floor
                ),
            ]
            if wall.wall_id in reserved:
                occupied.append(reserved[wall.wall_id])
            placed.extend(self.fill_service.fill_wall(wall, occupied))

        # Upper modules are derived from the finished floor layout
        floor_layout = list(placed)
        for wall in room.walls:
            placed.extend(self.mirror_service.mirror_wall(wall, floor_layout))

        corner_walls = room.corner_walls
        if corner is not None and corner_walls is not None:
            upper = self.mirror_service.mirror_corner(corner, corner_walls)
            if upper is not None:
                placed.append(upper)

        floor_count = sum(1 for m in placed if m.category != ModuleCategory.WALL)
        logger.info(
            f"Solved {room.shape.value} room: {floor_count} floor module(s), "
            f"{len(placed) - floor_count} upper module(s), "
            f"{len(diagnostics)} conflict(s)"
        )
        return LayoutResult(placed_modules=tuple(placed), diagnostics=tuple(diagnostics))


def generate_layout(room: Room, catalog: Catalog | None = None) -> LayoutResult:
    """Solve a room with a fresh solver.

    Convenience wrapper around ``KitchenLayoutSolver(catalog).solve(room)``.
    """
    return KitchenLayoutSolver(catalog).solve(room)
