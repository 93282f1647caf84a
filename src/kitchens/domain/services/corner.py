"""Placement of the corner module at the junction of two walls."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..catalog import DEFAULT_CATALOG, Catalog
from ..value_objects import PlacedModule, Zone

if TYPE_CHECKING:
    from ..entities import Room

logger = logging.getLogger(__name__)

__all__ = ["CornerPlacementService", "corner_junction_id"]


def corner_junction_id(primary_wall_id: str, secondary_wall_id: str) -> str:
    """Synthetic wall id used for the module sitting in the origin corner."""
    return f"corner-{primary_wall_id}-{secondary_wall_id}"


class CornerPlacementService:
    """Places the single square corner module for angled rooms.

    The corner module sits at offset 0 on both walls meeting at the origin
    corner and consumes ``[0, corner width)`` on each. It is not checked
    against obstacles; the corner is assumed to be obstacle-free.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def place(self, room: Room) -> PlacedModule | None:
        """Return the corner placement, or None for rooms without a corner."""
        walls = room.corner_walls
        module = self.catalog.corner_module
        if walls is None or module is None:
            return None

        primary, secondary = walls
        placed = PlacedModule.from_catalog(
            module, corner_junction_id(primary.wall_id, secondary.wall_id), 0
        )
        logger.debug(
            f"Corner module {module.ref} placed between "
            f"{primary.wall_id} and {secondary.wall_id}"
        )
        return placed

    def reservations(self, room: Room) -> dict[str, Zone]:
        """Space the corner module consumes on each joined wall, by wall id."""
        walls = room.corner_walls
        module = self.catalog.corner_module
        if walls is None or module is None:
            return {}
        footprint = Zone(start=0, end=module.width)
        return {wall.wall_id: footprint for wall in walls}
