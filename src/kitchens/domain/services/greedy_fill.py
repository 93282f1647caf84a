"""First-fit-decreasing fill of free wall segments."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..catalog import DEFAULT_CATALOG, Catalog
from ..value_objects import CatalogModule, PlacedModule, Zone
from .zones import find_free_segments

if TYPE_CHECKING:
    from ..entities import Wall

logger = logging.getLogger(__name__)

__all__ = ["GreedyFillService"]


class GreedyFillService:
    """Fills free segments with ordinary base modules, widest first.

    This is a single deterministic left-to-right pass with no backtracking.
    Whatever space is left at the end of a segment is accepted as is.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG
        self._candidates = self.catalog.base_modules_by_width()

    def fill_wall(self, wall: Wall, occupied: Iterable[Zone]) -> list[PlacedModule]:
        """Fill every free segment on a wall.

        Args:
            wall: The wall to fill.
            occupied: Blocked zones plus space already used by anchor and
                corner placements on this wall.

        Returns:
            New placements in left-to-right order.
        """
        placed: list[PlacedModule] = []
        segments = find_free_segments(wall.length, occupied)
        for segment in segments:
            placed.extend(self.fill_segment(wall.wall_id, segment))

        logger.debug(
            f"Wall {wall.wall_id}: {len(segments)} free segment(s), "
            f"{len(placed)} module(s) filled"
        )
        return placed

    def fill_segment(self, wall_id: str, segment: Zone) -> list[PlacedModule]:
        """Fill one free segment starting at its left edge."""
        placed: list[PlacedModule] = []
        cursor = segment.start

        while cursor < segment.end:
            module = self._widest_fitting(segment.end - cursor)
            if module is None:
                break
            placed.append(PlacedModule.from_catalog(module, wall_id, cursor))
            cursor += module.width

        return placed

    def _widest_fitting(self, remaining: float) -> CatalogModule | None:
        for module in self._candidates:
            if module.width <= remaining:
                return module
        return None
