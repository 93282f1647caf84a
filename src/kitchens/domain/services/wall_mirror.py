"""Derivation of upper modules from the floor-level layout."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..catalog import DEFAULT_CATALOG, Catalog
from ..value_objects import CatalogModule, ModuleCategory, PlacedModule, Zone
from .zones import build_window_zones, is_conflict

if TYPE_CHECKING:
    from ..entities import Wall

logger = logging.getLogger(__name__)

__all__ = ["WallMirrorService"]


class WallMirrorService:
    """Projects base modules upward into upper (wall) modules.

    A base module whose footprint overlaps a window gets no upper module.
    Otherwise the upper module with the same width is used; failing that,
    the widest upper module that is not wider than the base module.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG
        self._uppers = self.catalog.wall_modules_by_width()

    def select_upper(self, width: float) -> CatalogModule | None:
        """Pick the upper module to hang above a floor module of ``width``."""
        for module in self._uppers:
            if module.width == width:
                return module
        for module in self._uppers:
            if module.width <= width:
                return module
        return None

    def mirror_wall(
        self, wall: Wall, placed: Iterable[PlacedModule]
    ) -> list[PlacedModule]:
        """Upper modules for every base module already placed on ``wall``.

        Args:
            wall: The wall being mirrored.
            placed: Placements so far, in solver order.

        Returns:
            New upper placements, in the order of the base modules.
        """
        windows = build_window_zones(wall.obstacles)
        uppers: list[PlacedModule] = []
        skipped = 0

        for base in placed:
            if base.wall_id != wall.wall_id or base.category != ModuleCategory.BASE:
                continue
            upper = self._mirror(base, base.wall_id, windows)
            if upper is None:
                skipped += 1
                continue
            uppers.append(upper)

        logger.debug(
            f"Wall {wall.wall_id}: {len(uppers)} upper module(s), "
            f"{skipped} position(s) left open"
        )
        return uppers

    def mirror_corner(
        self, corner: PlacedModule, walls: Sequence[Wall]
    ) -> PlacedModule | None:
        """Upper module above the corner module.

        The corner footprint spans both joined walls, so a window on either
        of them suppresses it.
        """
        windows = [zone for wall in walls for zone in build_window_zones(wall.obstacles)]
        return self._mirror(corner, corner.wall_id, windows)

    def _mirror(
        self, base: PlacedModule, wall_id: str, windows: Sequence[Zone]
    ) -> PlacedModule | None:
        if is_conflict(base.position, base.end, windows):
            return None
        module = self.select_upper(base.width)
        if module is None:
            return None
        return PlacedModule.from_catalog(module, wall_id, base.position)
