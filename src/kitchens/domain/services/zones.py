"""Interval arithmetic on a single wall axis.

All zones are half-open ``[start, end)`` intervals in millimeters measured
from the wall origin.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..value_objects import ObstacleType, Zone

if TYPE_CHECKING:
    from ..entities import Obstacle

__all__ = [
    "build_blocked_zones",
    "build_window_zones",
    "find_free_segments",
    "is_conflict",
    "merge_zones",
]


def build_blocked_zones(obstacles: Iterable[Obstacle]) -> list[Zone]:
    """Zones for obstacles that block all furniture (doors and columns).

    Windows only block upper modules and point obstacles are handled by
    anchor placement, so neither produces a blocked zone.

    Args:
        obstacles: Obstacles on one wall.

    Returns:
        Blocked zones sorted by start.
    """
    zones = [o.to_zone() for o in obstacles if o.obstacle_type.is_blocking]
    return sorted(zones, key=lambda z: z.start)


def build_window_zones(obstacles: Iterable[Obstacle]) -> list[Zone]:
    """Zones covered by windows, which block upper modules only."""
    zones = [o.to_zone() for o in obstacles if o.obstacle_type == ObstacleType.WINDOW]
    return sorted(zones, key=lambda z: z.start)


def merge_zones(zones: Iterable[Zone]) -> list[Zone]:
    """Merge overlapping and touching zones.

    Zones are sorted by start and walked once; a zone whose start is at or
    before the current accumulator's end is folded into it.

    Args:
        zones: Zones in any order.

    Returns:
        Sorted, non-overlapping, non-adjacent zones.
    """
    ordered = sorted(zones, key=lambda z: z.start)
    if not ordered:
        return []

    merged: list[Zone] = [ordered[0]]
    for zone in ordered[1:]:
        last = merged[-1]
        if zone.start <= last.end:
            merged[-1] = Zone(start=last.start, end=max(last.end, zone.end))
        else:
            merged.append(zone)
    return merged


def find_free_segments(
    wall_length: float, occupied_zones: Iterable[Zone]
) -> list[Zone]:
    """Find the gaps left on a wall by a set of occupied zones.

    Occupied zones are merged first, then swept from the wall origin. The
    cursor only moves forward. Zones reaching past either end of the wall
    are clipped, so every segment lies inside ``[0, wall_length)``.

    Args:
        wall_length: Length of the wall in millimeters.
        occupied_zones: Zones that furniture may not use.

    Returns:
        Free segments in ascending order.
    """
    free: list[Zone] = []
    cursor: float = 0

    for zone in merge_zones(occupied_zones):
        if cursor >= wall_length:
            break
        gap_end = min(zone.start, wall_length)
        if cursor < gap_end:
            free.append(Zone(start=cursor, end=gap_end))
        cursor = max(cursor, zone.end)

    if cursor < wall_length:
        free.append(Zone(start=cursor, end=wall_length))

    return free


def is_conflict(start: float, end: float, zones: Sequence[Zone]) -> bool:
    """Check whether ``[start, end)`` overlaps any of ``zones``."""
    return any(zone.overlaps(start, end) for zone in zones)
