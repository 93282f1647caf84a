"""Interval value objects on a single wall axis."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Zone:
    """Half-open interval ``[start, end)`` along one wall, in millimeters.

    Zones are only ever compared within one wall. A zone may extend past
    either end of the wall (a door centered near the origin, for example);
    free-segment computation clips to the wall.

    Attributes:
        start: Offset of the first covered millimeter from the wall origin.
        end: Offset one past the last covered millimeter.
    """

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Zone end must be >= start")

    @property
    def length(self) -> float:
        """Length of the zone."""
        return self.end - self.start

    def overlaps(self, start: float, end: float) -> bool:
        """Check whether ``[start, end)`` strictly overlaps this zone."""
        return start < self.end and end > self.start
