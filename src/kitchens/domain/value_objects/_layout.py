"""Room shape and layout result value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._modules import PlacedModule


class RoomShape(str, Enum):
    """Shape of the kitchen run.

    Attributes:
        LINEAR: A single straight wall.
        L_SHAPED: Two walls meeting at the origin corner.
        U_SHAPED: Three walls; the first two meet at the origin corner.
    """

    LINEAR = "LINEAR"
    L_SHAPED = "L-SHAPED"
    U_SHAPED = "U-SHAPED"

    @property
    def wall_count(self) -> int:
        """Number of walls a room of this shape has."""
        return ROOM_SHAPE_WALL_COUNTS[self]

    @property
    def has_corner(self) -> bool:
        """Whether two walls meet at an origin corner."""
        return self is not RoomShape.LINEAR


ROOM_SHAPE_WALL_COUNTS: dict[RoomShape, int] = {
    RoomShape.LINEAR: 1,
    RoomShape.L_SHAPED: 2,
    RoomShape.U_SHAPED: 3,
}


@dataclass(frozen=True)
class LayoutResult:
    """Output of a solve: placements plus human-readable diagnostics.

    Attributes:
        placed_modules: Placements in the order the solver produced them.
        diagnostics: Conflict messages in stable, reproducible order.
    """

    placed_modules: tuple[PlacedModule, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @property
    def has_diagnostics(self) -> bool:
        """True when at least one conflict was recorded."""
        return bool(self.diagnostics)

    def modules_on_wall(self, wall_id: str) -> list[PlacedModule]:
        """Placements whose owning wall is ``wall_id``."""
        return [m for m in self.placed_modules if m.wall_id == wall_id]
