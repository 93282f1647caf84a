"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchens.domain import Budget, PlacedModule, Room


@dataclass
class KitchenLayoutOutput:
    """Output DTO for a solved and priced kitchen.

    Attributes:
        room: The room that was solved.
        placed_modules: Placements in solver order.
        diagnostics: Anchor conflicts recorded by the solver.
        budget: Priced bill of materials for the placements.
        errors: Structural errors that prevented solving.
    """

    room: Room | None
    placed_modules: list[PlacedModule] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)
    budget: Budget = field(default_factory=Budget)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Whether the room could be solved at all."""
        return len(self.errors) == 0

    @property
    def has_diagnostics(self) -> bool:
        """Whether some anchors were left out."""
        return len(self.diagnostics) > 0
