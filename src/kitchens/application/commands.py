"""Application commands (use cases) for kitchen layout."""

from __future__ import annotations

import logging

from kitchens.domain import (
    BudgetAggregator,
    Catalog,
    KitchenLayoutSolver,
    Room,
    RoomGeometryError,
)
from kitchens.domain.catalog import DEFAULT_CATALOG

from .config import KitchenConfiguration, config_to_room
from .dtos import KitchenLayoutOutput

logger = logging.getLogger(__name__)


class SolveKitchenCommand:
    """Command to lay out and price a kitchen.

    Runs the layout solver on a room and hands the resulting placements to
    the budget aggregator. Both use the same catalog.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        solver: KitchenLayoutSolver | None = None,
        aggregator: BudgetAggregator | None = None,
    ) -> None:
        self.catalog = catalog or DEFAULT_CATALOG
        self.solver = solver or KitchenLayoutSolver(self.catalog)
        self.aggregator = aggregator or BudgetAggregator(self.catalog)

    def execute(self, room: Room) -> KitchenLayoutOutput:
        """Solve and price a room.

        Args:
            room: The room description.

        Returns:
            KitchenLayoutOutput with placements, diagnostics and budget.
        """
        layout = self.solver.solve(room)
        budget = self.aggregator.aggregate(layout.placed_modules)
        return KitchenLayoutOutput(
            room=room,
            placed_modules=list(layout.placed_modules),
            diagnostics=list(layout.diagnostics),
            budget=budget,
        )

    def execute_config(self, config: KitchenConfiguration) -> KitchenLayoutOutput:
        """Solve and price a room described by a validated configuration.

        Structural problems are returned as errors instead of raised.
        """
        try:
            room = config_to_room(config)
        except RoomGeometryError as e:
            logger.warning(f"Room description rejected: {e}")
            return KitchenLayoutOutput(room=None, errors=[str(e)])
        return self.execute(room)
