"""Domain services for kitchen layout and pricing.

This package provides:
- Zone algebra on a single wall axis
- Anchor, corner, greedy-fill and wall-mirror placement phases
- The layout solver that sequences the phases
- The budget aggregator
"""

from .anchor import AnchorPlacementService, format_mm
from .budget import BudgetAggregator, calculate_budget, round_currency
from .corner import CornerPlacementService, corner_junction_id
from .greedy_fill import GreedyFillService
from .solver import KitchenLayoutSolver, generate_layout
from .wall_mirror import WallMirrorService
from .zones import (
    build_blocked_zones,
    build_window_zones,
    find_free_segments,
    is_conflict,
    merge_zones,
)

__all__ = [
    # Zone algebra
    "build_blocked_zones",
    "build_window_zones",
    "find_free_segments",
    "is_conflict",
    "merge_zones",
    # Placement phases
    "AnchorPlacementService",
    "CornerPlacementService",
    "GreedyFillService",
    "WallMirrorService",
    "corner_junction_id",
    "format_mm",
    # Solver
    "KitchenLayoutSolver",
    "generate_layout",
    # Pricing
    "BudgetAggregator",
    "calculate_budget",
    "round_currency",
]
