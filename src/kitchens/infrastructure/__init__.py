"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    BudgetFormatter,
    CatalogFormatter,
    DiagnosticsFormatter,
    JsonExporter,
    PlacementFormatter,
    budget_to_dict,
    placement_to_dict,
)

__all__ = [
    "BudgetFormatter",
    "CatalogFormatter",
    "DiagnosticsFormatter",
    "JsonExporter",
    "PlacementFormatter",
    "budget_to_dict",
    "placement_to_dict",
]
