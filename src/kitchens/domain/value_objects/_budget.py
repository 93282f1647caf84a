"""Budget value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._modules import ModuleCategory


@dataclass(frozen=True)
class BudgetLine:
    """One priced line of a bill of materials.

    Attributes:
        quantity: Number of units.
        ref: Catalog reference or hardware/lineal key.
        label: Display label.
        unit_price: Price of one unit.
        total: Line total.
        category: Module category for module lines, None otherwise.
    """

    quantity: int
    ref: str
    label: str
    unit_price: float
    total: float
    category: ModuleCategory | None = None


@dataclass(frozen=True)
class Budget:
    """Categorized cost breakdown of a placement."""

    module_lines: tuple[BudgetLine, ...] = ()
    hardware_lines: tuple[BudgetLine, ...] = ()
    lineal_lines: tuple[BudgetLine, ...] = ()
    modules_total: float = 0.0
    hardware_total: float = 0.0
    lineal_total: float = 0.0
    total_price: float = 0.0
    module_count: int = 0
    base_lineal_m: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True when nothing was placed."""
        return self.module_count == 0
