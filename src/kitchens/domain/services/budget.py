"""Budget aggregation for a kitchen placement."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from ..catalog import DEFAULT_CATALOG, Catalog
from ..value_objects import (
    Budget,
    BudgetLine,
    LinealRate,
    ModuleCategory,
    PlacedModule,
)

logger = logging.getLogger(__name__)

__all__ = ["BudgetAggregator", "calculate_budget", "round_currency"]

_CENT = Decimal("0.01")


def round_currency(value: float) -> float:
    """Round to 2 decimals, half away from zero on the decimal representation."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


class BudgetAggregator:
    """Turns a placement list into a priced bill of materials.

    Three cost families are produced:
    - Modules: one line per reference code, quantity times unit price
    - Hardware: every hardware kind charged per placed module
    - Lineal: countertop and plinth charged per meter of base modules
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog = catalog or DEFAULT_CATALOG

    def aggregate(self, placed_modules: Sequence[PlacedModule]) -> Budget:
        """Compute the budget for a placement.

        Args:
            placed_modules: Placements from the solver. May be empty.

        Returns:
            The budget. An empty placement yields an all-zero budget.
        """
        if not placed_modules:
            return Budget()

        module_lines = self._module_lines(placed_modules)
        module_count = len(placed_modules)
        hardware_lines = self._hardware_lines(module_count)

        base_mm = sum(
            m.width for m in placed_modules if m.category == ModuleCategory.BASE
        )
        base_lineal_m = base_mm / 1000
        lineal_lines = (
            self._lineal_line(self.catalog.countertop, base_lineal_m),
            self._lineal_line(self.catalog.plinth, base_lineal_m),
        )

        modules_total = round_currency(sum(line.total for line in module_lines))
        hardware_total = round_currency(sum(line.total for line in hardware_lines))
        lineal_total = round_currency(sum(line.total for line in lineal_lines))
        total_price = round_currency(modules_total + hardware_total + lineal_total)

        logger.debug(
            f"Budget: {module_count} module(s), {base_lineal_m:.2f}m base run, "
            f"total {total_price:.2f}"
        )
        return Budget(
            module_lines=module_lines,
            hardware_lines=hardware_lines,
            lineal_lines=lineal_lines,
            modules_total=modules_total,
            hardware_total=hardware_total,
            lineal_total=lineal_total,
            total_price=total_price,
            module_count=module_count,
            base_lineal_m=base_lineal_m,
        )

    def _module_lines(
        self, placed_modules: Sequence[PlacedModule]
    ) -> tuple[BudgetLine, ...]:
        """One line per reference code, in order of first appearance."""
        counts: dict[str, int] = {}
        first: dict[str, PlacedModule] = {}
        for module in placed_modules:
            if module.ref not in counts:
                counts[module.ref] = 0
                first[module.ref] = module
            counts[module.ref] += 1

        return tuple(
            BudgetLine(
                quantity=qty,
                ref=ref,
                label=first[ref].label,
                unit_price=first[ref].price,
                total=qty * first[ref].price,
                category=first[ref].category,
            )
            for ref, qty in counts.items()
        )

    def _hardware_lines(self, module_count: int) -> tuple[BudgetLine, ...]:
        lines = []
        for item in self.catalog.hardware:
            qty = module_count * item.per_module
            lines.append(
                BudgetLine(
                    quantity=qty,
                    ref=item.key,
                    label=item.label,
                    unit_price=item.price,
                    total=qty * item.price,
                )
            )
        return tuple(lines)

    def _lineal_line(self, rate: LinealRate, meters: float) -> BudgetLine:
        cost = round_currency(meters * rate.price_per_meter)
        return BudgetLine(
            quantity=1,
            ref=rate.key,
            label=f"{rate.label} ({meters:.2f}m)",
            unit_price=cost,
            total=cost,
        )


def calculate_budget(
    placed_modules: Sequence[PlacedModule], catalog: Catalog | None = None
) -> Budget:
    """Aggregate a placement with a fresh aggregator."""
    return BudgetAggregator(catalog).aggregate(placed_modules)
