"""Output formatters and exporters for kitchen layouts."""

from __future__ import annotations

import json
from typing import Any

from kitchens.application.dtos import KitchenLayoutOutput
from kitchens.domain import Budget, BudgetLine, Catalog, PlacedModule
from kitchens.domain.services import format_mm


class PlacementFormatter:
    """Formats the placement list as a table grouped by wall."""

    def format(self, placed_modules: list[PlacedModule]) -> str:
        """Format placements, one block per owning wall in order of appearance."""
        if not placed_modules:
            return "No modules placed."

        walls: dict[str, list[PlacedModule]] = {}
        for module in placed_modules:
            walls.setdefault(module.wall_id, []).append(module)

        lines = [
            "PLACED MODULES",
            "=" * 70,
        ]
        for wall_id, modules in walls.items():
            lines.append(f"{wall_id}")
            lines.append(
                f"  {'Ref':<10} {'Category':<9} {'Start':>8} {'End':>8} "
                f"{'Width':>7}  {'Notes'}"
            )
            lines.append("  " + "-" * 66)
            for m in sorted(modules, key=lambda m: (m.category.value, m.position)):
                lines.append(
                    f"  {m.ref:<10} {m.category.value:<9} {format_mm(m.position):>8} "
                    f"{format_mm(m.end):>8} {m.width:>7}  {self._notes(m)}"
                )
            lines.append("")

        lines.append(f"Total: {len(placed_modules)} module(s)")
        return "\n".join(lines)

    def _notes(self, module: PlacedModule) -> str:
        if module.corner:
            return "corner"
        if module.anchor is not None:
            return f"on {module.anchor.display_name}"
        return ""


class DiagnosticsFormatter:
    """Formats solver conflict messages."""

    def format(self, diagnostics: list[str]) -> str:
        """Format diagnostics as a bulleted list."""
        if not diagnostics:
            return "No conflicts."
        lines = [f"CONFLICTS ({len(diagnostics)})", "=" * 70]
        lines.extend(f"  - {message}" for message in diagnostics)
        return "\n".join(lines)


class BudgetFormatter:
    """Formats a budget as three priced sections plus a grand total."""

    def format(self, budget: Budget) -> str:
        """Format the budget breakdown."""
        if budget.is_empty:
            return "BUDGET\n" + "=" * 70 + "\nNothing placed. Total: 0.00"

        lines = ["BUDGET", "=" * 70]
        lines.extend(self._section("Modules", budget.module_lines, budget.modules_total))
        lines.extend(
            self._section("Hardware", budget.hardware_lines, budget.hardware_total)
        )
        lines.extend(self._section("Lineal", budget.lineal_lines, budget.lineal_total))
        lines.append("=" * 70)
        lines.append(f"{'TOTAL':<54} {budget.total_price:>15.2f}")
        lines.append(
            f"{budget.module_count} module(s), "
            f"{budget.base_lineal_m:.2f}m of base modules"
        )
        return "\n".join(lines)

    def _section(
        self, title: str, budget_lines: tuple[BudgetLine, ...], subtotal: float
    ) -> list[str]:
        lines = [
            title,
            f"  {'Qty':>5}  {'Ref':<12} {'Label':<24} {'Unit':>10} {'Total':>10}",
            "  " + "-" * 66,
        ]
        for line in budget_lines:
            lines.append(
                f"  {line.quantity:>5}  {line.ref:<12} {line.label:<24} "
                f"{line.unit_price:>10.2f} {line.total:>10.2f}"
            )
        lines.append(f"  {'Subtotal':<55} {subtotal:>10.2f}")
        lines.append("")
        return lines


class CatalogFormatter:
    """Formats a catalog's modules, hardware and lineal rates."""

    def format(self, catalog: Catalog) -> str:
        """Format the catalog as a report."""
        lines = [
            "CATALOG",
            "=" * 70,
            f"{'Ref':<10} {'Label':<14} {'Category':<9} {'Width':>6} {'Depth':>6} "
            f"{'Price':>9}  {'Binding'}",
            "-" * 70,
        ]
        for m in catalog.modules:
            binding = ""
            if m.is_corner:
                binding = "corner"
            elif m.anchor_type is not None:
                binding = m.anchor_type.value
            lines.append(
                f"{m.ref:<10} {m.label:<14} {m.category.value:<9} {m.width:>6} "
                f"{m.depth:>6} {m.price:>9.2f}  {binding}"
            )

        lines.append("")
        lines.append("Hardware (per placed module)")
        for item in catalog.hardware:
            lines.append(
                f"  {item.key:<10} {item.label:<20} {item.price:>8.2f} "
                f"x{item.per_module}"
            )

        lines.append("")
        lines.append("Lineal (per meter of base modules)")
        for rate in (catalog.countertop, catalog.plinth):
            lines.append(
                f"  {rate.key:<10} {rate.label:<20} {rate.price_per_meter:>8.2f}"
            )
        return "\n".join(lines)


def placement_to_dict(module: PlacedModule) -> dict[str, Any]:
    """Serialize a placement for JSON output."""
    return {
        "ref": module.ref,
        "category": module.category.value,
        "wall_id": module.wall_id,
        "position": module.position,
        "width": module.width,
        "label": module.label,
        "price": module.price,
        "anchor": module.anchor.value if module.anchor is not None else None,
        "corner": module.corner,
    }


def budget_line_to_dict(line: BudgetLine) -> dict[str, Any]:
    """Serialize a budget line for JSON output."""
    return {
        "quantity": line.quantity,
        "ref": line.ref,
        "label": line.label,
        "unit_price": line.unit_price,
        "total": line.total,
        "category": line.category.value if line.category is not None else None,
    }


def budget_to_dict(budget: Budget) -> dict[str, Any]:
    """Serialize a budget for JSON output."""
    return {
        "module_lines": [budget_line_to_dict(line) for line in budget.module_lines],
        "hardware_lines": [budget_line_to_dict(line) for line in budget.hardware_lines],
        "lineal_lines": [budget_line_to_dict(line) for line in budget.lineal_lines],
        "modules_total": budget.modules_total,
        "hardware_total": budget.hardware_total,
        "lineal_total": budget.lineal_total,
        "total_price": budget.total_price,
        "module_count": budget.module_count,
        "base_lineal_m": budget.base_lineal_m,
    }


class JsonExporter:
    """Exports a solved kitchen as JSON.

    The document holds the room shape, placements, diagnostics and budget,
    and is what a persistence layer stores as an opaque blob.
    """

    def to_dict(self, output: KitchenLayoutOutput) -> dict[str, Any]:
        """Build the JSON document as a dictionary."""
        if not output.is_valid:
            return {"errors": output.errors}
        return {
            "shape": output.room.shape.value if output.room is not None else None,
            "placed_modules": [placement_to_dict(m) for m in output.placed_modules],
            "diagnostics": list(output.diagnostics),
            "budget": budget_to_dict(output.budget),
        }

    def export(self, output: KitchenLayoutOutput) -> str:
        """Export layout output as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)
