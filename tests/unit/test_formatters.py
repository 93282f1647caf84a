"""Unit tests for text formatters and the JSON exporter."""

import json

from kitchens.application.commands import SolveKitchenCommand
from kitchens.application.dtos import KitchenLayoutOutput
from kitchens.domain import DEFAULT_CATALOG, Budget, Room
from kitchens.infrastructure import (
    BudgetFormatter,
    CatalogFormatter,
    DiagnosticsFormatter,
    JsonExporter,
    PlacementFormatter,
)


class TestPlacementFormatter:
    def test_empty(self) -> None:
        assert PlacementFormatter().format([]) == "No modules placed."

    def test_grouped_by_wall(
        self, solve_command: SolveKitchenCommand, l_shaped_room: Room
    ) -> None:
        result = solve_command.execute(l_shaped_room)
        text = PlacementFormatter().format(result.placed_modules)

        assert "PLACED MODULES" in text
        assert "\nwall-A\n" in text
        assert "\nwall-B\n" in text
        assert "\ncorner-wall-A-wall-B\n" in text
        assert "corner" in text
        assert f"Total: {len(result.placed_modules)} module(s)" in text

    def test_anchor_note(
        self, solve_command: SolveKitchenCommand, u_shaped_room: Room
    ) -> None:
        result = solve_command.execute(u_shaped_room)
        text = PlacementFormatter().format(result.placed_modules)
        assert "on water point" in text
        assert "on smoke outlet" in text


class TestDiagnosticsFormatter:
    def test_no_conflicts(self) -> None:
        assert DiagnosticsFormatter().format([]) == "No conflicts."

    def test_lists_conflicts(self) -> None:
        text = DiagnosticsFormatter().format(["Conflict: one.", "Conflict: two."])
        assert text.startswith("CONFLICTS (2)")
        assert "  - Conflict: two." in text


class TestBudgetFormatter:
    def test_empty_budget(self) -> None:
        text = BudgetFormatter().format(Budget())
        assert "Nothing placed. Total: 0.00" in text

    def test_sections_and_total(
        self, solve_command: SolveKitchenCommand, linear_room: Room
    ) -> None:
        budget = solve_command.execute(linear_room).budget
        text = BudgetFormatter().format(budget)

        for heading in ("Modules", "Hardware", "Lineal"):
            assert f"\n{heading}\n" in text
        assert "Countertop (3.00m)" in text
        assert "827.00" in text
        assert "6 module(s), 3.00m of base modules" in text


class TestCatalogFormatter:
    def test_lists_modules_and_rates(self) -> None:
        text = CatalogFormatter().format(DEFAULT_CATALOG)
        assert "CORNER90" in text
        assert "water_point" in text
        assert "HINGES" in text
        assert "Countertop" in text
        assert "85.00" in text


class TestJsonExporter:
    def test_document_shape(
        self, solve_command: SolveKitchenCommand, linear_room: Room
    ) -> None:
        output = solve_command.execute(linear_room)
        document = json.loads(JsonExporter().export(output))

        assert document["shape"] == "LINEAR"
        assert len(document["placed_modules"]) == 6
        assert document["placed_modules"][0] == {
            "ref": "B120",
            "category": "base",
            "wall_id": "wall-A",
            "position": 0,
            "width": 1200,
            "label": "Base 120",
            "price": 95,
            "anchor": None,
            "corner": False,
        }
        assert document["diagnostics"] == []
        assert document["budget"]["total_price"] == 827.0
        assert document["budget"]["module_lines"][0]["category"] == "base"
        assert document["budget"]["hardware_lines"][0]["category"] is None

    def test_errors_only_when_invalid(self) -> None:
        output = KitchenLayoutOutput(room=None, errors=["bad room"])
        assert JsonExporter().to_dict(output) == {"errors": ["bad room"]}
