"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid room descriptions pass validation
- Invalid files produce errors
- Layout conflicts are displayed as warnings
- Exit codes are correct
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from kitchens.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def _write(tmp_path: Path, data: Any, name: str = "room.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_room(self, runner: CliRunner, tmp_path: Path, linear_config_dict) -> None:
        result = runner.invoke(app, ["validate", str(_write(tmp_path, linear_config_dict))])

        assert result.exit_code == 0
        assert "Validation passed. Room description is valid." in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()
        assert "Validation failed" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{ not json", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output

    def test_unknown_field_rejected(
        self, runner: CliRunner, tmp_path: Path, linear_config_dict
    ) -> None:
        linear_config_dict["walls"][0]["height"] = 2400
        result = runner.invoke(app, ["validate", str(_write(tmp_path, linear_config_dict))])

        assert result.exit_code == 1
        assert "walls[0].height" in result.output

    def test_wall_count_mismatch(
        self, runner: CliRunner, tmp_path: Path, linear_config_dict
    ) -> None:
        linear_config_dict["shape"] = "L-SHAPED"
        result = runner.invoke(app, ["validate", str(_write(tmp_path, linear_config_dict))])

        assert result.exit_code == 1
        assert "requires 2 wall(s)" in result.output

    def test_conflicts_are_warnings(
        self, runner: CliRunner, tmp_path: Path, l_shaped_config_dict
    ) -> None:
        l_shaped_config_dict["walls"][0]["obstacles"] = [
            {"type": "water_point", "position": 300}
        ]
        result = runner.invoke(app, ["validate", str(_write(tmp_path, l_shaped_config_dict))])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "is obstructed" in result.output
        assert "Validation passed with" in result.output

    def test_catalog_option(
        self, runner: CliRunner, tmp_path: Path, linear_config_dict, small_catalog_dict
    ) -> None:
        linear_config_dict["walls"][0]["length"] = 400
        room = _write(tmp_path, linear_config_dict)
        catalog = _write(tmp_path, small_catalog_dict, "catalog.json")

        result = runner.invoke(app, ["validate", str(room), "--catalog", str(catalog)])
        assert result.exit_code == 2
        assert "500mm module" in result.output
