"""Integration tests for the templates CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from kitchens.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    def test_lists_all_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Available templates:" in result.output
        for name in ("linear", "l-shaped", "u-shaped"):
            assert name in result.output

    def test_lists_shape_and_wall_run(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])

        row = next(line for line in result.output.splitlines() if "u-shaped" in line)
        assert row.split()[:4] == ["u-shaped", "U-SHAPED", "3", "8000"]


class TestTemplatesShow:
    def test_prints_room_description(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "show", "l-shaped"])

        assert result.exit_code == 0
        content = json.loads(result.output)
        assert content["shape"] == "L-SHAPED"
        assert [w["id"] for w in content["walls"]] == ["wall-A", "wall-B"]

    def test_unknown_template(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "show", "galley"])

        assert result.exit_code == 1
        assert "Template not found: galley" in result.output


class TestTemplatesInit:
    def test_init_to_output_path(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "kitchen.json"
        result = runner.invoke(app, ["templates", "init", "u-shaped", "-o", str(output)])

        assert result.exit_code == 0
        assert f"Created: {output}" in result.output
        assert "wall-A 3000mm, wall-B 2000mm, wall-C 3000mm" in result.output
        content = json.loads(output.read_text(encoding="utf-8"))
        assert content["shape"] == "U-SHAPED"
        assert len(content["walls"]) == 3

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "kitchen.json"
        output.write_text("{}", encoding="utf-8")
        result = runner.invoke(app, ["templates", "init", "linear", "-o", str(output)])

        assert result.exit_code == 1
        assert "File already exists" in result.output
        assert output.read_text(encoding="utf-8") == "{}"

    def test_force_overwrites(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "kitchen.json"
        output.write_text("{}", encoding="utf-8")
        result = runner.invoke(
            app, ["templates", "init", "linear", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["shape"] == "LINEAR"

    def test_unknown_template(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "galley", "-o", str(tmp_path / "x.json")]
        )

        assert result.exit_code == 1
        assert "Template not found: galley" in result.output
        assert "Available templates: linear, l-shaped, u-shaped" in result.output

    def test_initialized_template_solves(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "kitchen.json"
        runner.invoke(app, ["templates", "init", "l-shaped", "-o", str(output)])

        result = runner.invoke(app, ["solve", str(output)])
        assert result.exit_code == 0
        assert "CORNER90" in result.output
