"""Shared loading and output helpers for the kitchens CLI.

This module loads room and catalog files on behalf of the commands,
reports configuration errors, and writes solve results as text or JSON.
"""

from __future__ import annotations

from pathlib import Path

import typer

from kitchens.application.config import (
    CatalogConfig,
    ConfigError,
    KitchenConfiguration,
    load_catalog,
    load_config,
)
from kitchens.application.dtos import KitchenLayoutOutput
from kitchens.infrastructure import (
    BudgetFormatter,
    DiagnosticsFormatter,
    JsonExporter,
    PlacementFormatter,
)

__all__ = [
    "OUTPUT_FORMATS",
    "display_load_error",
    "load_inputs",
    "write_solve_output",
]

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def load_inputs(
    config_file: Path, catalog_file: Path | None
) -> tuple[KitchenConfiguration, CatalogConfig | None]:
    """Load a room file and an optional catalog file, exiting with code 1 on error."""
    try:
        config = load_config(config_file)
        catalog = load_catalog(catalog_file) if catalog_file is not None else None
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return config, catalog


def write_solve_output(
    result: KitchenLayoutOutput,
    output_format: str,
    output_file: Path | None,
) -> None:
    """Render a solve result and print it or write it to ``output_file``."""
    if output_format == "json":
        content = JsonExporter().export(result)
    else:
        content = "\n\n".join(
            [
                PlacementFormatter().format(result.placed_modules),
                DiagnosticsFormatter().format(result.diagnostics),
                BudgetFormatter().format(result.budget),
            ]
        )

    if output_file is None:
        typer.echo(content)
        return

    try:
        output_file.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {output_format} output to {output_file}")
