"""Validate command for checking room description files.

This module provides the `validate` command that checks a JSON room
description for errors and reports layout advisories as warnings.
"""

from pathlib import Path
from typing import Annotated

import typer

from kitchens.application.config import ValidationResult, validate_config
from kitchens.cli.commands.output_handlers import load_inputs


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Room description is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room description to validate"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog file to validate against"),
    ] = None,
) -> None:
    """Validate a kitchen room description.

    Checks the file for:
    - JSON syntax errors
    - Schema errors (wall count vs. shape, obstacle positions, etc.)
    - Layout advisories (anchor conflicts, walls too short to fill)

    Exit codes:
        0 - Room description is valid with no warnings
        1 - Room description has errors (cannot be used)
        2 - Room description is valid but has warnings

    Example:
        kitchens validate my-kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config, catalog = load_inputs(config_file, catalog_file)
    except typer.Exit:
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise

    result = validate_config(config, catalog)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
