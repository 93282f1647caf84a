"""Typer CLI for kitchen layout and budgeting."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from kitchens.application import SolveKitchenCommand
from kitchens.application.config import (
    ConfigError,
    config_to_catalog,
    load_catalog,
    resolve_catalog,
)
from kitchens.domain.catalog import DEFAULT_CATALOG
from kitchens.infrastructure import BudgetFormatter, CatalogFormatter
from kitchens.cli.commands import validate_command, templates_app
from kitchens.cli.commands.output_handlers import (
    OUTPUT_FORMATS,
    display_load_error,
    load_inputs,
    write_solve_output,
)

app = typer.Typer(
    name="kitchens",
    help="Lay out modular kitchen cabinets along walls and price the result.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Lay out modular kitchen cabinets along walls and price the result."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _solve(config_file: Path, catalog_file: Path | None):
    config, catalog_config = load_inputs(config_file, catalog_file)
    command = SolveKitchenCommand(resolve_catalog(config, catalog_config))
    result = command.execute_config(config)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


@app.command()
def solve(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room description"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog file overriding the room's catalog"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Lay out a kitchen and print placements, conflicts and budget.

    Conflicts are reported but do not change the exit code.

    Example:
        kitchens solve my-kitchen.json --format json
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    result = _solve(config_file, catalog_file)
    write_solve_output(result, output_format, output_file)


@app.command()
def budget(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON room description"),
    ],
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog file overriding the room's catalog"),
    ] = None,
) -> None:
    """Lay out a kitchen and print only its budget."""
    result = _solve(config_file, catalog_file)
    typer.echo(BudgetFormatter().format(result.budget))


@app.command()
def catalog(
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Catalog file to show instead of the built-in one"),
    ] = None,
) -> None:
    """Show the module catalog, hardware and lineal rates."""
    if catalog_file is None:
        shown = DEFAULT_CATALOG
    else:
        try:
            shown = config_to_catalog(load_catalog(catalog_file))
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)

    typer.echo(CatalogFormatter().format(shown))


if __name__ == "__main__":
    app()
