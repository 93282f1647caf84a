"""Templates commands for the starter rooms.

``list`` tabulates each starter room's shape and walls, ``show`` prints a
room description to stdout and ``init`` writes one to disk.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from kitchens.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Starter room descriptions (linear, L-shaped, U-shaped).",
)


def _wall_summary(room: dict[str, Any]) -> str:
    return ", ".join(f"{wall['id']} {wall['length']}mm" for wall in room["walls"])


def _get_room(manager: TemplateManager, name: str) -> dict[str, Any]:
    try:
        return manager.get_room(name)
    except TemplateNotFoundError:
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)


@templates_app.command(name="list")
def list_templates() -> None:
    """List the starter rooms with their shape and wall run.

    Example:
        kitchens templates list
    """
    manager = TemplateManager()
    rows = []
    for name, description in manager.list_templates():
        room = manager.get_room(name)
        run = sum(wall["length"] for wall in room["walls"])
        rows.append((name, room["shape"], len(room["walls"]), run, description))

    typer.echo("Available templates:")
    typer.echo()
    typer.echo(f"  {'NAME':<10} {'SHAPE':<10} {'WALLS':>5} {'RUN (mm)':>9}  DESCRIPTION")
    for name, shape, walls, run, description in rows:
        typer.echo(f"  {name:<10} {shape:<10} {walls:>5} {run:>9}  {description}")
    typer.echo()
    typer.echo("Use 'kitchens templates init <name>' to start a room description.")


@templates_app.command(name="show")
def show_template(
    name: Annotated[str, typer.Argument(help="Name of the template to print")],
) -> None:
    """Print a starter room description without writing a file.

    Example:
        kitchens templates show u-shaped > kitchen.json
    """
    manager = TemplateManager()
    _get_room(manager, name)
    typer.echo(manager.get_template(name), nl=False)


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Write a starter room description, ready to add obstacles to.

    Examples:
        kitchens templates init l-shaped
        kitchens templates init linear --output my-kitchen.json
    """
    manager = TemplateManager()
    room = _get_room(manager, name)
    output = output or Path(f"{name}.json")

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {output}")
    typer.echo(f"  {room['shape']}: {_wall_summary(room)}")
    typer.echo(f"Add obstacles, then run 'kitchens solve {output}'.")
