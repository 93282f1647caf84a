"""Template manager for starter room descriptions.

This module provides the TemplateManager class for listing starter rooms and
writing them out as configuration files.
"""

import json
from pathlib import Path
from typing import Any

from kitchens.domain.value_objects import RoomShape


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> (shape, description)
TEMPLATE_METADATA: dict[str, tuple[RoomShape, str]] = {
    "linear": (RoomShape.LINEAR, "Single 3000mm wall"),
    "l-shaped": (RoomShape.L_SHAPED, "3000mm primary wall with a 2000mm side wall"),
    "u-shaped": (
        RoomShape.U_SHAPED,
        "3000mm primary wall with 2000mm and 3000mm side walls",
    ),
}

# Starter walls in declaration order: (id, length in mm)
_STARTER_WALLS: tuple[tuple[str, int], ...] = (
    ("wall-A", 3000),
    ("wall-B", 2000),
    ("wall-C", 3000),
)


def build_starter_room(shape: RoomShape) -> dict[str, Any]:
    """Room description with the starter walls for ``shape`` and no obstacles."""
    return {
        "schema_version": "1.0",
        "shape": shape.value,
        "walls": [
            {"id": wall_id, "length": length, "obstacles": []}
            for wall_id, length in _STARTER_WALLS[: shape.wall_count]
        ],
    }


class TemplateManager:
    """Manager for starter room templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("l-shaped", Path("my-kitchen.json"))
    """

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return [(name, desc) for name, (_, desc) in TEMPLATE_METADATA.items()]

    def get_room(self, name: str) -> dict[str, Any]:
        """Get the room description a template produces.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)
        shape, _ = TEMPLATE_METADATA[name]
        return build_starter_room(shape)

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        return json.dumps(self.get_room(name), indent=2) + "\n"

    def init_template(self, name: str, output_path: Path) -> None:
        """Write a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name)
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        """Check if a template with the given name exists."""
        return name in TEMPLATE_METADATA
