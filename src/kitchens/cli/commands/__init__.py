"""CLI command implementations for the kitchens application.

This package contains subcommands for the kitchens CLI, including:
- validate: Validate a room description file
- templates: List and initialize starter rooms
"""

from kitchens.cli.commands.templates import templates_app
from kitchens.cli.commands.validate import validate_command

__all__ = ["templates_app", "validate_command"]
