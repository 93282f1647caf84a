"""Starter room templates.

This package provides starter room descriptions for each room shape and a
TemplateManager class for accessing them.
"""

from kitchens.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
    build_starter_room,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
    "build_starter_room",
]
