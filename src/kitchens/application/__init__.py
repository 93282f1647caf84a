"""Application layer - use cases and configuration."""

from .commands import SolveKitchenCommand
from .dtos import KitchenLayoutOutput

__all__ = [
    "KitchenLayoutOutput",
    "SolveKitchenCommand",
]
