"""Pytest configuration and shared fixtures for kitchen tests."""

from __future__ import annotations

from typing import Any

import pytest

from kitchens.application.commands import SolveKitchenCommand
from kitchens.domain import (
    DEFAULT_CATALOG,
    Obstacle,
    ObstacleType,
    Room,
    RoomShape,
    Wall,
)


def _wall(
    wall_id: str = "wall-A",
    length: int = 3000,
    obstacles: tuple[tuple[ObstacleType, float, float], ...] = (),
) -> Wall:
    """Build a wall from (type, position, width) triples."""
    return Wall(
        wall_id=wall_id,
        length=length,
        obstacles=tuple(
            Obstacle(
                obstacle_id=f"{wall_id}-obs-{i}",
                obstacle_type=obstacle_type,
                position=position,
                width=width,
            )
            for i, (obstacle_type, position, width) in enumerate(obstacles, start=1)
        ),
    )


# =============================================================================
# Room fixtures
# =============================================================================


@pytest.fixture
def linear_room() -> Room:
    """A single 3000mm wall with no obstacles."""
    return Room(shape=RoomShape.LINEAR, walls=(_wall(),))


@pytest.fixture
def door_room() -> Room:
    """A 3000mm wall with an 800mm door centered at 1500mm."""
    return Room(
        shape=RoomShape.LINEAR,
        walls=(_wall(obstacles=((ObstacleType.DOOR, 1500, 800),)),),
    )


@pytest.fixture
def l_shaped_room() -> Room:
    """A 3000mm primary wall joined to a 2000mm secondary wall."""
    return Room(
        shape=RoomShape.L_SHAPED,
        walls=(_wall("wall-A", 3000), _wall("wall-B", 2000)),
    )


@pytest.fixture
def u_shaped_room() -> Room:
    """Starter U-shaped room with a sink and an oven on the primary wall."""
    return Room(
        shape=RoomShape.U_SHAPED,
        walls=(
            _wall(
                "wall-A",
                3000,
                (
                    (ObstacleType.WATER_POINT, 1500, 0),
                    (ObstacleType.SMOKE_OUTLET, 2500, 0),
                ),
            ),
            _wall("wall-B", 2000, ((ObstacleType.WINDOW, 1400, 1200),)),
            _wall("wall-C", 3000, ((ObstacleType.DOOR, 2500, 800),)),
        ),
    )


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def linear_config_dict() -> dict[str, Any]:
    """Room description dictionary for a single obstacle-free wall."""
    return {
        "schema_version": "1.0",
        "shape": "LINEAR",
        "walls": [{"id": "wall-A", "length": 3000, "obstacles": []}],
    }


@pytest.fixture
def l_shaped_config_dict() -> dict[str, Any]:
    """Room description dictionary for an L-shaped room with a sink."""
    return {
        "schema_version": "1.0",
        "shape": "L-SHAPED",
        "walls": [
            {
                "id": "wall-A",
                "length": 3000,
                "obstacles": [{"type": "water_point", "position": 1500}],
            },
            {"id": "wall-B", "length": 2000},
        ],
    }


@pytest.fixture
def small_catalog_dict() -> dict[str, Any]:
    """A catalog with two base modules, one upper module and a sink."""
    return {
        "modules": [
            {
                "ref": "BX50",
                "label": "Base 50",
                "category": "base",
                "width": 500,
                "depth": 600,
                "price": 40,
            },
            {
                "ref": "BX100",
                "label": "Base 100",
                "category": "base",
                "width": 1000,
                "depth": 600,
                "price": 70,
            },
            {
                "ref": "AX50",
                "label": "Wall 50",
                "category": "wall",
                "width": 500,
                "depth": 350,
                "price": 30,
            },
            {
                "ref": "SX60",
                "label": "Sink 60",
                "category": "base",
                "width": 600,
                "depth": 600,
                "price": 80,
                "anchor": "water_point",
            },
        ],
        "hardware": [{"key": "HANDLE", "label": "Handle", "price": 2}],
        "lineals": {
            "countertop": {"label": "Countertop", "price_per_meter": 100},
            "plinth": {"label": "Plinth", "price_per_meter": 10},
        },
    }


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def solve_command() -> SolveKitchenCommand:
    """A SolveKitchenCommand bound to the built-in catalog."""
    return SolveKitchenCommand(DEFAULT_CATALOG)
