"""Unit tests for anchor placement (sinks on water points, ovens on smoke outlets)."""

import logging

import pytest

from kitchens.domain.catalog import DEFAULT_CATALOG, Catalog
from kitchens.domain.entities import Obstacle, Wall
from kitchens.domain.services import (
    AnchorPlacementService,
    build_blocked_zones,
    format_mm,
)
from kitchens.domain.value_objects import ObstacleType, Zone


def _wall(*obstacles: Obstacle, length: int = 3000) -> Wall:
    return Wall(wall_id="wall-A", length=length, obstacles=tuple(obstacles))


def _place(wall: Wall, reserved: list[Zone] | None = None, catalog: Catalog | None = None):
    service = AnchorPlacementService(catalog)
    return service.place(wall, build_blocked_zones(wall.obstacles), reserved or [])


class TestFormatMm:
    def test_integral_values_drop_fraction(self) -> None:
        assert format_mm(1500.0) == "1500"
        assert format_mm(200) == "200"

    def test_fractional_values_kept(self) -> None:
        assert format_mm(1502.5) == "1502.5"


class TestAnchorPlacement:
    """Tests for AnchorPlacementService."""

    def test_sink_centered_on_water_point(self) -> None:
        wall = _wall(Obstacle("w1", ObstacleType.WATER_POINT, 500))
        placed, diagnostics = _place(wall)

        assert diagnostics == []
        assert len(placed) == 1
        sink = placed[0]
        assert sink.ref == "SINK60"
        assert sink.position == 200
        assert sink.end == 800
        assert sink.anchor == ObstacleType.WATER_POINT
        assert sink.wall_id == "wall-A"

    def test_oven_centered_on_smoke_outlet(self) -> None:
        wall = _wall(Obstacle("s1", ObstacleType.SMOKE_OUTLET, 2000))
        placed, diagnostics = _place(wall)

        assert diagnostics == []
        assert [(m.ref, m.position) for m in placed] == [("OVEN60", 1700)]

    def test_water_points_processed_before_smoke_outlets(self) -> None:
        wall = _wall(
            Obstacle("s1", ObstacleType.SMOKE_OUTLET, 2000),
            Obstacle("w1", ObstacleType.WATER_POINT, 700),
        )
        placed, _ = _place(wall)
        assert [m.ref for m in placed] == ["SINK60", "OVEN60"]

    def test_blocked_by_door(self) -> None:
        wall = _wall(
            Obstacle("d1", ObstacleType.DOOR, 1500, 800),
            Obstacle("w1", ObstacleType.WATER_POINT, 1500),
        )
        placed, diagnostics = _place(wall)

        assert placed == []
        assert diagnostics == [
            "Conflict: the water point on wall-A (pos 1500mm) is obstructed."
        ]

    def test_out_of_bounds_at_wall_start(self) -> None:
        wall = _wall(Obstacle("w1", ObstacleType.WATER_POINT, 100))
        placed, diagnostics = _place(wall)

        assert placed == []
        assert diagnostics == ["Conflict: Sink does not fit on wall-A (pos 100mm)."]

    def test_out_of_bounds_at_wall_end(self) -> None:
        wall = _wall(Obstacle("s1", ObstacleType.SMOKE_OUTLET, 2900))
        placed, diagnostics = _place(wall)

        assert placed == []
        assert diagnostics == ["Conflict: Oven does not fit on wall-A (pos 2900mm)."]

    def test_flush_with_wall_end_fits(self) -> None:
        wall = _wall(Obstacle("s1", ObstacleType.SMOKE_OUTLET, 2700))
        placed, diagnostics = _place(wall)

        assert diagnostics == []
        assert placed[0].end == 3000

    def test_second_anchor_cannot_overlap_first(self) -> None:
        wall = _wall(
            Obstacle("w1", ObstacleType.WATER_POINT, 1000),
            Obstacle("w2", ObstacleType.WATER_POINT, 1200),
        )
        placed, diagnostics = _place(wall)

        assert [m.position for m in placed] == [700]
        assert diagnostics == [
            "Conflict: the water point on wall-A (pos 1200mm) is obstructed."
        ]

    def test_reserved_space_obstructs(self) -> None:
        wall = _wall(Obstacle("w1", ObstacleType.WATER_POINT, 400))
        placed, diagnostics = _place(wall, reserved=[Zone(0, 930)])

        assert placed == []
        assert len(diagnostics) == 1
        assert "obstructed" in diagnostics[0]

    def test_conflict_only_skips_that_anchor(self) -> None:
        wall = _wall(
            Obstacle("d1", ObstacleType.DOOR, 1500, 800),
            Obstacle("w1", ObstacleType.WATER_POINT, 1500),
            Obstacle("s1", ObstacleType.SMOKE_OUTLET, 2500),
        )
        placed, diagnostics = _place(wall)

        assert [m.ref for m in placed] == ["OVEN60"]
        assert len(diagnostics) == 1

    def test_missing_catalog_module(self) -> None:
        catalog = Catalog(
            modules=tuple(
                m
                for m in DEFAULT_CATALOG.modules
                if m.anchor_type != ObstacleType.SMOKE_OUTLET
            ),
            hardware=DEFAULT_CATALOG.hardware,
            countertop=DEFAULT_CATALOG.countertop,
            plinth=DEFAULT_CATALOG.plinth,
        )
        wall = _wall(Obstacle("s1", ObstacleType.SMOKE_OUTLET, 2000))
        placed, diagnostics = _place(wall, catalog=catalog)

        assert placed == []
        assert diagnostics == [
            "Conflict: no catalog module binds to the smoke outlet on wall-A "
            "(pos 2000mm)."
        ]

    def test_conflicts_logged_as_warnings(self, caplog: pytest.LogCaptureFixture) -> None:
        wall = _wall(Obstacle("w1", ObstacleType.WATER_POINT, 100))
        with caplog.at_level(logging.WARNING, logger="kitchens.domain.services.anchor"):
            _place(wall)

        assert any("does not fit" in r.getMessage() for r in caplog.records)
