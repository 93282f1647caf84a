"""Unit tests for room entities, value objects and the catalog."""

import pytest

from kitchens.domain import (
    DEFAULT_CATALOG,
    CatalogModule,
    ModuleCategory,
    Obstacle,
    ObstacleType,
    PlacedModule,
    Room,
    RoomGeometryError,
    RoomShape,
    Wall,
    Zone,
)
from kitchens.domain.catalog import Catalog


class TestObstacleType:
    def test_values(self) -> None:
        assert [t.value for t in ObstacleType] == [
            "window",
            "door",
            "column",
            "water_point",
            "smoke_outlet",
        ]

    def test_classification(self) -> None:
        assert ObstacleType.DOOR.is_blocking
        assert ObstacleType.COLUMN.is_blocking
        assert not ObstacleType.WINDOW.is_blocking
        assert ObstacleType.WATER_POINT.is_point
        assert not ObstacleType.WINDOW.is_point

    def test_display_name(self) -> None:
        assert ObstacleType.SMOKE_OUTLET.display_name == "smoke outlet"


class TestObstacle:
    def test_zone_is_centered(self) -> None:
        door = Obstacle("d", ObstacleType.DOOR, 1500, 800)
        assert door.to_zone() == Zone(1100, 1900)

    def test_point_obstacle_must_have_zero_width(self) -> None:
        with pytest.raises(RoomGeometryError):
            Obstacle("p", ObstacleType.WATER_POINT, 500, 10)

    def test_rejects_negative_position(self) -> None:
        with pytest.raises(RoomGeometryError):
            Obstacle("d", ObstacleType.DOOR, -1, 800)

    def test_rejects_negative_width(self) -> None:
        with pytest.raises(ValueError):
            Obstacle("d", ObstacleType.DOOR, 100, -5)


class TestWall:
    def test_rejects_non_positive_length(self) -> None:
        with pytest.raises(RoomGeometryError):
            Wall("wall-A", 0)

    def test_rejects_empty_id(self) -> None:
        with pytest.raises(RoomGeometryError):
            Wall("", 3000)

    def test_rejects_obstacle_beyond_end(self) -> None:
        with pytest.raises(RoomGeometryError):
            Wall("wall-A", 3000, (Obstacle("d", ObstacleType.DOOR, 3100, 800),))

    def test_obstacles_of_type_keeps_order(self) -> None:
        wall = Wall(
            "wall-A",
            3000,
            (
                Obstacle("w2", ObstacleType.WATER_POINT, 2000),
                Obstacle("d", ObstacleType.DOOR, 500, 800),
                Obstacle("w1", ObstacleType.WATER_POINT, 1000),
            ),
        )
        ids = [o.obstacle_id for o in wall.obstacles_of_type(ObstacleType.WATER_POINT)]
        assert ids == ["w2", "w1"]


class TestRoom:
    def test_wall_count_must_match_shape(self) -> None:
        with pytest.raises(RoomGeometryError) as exc_info:
            Room(RoomShape.L_SHAPED, (Wall("wall-A", 3000),))
        assert "requires 2 wall(s)" in str(exc_info.value)

    def test_wall_ids_unique(self) -> None:
        with pytest.raises(RoomGeometryError):
            Room(RoomShape.L_SHAPED, (Wall("wall-A", 3000), Wall("wall-A", 2000)))

    def test_corner_walls(self, u_shaped_room: Room) -> None:
        primary, secondary = u_shaped_room.corner_walls
        assert primary.wall_id == "wall-A"
        assert secondary.wall_id == "wall-B"
        assert u_shaped_room.primary_wall is primary

    def test_linear_room_has_no_corner(self, linear_room: Room) -> None:
        assert linear_room.corner_walls is None

    def test_get_wall(self, l_shaped_room: Room) -> None:
        assert l_shaped_room.get_wall("wall-B").length == 2000
        assert l_shaped_room.get_wall("wall-Z") is None

    def test_shape_wall_counts(self) -> None:
        assert RoomShape.LINEAR.wall_count == 1
        assert RoomShape("L-SHAPED").wall_count == 2
        assert RoomShape.U_SHAPED.wall_count == 3


class TestCatalogModule:
    def test_rejects_non_positive_width(self) -> None:
        with pytest.raises(ValueError):
            CatalogModule("X", "X", ModuleCategory.BASE, 0, 600, 10)

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValueError):
            CatalogModule("X", "X", ModuleCategory.BASE, 600, 600, -1)

    def test_corner_must_be_square(self) -> None:
        with pytest.raises(ValueError):
            CatalogModule("C", "C", ModuleCategory.BASE, 900, 600, 10, is_corner=True)

    def test_placed_module_from_catalog(self) -> None:
        sink = DEFAULT_CATALOG.get_module("SINK60")
        placed = PlacedModule.from_catalog(
            sink, "wall-A", 200, anchor=ObstacleType.WATER_POINT
        )
        assert placed.end == 800
        assert placed.price == sink.price
        assert placed.label == "Sink"
        assert not placed.corner


class TestCatalog:
    def test_default_anchor_modules(self) -> None:
        assert DEFAULT_CATALOG.anchor_module(ObstacleType.WATER_POINT).ref == "SINK60"
        assert DEFAULT_CATALOG.anchor_module(ObstacleType.SMOKE_OUTLET).ref == "OVEN60"
        assert DEFAULT_CATALOG.anchor_module(ObstacleType.DOOR) is None

    def test_default_corner_module(self) -> None:
        corner = DEFAULT_CATALOG.corner_module
        assert corner.ref == "CORNER90"
        assert corner.width == corner.depth == 930

    def test_base_modules_widest_first(self) -> None:
        refs = [m.ref for m in DEFAULT_CATALOG.base_modules_by_width()]
        assert refs == ["B120", "B90", "B60", "B45", "B30", "B15"]

    def test_wall_modules_widest_first(self) -> None:
        refs = [m.ref for m in DEFAULT_CATALOG.wall_modules_by_width()]
        assert refs == ["A120", "A90", "A60", "A45", "A30", "A15"]

    def test_get_module(self) -> None:
        assert DEFAULT_CATALOG.get_module("T60").category == ModuleCategory.TALL
        assert DEFAULT_CATALOG.get_module("NOPE") is None

    def test_rejects_duplicate_refs(self) -> None:
        b60 = DEFAULT_CATALOG.get_module("B60")
        with pytest.raises(ValueError):
            Catalog((b60, b60), (), DEFAULT_CATALOG.countertop, DEFAULT_CATALOG.plinth)

    def test_rejects_anchor_on_blocking_type(self) -> None:
        module = CatalogModule(
            "X", "X", ModuleCategory.BASE, 600, 600, 10, anchor_type=ObstacleType.DOOR
        )
        with pytest.raises(ValueError):
            Catalog((module,), (), DEFAULT_CATALOG.countertop, DEFAULT_CATALOG.plinth)
