"""Unit tests for geometry and collision output formatters."""

import json

import pytest

from roomplanner.application import LayoutSession
from roomplanner.domain.entities import FurnitureDefinition, PlacedItem, Room
from roomplanner.domain.services import FurnitureCollisionService, build_geometry
from roomplanner.domain.value_objects import Point2D
from roomplanner.infrastructure import (
    CollisionReportFormatter,
    GeometryReportFormatter,
    JsonReportExporter,
    RoomDiagramFormatter,
)
from roomplanner.infrastructure.formatters import inches_to_feet_str


@pytest.fixture
def session(rectangular_room: Room) -> LayoutSession:
    return LayoutSession(
        room=rectangular_room,
        palette=[
            FurnitureDefinition(name="Sofa", width=84.0, height=36.0),
            FurnitureDefinition(name="Chair", width=36.0, height=33.0),
        ],
    )


def _place(session: LayoutSession, index: int, x: float, y: float) -> PlacedItem:
    item = session.place_from_palette(index, Point2D(x, y))
    assert isinstance(item, PlacedItem)
    return item


@pytest.mark.parametrize(
    "inches, expected",
    [(144.0, "12'"), (150.0, "12' 6\""), (0.0, "0'"), (11.6, "1'"), (13.0, "1' 1\"")],
)
def test_inches_to_feet_str(inches: float, expected: str) -> None:
    assert inches_to_feet_str(inches) == expected


class TestGeometryReportFormatter:
    """Tests for the text geometry report."""

    def test_empty_room(self) -> None:
        output = GeometryReportFormatter().format(build_geometry(Room(name="Den")), "Den")
        assert output == "Den: no walls defined."

    def test_rectangular_room(self, rectangular_room: Room) -> None:
        output = GeometryReportFormatter().format(build_geometry(rectangular_room), "Living Room")

        assert "ROOM GEOMETRY: Living Room" in output
        assert "Shape: rectangular" in output
        assert "Bounds: 180.0\" x 144.0\" (15' x 12')" in output
        for name in ("north", "east", "south", "west"):
            assert name in output
        assert "door" in output
        assert "clearance box (72.0, 129.0) 36.0 x 30.0" in output

    def test_no_openings(self, triangle_room: Room) -> None:
        output = GeometryReportFormatter().format(build_geometry(triangle_room))
        assert "Shape: polygon" in output
        assert output.endswith("Openings: none")


class TestCollisionReportFormatter:
    """Tests for the text collision report."""

    def test_no_items(self) -> None:
        assert CollisionReportFormatter().format([], {}) == "No furniture placed."

    def test_all_clear(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        _place(session, 1, 150.0, 90.0)
        output = CollisionReportFormatter().format(session.items, session.collision_report())

        assert output.count("OK") == 2
        assert output.endswith("All 2 item(s) clear")

    def test_collisions_listed(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        _place(session, 1, 90.0, 138.0)
        output = CollisionReportFormatter().format(session.items, session.collision_report())

        assert "OK    #1 Sofa" in output
        assert "WARN  #2 Chair" in output
        assert "- wall" in output
        assert "- opening: door on south" in output
        assert output.endswith("1 of 2 item(s) have collisions")

    def test_furniture_collision_names_other_item(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        _place(session, 1, 96.0, 48.0)
        output = CollisionReportFormatter().format(session.items, session.collision_report())

        assert "- furniture: Chair (#2)" in output
        assert "- furniture: Sofa (#1)" in output


class TestRoomDiagramFormatter:
    """Tests for the ASCII plan."""

    def test_no_walls(self) -> None:
        assert RoomDiagramFormatter().format(LayoutSession()) == "No room to display."

    def test_outline_and_door(self, session: LayoutSession) -> None:
        lines = RoomDiagramFormatter().format(session).splitlines()
        grid = lines[2:]

        assert lines[0] == "ROOM PLAN: Living Room"
        assert grid[0].startswith("+") and grid[0].endswith("+")
        assert "D" in grid[-1]

    def test_items_in_legend(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        output = RoomDiagramFormatter().format(session)

        assert "a = #1 Sofa" in output
        # Sofa spans y 24-60, grid rows 3-8
        assert "a" in output.splitlines()[2 + 4]

    def test_overlap_marked(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        _place(session, 1, 90.0, 42.0)
        assert "#" in "".join(RoomDiagramFormatter().format(session).splitlines()[2:-3])


class TestJsonReportExporter:
    """Tests for the JSON exporter."""

    def test_geometry(self, rectangular_room: Room) -> None:
        data = JsonReportExporter().export_geometry(build_geometry(rectangular_room))

        assert data["shape"] == "rectangular"
        assert data["bounds"] == {"width": 180.0, "height": 144.0}
        assert [s["name"] for s in data["wall_segments"]] == ["north", "east", "south", "west"]
        assert data["opening_zones"][0]["type"] == "door"
        assert data["opening_zones"][0]["depth"] == 18.0
        assert data["opening_zones"][0]["bounding_box"]["h"] == pytest.approx(30.0)

    def test_empty_geometry(self) -> None:
        data = JsonReportExporter().export_geometry(build_geometry(Room(name="x")))
        assert data == {"shape": None, "bounds": None, "wall_segments": [], "opening_zones": []}

    def test_export_session(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        _place(session, 1, 96.0, 138.0)
        data = json.loads(JsonReportExporter().export(session))

        assert data["room"] == "Living Room"
        sofa, chair = data["items"]
        assert sofa["collisions"] == []
        kinds = sorted(c["kind"] for c in chair["collisions"])
        assert kinds == ["opening", "wall"]
        opening = next(c for c in chair["collisions"] if c["kind"] == "opening")
        assert opening == {"kind": "opening", "opening_type": "door", "wall": "south"}

    def test_export_uses_given_report(self, rectangular_room: Room) -> None:
        class CountingCollisionService(FurnitureCollisionService):
            calls = 0

            def check_all(self, items, room_bounds, opening_zones):
                CountingCollisionService.calls += 1
                return super().check_all(items, room_bounds, opening_zones)

        session = LayoutSession(
            room=rectangular_room,
            palette=[FurnitureDefinition(name="Chair", width=36.0, height=33.0)],
            collision_service=CountingCollisionService(),
        )
        _place(session, 0, 90.0, 138.0)
        report = session.collision_report()

        data = json.loads(JsonReportExporter().export(session, report))

        assert CountingCollisionService.calls == 1
        assert sorted(c["kind"] for c in data["items"][0]["collisions"]) == ["opening", "wall"]

    def test_furniture_collision_fields(self, session: LayoutSession) -> None:
        _place(session, 0, 90.0, 42.0)
        _place(session, 1, 96.0, 48.0)
        data = json.loads(JsonReportExporter().export(session))

        assert data["items"][0]["collisions"] == [
            {"kind": "furniture", "item_id": 2, "item_name": "Chair"}
        ]
