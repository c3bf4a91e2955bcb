"""Unit tests for FurnitureCollisionService.

These tests verify:
- Separating axis overlap for axis-aligned and rotated footprints
- Symmetry of furniture collisions
- Room boundary checks against the item's bounding box
- Opening clearance zone checks
- Independent reporting of simultaneous collisions
"""

from typing import Callable

import pytest

from roomplanner.domain.entities import PlacedItem, Room
from roomplanner.domain.services import (
    FurnitureCollisionService,
    build_geometry,
    check_collisions,
    corners_of,
    polygons_overlap,
)
from roomplanner.domain.value_objects import (
    CollisionKind,
    CollisionRecord,
    OpeningType,
    RoomBounds,
)

MakeItem = Callable[..., PlacedItem]


def _kinds(records: list[CollisionRecord]) -> list[CollisionKind]:
    return [r.kind for r in records]


class TestPolygonsOverlap:
    """Tests for the separating axis test."""

    def test_identical_squares_overlap(self, make_item: MakeItem) -> None:
        a = make_item(50.0, 50.0)
        b = make_item(50.0, 50.0)
        assert polygons_overlap(corners_of(a), corners_of(b))

    def test_disjoint_x_ranges(self, make_item: MakeItem) -> None:
        a = make_item(0.0, 0.0)
        b = make_item(30.0, 0.0)
        assert not polygons_overlap(corners_of(a), corners_of(b))

    def test_touching_edges_do_not_overlap(self, make_item: MakeItem) -> None:
        a = make_item(0.0, 0.0)
        b = make_item(24.0, 0.0)
        assert not polygons_overlap(corners_of(a), corners_of(b))

    @pytest.mark.parametrize(
        "bx, by, expected",
        [
            (20.0, 0.0, True),
            (0.0, 23.0, True),
            (23.9, 23.9, True),
            (25.0, 5.0, False),
            (5.0, -25.0, False),
            (30.0, 30.0, False),
        ],
    )
    def test_axis_aligned_matches_range_overlap(
        self, make_item: MakeItem, bx: float, by: float, expected: bool
    ) -> None:
        a = make_item(0.0, 0.0)
        b = make_item(bx, by)
        assert polygons_overlap(corners_of(a), corners_of(b)) is expected

    def test_rotated_square_clears_corner_gap(self, make_item: MakeItem) -> None:
        # Bounding boxes overlap, but the diamond sits in the corner gap.
        a = make_item(0.0, 0.0, 20.0, 20.0)
        b = make_item(22.0, 22.0, 20.0, 20.0, rotation=45.0)
        assert not polygons_overlap(corners_of(a), corners_of(b))

    def test_rotated_square_reaching_in(self, make_item: MakeItem) -> None:
        a = make_item(0.0, 0.0, 20.0, 20.0)
        b = make_item(22.0, 0.0, 20.0, 20.0, rotation=45.0)
        assert polygons_overlap(corners_of(a), corners_of(b))

    def test_crossing_thin_rectangles(self, make_item: MakeItem) -> None:
        a = make_item(0.0, 0.0, 100.0, 2.0)
        b = make_item(0.0, 0.0, 100.0, 2.0, rotation=90.0)
        assert polygons_overlap(corners_of(a), corners_of(b))

    def test_zero_size_never_overlaps(self, make_item: MakeItem) -> None:
        a = make_item(10.0, 10.0, 0.0, 0.0)
        b = make_item(10.0, 10.0, 40.0, 40.0)
        assert not polygons_overlap(corners_of(a), corners_of(b))
        assert not polygons_overlap(corners_of(b), corners_of(a))


class TestFurnitureCollisions:
    """Tests for item-vs-item reporting."""

    def test_reports_other_item(self, make_item: MakeItem) -> None:
        a = make_item(50.0, 50.0)
        b = make_item(60.0, 50.0, name="Chair")
        records = check_collisions(a, [a, b], None, [])

        assert _kinds(records) == [CollisionKind.FURNITURE]
        assert records[0].other_item is b

    def test_subject_is_skipped_by_id(self, make_item: MakeItem) -> None:
        a = make_item(50.0, 50.0)
        assert check_collisions(a, [a], None, []) == []

    @pytest.mark.parametrize("rotation_a", [0.0, 30.0, 45.0, 90.0])
    @pytest.mark.parametrize("rotation_b", [0.0, 10.0, 60.0])
    @pytest.mark.parametrize("dx", [10.0, 25.0, 31.0, 50.0])
    def test_symmetric(
        self, make_item: MakeItem, rotation_a: float, rotation_b: float, dx: float
    ) -> None:
        a = make_item(0.0, 0.0, 40.0, 20.0, rotation=rotation_a)
        b = make_item(dx, 5.0, 30.0, 10.0, rotation=rotation_b)
        service = FurnitureCollisionService()

        a_hits = service.check_furniture(a, corners_of(a), [a, b])
        b_hits = service.check_furniture(b, corners_of(b), [a, b])
        assert bool(a_hits) == bool(b_hits)

    def test_every_overlapping_item_reported(self, make_item: MakeItem) -> None:
        a = make_item(50.0, 50.0, 60.0, 60.0)
        others = [make_item(30.0, 50.0), make_item(70.0, 50.0), make_item(200.0, 200.0)]
        records = check_collisions(a, [a, *others], None, [])

        assert [r.other_item for r in records] == others[:2]


class TestWallCollisions:
    """Tests for the room boundary check."""

    def test_centered_item_is_clear(self, make_item: MakeItem) -> None:
        bounds = RoomBounds.of_size(180.0, 144.0)
        item = make_item(90.0, 72.0, 84.0, 36.0)
        assert check_collisions(item, [item], bounds, []) == []

    @pytest.mark.parametrize(
        "x, y",
        [(5.0, 72.0), (175.0, 72.0), (90.0, 5.0), (90.0, 140.0), (-50.0, -50.0)],
    )
    def test_item_past_edge_reports_one_wall(
        self, make_item: MakeItem, x: float, y: float
    ) -> None:
        bounds = RoomBounds.of_size(180.0, 144.0)
        item = make_item(x, y)
        records = check_collisions(item, [item], bounds, [])

        assert _kinds(records) == [CollisionKind.WALL]

    def test_flush_against_wall_is_clear(self, make_item: MakeItem) -> None:
        bounds = RoomBounds.of_size(180.0, 144.0)
        item = make_item(12.0, 12.0)
        assert check_collisions(item, [item], bounds, []) == []

    def test_rotation_pushes_box_past_wall(self, make_item: MakeItem) -> None:
        bounds = RoomBounds.of_size(180.0, 144.0)
        item = make_item(14.0, 72.0, 24.0, 24.0, rotation=45.0)
        assert _kinds(check_collisions(item, [item], bounds, [])) == [CollisionKind.WALL]

    def test_no_bounds_skips_wall_check(self, make_item: MakeItem) -> None:
        item = make_item(-100.0, -100.0)
        assert check_collisions(item, [item], None, []) == []


class TestOpeningCollisions:
    """Tests for opening clearance zone checks."""

    def test_item_in_front_of_door(self, rectangular_room: Room, make_item: MakeItem) -> None:
        geometry = build_geometry(rectangular_room)
        item = make_item(90.0, 144.0, 40.0, 20.0)
        records = check_collisions(item, [item], None, geometry.opening_zones)

        assert _kinds(records) == [CollisionKind.OPENING]
        assert records[0].zone.opening_type == OpeningType.DOOR

    def test_item_inside_room_near_door(self, rectangular_room: Room, make_item: MakeItem) -> None:
        geometry = build_geometry(rectangular_room)
        item = make_item(90.0, 124.0, 40.0, 20.0)
        records = check_collisions(
            item, [item], geometry.room_bounds, geometry.opening_zones
        )

        assert _kinds(records) == [CollisionKind.OPENING]

    def test_item_away_from_door(self, rectangular_room: Room, make_item: MakeItem) -> None:
        geometry = build_geometry(rectangular_room)
        item = make_item(30.0, 30.0)
        assert check_collisions(
            item, [item], geometry.room_bounds, geometry.opening_zones
        ) == []

    def test_touching_zone_edge_is_clear(self, rectangular_room: Room, make_item: MakeItem) -> None:
        geometry = build_geometry(rectangular_room)
        # Door zone spans x 72-108; this item ends at x=72.
        item = make_item(60.0, 130.0, 24.0, 24.0)
        records = check_collisions(item, [item], None, geometry.opening_zones)

        assert records == []


class TestSimultaneousCollisions:
    """All checks run independently."""

    def test_furniture_wall_and_opening_together(
        self, rectangular_room: Room, make_item: MakeItem
    ) -> None:
        geometry = build_geometry(rectangular_room)
        item = make_item(90.0, 144.0, 40.0, 20.0)
        other = make_item(95.0, 140.0)
        records = check_collisions(
            item, [item, other], geometry.room_bounds, geometry.opening_zones
        )

        assert sorted(r.kind.value for r in records) == ["furniture", "opening", "wall"]

    def test_check_all_keys_by_id(self, make_item: MakeItem) -> None:
        a = make_item(0.0, 0.0)
        b = make_item(10.0, 0.0)
        c = make_item(100.0, 100.0)
        report = FurnitureCollisionService().check_all([a, b, c], None, [])

        assert set(report) == {a.id, b.id, c.id}
        assert report[a.id][0].other_item is b
        assert report[b.id][0].other_item is a
        assert report[c.id] == []


class TestCollisionRecord:
    """Tests for collision record validation."""

    def test_furniture_record_needs_item(self) -> None:
        with pytest.raises(ValueError):
            CollisionRecord(kind=CollisionKind.FURNITURE)

    def test_opening_record_needs_zone(self) -> None:
        with pytest.raises(ValueError):
            CollisionRecord(kind=CollisionKind.OPENING)

    def test_wall_description(self) -> None:
        assert CollisionRecord(kind=CollisionKind.WALL).description == "wall"
