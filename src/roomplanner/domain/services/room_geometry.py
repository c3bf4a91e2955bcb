"""Room geometry construction.

This module provides the RoomGeometryService, which turns an ordered list of
named walls into absolute wall segments, the room's bounding rectangle and
the clearance zones of its openings.

Two layout strategies exist:
- RECTANGULAR: walls named north, south, east and west form an axis-aligned
  rectangle sized by the longer wall of each opposite pair.
- POLYGON: any other wall set is walked end to end, turning 360/N degrees
  after each wall. The walk is not forced to close for unequal lengths.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from ..entities import Room, Wall, WallSegment
from ..value_objects import OpeningClearance, OpeningZone, Point2D, RoomBounds
from .opening_zones import OpeningZoneService

logger = logging.getLogger(__name__)

__all__ = [
    "RECTANGULAR_WALL_NAMES",
    "RoomGeometry",
    "RoomGeometryService",
    "RoomShape",
    "build_geometry",
]

RECTANGULAR_WALL_NAMES: tuple[str, ...] = ("north", "east", "south", "west")


class RoomShape(str, Enum):
    """Layout strategy used to build a room."""

    RECTANGULAR = "rectangular"
    POLYGON = "polygon"


@dataclass(frozen=True)
class RoomGeometry:
    """Derived geometry of a room.

    Attributes:
        wall_segments: One segment per wall, in traversal order.
        opening_zones: One zone per physical opening.
        room_bounds: Bounds anchored at the origin, or None for a room
            without walls.
        shape: Strategy that produced the segments, or None for an empty room.
    """

    wall_segments: list[WallSegment] = field(default_factory=list)
    opening_zones: list[OpeningZone] = field(default_factory=list)
    room_bounds: RoomBounds | None = None
    shape: RoomShape | None = None

    @property
    def is_empty(self) -> bool:
        """True when the room had no walls."""
        return not self.wall_segments

    @property
    def closure_gap(self) -> float:
        """Distance between the last segment's end and the first one's start."""
        if not self.wall_segments:
            return 0.0
        return self.wall_segments[-1].end.distance_to(self.wall_segments[0].start)


class RoomGeometryService:
    """Builds wall segments, bounds and opening zones for a room.

    Attributes:
        zone_service: Service used to derive opening zones.
    """

    def __init__(self, zone_service: OpeningZoneService | None = None) -> None:
        self.zone_service = zone_service or OpeningZoneService()

    def select_shape(self, room: Room) -> RoomShape:
        """Choose the layout strategy from the wall names.

        Matching is case-insensitive. The rectangle is used whenever all four
        compass names are present, regardless of any extra walls.
        """
        by_name = room.walls_by_name()
        if all(name in by_name for name in RECTANGULAR_WALL_NAMES):
            return RoomShape.RECTANGULAR
        return RoomShape.POLYGON

    def build(self, room: Room) -> RoomGeometry:
        """Build the full geometry of a room.

        Never raises for a well-formed room; a room without walls yields an
        empty geometry.

        Args:
            room: The room to lay out.

        Returns:
            RoomGeometry with segments, zones and bounds.
        """
        if not room.walls:
            logger.debug("Room %r has no walls; geometry cleared", room.name)
            return RoomGeometry()

        shape = self.select_shape(room)
        if shape == RoomShape.RECTANGULAR:
            segments, bounds = self._rectangular_segments(room.walls_by_name())
        else:
            segments, bounds = self._polygon_segments(room.walls)

        zones = self.zone_service.derive_zones(segments)
        logger.debug(
            "Built %s room %r: %d segment(s), %d opening zone(s), %.2f x %.2f",
            shape.value,
            room.name,
            len(segments),
            len(zones),
            bounds.width,
            bounds.height,
        )
        return RoomGeometry(
            wall_segments=segments,
            opening_zones=zones,
            room_bounds=bounds,
            shape=shape,
        )

    def _rectangular_segments(
        self, by_name: dict[str, Wall]
    ) -> tuple[list[WallSegment], RoomBounds]:
        """Lay out the four compass walls clockwise from the north-west corner."""
        north, east = by_name["north"], by_name["east"]
        south, west = by_name["south"], by_name["west"]
        width = max(north.length, south.length)
        height = max(east.length, west.length)

        nw = Point2D(0.0, 0.0)
        ne = Point2D(width, 0.0)
        se = Point2D(width, height)
        sw = Point2D(0.0, height)
        segments = [
            WallSegment(start=nw, end=ne, source_wall=north, name="north"),
            WallSegment(start=ne, end=se, source_wall=east, name="east"),
            WallSegment(start=se, end=sw, source_wall=south, name="south"),
            WallSegment(start=sw, end=nw, source_wall=west, name="west"),
        ]
        return segments, RoomBounds.of_size(width, height)

    def _polygon_segments(
        self, walls: list[Wall]
    ) -> tuple[list[WallSegment], RoomBounds]:
        """Walk the walls end to end, turning an equal share of a full turn."""
        turn = 2 * math.pi / len(walls)
        heading = 0.0
        x, y = 0.0, 0.0

        raw: list[tuple[float, float, float, float, Wall]] = []
        for wall in walls:
            end_x = x + wall.length * math.cos(heading)
            end_y = y + wall.length * math.sin(heading)
            raw.append((x, y, end_x, end_y, wall))
            x, y = end_x, end_y
            heading += turn

        xs = [v for x1, _, x2, _, _ in raw for v in (x1, x2)]
        ys = [v for _, y1, _, y2, _ in raw for v in (y1, y2)]
        min_x, min_y = min(xs), min(ys)

        segments = [
            WallSegment(
                start=Point2D(x1 - min_x, y1 - min_y),
                end=Point2D(x2 - min_x, y2 - min_y),
                source_wall=wall,
                name=wall.name,
            )
            for x1, y1, x2, y2, wall in raw
        ]
        bounds = RoomBounds.of_size(max(xs) - min_x, max(ys) - min_y)
        return segments, bounds


def build_geometry(
    room: Room, clearance: OpeningClearance | None = None
) -> RoomGeometry:
    """Build the geometry of a room with default services.

    Args:
        room: The room to lay out.
        clearance: Optional opening clearance depths.

    Returns:
        The derived RoomGeometry.
    """
    return RoomGeometryService(OpeningZoneService(clearance)).build(room)
