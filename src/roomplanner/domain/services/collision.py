"""Collision detection for placed furniture.

This module provides the FurnitureCollisionService for checking a placed
item against other items, the room boundary and opening clearance zones.
Item-vs-item checks use the separating axis theorem on the rotated
footprints. Wall and opening checks use axis-aligned boxes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from ..value_objects import (
    CollisionKind,
    CollisionRecord,
    OpeningZone,
    Point2D,
    RoomBounds,
    Vector2D,
)
from .oriented_rect import aabb_of, corners_of

if TYPE_CHECKING:
    from ..entities import PlacedItem

logger = logging.getLogger(__name__)

__all__ = [
    "FurnitureCollisionService",
    "check_collisions",
    "polygons_overlap",
]


def _edge_normals(corners: Sequence[Point2D]) -> list[Vector2D]:
    """Perpendiculars of each polygon edge, in vertex order."""
    normals = []
    count = len(corners)
    for i in range(count):
        j = (i + 1) % count
        edge = Vector2D(x=corners[j].x - corners[i].x, y=corners[j].y - corners[i].y)
        normals.append(edge.perpendicular())
    return normals


def _project(corners: Sequence[Point2D], axis: Vector2D) -> tuple[float, float]:
    """Interval covered by a polygon projected onto an axis."""
    projections = [c.x * axis.x + c.y * axis.y for c in corners]
    return min(projections), max(projections)


def polygons_overlap(
    corners_a: Sequence[Point2D], corners_b: Sequence[Point2D]
) -> bool:
    """Check two convex polygons for overlap with the separating axis theorem.

    Every edge normal of both polygons is a candidate axis. If the
    projections of the polygons onto any axis do not overlap, the polygons
    are disjoint. Projections that only touch count as disjoint, so
    polygons sharing an edge do not overlap. A degenerate polygon (zero
    area) produces zero axes, which can never overlap anything either.

    Args:
        corners_a: Vertices of the first polygon, in order.
        corners_b: Vertices of the second polygon, in order.

    Returns:
        True if the polygons' interiors intersect.
    """
    for axis in _edge_normals(corners_a) + _edge_normals(corners_b):
        min_a, max_a = _project(corners_a, axis)
        min_b, max_b = _project(corners_b, axis)
        if max_a <= min_b or max_b <= min_a:
            return False
    return True


class FurnitureCollisionService:
    """Detects collisions between a placed item and its surroundings.

    All checks run independently; a single item can report furniture,
    wall and opening collisions at once.
    """

    def check_collisions(
        self,
        item: PlacedItem,
        all_items: Iterable[PlacedItem],
        room_bounds: RoomBounds | None,
        opening_zones: Iterable[OpeningZone],
    ) -> list[CollisionRecord]:
        """Report every collision for one item.

        Args:
            item: The subject item.
            all_items: All placed items. Entries with the subject's id are
                skipped.
            room_bounds: Bounds of the room; the wall check is skipped when
                None.
            opening_zones: Clearance zones of the room's openings.

        Returns:
            List of CollisionRecord objects. Empty if the item is clear.
        """
        corners = corners_of(item)
        results = self.check_furniture(item, corners, all_items)

        box = aabb_of(corners)
        if room_bounds is not None and not room_bounds.contains_box(box):
            results.append(CollisionRecord(kind=CollisionKind.WALL))

        for zone in opening_zones:
            if box.intersects(zone.bounding_box):
                results.append(CollisionRecord(kind=CollisionKind.OPENING, zone=zone))

        if results:
            logger.debug(
                "Item %d (%s) has %d collision(s): %s",
                item.id,
                item.name,
                len(results),
                ", ".join(r.kind.value for r in results),
            )
        return results

    def check_furniture(
        self,
        item: PlacedItem,
        corners: Sequence[Point2D],
        all_items: Iterable[PlacedItem],
    ) -> list[CollisionRecord]:
        """Check an item's footprint against every other placed item."""
        return [
            CollisionRecord(kind=CollisionKind.FURNITURE, other_item=other)
            for other in all_items
            if other.id != item.id and polygons_overlap(corners, corners_of(other))
        ]

    def check_all(
        self,
        items: Sequence[PlacedItem],
        room_bounds: RoomBounds | None,
        opening_zones: Sequence[OpeningZone],
    ) -> dict[int, list[CollisionRecord]]:
        """Check every item, keyed by item id.

        Items with no collisions map to empty lists.
        """
        return {
            item.id: self.check_collisions(item, items, room_bounds, opening_zones)
            for item in items
        }


def check_collisions(
    item: PlacedItem,
    all_items: Iterable[PlacedItem],
    room_bounds: RoomBounds | None,
    opening_zones: Iterable[OpeningZone],
) -> list[CollisionRecord]:
    """Report every collision for one item using the default service."""
    return FurnitureCollisionService().check_collisions(
        item, all_items, room_bounds, opening_zones
    )
