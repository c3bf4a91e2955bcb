"""Oriented rectangle geometry for placed items.

A placed item is a rectangle rotated about its center. These helpers turn an
item's pose into its four corners and derive the conservative axis-aligned
box around them.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

from ..value_objects import AxisAlignedBox, Point2D

if TYPE_CHECKING:
    from ..entities import PlacedItem

__all__ = [
    "aabb_of",
    "corners_of",
    "oriented_corners",
    "point_in_polygon",
]


def oriented_corners(
    center: Point2D,
    width: float,
    height: float,
    rotation_degrees: float,
) -> list[Point2D]:
    """Corners of a rectangle rotated about its center.

    The corners come from the half-extent offsets (-w/2, -h/2), (w/2, -h/2),
    (w/2, h/2), (-w/2, h/2), in that order, so the winding is consistent
    for every rotation.

    Args:
        center: Center of the rectangle.
        width: Extent along the local x axis.
        height: Extent along the local y axis.
        rotation_degrees: Rotation about the center in degrees.

    Returns:
        The four corner points.
    """
    half_w = width / 2
    half_h = height / 2
    angle = math.radians(rotation_degrees)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)

    corners = []
    for ox, oy in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)):
        corners.append(
            Point2D(
                x=center.x + ox * cos_a - oy * sin_a,
                y=center.y + ox * sin_a + oy * cos_a,
            )
        )
    return corners


def corners_of(item: PlacedItem) -> list[Point2D]:
    """Corners of a placed item's rotated footprint."""
    return oriented_corners(
        item.position, item.width, item.height, item.rotation_degrees
    )


def aabb_of(corners: Sequence[Point2D]) -> AxisAlignedBox:
    """Axis-aligned bounding box of a set of corners.

    The box always contains the rotated footprint, so it is never smaller
    than the true shape's projection on either axis.
    """
    return AxisAlignedBox.from_points(list(corners))


def point_in_polygon(point: Point2D, corners: Sequence[Point2D]) -> bool:
    """Even-odd test for a point inside a polygon.

    Args:
        point: The point to test.
        corners: Polygon vertices in order.

    Returns:
        True if the point lies inside the polygon.
    """
    inside = False
    j = len(corners) - 1
    for i in range(len(corners)):
        xi, yi = corners[i].x, corners[i].y
        xj, yj = corners[j].x, corners[j].y
        if (yi > point.y) != (yj > point.y):
            crossing_x = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < crossing_x:
                inside = not inside
        j = i
    return inside
