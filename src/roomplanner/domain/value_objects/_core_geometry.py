"""Core 2D geometry value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """2D point in room coordinate space.

    Room coordinates are measured in inches with x growing to the right and
    y growing downward (north wall at y=0). Intermediate values may be
    negative before a room is normalized to the origin.
    """

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> Point2D:
        """Return a copy of this point moved by (dx, dy)."""
        return Point2D(x=self.x + dx, y=self.y + dy)

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Vector2D:
    """Direction in room coordinate space."""

    x: float
    y: float

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def perpendicular(self) -> Vector2D:
        """Rotate this vector by 90 degrees, (x, y) -> (-y, x)."""
        return Vector2D(x=-self.y, y=self.x)


@dataclass(frozen=True)
class AxisAlignedBox:
    """Axis-aligned bounding box in room coordinates.

    Attributes:
        x: Left edge.
        y: Top edge (smallest y).
        w: Width along the x axis.
        h: Height along the y axis.
    """

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        """Right edge of the box (x + w)."""
        return self.x + self.w

    @property
    def bottom(self) -> float:
        """Bottom edge of the box (y + h)."""
        return self.y + self.h

    @property
    def center(self) -> Point2D:
        """Center point of the box."""
        return Point2D(x=self.x + self.w / 2, y=self.y + self.h / 2)

    def intersects(self, other: AxisAlignedBox) -> bool:
        """Check if this box overlaps another.

        Boxes that only share an edge do not intersect.

        Args:
            other: The box to test against.

        Returns:
            True if the interiors of the two boxes overlap.
        """
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    @classmethod
    def from_points(cls, points: list[Point2D]) -> AxisAlignedBox:
        """Smallest box enclosing the given points."""
        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)
        return cls(x=min_x, y=min_y, w=max_x - min_x, h=max_y - min_y)


@dataclass(frozen=True)
class RoomBounds:
    """Rectangular extent of a built room.

    After a geometry build the minimum corner is always the origin.

    Attributes:
        min: Minimum corner (always (0, 0) after normalization).
        max: Maximum corner.
    """

    min: Point2D
    max: Point2D

    @property
    def width(self) -> float:
        """Span along the x axis."""
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        """Span along the y axis."""
        return self.max.y - self.min.y

    @property
    def center(self) -> Point2D:
        """Center point of the room bounds."""
        return Point2D(
            x=self.min.x + self.width / 2,
            y=self.min.y + self.height / 2,
        )

    def contains_box(self, box: AxisAlignedBox) -> bool:
        """Check if a box lies entirely within these bounds.

        Edges that coincide with the bounds count as inside.
        """
        return (
            box.x >= self.min.x
            and box.y >= self.min.y
            and box.right <= self.max.x
            and box.bottom <= self.max.y
        )

    @classmethod
    def of_size(cls, width: float, height: float) -> RoomBounds:
        """Bounds anchored at the origin with the given span."""
        return cls(min=Point2D(0.0, 0.0), max=Point2D(width, height))
