"""Value objects for the room planner domain.

This module provides immutable data types used throughout the planner.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    AxisAlignedBox,
    Point2D,
    RoomBounds,
    Vector2D,
)

# Wall openings and clearance zones
from ._openings import (
    DEFAULT_OPENING_CLEARANCE,
    OpeningClearance,
    OpeningType,
    OpeningZone,
)

# Collision detection
from ._collisions import (
    CollisionKind,
    CollisionRecord,
)

__all__ = [
    # Core geometry
    "AxisAlignedBox",
    "Point2D",
    "RoomBounds",
    "Vector2D",
    # Openings
    "DEFAULT_OPENING_CLEARANCE",
    "OpeningClearance",
    "OpeningType",
    "OpeningZone",
    # Collisions
    "CollisionKind",
    "CollisionRecord",
]
