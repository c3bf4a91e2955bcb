"""Domain layer - room geometry and collision logic."""

from .entities import (
    FurnitureDefinition,
    Opening,
    PlacedItem,
    Room,
    Wall,
    WallSegment,
)
from .services import (
    FurnitureCollisionService,
    RoomGeometry,
    RoomGeometryService,
    RoomShape,
    aabb_of,
    build_geometry,
    check_collisions,
    corners_of,
)
from .value_objects import (
    AxisAlignedBox,
    CollisionKind,
    CollisionRecord,
    OpeningType,
    OpeningZone,
    Point2D,
    RoomBounds,
)

__all__ = [
    "AxisAlignedBox",
    "CollisionKind",
    "CollisionRecord",
    "FurnitureCollisionService",
    "FurnitureDefinition",
    "Opening",
    "OpeningType",
    "OpeningZone",
    "PlacedItem",
    "Point2D",
    "Room",
    "RoomBounds",
    "RoomGeometry",
    "RoomGeometryService",
    "RoomShape",
    "Wall",
    "WallSegment",
    "aabb_of",
    "build_geometry",
    "check_collisions",
    "corners_of",
]
