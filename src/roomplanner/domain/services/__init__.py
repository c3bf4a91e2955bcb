"""Domain services for room geometry and collision detection.

This package provides:
- Room geometry construction (rectangular and polygon strategies)
- Opening clearance zone derivation
- Oriented rectangle helpers for placed items
- Furniture collision detection
"""

from .collision import FurnitureCollisionService, check_collisions, polygons_overlap
from .opening_zones import OpeningZoneService
from .oriented_rect import aabb_of, corners_of, oriented_corners, point_in_polygon
from .room_geometry import (
    RECTANGULAR_WALL_NAMES,
    RoomGeometry,
    RoomGeometryService,
    RoomShape,
    build_geometry,
)

__all__ = [
    # Room geometry
    "RECTANGULAR_WALL_NAMES",
    "RoomGeometry",
    "RoomGeometryService",
    "RoomShape",
    "build_geometry",
    # Opening zones
    "OpeningZoneService",
    # Oriented rectangles
    "aabb_of",
    "corners_of",
    "oriented_corners",
    "point_in_polygon",
    # Collisions
    "FurnitureCollisionService",
    "check_collisions",
    "polygons_overlap",
]
