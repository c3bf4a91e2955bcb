"""Wall opening and clearance zone value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import AxisAlignedBox, Point2D, Vector2D


class OpeningType(str, Enum):
    """Types of wall openings.

    Attributes:
        DOOR: Door opening; needs swing clearance.
        WINDOW: Window opening.
        CLOSET: Closet door or pass-through.
        NONE: Placeholder meaning the wall has no physical opening.
    """

    DOOR = "door"
    WINDOW = "window"
    CLOSET = "closet"
    NONE = "none"


@dataclass(frozen=True)
class OpeningClearance:
    """Depth of the region kept clear in front of an opening.

    All values are in inches. The reported zone depth and the depth used for
    the collision bounding box are different: the collision box reaches
    further into the room than the zone that is drawn.

    Attributes:
        wall_thickness: Nominal wall thickness.
        clearance: Clearance beyond the wall reported on each zone.
        collision_clearance: Clearance beyond the wall used for collision boxes.
    """

    wall_thickness: float = 6.0
    clearance: float = 12.0
    collision_clearance: float = 24.0

    def __post_init__(self) -> None:
        if self.wall_thickness < 0 or self.clearance < 0 or self.collision_clearance < 0:
            raise ValueError("Clearance values must be non-negative")

    @property
    def depth(self) -> float:
        """Reported zone depth (wall thickness plus clearance)."""
        return self.wall_thickness + self.clearance

    @property
    def collision_depth(self) -> float:
        """Depth of the collision bounding box."""
        return self.wall_thickness + self.collision_clearance


DEFAULT_OPENING_CLEARANCE = OpeningClearance()


@dataclass(frozen=True)
class OpeningZone:
    """Clearance zone in front of a wall opening.

    Attributes:
        center: Midpoint of the opening along its wall.
        along_dir: Unit vector along the wall, in traversal direction.
        normal_dir: Unit normal of the wall (along_dir rotated by 90 degrees).
        width: Opening width along the wall.
        depth: Clearance depth reported for the zone.
        opening_type: Type of the opening.
        wall_name: Name of the wall the opening belongs to.
        bounding_box: Conservative axis-aligned box used for collision checks.
    """

    center: Point2D
    along_dir: Vector2D
    normal_dir: Vector2D
    width: float
    depth: float
    opening_type: OpeningType
    wall_name: str
    bounding_box: AxisAlignedBox
