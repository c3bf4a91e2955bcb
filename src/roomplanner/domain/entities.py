"""Domain entities for room layout."""

import math
from dataclasses import dataclass, field

from .value_objects import OpeningType, Point2D, Vector2D


@dataclass
class Opening:
    """A door, window or closet gap in a wall.

    Attributes:
        opening_type: The kind of opening. NONE marks a wall without one.
        start: Distance from the wall's origin corner in inches.
        width: Width of the opening along the wall in inches.
    """

    opening_type: OpeningType = OpeningType.NONE
    start: float = 0.0
    width: float = 0.0

    def __post_init__(self) -> None:
        """Validate opening position and width."""
        self.opening_type = OpeningType(self.opening_type)
        if self.start < 0:
            raise ValueError("Opening start must be non-negative")
        if self.width < 0:
            raise ValueError("Opening width must be non-negative")

    @property
    def end(self) -> float:
        """Distance from the wall origin to the far edge of the opening."""
        return self.start + self.width

    @property
    def is_physical(self) -> bool:
        """False for the NONE placeholder."""
        return self.opening_type != OpeningType.NONE


@dataclass
class Wall:
    """A named wall of a room.

    Attributes:
        name: Wall identifier. north/south/east/west select a rectangular room.
        length: Length of the wall in inches.
        openings: Openings on this wall, in order.
    """

    name: str
    length: float
    openings: list[Opening] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate wall length."""
        if self.length <= 0:
            raise ValueError("Wall length must be positive")

    @property
    def physical_openings(self) -> list[Opening]:
        """Openings that are real gaps in the wall (type other than NONE)."""
        return [op for op in self.openings if op.is_physical]


@dataclass
class Room:
    """A room defined by an ordered list of walls.

    Wall order matters for the polygon layout of non-rectangular rooms.

    Attributes:
        name: Identifier for the room.
        walls: Walls in traversal order.
    """

    name: str
    walls: list[Wall] = field(default_factory=list)

    def walls_by_name(self) -> dict[str, Wall]:
        """Index walls by lower-cased name. Later duplicates replace earlier ones."""
        return {wall.name.lower(): wall for wall in self.walls}


@dataclass(frozen=True)
class WallSegment:
    """A wall placed in absolute room coordinates.

    Attributes:
        start: First endpoint.
        end: Second endpoint.
        source_wall: The wall this segment was built from.
        name: Wall name used for the segment.
    """

    start: Point2D
    end: Point2D
    source_wall: Wall
    name: str

    @property
    def length(self) -> float:
        """Geometric length of the segment."""
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> Vector2D:
        """Unnormalized direction from start to end."""
        return Vector2D(x=self.end.x - self.start.x, y=self.end.y - self.start.y)


@dataclass
class FurnitureDefinition:
    """A furniture palette entry.

    Attributes:
        name: Display name of the item.
        width: Footprint along the item's local x axis in inches.
        height: Footprint along the item's local y axis in inches.
        quantity: How many of this item may be placed.
        color: Display color, as a CSS hex string.
    """

    name: str
    width: float
    height: float
    quantity: int = 1
    color: str = "#e94560"

    def __post_init__(self) -> None:
        """Validate furniture dimensions and quantity."""
        if self.width < 0 or self.height < 0:
            raise ValueError("Furniture dimensions must be non-negative")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")


@dataclass
class PlacedItem:
    """A furniture item placed in the room.

    Attributes:
        id: Unique identifier, assigned in increasing order by the session.
        name: Display name.
        width: Footprint along the local x axis in inches.
        height: Footprint along the local y axis in inches.
        position: Center of the item in room coordinates.
        rotation_degrees: Rotation about the center, kept in [0, 360).
        color: Display color.
        definition: Palette entry the item was placed from, if any.
    """

    id: int
    name: str
    width: float
    height: float
    position: Point2D
    rotation_degrees: float = 0.0
    color: str = "#e94560"
    definition: FurnitureDefinition | None = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Normalize the rotation."""
        self.rotation_degrees = normalize_degrees(self.rotation_degrees)

    def rotate_by(self, degrees: float) -> None:
        """Rotate the item about its center, keeping the angle in [0, 360)."""
        self.rotation_degrees = normalize_degrees(self.rotation_degrees + degrees)

    def move_to(self, position: Point2D) -> None:
        """Move the item's center."""
        self.position = position

    @property
    def rotation_radians(self) -> float:
        """Rotation in radians."""
        return math.radians(self.rotation_degrees)

    @classmethod
    def from_definition(
        cls,
        item_id: int,
        definition: FurnitureDefinition,
        position: Point2D,
        rotation_degrees: float = 0.0,
    ) -> "PlacedItem":
        """Create an item from a palette entry."""
        return cls(
            id=item_id,
            name=definition.name,
            width=definition.width,
            height=definition.height,
            position=position,
            rotation_degrees=rotation_degrees,
            color=definition.color,
            definition=definition,
        )


def normalize_degrees(degrees: float) -> float:
    """Reduce an angle to [0, 360)."""
    normalized = degrees % 360
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if normalized >= 360 else normalized
