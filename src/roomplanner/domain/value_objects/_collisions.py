"""Collision detection value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ._openings import OpeningZone

if TYPE_CHECKING:
    from ..entities import PlacedItem


class CollisionKind(str, Enum):
    """What a placed item collided with.

    Attributes:
        FURNITURE: Another placed item.
        WALL: The room boundary.
        OPENING: A door, window or closet clearance zone.
    """

    FURNITURE = "furniture"
    WALL = "wall"
    OPENING = "opening"


@dataclass(frozen=True)
class CollisionRecord:
    """A single detected collision for a subject item.

    Attributes:
        kind: What was hit.
        other_item: The other item, for FURNITURE collisions.
        zone: The opening zone, for OPENING collisions.
    """

    kind: CollisionKind
    other_item: "PlacedItem | None" = None
    zone: OpeningZone | None = None

    def __post_init__(self) -> None:
        if self.kind == CollisionKind.FURNITURE and self.other_item is None:
            raise ValueError("Furniture collisions must reference the other item")
        if self.kind == CollisionKind.OPENING and self.zone is None:
            raise ValueError("Opening collisions must reference the zone")

    @property
    def description(self) -> str:
        """Short human-readable description of the collision."""
        if self.kind == CollisionKind.FURNITURE and self.other_item is not None:
            return f"furniture: {self.other_item.name} (#{self.other_item.id})"
        if self.kind == CollisionKind.OPENING and self.zone is not None:
            return f"opening: {self.zone.opening_type.value} on {self.zone.wall_name}"
        return self.kind.value
