"""Layout session: the mutable state of one room layout.

The session owns the room, the furniture palette, the placed items and the
current selection. Geometry is derived lazily from the room and cached
against a snapshot of the walls (names, lengths and openings). Any change
to that snapshot, through the session or by editing the walls directly,
rebuilds the geometry on the next read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable

from roomplanner.domain.entities import (
    FurnitureDefinition,
    Opening,
    PlacedItem,
    Room,
    Wall,
)
from roomplanner.domain.services import (
    FurnitureCollisionService,
    OpeningZoneService,
    RoomGeometry,
    RoomGeometryService,
    corners_of,
    point_in_polygon,
)
from roomplanner.domain.value_objects import CollisionRecord, Point2D

from .settings import PlannerSettings

logger = logging.getLogger(__name__)

__all__ = [
    "LayoutSession",
    "LayoutSessionError",
    "PlacementRefused",
]


class LayoutSessionError(Exception):
    """Raised when a session operation references something that does not exist."""


@dataclass(frozen=True)
class PlacementRefused:
    """Returned instead of an item when a palette entry is fully placed.

    Attributes:
        definition: The palette entry that was requested.
        placed: How many of it are already placed.
    """

    definition: FurnitureDefinition
    placed: int

    @property
    def message(self) -> str:
        return (
            f"All {self.definition.quantity} {self.definition.name}(s) already placed"
        )


def _walls_key(walls: Iterable[Wall]) -> tuple:
    """Value snapshot of everything geometry is derived from."""
    return tuple(
        (
            wall.name,
            wall.length,
            tuple((op.opening_type, op.start, op.width) for op in wall.openings),
        )
        for wall in walls
    )


class LayoutSession:
    """Explicit context for a single room layout.

    Attributes:
        room: The room being furnished.
        palette: Furniture definitions available for placement.
        items: Placed items, in placement order (last is topmost).
        settings: Grid, rotation and clearance settings.
        selected_id: Id of the selected item, if any.
    """

    def __init__(
        self,
        room: Room | None = None,
        palette: Iterable[FurnitureDefinition] | None = None,
        settings: PlannerSettings | None = None,
        collision_service: FurnitureCollisionService | None = None,
    ) -> None:
        self.room = room or Room(name="My Room")
        self.palette: list[FurnitureDefinition] = list(palette or [])
        self.items: list[PlacedItem] = []
        self.settings = settings or PlannerSettings()
        self.selected_id: int | None = None
        self.collision_service = collision_service or FurnitureCollisionService()
        self.geometry_service = RoomGeometryService(
            OpeningZoneService(self.settings.opening_clearance)
        )
        self._next_id = 1
        self._wall_version = 0
        self._geometry: RoomGeometry | None = None
        self._geometry_key: tuple | None = None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def wall_version(self) -> int:
        """Counter incremented by every wall edit the session sees."""
        return self._wall_version

    @property
    def geometry(self) -> RoomGeometry:
        """Room geometry for the current walls, rebuilt after any wall edit."""
        key = _walls_key(self.room.walls)
        if self._geometry is None or key != self._geometry_key:
            self._geometry = self.geometry_service.build(self.room)
            self._geometry_key = key
        return self._geometry

    def _walls_changed(self) -> None:
        self._wall_version += 1

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    def set_walls(self, walls: Iterable[Wall]) -> None:
        """Replace all walls of the room."""
        self.room.walls = list(walls)
        self._walls_changed()

    def add_wall(self, wall: Wall) -> None:
        """Append a wall to the room."""
        self.room.walls.append(wall)
        self._walls_changed()

    def update_wall(
        self,
        index: int,
        *,
        name: str | None = None,
        length: float | None = None,
        openings: list[Opening] | None = None,
    ) -> Wall:
        """Change a wall's name, length or openings.

        Args:
            index: Position of the wall in the room.
            name: New name, if changing.
            length: New length, if changing.
            openings: New openings, if changing.

        Returns:
            The updated wall.

        Raises:
            LayoutSessionError: If no wall exists at index.
        """
        current = self._wall_at(index)
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if length is not None:
            changes["length"] = length
        if openings is not None:
            changes["openings"] = list(openings)
        updated = replace(current, **changes)
        self.room.walls[index] = updated
        self._walls_changed()
        return updated

    def remove_wall(self, index: int) -> Wall:
        """Remove and return the wall at index."""
        wall = self._wall_at(index)
        del self.room.walls[index]
        self._walls_changed()
        return wall

    def _wall_at(self, index: int) -> Wall:
        if not 0 <= index < len(self.room.walls):
            raise LayoutSessionError(f"No wall at index {index}")
        return self.room.walls[index]

    # ------------------------------------------------------------------
    # Palette
    # ------------------------------------------------------------------

    def set_palette(self, definitions: Iterable[FurnitureDefinition]) -> None:
        """Replace the palette. Placed items are removed."""
        self.palette = list(definitions)
        self.items = []
        self.selected_id = None

    def add_definition(self, definition: FurnitureDefinition) -> None:
        """Add an entry to the palette."""
        self.palette.append(definition)

    def remove_definition(self, index: int) -> FurnitureDefinition:
        """Remove a palette entry and every item placed from it."""
        definition = self._definition_at(index)
        self.items = [item for item in self.items if item.definition is not definition]
        if self.selected_id is not None and self.get_item_or_none(self.selected_id) is None:
            self.selected_id = None
        del self.palette[index]
        return definition

    def placed_count(self, definition: FurnitureDefinition) -> int:
        """Number of items placed from a palette entry."""
        return sum(1 for item in self.items if item.definition is definition)

    def _definition_at(self, index: int) -> FurnitureDefinition:
        if not 0 <= index < len(self.palette):
            raise LayoutSessionError(f"No palette entry at index {index}")
        return self.palette[index]

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def place_from_palette(
        self,
        index: int,
        position: Point2D | None = None,
        rotation_degrees: float = 0.0,
    ) -> PlacedItem | PlacementRefused:
        """Place a new item from a palette entry.

        Without a position the item goes to the center of the room, or to
        the default position when the room has no bounds. The position is
        snapped to the grid and the new item becomes selected.

        Args:
            index: Palette index to place from.
            position: Optional center for the new item.
            rotation_degrees: Initial rotation.

        Returns:
            The new item, or PlacementRefused when the entry's quantity is
            already placed.
        """
        definition = self._definition_at(index)
        placed = self.placed_count(definition)
        if placed >= definition.quantity:
            logger.debug("Refusing to place %s: %d already placed", definition.name, placed)
            return PlacementRefused(definition=definition, placed=placed)

        if position is None:
            position = self._default_position()
        item = PlacedItem.from_definition(
            item_id=self._allocate_id(),
            definition=definition,
            position=self._snapped(position),
            rotation_degrees=rotation_degrees,
        )
        self.items.append(item)
        self.selected_id = item.id
        logger.debug("Placed %s as item %d at %s", item.name, item.id, item.position)
        return item

    def _default_position(self) -> Point2D:
        bounds = self.geometry.room_bounds
        if bounds is None:
            x, y = self.settings.default_position
            return Point2D(x, y)
        return bounds.center

    def _allocate_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def _snapped(self, position: Point2D) -> Point2D:
        return Point2D(self.settings.snap(position.x), self.settings.snap(position.y))

    # ------------------------------------------------------------------
    # Item manipulation
    # ------------------------------------------------------------------

    def get_item(self, item_id: int) -> PlacedItem:
        """Look up a placed item.

        Raises:
            LayoutSessionError: If no item has this id.
        """
        item = self.get_item_or_none(item_id)
        if item is None:
            raise LayoutSessionError(f"No placed item with id {item_id}")
        return item

    def get_item_or_none(self, item_id: int) -> PlacedItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def move_item(self, item_id: int, position: Point2D) -> PlacedItem:
        """Move an item's center, snapping to the grid."""
        item = self.get_item(item_id)
        item.move_to(self._snapped(position))
        return item

    def nudge_item(self, item_id: int, dx: float, dy: float) -> PlacedItem:
        """Move an item by an offset, then snap to the grid."""
        item = self.get_item(item_id)
        item.move_to(self._snapped(item.position.translated(dx, dy)))
        return item

    def rotate_item(self, item_id: int, clockwise: bool = True) -> PlacedItem:
        """Rotate an item by one rotation step."""
        item = self.get_item(item_id)
        step = self.settings.rotation_step
        item.rotate_by(step if clockwise else -step)
        return item

    def remove_item(self, item_id: int) -> PlacedItem:
        """Remove a placed item and clear the selection."""
        item = self.get_item(item_id)
        self.items.remove(item)
        self.selected_id = None
        return item

    # ------------------------------------------------------------------
    # Selection and hit testing
    # ------------------------------------------------------------------

    def select(self, item_id: int | None) -> None:
        """Select an item, or clear the selection with None."""
        if item_id is not None:
            self.get_item(item_id)
        self.selected_id = item_id

    @property
    def selected_item(self) -> PlacedItem | None:
        if self.selected_id is None:
            return None
        return self.get_item_or_none(self.selected_id)

    def hit_test(self, point: Point2D) -> PlacedItem | None:
        """Topmost item whose footprint contains a point."""
        for item in reversed(self.items):
            if point_in_polygon(point, corners_of(item)):
                return item
        return None

    # ------------------------------------------------------------------
    # Collisions
    # ------------------------------------------------------------------

    def collisions_for(self, item_id: int) -> list[CollisionRecord]:
        """Collisions of one item against the current geometry."""
        item = self.get_item(item_id)
        geometry = self.geometry
        return self.collision_service.check_collisions(
            item, self.items, geometry.room_bounds, geometry.opening_zones
        )

    def collision_report(self) -> dict[int, list[CollisionRecord]]:
        """Collisions of every placed item, keyed by item id."""
        geometry = self.geometry
        return self.collision_service.check_all(
            self.items, geometry.room_bounds, geometry.opening_zones
        )
