"""Output formatters for room geometry and collision reports."""

from __future__ import annotations

import json
from typing import Any

from roomplanner.application.session import LayoutSession
from roomplanner.domain.entities import PlacedItem
from roomplanner.domain.services import RoomGeometry, aabb_of, corners_of
from roomplanner.domain.value_objects import CollisionKind, CollisionRecord, Point2D


def inches_to_feet_str(inches: float) -> str:
    """Format inches as feet and inches, e.g. 150 -> 12' 6"."""
    feet = int(inches // 12)
    rem = round(inches % 12)
    if rem == 12:
        feet, rem = feet + 1, 0
    return f"{feet}'" if rem == 0 else f"{feet}' {rem}\""


def _point(p: Point2D) -> str:
    return f"({p.x:.1f}, {p.y:.1f})"


class GeometryReportFormatter:
    """Formats the derived geometry of a room as a text report."""

    def format(self, geometry: RoomGeometry, room_name: str = "Room") -> str:
        """Format wall segments, bounds and opening zones."""
        if geometry.is_empty or geometry.room_bounds is None:
            return f"{room_name}: no walls defined."

        bounds = geometry.room_bounds
        lines = [
            f"ROOM GEOMETRY: {room_name}",
            "=" * 60,
            f"Shape: {geometry.shape.value if geometry.shape else 'unknown'}",
            (
                f'Bounds: {bounds.width:.1f}" x {bounds.height:.1f}" '
                f"({inches_to_feet_str(bounds.width)} x {inches_to_feet_str(bounds.height)})"
            ),
            "",
            f"{'Wall':<12} {'Start':>16} {'End':>16} {'Length':>9}",
            "-" * 60,
        ]
        for seg in geometry.wall_segments:
            lines.append(
                f"{seg.name:<12} {_point(seg.start):>16} {_point(seg.end):>16} "
                f'{seg.length:>8.1f}"'
            )

        lines.append("")
        if not geometry.opening_zones:
            lines.append("Openings: none")
            return "\n".join(lines)

        lines.append("Openings:")
        for zone in geometry.opening_zones:
            box = zone.bounding_box
            lines.append(
                f'  {zone.opening_type.value:<7} on {zone.wall_name:<8} '
                f'center {_point(zone.center)} width {zone.width:.1f}" '
                f'clearance box ({box.x:.1f}, {box.y:.1f}) {box.w:.1f} x {box.h:.1f}'
            )
        return "\n".join(lines)


class CollisionReportFormatter:
    """Formats per-item collision results."""

    def format(
        self,
        items: list[PlacedItem],
        report: dict[int, list[CollisionRecord]],
    ) -> str:
        """Format collisions for every placed item."""
        if not items:
            return "No furniture placed."

        lines = ["COLLISION REPORT", "=" * 60]
        for item in items:
            records = report.get(item.id, [])
            header = (
                f"#{item.id} {item.name} at {_point(item.position)} "
                f"rot {item.rotation_degrees:g}"
            )
            if not records:
                lines.append(f"  OK    {header}")
                continue
            lines.append(f"  WARN  {header}")
            for record in records:
                lines.append(f"          - {record.description}")

        colliding = sum(1 for records in report.values() if records)
        lines.append("-" * 60)
        if colliding:
            lines.append(f"{colliding} of {len(items)} item(s) have collisions")
        else:
            lines.append(f"All {len(items)} item(s) clear")
        return "\n".join(lines)


class RoomDiagramFormatter:
    """Draws an ASCII plan of the room with item bounding boxes.

    Each placed item is drawn as its axis-aligned bounding box filled with
    a letter; overlapping cells show '#'. Opening zones on the boundary are
    marked with D (door), W (window) or C (closet).
    """

    def __init__(self, chars_per_inch: float = 0.25) -> None:
        self.chars_per_inch = chars_per_inch

    def format(self, session: LayoutSession) -> str:
        geometry = session.geometry
        bounds = geometry.room_bounds
        if bounds is None:
            return "No room to display."

        cols = max(int(bounds.width * self.chars_per_inch), 2) + 1
        # Terminal cells are about twice as tall as wide
        rows = max(int(bounds.height * self.chars_per_inch / 2), 2) + 1
        grid = [[" " for _ in range(cols)] for _ in range(rows)]

        def to_cell(x: float, y: float) -> tuple[int, int]:
            col = int(round(x / bounds.width * (cols - 1))) if bounds.width else 0
            row = int(round(y / bounds.height * (rows - 1))) if bounds.height else 0
            return min(max(row, 0), rows - 1), min(max(col, 0), cols - 1)

        self._draw_box(grid, 0, 0, cols - 1, rows - 1)

        for zone in geometry.opening_zones:
            row, col = to_cell(zone.center.x, zone.center.y)
            grid[row][col] = zone.opening_type.value[0].upper()

        legend = []
        for i, item in enumerate(session.items):
            letter = chr(ord("a") + i % 26)
            legend.append(f"  {letter} = #{item.id} {item.name}")
            box = aabb_of(corners_of(item))
            top, left = to_cell(box.x, box.y)
            bottom, right = to_cell(box.right, box.bottom)
            for row in range(top, bottom + 1):
                for col in range(left, right + 1):
                    grid[row][col] = letter if grid[row][col] in " -|+" else "#"

        lines = [f"ROOM PLAN: {session.room.name}", ""]
        lines.extend("".join(row) for row in grid)
        if legend:
            lines.append("")
            lines.extend(legend)
        return "\n".join(lines)

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[y][x] = "+"


class JsonReportExporter:
    """Exports room geometry and collision results as JSON."""

    def export_geometry(self, geometry: RoomGeometry) -> dict[str, Any]:
        bounds = geometry.room_bounds
        return {
            "shape": geometry.shape.value if geometry.shape else None,
            "bounds": (
                {"width": bounds.width, "height": bounds.height} if bounds else None
            ),
            "wall_segments": [
                {
                    "name": seg.name,
                    "start": [seg.start.x, seg.start.y],
                    "end": [seg.end.x, seg.end.y],
                    "length": seg.length,
                }
                for seg in geometry.wall_segments
            ],
            "opening_zones": [
                {
                    "type": zone.opening_type.value,
                    "wall": zone.wall_name,
                    "center": [zone.center.x, zone.center.y],
                    "width": zone.width,
                    "depth": zone.depth,
                    "bounding_box": {
                        "x": zone.bounding_box.x,
                        "y": zone.bounding_box.y,
                        "w": zone.bounding_box.w,
                        "h": zone.bounding_box.h,
                    },
                }
                for zone in geometry.opening_zones
            ],
        }

    def export_collisions(
        self,
        items: list[PlacedItem],
        report: dict[int, list[CollisionRecord]],
    ) -> list[dict[str, Any]]:
        return [
            {
                "id": item.id,
                "name": item.name,
                "position": [item.position.x, item.position.y],
                "rotation": item.rotation_degrees,
                "collisions": [
                    self._collision(record) for record in report.get(item.id, [])
                ],
            }
            for item in items
        ]

    def _collision(self, record: CollisionRecord) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": record.kind.value}
        if record.kind == CollisionKind.FURNITURE and record.other_item is not None:
            data["item_id"] = record.other_item.id
            data["item_name"] = record.other_item.name
        elif record.kind == CollisionKind.OPENING and record.zone is not None:
            data["opening_type"] = record.zone.opening_type.value
            data["wall"] = record.zone.wall_name
        return data

    def export(
        self,
        session: LayoutSession,
        report: dict[int, list[CollisionRecord]] | None = None,
    ) -> str:
        """Export the session's geometry and collisions as a JSON string.

        Args:
            session: The layout to export.
            report: Collision report already computed for the session. Computed
                here when omitted.
        """
        if report is None:
            report = session.collision_report()
        data = {
            "room": session.room.name,
            "geometry": self.export_geometry(session.geometry),
            "items": self.export_collisions(session.items, report),
        }
        return json.dumps(data, indent=2)
