"""Infrastructure layer - output formatting."""

from .formatters import (
    CollisionReportFormatter,
    GeometryReportFormatter,
    JsonReportExporter,
    RoomDiagramFormatter,
    inches_to_feet_str,
)

__all__ = [
    "CollisionReportFormatter",
    "GeometryReportFormatter",
    "JsonReportExporter",
    "RoomDiagramFormatter",
    "inches_to_feet_str",
]
