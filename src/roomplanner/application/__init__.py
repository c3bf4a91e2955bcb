"""Application layer - layout session and configuration."""

from .session import LayoutSession, LayoutSessionError, PlacementRefused
from .settings import PlannerSettings

__all__ = [
    "LayoutSession",
    "LayoutSessionError",
    "PlacementRefused",
    "PlannerSettings",
]
