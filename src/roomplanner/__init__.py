"""Room layout planning with furniture collision warnings."""

__version__ = "0.1.0"
