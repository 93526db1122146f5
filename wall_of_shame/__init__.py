"""Wall of Shame voice skill engine."""

WALL_OF_SHAME_VERSION = "1.0.0"

__all__ = ["WALL_OF_SHAME_VERSION"]
