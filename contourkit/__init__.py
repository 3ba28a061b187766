"""2D contours made of line and arc segments, with connectivity checks."""

__version__ = "0.1.0"
__all__ = ["geometry", "segments", "contour", "cli"]