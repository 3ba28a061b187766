"""A contour: an ordered chain of segments."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from contourkit.geometry import Point2D
from contourkit.segments import LineSegment, Segment


class Contour:
    """An ordered sequence of segments with a cached connectivity check."""

    def __init__(self, segments: Iterable[Segment] | None = None) -> None:
        self._segments: list[Segment] = []
        self._valid: bool | None = None
        for segment in segments or ():
            self.add_segment(segment)

    @staticmethod
    def _check_segment(segment: object) -> None:
        if segment is None:
            raise ValueError("Segment cannot be null")
        if not isinstance(segment, Segment):
            raise TypeError(f"Expected a Segment, got {type(segment).__name__}")

    def add_segment(self, segment: Segment) -> None:
        """Append a segment to the end of the contour."""
        self._check_segment(segment)
        self._segments.append(segment)
        self._valid = None

    def insert_segment(self, index: int, segment: Segment) -> None:
        """Insert a segment before position ``index`` (0 to ``len(self)``)."""
        self._check_segment(segment)
        if not 0 <= index <= len(self._segments):
            raise IndexError("Index out of range")
        self._segments.insert(index, segment)
        self._valid = None

    def remove_segment(self, index: int) -> None:
        """Remove the segment at position ``index``."""
        if not 0 <= index < len(self._segments):
            raise IndexError("Index out of range")
        del self._segments[index]
        self._valid = None

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def copy(self) -> Contour:
        """Return an independent contour holding the same segments."""
        duplicate = Contour()
        duplicate._segments = list(self._segments)
        duplicate._valid = self._valid
        return duplicate

    __copy__ = copy

    def is_valid(self) -> bool:
        """Return True if each segment ends where the next one starts."""
        if self._valid is None:
            self._valid = all(
                current.end == following.start
                for current, following in zip(self._segments, self._segments[1:])
            )
        return self._valid

    @classmethod
    def from_polyline(cls, points: Sequence[Point2D]) -> Contour:
        """Build a contour of line segments joining consecutive points."""
        if len(points) < 2:
            raise ValueError("Polyline requires at least 2 points")
        return cls(LineSegment(a, b) for a, b in zip(points, points[1:]))

    def __repr__(self) -> str:
        return f"Contour({self._segments!r})"