"""Segments that make up a contour: straight lines and circular arcs."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum

from contourkit.geometry import Point2D, is_approximately_equal


class SegmentType(Enum):
    """Kind of a segment."""

    LINE = "line"
    ARC = "arc"


class Segment(ABC):
    """An immutable piece of a contour with a start and an end point."""

    @property
    @abstractmethod
    def type(self) -> SegmentType:
        """The kind of this segment."""

    @property
    @abstractmethod
    def start(self) -> Point2D:
        """The point where the segment begins."""

    @property
    @abstractmethod
    def end(self) -> Point2D:
        """The point where the segment ends."""


class LineSegment(Segment):
    """A straight segment between two points."""

    __slots__ = ("_start", "_end")

    def __init__(self, start: Point2D, end: Point2D) -> None:
        self._start = start
        self._end = end

    @property
    def type(self) -> SegmentType:
        return SegmentType.LINE

    @property
    def start(self) -> Point2D:
        return self._start

    @property
    def end(self) -> Point2D:
        return self._end

    def __repr__(self) -> str:
        return f"LineSegment({self._start!r}, {self._end!r})"


class ArcSegment(Segment):
    """A circular arc from ``start`` to ``end`` around ``center``."""

    __slots__ = ("_start", "_end", "_center", "_radius", "_clockwise")

    def __init__(
        self,
        start: Point2D,
        end: Point2D,
        center: Point2D,
        radius: float,
        clockwise: bool,
    ) -> None:
        if radius <= 0:
            raise ValueError("Radius must be positive")
        dist_start = math.hypot(start.x - center.x, start.y - center.y)
        dist_end = math.hypot(end.x - center.x, end.y - center.y)
        if not (
            is_approximately_equal(dist_start, radius)
            and is_approximately_equal(dist_end, radius)
        ):
            raise ValueError("Start and end points must lie on the circle")
        self._start = start
        self._end = end
        self._center = center
        self._radius = radius
        self._clockwise = clockwise

    @property
    def type(self) -> SegmentType:
        return SegmentType.ARC

    @property
    def start(self) -> Point2D:
        return self._start

    @property
    def end(self) -> Point2D:
        return self._end

    @property
    def center(self) -> Point2D:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def clockwise(self) -> bool:
        return self._clockwise

    def __repr__(self) -> str:
        return (
            f"ArcSegment({self._start!r}, {self._end!r}, {self._center!r}, "
            f"{self._radius!r}, {self._clockwise!r})"
        )