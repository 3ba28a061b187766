import pytest

from contourkit.geometry import Point2D
from contourkit.segments import ArcSegment, LineSegment, Segment, SegmentType


def test_line_segment_type():
    seg = LineSegment(Point2D(0, 0), Point2D(1, 0))
    assert seg.type is SegmentType.LINE


def test_line_segment_endpoints():
    seg = LineSegment(Point2D(0, 0), Point2D(1, 0))
    assert seg.start == Point2D(0, 0)
    assert seg.end == Point2D(1, 0)


def test_arc_segment_type_and_endpoints():
    arc = ArcSegment(Point2D(0, 1), Point2D(0, -1), Point2D(0, 0), 1.0, True)
    assert arc.type is SegmentType.ARC
    assert arc.start == Point2D(0, 1)
    assert arc.end == Point2D(0, -1)


def test_arc_keeps_geometry():
    arc = ArcSegment(Point2D(0, 1), Point2D(0, -1), Point2D(0, 0), 1.0, True)
    assert arc.center == Point2D(0, 0)
    assert arc.radius == 1.0
    assert arc.clockwise is True


@pytest.mark.parametrize("radius", [0.0, -1.0])
def test_arc_rejects_non_positive_radius(radius):
    with pytest.raises(ValueError, match="Radius must be positive"):
        ArcSegment(Point2D(0, 1), Point2D(0, -1), Point2D(0, 0), radius, False)


def test_arc_rejects_start_off_circle():
    with pytest.raises(ValueError, match="must lie on the circle"):
        ArcSegment(Point2D(0, 2), Point2D(0, -1), Point2D(0, 0), 1.0, True)


def test_arc_rejects_end_off_circle():
    with pytest.raises(ValueError, match="must lie on the circle"):
        ArcSegment(Point2D(0, 1), Point2D(0.5, 0), Point2D(0, 0), 1.0, True)


def test_arc_accepts_points_within_tolerance():
    arc = ArcSegment(Point2D(1 + 1e-8, 0), Point2D(-1, 0), Point2D(0, 0), 1.0, False)
    assert arc.clockwise is False


def test_segment_is_abstract():
    with pytest.raises(TypeError):
        Segment()