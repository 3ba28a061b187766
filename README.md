# contourkit

contourkit models a 2D contour as an ordered chain of segments. A segment is
either a straight line or a circular arc. A contour is valid when every
segment ends where the next one begins. Endpoints are compared with a
tolerance of `1e-6`. An empty contour and a single-segment contour are
always valid.

## Installation

```
pip install contourkit
```

## Usage

```python
from contourkit.geometry import Point2D
from contourkit.segments import LineSegment, ArcSegment, SegmentType
from contourkit.contour import Contour

square = Contour()
square.add_segment(LineSegment(Point2D(0, 0), Point2D(1, 0)))
square.add_segment(LineSegment(Point2D(1, 0), Point2D(1, 1)))
square.add_segment(LineSegment(Point2D(1, 1), Point2D(0, 1)))
square.add_segment(LineSegment(Point2D(0, 1), Point2D(0, 0)))
assert square.is_valid()

# An arc's start and end points must lie on its circle.
# A radius that is not positive, or an off-circle point, raises ValueError.
semicircle = Contour([
    ArcSegment(Point2D(0, 1), Point2D(0, -1), Point2D(0, 0), 1.0, True)
])
assert semicircle.is_valid()

path = Contour.from_polyline([Point2D(0, 0), Point2D(1, 0), Point2D(1, 1)])
assert len(path) == 2
assert all(seg.type is SegmentType.LINE for seg in path)
```

### Segments

Every segment has read-only `type`, `start` and `end` properties.
`ArcSegment` also exposes `center`, `radius` and `clockwise`. Segments are
not modified after they are built.

### Editing a contour

- `Contour(segments)` takes an optional iterable of segments.
- `add_segment(segment)` appends a segment.
- `insert_segment(index, segment)` inserts before `index`; it raises
  `IndexError` unless `0 <= index <= len(contour)`.
- `remove_segment(index)` raises `IndexError` unless `0 <= index < len(contour)`.
- Passing `None` as a segment raises `ValueError`; passing anything else that
  is not a `Segment` raises `TypeError`.
- `Contour.from_polyline(points)` joins consecutive points with line segments
  and raises `ValueError` for fewer than two points.
- `copy()` returns a contour with its own segment list, so editing one does
  not change the other.

The result of `is_valid()` is cached and recomputed after any edit.

### Floating-point helpers

`contourkit.geometry.is_approximately_equal(a, b, epsilon=1e-6)` returns
`True` when the two floats differ by strictly less than `epsilon`.
`Point2D` equality compares each coordinate this way. Because that
equality is approximate, `Point2D` objects are not hashable.

## Command line

```
contourkit
```

This builds a fixed set of five sample contours: a closed square, an open
triangle and an open semicircle, which are valid, and two contours with gaps,
which are not. It sorts them into valid and invalid ones on two worker
threads and prints how many fall in each group. It then reports whether the
two groups overlap and whether together they include every contour. The
command takes no options. It does not read contours from files or other
input.

## Scope

contourkit only checks whether segments connect. It does not compute
lengths, areas or intersections, and it does not check whether a contour is
closed.