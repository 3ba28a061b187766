"""Command that sorts a set of sample contours into valid and invalid ones."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from contourkit.contour import Contour
from contourkit.geometry import Point2D
from contourkit.segments import ArcSegment, LineSegment


def find_valid_contours(contours: Sequence[Contour]) -> list[Contour]:
    """Return the contours whose segments connect end to start."""
    return [contour for contour in contours if contour.is_valid()]


def find_invalid_contours(contours: Sequence[Contour]) -> list[Contour]:
    """Return the contours with a gap between consecutive segments."""
    return [contour for contour in contours if not contour.is_valid()]


def _line(x1: float, y1: float, x2: float, y2: float) -> LineSegment:
    return LineSegment(Point2D(x1, y1), Point2D(x2, y2))


def sample_contours() -> list[Contour]:
    """Return the demonstration set: three valid contours, then two invalid ones."""
    return [
        # closed square
        Contour([_line(0, 0, 1, 0), _line(1, 0, 1, 1), _line(1, 1, 0, 1), _line(0, 1, 0, 0)]),
        # open triangle
        Contour([_line(0, 0, 1, 0), _line(1, 0, 0.5, 1)]),
        # open semicircle
        Contour([ArcSegment(Point2D(0, 1), Point2D(0, -1), Point2D(0, 0), 1.0, True)]),
        # disconnected segments
        Contour([_line(0, 0, 1, 0), _line(2, 0, 2, 1)]),
        # small gap between segments
        Contour([_line(0, 0, 1, 0), _line(1.1, 0, 1.1, 1)]),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Classify the sample contours concurrently and print a summary."""
    parser = argparse.ArgumentParser(
        description="Check the sample contours for connectivity."
    )
    parser.parse_args(argv)

    contours = sample_contours()
    with ThreadPoolExecutor(max_workers=2) as pool:
        valid_future = pool.submit(find_valid_contours, contours)
        invalid_future = pool.submit(find_invalid_contours, contours)
        valid = valid_future.result()
        invalid = invalid_future.result()

    print(f"Valid contours: {len(valid)}")
    print(f"Invalid contours: {len(invalid)}")

    identities = [id(contour) for contour in valid + invalid]
    is_unique = len(set(identities)) == len(identities)
    is_complete = len(identities) == len(contours)

    print(f"Results are unique: {'Yes' if is_unique else 'No'}")
    print(f"All contours accounted for: {'Yes' if is_complete else 'No'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())