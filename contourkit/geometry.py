"""Basic 2D geometry primitives with tolerance-based comparison."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EPSILON = 1e-6


def is_approximately_equal(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by strictly less than ``epsilon``."""
    return abs(a - b) < epsilon


@dataclass(frozen=True, eq=False)
class Point2D:
    """A point in the plane; equality is approximate, coordinate by coordinate."""

    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return is_approximately_equal(self.x, other.x) and is_approximately_equal(
            self.y, other.y
        )

    # Approximate equality is not transitive, so points cannot be hashed consistently.
    __hash__ = None  # type: ignore[assignment]