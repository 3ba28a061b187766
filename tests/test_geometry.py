import pytest

from contourkit.geometry import Point2D, is_approximately_equal


def test_equal_values_are_approximately_equal():
    assert is_approximately_equal(1.5, 1.5) is True


def test_difference_below_default_epsilon():
    assert is_approximately_equal(1.0, 1.0 + 1e-7) is True


def test_difference_above_default_epsilon():
    assert is_approximately_equal(1.0, 1.0 + 1e-5) is False


def test_custom_epsilon_widens_tolerance():
    assert is_approximately_equal(1.0, 1.05, 0.1) is True
    assert is_approximately_equal(1.0, 1.2, 0.1) is False


def test_comparison_is_symmetric():
    assert is_approximately_equal(2.0, 2.0 + 1e-3) == is_approximately_equal(2.0 + 1e-3, 2.0)


def test_points_equal_within_tolerance():
    assert Point2D(1.0, 2.0) == Point2D(1.0 + 1e-8, 2.0 - 1e-8)


def test_points_differ_in_x():
    assert Point2D(1.0, 0.0) != Point2D(1.1, 0.0)


def test_points_differ_in_y():
    assert not (Point2D(0.0, 0.0) == Point2D(0.0, 1e-3))


def test_point_coordinates_are_kept():
    p = Point2D(0.5, -3.0)
    assert (p.x, p.y) == (0.5, -3.0)


def test_point_is_unhashable():
    with pytest.raises(TypeError):
        hash(Point2D(0.0, 0.0))


def test_point_compared_with_other_type():
    assert (Point2D(0.0, 0.0) == (0.0, 0.0)) is False