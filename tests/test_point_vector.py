from math import pi

import numpy as np
import pytest

from src.bezier_curve.errors import DimensionMismatch, ZeroDimension
from src.bezier_curve.point import PointVector, distance, interpolate, turning_angle


def test_component_accessors():
    point = PointVector([9, 8, 7])
    assert point.x == 9
    assert point.y == 8
    assert point.z == 7
    assert point.dimension == 3
    assert point.as_tuple() == (9.0, 8.0, 7.0)
    assert list(point) == [9.0, 8.0, 7.0]
    np.testing.assert_array_equal(point.to_array(), np.array([9.0, 8.0, 7.0]))


def test_missing_component_raises_index_error():
    with pytest.raises(IndexError):
        PointVector([1, 2]).z


def test_empty_point_is_rejected():
    with pytest.raises(ZeroDimension):
        PointVector([])


def test_points_are_immutable_values():
    a = PointVector([1, 2])
    assert a == PointVector((1.0, 2.0))
    assert hash(a) == hash(PointVector([1, 2]))
    with pytest.raises(AttributeError):
        a.components = (3.0, 4.0)


def test_interpolate_and_extrapolate():
    a, b = PointVector([1, 1, 1]), PointVector([5, 5, 5])
    assert interpolate(a, b, 0.5).as_tuple() == (3, 3, 3)
    assert interpolate(a, b, -0.5).as_tuple() == (-1, -1, -1)
    assert a.interpolate(b, 1.5).as_tuple() == (7, 7, 7)


def test_interpolate_hits_endpoints_exactly():
    a, b = PointVector([0.1, -3.7]), PointVector([0.3, 12.9])
    assert interpolate(a, b, 0.0) == a
    assert interpolate(a, b, 1.0) == b


def test_distance_in_several_dimensions():
    assert distance([3], [6]) == 3
    for n in range(2, 5):
        assert distance([3] * n, [6] * n) == pytest.approx((3 ** 2 * n) ** 0.5)
    assert PointVector([1, 1]).distance_to([-1, -1]) == pytest.approx(8 ** 0.5)


def test_distance_is_symmetric_and_zero_at_equal_points():
    a, b = PointVector([2, -1, 4]), PointVector([-3, 5, 0.5])
    assert distance(a, a) == 0
    assert distance(a, b) == distance(b, a)


@pytest.mark.parametrize("func", [distance, lambda a, b: interpolate(a, b, 0.5)])
def test_binary_operations_require_equal_dimensions(func):
    with pytest.raises(DimensionMismatch):
        func([0, 0], [0, 0, 0])


def test_turning_angles():
    eps = 1e-12
    assert turning_angle([1, 0], [0, 0], [0, 1]) == pytest.approx(pi / 2, abs=eps)
    assert turning_angle([1, 1], [0, 0], [1, 1]) == pytest.approx(pi, abs=eps)
    assert turning_angle([1, 1], [0, 0], [-1, -1]) == pytest.approx(0, abs=eps)
    assert PointVector([-1, 0]).turning_angle([0, 0], [1, 1]) == pytest.approx(pi / 4, abs=eps)


def test_turning_angle_in_higher_dimensions():
    angle = turning_angle([0, 0, 0, 1], [0, 0, 0, 0], [0, 0, 2, 0])
    assert angle == pytest.approx(pi / 2)


def test_turning_angle_with_zero_length_edge_is_zero():
    assert turning_angle([1, 1], [1, 1], [3, 0]) == 0.0
    assert turning_angle([0, 0], [1, 1], [1, 1]) == 0.0


def test_turning_angle_dimension_mismatch():
    with pytest.raises(DimensionMismatch):
        turning_angle([0, 0], [1, 0], [2, 0, 0])
