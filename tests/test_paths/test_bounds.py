import math

import numpy as np
import pytest

from vecpath.bounds import Bounds, combine_bounds, projection
from vecpath.segment import straight
from vecpath.vector_types import Vector


def _point_bounds(p):
    p = Vector(*p)
    return Bounds(lambda direction: projection(p, direction))


def test_empty_is_negative_infinity():
    assert Bounds.empty()((1, 0)) == float("-inf")
    assert Bounds.empty()((0, -3)) == float("-inf")


def test_empty_is_identity_for_combine():
    b = _point_bounds((2, 3))
    for direction in [(1, 0), (0, 1), (-1, -1)]:
        assert (Bounds.empty() | b)(direction) == b(direction)
        assert b.combine(Bounds.empty())(direction) == b(direction)


def test_combine_is_pointwise_max():
    a = _point_bounds((2, 0))
    b = _point_bounds((0, 5))
    both = a | b
    assert math.isclose(both((1, 0)), 2.0)
    assert math.isclose(both((0, 1)), 5.0)
    assert math.isclose(both((-1, 0)), 0.0, abs_tol=1e-12)


def test_combine_rejects_non_bounds():
    with pytest.raises(TypeError):
        _point_bounds((1, 1)) | 3


def test_combine_method_raises_for_non_bounds():
    with pytest.raises(TypeError, match="Cannot combine Bounds with int"):
        _point_bounds((1, 1)).combine(3)
    with pytest.raises(TypeError, match="Cannot combine"):
        combine_bounds([_point_bounds((1, 1)), 3])


def test_combine_bounds_fold():
    points = [(1, 0), (0, 2), (-3, 0)]
    combined = combine_bounds(_point_bounds(p) for p in points)
    assert math.isclose(combined((1, 0)), 1.0)
    assert math.isclose(combined((0, 1)), 2.0)
    assert math.isclose(combined((-1, 0)), 3.0)
    assert combine_bounds([])((1, 0)) == float("-inf")


def test_rebase_shifts_shape():
    b = straight((3, 4)).bounds().rebase((10, -1))
    assert math.isclose(b((1, 0)), 13.0)
    assert math.isclose(b((0, 1)), 3.0)
    assert math.isclose(b((-1, 0)), -10.0)


def test_rebase_along_diagonal_is_normalised():
    b = _point_bounds((0, 0)).rebase((1, 1))
    assert math.isclose(b((1, 1)), math.sqrt(2))


def test_extent():
    b = straight((3, 4)).bounds()
    low, high = b.extent((1, 0))
    assert math.isclose(low, 0.0, abs_tol=1e-12)
    assert math.isclose(high, 3.0)


def test_bounding_box():
    b = straight((3, -4)).bounds().rebase((1, 1))
    lows, highs = b.bounding_box(2)
    assert lows == Vector(1, -3)
    assert highs == Vector(4, 1)


def test_zero_direction_is_nan():
    with np.errstate(divide="ignore", invalid="ignore"):
        assert math.isnan(_point_bounds((1, 2))((0, 0)))
