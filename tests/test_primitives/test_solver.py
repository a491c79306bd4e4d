import logging
import math

import pytest

from vecpath.solver import solve_linear, solve_quadratic, solve_quadratic_or_linear


def _residual(a, b, c, t):
    return abs(a * t * t + b * t + c)


def test_negative_discriminant_has_no_roots():
    assert solve_quadratic(1, 0, 1) == []


def test_zero_discriminant_has_one_root():
    roots = solve_quadratic(1, -2, 1)
    assert len(roots) == 1
    assert math.isclose(roots[0], 1.0)


def test_positive_discriminant_has_two_roots():
    roots = solve_quadratic(1, -3, 2)
    assert len(roots) == 2
    assert sorted(roots) == pytest.approx([1.0, 2.0])


@pytest.mark.parametrize(
    "a,b,c",
    [
        (1, 0, -4),
        (2, 5, -3),
        (-3, 1, 7),
        (0.5, -0.1, -2.25),
        (6, 3, -3),
    ],
)
def test_roots_satisfy_equation(a, b, c):
    roots = solve_quadratic(a, b, c)
    assert len(roots) == 2
    assert roots[0] != roots[1]
    for t in roots:
        assert _residual(a, b, c, t) < 1e-9


def test_zero_leading_coefficient_raises():
    with pytest.raises(ValueError, match="non-zero"):
        solve_quadratic(0, 1, 1)


def test_solve_linear():
    assert solve_linear(2, -1) == [0.5]
    assert solve_linear(0, 3) == []


def test_degenerate_falls_back_to_linear(caplog):
    caplog.set_level(logging.DEBUG, logger="vecpath.solver")
    assert solve_quadratic_or_linear(0.0, -6.0, 3.0) == [0.5]
    assert "Degenerate quadratic" in caplog.text


def test_near_zero_leading_coefficient_is_degenerate():
    assert solve_quadratic_or_linear(1e-15, 2.0, -4.0) == [2.0]


def test_non_degenerate_uses_quadratic():
    roots = solve_quadratic_or_linear(1, 0, -1)
    assert sorted(roots) == pytest.approx([-1.0, 1.0])


@pytest.mark.parametrize("k", [1e-14, 1.0, 1e14])
def test_degeneracy_is_relative_to_coefficient_scale(k):
    roots = solve_quadratic_or_linear(k, 0, -k)
    assert sorted(roots) == pytest.approx([-1.0, 1.0])


def test_all_zero_coefficients_have_no_roots():
    assert solve_quadratic_or_linear(0.0, 0.0, 0.0) == []
