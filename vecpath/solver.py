"""
Closed-form real root finding for the low-degree polynomials that appear
when extremising the projection of a Bezier segment.
"""

import logging
import math
from typing import List

from .constants import DEGENERATE_EPS

logger = logging.getLogger(__name__)


def solve_quadratic(a: float, b: float, c: float) -> List[float]:
    """
    Real roots of ``a*t**2 + b*t + c = 0``.

    Args:
        a: Quadratic coefficient, must be non-zero
        b: Linear coefficient
        c: Constant coefficient

    Returns:
        No roots for a negative discriminant, the double root for a zero
        discriminant, otherwise both roots (in no particular order)
    """
    if a == 0:
        raise ValueError(
            "solve_quadratic requires a non-zero quadratic coefficient; "
            "use solve_linear for the degenerate case"
        )
    d = b * b - 4 * a * c
    if d < 0:
        return []
    if d == 0:
        return [-b / (2 * a)]
    sqrt_d = math.sqrt(d)
    return [(-b + sqrt_d) / (2 * a), (-b - sqrt_d) / (2 * a)]


def solve_linear(b: float, c: float) -> List[float]:
    """Root of ``b*t + c = 0``; empty when ``b`` is zero."""
    if b == 0:
        return []
    return [-c / b]


def solve_quadratic_or_linear(
    a: float, b: float, c: float, eps: float = DEGENERATE_EPS
) -> List[float]:
    """
    Like ``solve_quadratic`` but falls back to ``solve_linear`` when ``a`` is
    negligible.

    ``a`` counts as negligible when ``|a| <= eps * max(|a|, |b|, |c|)``, so
    scaling all three coefficients together does not change the outcome.
    """
    if abs(a) <= eps * max(abs(a), abs(b), abs(c)):
        logger.debug(f"Degenerate quadratic (a={a:.3e}), solving {b}*t + {c} = 0")
        return solve_linear(b, c)
    return solve_quadratic(a, b, c)
