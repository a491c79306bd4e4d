"""
Support functions ("bounds") of shapes.

A ``Bounds`` maps a direction to the largest extent of a shape projected onto
that direction, measured in units of the direction's length. Bounds combine
by pointwise maximum, so the bounds of a union of shapes is the combination
of their individual bounds.

Querying with a zero-length direction is the caller's responsibility: the
division by ``|direction|`` then produces NaN.
"""

from functools import reduce
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from .vector_types import Vector, VectorLike, as_vector


class Bounds:
    def __init__(self, fn: Callable[[Vector], float]):
        self._fn = fn

    @classmethod
    def empty(cls) -> "Bounds":
        """The identity for ``combine``: ``-inf`` in every direction."""
        return cls(lambda direction: float("-inf"))

    def evaluate(self, direction: VectorLike) -> float:
        return self._fn(as_vector(direction))

    __call__ = evaluate

    def combine(self, other: "Bounds") -> "Bounds":
        if not isinstance(other, Bounds):
            raise TypeError(f"Cannot combine Bounds with {type(other).__name__}")
        f, g = self._fn, other._fn
        return Bounds(lambda direction: max(f(direction), g(direction)))

    def __or__(self, other: "Bounds") -> "Bounds":
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.combine(other)

    def rebase(self, offset: VectorLike) -> "Bounds":
        """Bounds of the same shape shifted by ``offset``."""
        offset = as_vector(offset)
        f = self._fn
        return Bounds(lambda direction: f(direction) + projection(offset, direction))

    def extent(self, direction: VectorLike) -> Tuple[float, float]:
        """The interval ``(low, high)`` the shape covers along ``direction``."""
        direction = as_vector(direction)
        return -self.evaluate(-direction), self.evaluate(direction)

    def bounding_box(self, dim: int) -> Tuple[Vector, Vector]:
        """
        Axis-aligned bounding box from the support along each unit axis.

        Args:
            dim: Dimension of the ambient space

        Returns:
            (mins, maxs) corner vectors
        """
        lows, highs = [], []
        for axis in range(dim):
            low, high = self.extent(Vector.unit(axis, dim))
            lows.append(low)
            highs.append(high)
        return Vector(*lows), Vector(*highs)


def combine_bounds(bounds: Iterable[Bounds], initial: Optional[Bounds] = None) -> Bounds:
    """Fold ``bounds`` together with ``Bounds.combine``."""
    return reduce(Bounds.combine, bounds, initial if initial is not None else Bounds.empty())


def projection(point: Vector, direction: Vector) -> float:
    """Signed length of ``point`` projected onto ``direction`` (NaN for a zero direction)."""
    direction = np.asarray(direction, dtype=float)
    return float(np.dot(np.asarray(point), direction) / np.linalg.norm(direction))
