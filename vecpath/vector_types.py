import math
from typing import Sequence, Union

import numpy as np

from .constants import PRECISION


class Vector(np.ndarray):
    """
    An element of a real vector space of any dimension.

    Used both for relative offsets (inside segments) and for absolute points
    (path base points). Equality is tolerant, see ``PRECISION``.
    """

    def __new__(cls, *components: float) -> "Vector":
        if len(components) == 1 and np.ndim(components[0]) == 1:
            components = tuple(components[0])
        return np.asarray(components, dtype=float).view(cls)

    def __eq__(self, other: object) -> bool:
        try:
            other_arr = np.asarray(other, dtype=float)
        except (TypeError, ValueError):
            return NotImplemented
        if other_arr.shape != self.shape:
            return False
        return bool(np.allclose(np.asarray(self), other_arr, rtol=0.0, atol=PRECISION))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return "Vector({})".format(", ".join(repr(float(c)) for c in self))

    __str__ = __repr__

    @classmethod
    def zero(cls, dim: int) -> "Vector":
        return cls(*([0.0] * dim))

    @classmethod
    def unit(cls, axis: int, dim: int) -> "Vector":
        """The unit vector along ``axis`` in a ``dim``-dimensional space."""
        components = [0.0] * dim
        components[axis] = 1.0
        return cls(*components)

    @property
    def dim(self) -> int:
        return int(self.shape[0])

    def dot(self, other: "VectorLike") -> float:
        return float(np.dot(np.asarray(self), np.asarray(other, dtype=float)))

    def magnitude(self) -> float:
        return float(np.linalg.norm(np.asarray(self)))

    def normalize(self) -> "Vector":
        return self / self.magnitude()

    def is_zero(self) -> bool:
        return math.isclose(self.magnitude(), 0.0, abs_tol=PRECISION)

    @property
    def x(self):
        return float(self[0])

    @property
    def y(self):
        return float(self[1])

    @property
    def z(self):
        return float(self[2])

    def to_json(self):
        return [float(c) for c in self]

    @staticmethod
    def from_json(json_data):
        return Vector(*json_data)


VectorLike = Union[Sequence[float], Vector]


def as_vector(v: VectorLike) -> Vector:
    """Coerce a tuple, list or array into a ``Vector``."""
    if isinstance(v, Vector):
        return v
    arr = np.asarray(v, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {arr.shape}")
    return arr.view(Vector)


def check_same_dim(*vectors: Vector) -> int:
    """Return the shared dimension of ``vectors``, raising if they differ."""
    dims = {v.dim for v in vectors}
    if len(dims) != 1:
        raise ValueError(f"Vectors must share one dimension, got {sorted(dims)}")
    return dims.pop()
