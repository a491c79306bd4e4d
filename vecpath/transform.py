"""
Affine maps and the Transformable base class.

Only what the segment/path model needs: a linear matrix plus a translation,
composition, inversion and a handful of factories.
"""

import math
from abc import ABC, abstractmethod
from typing import Sequence, Union

import numpy as np

from .vector_types import Vector, VectorLike, as_vector


class Affine:
    """An affine map ``v -> matrix @ v + translation``."""

    def __init__(self, matrix, translation: VectorLike):
        matrix = np.array(matrix, dtype=float)
        translation = as_vector(translation)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Affine matrix must be square, got shape {matrix.shape}")
        if matrix.shape[0] != translation.dim:
            raise ValueError(
                f"Matrix of size {matrix.shape[0]} does not match "
                f"translation of dimension {translation.dim}"
            )
        matrix.setflags(write=False)
        self._matrix = matrix
        self._translation = Vector(*translation)

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def translation(self) -> Vector:
        return self._translation

    @property
    def dim(self) -> int:
        return self._translation.dim

    # ========== Factories ==========

    @classmethod
    def identity(cls, dim: int = 2) -> "Affine":
        return cls(np.eye(dim), Vector.zero(dim))

    @classmethod
    def translation_by(cls, offset: VectorLike) -> "Affine":
        """Pure translation by ``offset``."""
        offset = as_vector(offset)
        return cls(np.eye(offset.dim), offset)

    @classmethod
    def scaling(cls, k: Union[float, Sequence[float]], dim: int = 2) -> "Affine":
        """
        Scaling about the origin.

        Args:
            k: Uniform factor, or one factor per axis (``dim`` is then ignored)
            dim: Dimension of the space for a uniform factor

        Returns:
            The scaling map
        """
        if np.ndim(k) == 0:
            factors = [float(k)] * dim
        else:
            factors = [float(f) for f in k]
        return cls(np.diag(factors), Vector.zero(len(factors)))

    @classmethod
    def rotation(cls, angle: float) -> "Affine":
        """Counter-clockwise rotation of the plane by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return cls([[c, -s], [s, c]], Vector(0.0, 0.0))

    @classmethod
    def from_homogeneous(cls, m) -> "Affine":
        """Build from an ``(n+1) x (n+1)`` homogeneous matrix."""
        m = np.asarray(m, dtype=float)
        n = m.shape[0] - 1
        if m.shape != (n + 1, n + 1) or n < 1:
            raise ValueError(f"Homogeneous matrix must be square, got shape {m.shape}")
        if not np.allclose(m[n, :n], 0.0) or not math.isclose(m[n, n], 1.0):
            raise ValueError("Last row of a homogeneous affine matrix must be [0 ... 0 1]")
        return cls(m[:n, :n], m[:n, n])

    def to_homogeneous(self) -> np.ndarray:
        n = self.dim
        m = np.eye(n + 1)
        m[:n, :n] = self._matrix
        m[:n, n] = self._translation
        return m

    # ========== Application ==========

    def apply(self, v: VectorLike) -> Vector:
        v = as_vector(v)
        if v.dim != self.dim:
            raise ValueError(
                f"Cannot apply a {self.dim}-D affine map to a {v.dim}-D vector"
            )
        return Vector(*(self._matrix @ np.asarray(v) + np.asarray(self._translation)))

    __call__ = apply

    def apply_linear(self, v: VectorLike) -> Vector:
        """
        Apply only the linear part, as appropriate for displacements.

        Computed as ``apply(v) - apply(0)`` so that the translation cancels.
        """
        v = as_vector(v)
        return self.apply(v) - self.apply(Vector.zero(v.dim))

    def linear_part(self) -> "Affine":
        return Affine(self._matrix, Vector.zero(self.dim))

    def compose(self, other: "Affine") -> "Affine":
        """The map applying ``other`` first, then ``self``."""
        if not isinstance(other, Affine):
            raise TypeError(f"Cannot compose Affine with {type(other).__name__}")
        if other.dim != self.dim:
            raise ValueError(f"Cannot compose {self.dim}-D and {other.dim}-D maps")
        return Affine(
            self._matrix @ other._matrix,
            self._matrix @ np.asarray(other._translation) + np.asarray(self._translation),
        )

    __matmul__ = compose

    def inverse(self) -> "Affine":
        try:
            inv = np.linalg.inv(self._matrix)
        except np.linalg.LinAlgError:
            raise ValueError("Affine map is singular and has no inverse")
        return Affine(inv, -(inv @ np.asarray(self._translation)))

    def is_translation(self) -> bool:
        return bool(np.allclose(self._matrix, np.eye(self.dim)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affine):
            return NotImplemented
        return bool(
            np.allclose(self._matrix, other._matrix)
            and self._translation == other._translation
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Affine(matrix={self._matrix.tolist()}, translation={self._translation.to_json()})"


class Transformable(ABC):
    """
    Base class for values an Affine map can act on.

    Subclasses implement ``transform``; the convenience methods build the
    corresponding map and delegate to it.
    """

    @abstractmethod
    def transform(self, affine: Affine) -> "Transformable":
        """
        Return a transformed copy.

        Args:
            affine: The map to apply

        Returns:
            A new value of the same type
        """
        ...

    @property
    @abstractmethod
    def dim(self) -> int: ...

    def translate(self, offset: VectorLike) -> "Transformable":
        return self.transform(Affine.translation_by(offset))

    def scale(self, k: Union[float, Sequence[float]]) -> "Transformable":
        return self.transform(Affine.scaling(k, dim=self.dim))

    def rotate(self, angle: float) -> "Transformable":
        """Rotate counter-clockwise by ``angle`` radians (2-D only)."""
        return self.transform(Affine.rotation(angle))


def check_affine(affine: object) -> Affine:
    if not isinstance(affine, Affine):
        raise TypeError(f"Expected an Affine, got {type(affine).__name__}")
    return affine
