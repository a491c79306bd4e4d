"""
Segments: the atomic pieces of a path.

A segment is either a straight line or a cubic Bezier curve. Segments are
translationally invariant: they store only offsets relative to their own
starting point, so they have a length and a direction but no location.
Translating a segment has no effect; the other components of an affine map
(scaling, rotation, shear) do.
"""

import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

from .bounds import Bounds, projection
from .constants import CLIP_CRITICAL_PARAMS, PARAM_MAX, PARAM_MIN
from .solver import solve_quadratic_or_linear
from .transform import Affine, Transformable, check_affine
from .vector_types import Vector, VectorLike, as_vector, check_same_dim

logger = logging.getLogger(__name__)


class Segment(Transformable):
    """
    Base class of ``Linear`` and ``Cubic``.

    Every subclass exposes ``offset``, the total displacement from the start
    of the segment to its end.
    """

    offset: Vector

    @abstractmethod
    def vectors(self) -> Tuple[Vector, ...]:
        """The stored offset vectors, in declaration order."""
        ...

    @abstractmethod
    def map_vectors(self, fn: Callable[[Vector], VectorLike]) -> "Segment":
        """Apply ``fn`` to every stored vector, keeping the segment kind."""
        ...

    @abstractmethod
    def at_param(self, t: float) -> Vector:
        """
        Offset from the start of the segment at parameter ``t``.

        ``t`` runs over [0, 1] along the segment; values outside that range
        are not rejected and extrapolate the underlying polynomial.
        """
        ...

    @abstractmethod
    def bounds(self, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds: ...

    @abstractmethod
    def to_json(self) -> Dict[str, Any]: ...

    @property
    def dim(self) -> int:
        return self.offset.dim

    def transform(self, affine: Affine) -> "Segment":
        """Apply the linear part of ``affine`` to every stored offset."""
        return self.map_vectors(check_affine(affine).apply_linear)


@dataclass(frozen=True)
class Linear(Segment):
    """A straight segment along ``offset``."""

    offset: Vector

    # Vector equality is tolerant, so there is no hash consistent with ==
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "offset", as_vector(self.offset))

    def vectors(self) -> Tuple[Vector, ...]:
        return (self.offset,)

    def map_vectors(self, fn: Callable[[Vector], VectorLike]) -> "Linear":
        return Linear(fn(self.offset))

    def at_param(self, t: float) -> Vector:
        return t * self.offset

    def bounds(self, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds:
        # a projected line is monotone in t, so the endpoints suffice
        def support(direction: Vector) -> float:
            return max(projection(self.at_param(t), direction) for t in (PARAM_MIN, PARAM_MAX))

        return Bounds(support)

    def as_cubic(self) -> "Cubic":
        """The same straight line written as a cubic Bezier."""
        return Cubic(self.offset / 3, 2 * self.offset / 3, self.offset)

    def to_json(self) -> Dict[str, Any]:
        return {"type": "Linear", "offset": self.offset.to_json()}


@dataclass(frozen=True)
class Cubic(Segment):
    """
    A cubic Bezier segment.

    ``c1`` and ``c2`` are the offsets from the start of the segment to the
    first and second control points, ``end`` the offset to the endpoint.
    """

    c1: Vector
    c2: Vector
    end: Vector

    __hash__ = None

    def __post_init__(self):
        c1, c2, end = as_vector(self.c1), as_vector(self.c2), as_vector(self.end)
        check_same_dim(c1, c2, end)
        object.__setattr__(self, "c1", c1)
        object.__setattr__(self, "c2", c2)
        object.__setattr__(self, "end", end)

    @property
    def offset(self) -> Vector:
        return self.end

    def vectors(self) -> Tuple[Vector, ...]:
        return (self.c1, self.c2, self.end)

    def map_vectors(self, fn: Callable[[Vector], VectorLike]) -> "Cubic":
        return Cubic(fn(self.c1), fn(self.c2), fn(self.end))

    def at_param(self, t: float) -> Vector:
        # Bernstein basis; the start control point is the origin
        s = 1 - t
        return 3 * s * s * t * self.c1 + 3 * s * t * t * self.c2 + t ** 3 * self.end

    def critical_params(self, direction: Vector, clip: bool = CLIP_CRITICAL_PARAMS) -> List[float]:
        """
        Parameters where the projection onto ``direction`` is stationary.

        With ``d`` the unit vector along ``direction``, the projection is the cubic
        ``t^3 (3 c1 - 3 c2 + end).d + t^2 (-6 c1 + 3 c2).d + t (3 c1).d``,
        whose derivative is solved in closed form. With ``clip`` the roots are
        restricted to the segment's own parameter range [0, 1].
        """
        direction = as_vector(direction).normalize()
        a = 3 * (3 * self.c1 - 3 * self.c2 + self.end).dot(direction)
        b = 2 * (-6 * self.c1 + 3 * self.c2).dot(direction)
        c = 3 * self.c1.dot(direction)
        roots = solve_quadratic_or_linear(a, b, c)
        if not clip:
            return roots
        kept = [t for t in roots if PARAM_MIN <= t <= PARAM_MAX]
        if len(kept) < len(roots):
            logger.debug(f"Discarded critical parameters outside [0, 1]: {roots}")
        return kept

    def bounds(self, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds:
        def support(direction: Vector) -> float:
            params = [PARAM_MIN, PARAM_MAX] + self.critical_params(direction, clip=clip)
            return max(projection(self.at_param(t), direction) for t in params)

        return Bounds(support)

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "Cubic",
            "c1": self.c1.to_json(),
            "c2": self.c2.to_json(),
            "end": self.end.to_json(),
        }


def straight(v: VectorLike) -> Linear:
    """A straight segment with direction and length given by ``v``."""
    return Linear(v)


def bezier3(v1: VectorLike, v2: VectorLike, v3: VectorLike) -> Cubic:
    """
    A cubic Bezier segment.

    Args:
        v1: Offset from the start to the first control point
        v2: Offset from the start to the second control point
        v3: Offset from the start to the endpoint
    """
    return Cubic(v1, v2, v3)


def at_param(seg: Segment, t: float) -> Vector:
    return seg.at_param(t)


def seg_offset(seg: Segment) -> Vector:
    return seg.offset


def segment_bounds(seg: Segment, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds:
    return seg.bounds(clip=clip)


def transform_segment(seg: Segment, affine: Affine) -> Segment:
    return seg.transform(affine)


def segment_from_json(json_data: Dict[str, Any]) -> Segment:
    seg_type = json_data.get("type")
    if seg_type == "Linear":
        return Linear(Vector.from_json(json_data["offset"]))
    if seg_type == "Cubic":
        return Cubic(
            Vector.from_json(json_data["c1"]),
            Vector.from_json(json_data["c2"]),
            Vector.from_json(json_data["end"]),
        )
    raise ValueError(f"Unknown segment type: {seg_type!r}")
