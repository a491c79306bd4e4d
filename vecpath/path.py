"""
Paths: a base point together with a relative path.

The base point is an absolute location; the body's segments are traversed in
order starting there. Under an affine map the base point moves with the full
transform, while every offset in the body moves only with its linear part.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .bounds import Bounds
from .constants import CLIP_CRITICAL_PARAMS
from .relpath import RelPath, linear_rel_path
from .segment import Segment
from .transform import Affine, Transformable, check_affine
from .vector_types import Vector, VectorLike, as_vector


@dataclass(frozen=True)
class Path(Transformable):
    basepoint: Vector
    body: RelPath = field(default_factory=RelPath.empty)

    __hash__ = None

    def __post_init__(self):
        basepoint = as_vector(self.basepoint)
        if not isinstance(self.body, RelPath):
            raise TypeError(f"Path body must be a RelPath, got {type(self.body).__name__}")
        if not self.body.is_empty() and self.body.dim != basepoint.dim:
            raise ValueError(
                f"Basepoint of dimension {basepoint.dim} does not match "
                f"body of dimension {self.body.dim}"
            )
        object.__setattr__(self, "basepoint", basepoint)

    @property
    def dim(self) -> int:
        return self.basepoint.dim

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self.body.segments

    def transform(self, affine: Affine) -> "Path":
        affine = check_affine(affine)
        return Path(affine.apply(self.basepoint), self.body.transform(affine))

    def map_vectors(self, fn: Callable[[Vector], VectorLike]) -> "Path":
        return Path(as_vector(fn(self.basepoint)), self.body.map_vectors(fn))

    def vertices(self) -> List[Vector]:
        """Absolute segment endpoints, starting with the base point."""
        points = [self.basepoint]
        for seg in self.body:
            points.append(points[-1] + seg.offset)
        return points

    def end_point(self) -> Vector:
        return self.vertices()[-1]

    def bounds(self, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds:
        """
        Support function of the positioned path.

        Folds over the body's segments, shifting each segment's bounds to
        the point where it starts, and finally shifts the whole by the base
        point.
        """
        return self.body.bounds(clip=clip).rebase(self.basepoint)

    def bounding_box(self, clip: bool = CLIP_CRITICAL_PARAMS) -> Tuple[Vector, Vector]:
        return self.bounds(clip=clip).bounding_box(self.dim)

    def to_json(self) -> Dict[str, Any]:
        return {"basepoint": self.basepoint.to_json(), "body": self.body.to_json()}

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "Path":
        return Path(
            Vector.from_json(json_data["basepoint"]),
            RelPath.from_json(json_data.get("body", [])),
        )


def path(points: Sequence[VectorLike]) -> Path:
    """
    A zero-based path of straight segments.

    Each input vector is the *relative offset* of one segment, chained in
    order from the origin; the inputs are not absolute vertex coordinates.
    ``path([(1, 0), (0, 1)])`` therefore runs from (0, 0) to (1, 0) to (1, 1).

    Args:
        points: One offset per straight segment

    Returns:
        Path with basepoint at the origin
    """
    offsets = [as_vector(p) for p in points]
    if not offsets:
        raise ValueError("path() needs at least one offset to know the dimension")
    return Path(Vector.zero(offsets[0].dim), linear_rel_path(offsets))


def path_from_segments(
    segments: Iterable[Segment], basepoint: Optional[VectorLike] = None
) -> Path:
    """A path over arbitrary segments, based at ``basepoint`` or the origin."""
    body = RelPath(tuple(segments))
    if basepoint is None:
        if body.is_empty():
            raise ValueError("Cannot infer the dimension of an empty path without a basepoint")
        basepoint = Vector.zero(body.dim)
    return Path(as_vector(basepoint), body)


def path_bounds(p: Path, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds:
    return p.bounds(clip=clip)


def transform_path(p: Path, affine: Affine) -> Path:
    return p.transform(affine)
