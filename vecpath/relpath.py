"""
Relative paths: translationally invariant sequences of segments.

Relative paths form a monoid under concatenation with the empty path as
identity.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .bounds import Bounds, combine_bounds
from .constants import CLIP_CRITICAL_PARAMS
from .segment import Linear, Segment, segment_from_json
from .transform import Affine, Transformable, check_affine
from .vector_types import Vector, VectorLike, as_vector


@dataclass(frozen=True)
class RelPath(Transformable):
    segments: Tuple[Segment, ...] = ()

    __hash__ = None

    def __post_init__(self):
        segments = tuple(self.segments)
        for seg in segments:
            if not isinstance(seg, Segment):
                raise TypeError(f"RelPath segments must be Segments, got {type(seg).__name__}")
        dims = {seg.dim for seg in segments}
        if len(dims) > 1:
            raise ValueError(f"RelPath segments must share one dimension, got {sorted(dims)}")
        object.__setattr__(self, "segments", segments)

    @classmethod
    def empty(cls) -> "RelPath":
        return cls(())

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def is_empty(self) -> bool:
        return not self.segments

    @property
    def dim(self) -> int:
        if not self.segments:
            raise ValueError("An empty RelPath has no dimension")
        return self.segments[0].dim

    def concat(self, other: "RelPath") -> "RelPath":
        """``other``'s segments appended after this path's."""
        if not isinstance(other, RelPath):
            raise TypeError(f"Cannot concatenate RelPath with {type(other).__name__}")
        return RelPath(self.segments + other.segments)

    def __add__(self, other: "RelPath") -> "RelPath":
        if not isinstance(other, RelPath):
            return NotImplemented
        return self.concat(other)

    def transform(self, affine: Affine) -> "RelPath":
        affine = check_affine(affine)
        return RelPath(tuple(seg.transform(affine) for seg in self.segments))

    def map_vectors(self, fn: Callable[[Vector], VectorLike]) -> "RelPath":
        return RelPath(tuple(seg.map_vectors(fn) for seg in self.segments))

    def offsets(self) -> List[Vector]:
        """Cumulative offset reached before each segment, starting at the origin."""
        if not self.segments:
            return []
        cum = Vector.zero(self.dim)
        starts = []
        for seg in self.segments:
            starts.append(cum)
            cum = cum + seg.offset
        return starts

    def offset(self) -> Optional[Vector]:
        """Total displacement of the path, ``None`` when empty."""
        if not self.segments:
            return None
        return reduce(lambda acc, seg: acc + seg.offset, self.segments, Vector.zero(self.dim))

    def bounds(self, clip: bool = CLIP_CRITICAL_PARAMS) -> Bounds:
        """
        Support function of the path traversed from the origin.

        Each segment's own bounds is rebased to the point where the segment
        starts, and the results are combined by pointwise maximum.
        """
        return combine_bounds(
            seg.bounds(clip=clip).rebase(start)
            for seg, start in zip(self.segments, self.offsets())
        )

    def to_json(self) -> List[Dict[str, Any]]:
        return [seg.to_json() for seg in self.segments]

    @staticmethod
    def from_json(json_data: List[Dict[str, Any]]) -> "RelPath":
        return RelPath(tuple(segment_from_json(item) for item in json_data))


def empty() -> RelPath:
    return RelPath.empty()


def concat(a: RelPath, b: RelPath) -> RelPath:
    return a.concat(b)


def concat_all(paths: Iterable[RelPath]) -> RelPath:
    return reduce(concat, paths, RelPath.empty())


def transform_rel_path(rp: RelPath, affine: Affine) -> RelPath:
    return rp.transform(affine)


def rel_path(segments: Iterable[Segment]) -> RelPath:
    return RelPath(tuple(segments))


def linear_rel_path(offsets: Iterable[VectorLike]) -> RelPath:
    """A RelPath of straight segments, one per offset."""
    return RelPath(tuple(Linear(as_vector(v)) for v in offsets))
