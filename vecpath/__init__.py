"""
vecpath - Segments, paths and support-function bounds for vector graphics.

This package provides translation-invariant segments (straight lines and
cubic Beziers), relative and based paths built from them, and directional
bounds computed analytically under arbitrary affine transforms.
"""

__version__ = "0.1.0"

# Vector space and affine maps
from .vector_types import Vector, VectorLike, as_vector
from .transform import Affine, Transformable

# Support functions
from .bounds import Bounds, combine_bounds

# Segments
from .segment import (
    Cubic,
    Linear,
    Segment,
    at_param,
    bezier3,
    seg_offset,
    segment_bounds,
    segment_from_json,
    straight,
    transform_segment,
)
from .solver import solve_linear, solve_quadratic, solve_quadratic_or_linear

# Relative and based paths
from .relpath import RelPath, concat, concat_all, empty, rel_path, transform_rel_path
from .path import Path, path, path_bounds, path_from_segments, transform_path

__all__ = [
    # Vector space
    "Vector",
    "VectorLike",
    "as_vector",
    "Affine",
    "Transformable",
    # Bounds
    "Bounds",
    "combine_bounds",
    # Segments
    "Segment",
    "Linear",
    "Cubic",
    "straight",
    "bezier3",
    "at_param",
    "seg_offset",
    "segment_bounds",
    "segment_from_json",
    "transform_segment",
    "solve_quadratic",
    "solve_linear",
    "solve_quadratic_or_linear",
    # Paths
    "RelPath",
    "empty",
    "concat",
    "concat_all",
    "rel_path",
    "transform_rel_path",
    "Path",
    "path",
    "path_from_segments",
    "path_bounds",
    "transform_path",
]
