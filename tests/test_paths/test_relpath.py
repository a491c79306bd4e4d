"""
Tests for RelPath concatenation, transforms and bounds.
"""

import math

import pytest

from vecpath.relpath import (
    RelPath,
    concat,
    concat_all,
    empty,
    linear_rel_path,
    rel_path,
    transform_rel_path,
)
from vecpath.segment import bezier3, straight
from vecpath.transform import Affine
from vecpath.vector_types import Vector


@pytest.fixture
def paths():
    a = rel_path([straight((1, 0)), bezier3((0, 1), (1, 1), (1, 0))])
    b = rel_path([straight((0, 2))])
    c = rel_path([bezier3((1, 1), (2, 1), (3, 0)), straight((-1, -1))])
    return a, b, c


def test_empty():
    assert len(empty()) == 0
    assert empty().is_empty()
    assert empty() == RelPath.empty()


def test_concat_identity(paths):
    for x in paths:
        assert concat(empty(), x) == x
        assert concat(x, empty()) == x


def test_concat_associative(paths):
    a, b, c = paths
    assert concat(concat(a, b), c) == concat(a, concat(b, c))


def test_concat_preserves_order(paths):
    a, b, _ = paths
    ab = a + b
    assert ab.segments == a.segments + b.segments
    assert list(ab) == [straight((1, 0)), bezier3((0, 1), (1, 1), (1, 0)), straight((0, 2))]


def test_concat_all(paths):
    a, b, c = paths
    assert concat_all(paths) == a + b + c
    assert concat_all([]) == empty()


def test_concat_rejects_non_relpath(paths):
    a, _, _ = paths
    with pytest.raises(TypeError, match="Cannot concatenate"):
        a.concat([straight((1, 0))])


def test_segments_must_be_segments():
    with pytest.raises(TypeError, match="must be Segments"):
        RelPath((Vector(1, 0),))


def test_segments_must_share_dimension():
    with pytest.raises(ValueError, match="one dimension"):
        rel_path([straight((1, 0)), straight((1, 0, 0))])


def test_empty_has_no_dimension():
    with pytest.raises(ValueError, match="no dimension"):
        empty().dim


def test_offset_and_offsets(paths):
    a, _, _ = paths
    assert a.offset() == Vector(2, 0)
    assert a.offsets() == [Vector(0, 0), Vector(1, 0)]
    assert empty().offset() is None
    assert empty().offsets() == []


def test_transform_maps_every_segment_in_order(paths):
    _, _, c = paths
    scaled = transform_rel_path(c, Affine.translation_by((7, 7)) @ Affine.scaling(2))
    assert scaled == rel_path([bezier3((2, 2), (4, 2), (6, 0)), straight((-2, -2))])


def test_translation_leaves_relpath_unchanged(paths):
    for x in paths:
        assert x.transform(Affine.translation_by((3, -8))) == x


def test_map_vectors(paths):
    _, b, _ = paths
    assert b.map_vectors(lambda v: -v) == rel_path([straight((0, -2))])


def test_bounds_follow_segment_positions():
    rp = linear_rel_path([(1, 0), (1, 0), (0, 3)])
    bounds = rp.bounds()
    assert math.isclose(bounds((1, 0)), 2.0)
    assert math.isclose(bounds((0, 1)), 3.0)
    assert math.isclose(bounds((-1, 0)), 0.0, abs_tol=1e-12)
    assert math.isclose(bounds((0, -1)), 0.0, abs_tol=1e-12)


def test_bounds_with_cubic(paths):
    a, _, _ = paths
    # the hump starts at (1, 0) and peaks at y = 0.75
    bounds = a.bounds()
    assert math.isclose(bounds((0, 1)), 0.75)
    assert math.isclose(bounds((1, 0)), 2.0)


def test_empty_bounds():
    assert empty().bounds()((1, 0)) == float("-inf")


def test_json_round_trip(paths):
    for x in paths:
        assert RelPath.from_json(x.to_json()) == x


def test_relpath_is_unhashable(paths):
    with pytest.raises(TypeError, match="unhashable"):
        hash(paths[0])
