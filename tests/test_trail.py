"""Tests for trail accumulation and segment pairing."""

import pytest
from spirograph.trail import Trail


def _filled(n):
    trail = Trail()
    for i in range(n):
        trail.append((float(i), float(i * i)))
    return trail


def test_empty_trail():
    trail = Trail()
    assert len(trail) == 0
    assert list(trail.segments()) == []
    assert trail.last is None


def test_single_point_has_no_segments():
    trail = _filled(1)
    assert len(trail) == 1
    assert list(trail.segments()) == []


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 257])
def test_length_and_segment_count(n):
    """After N appends: len == N and max(N-1, 0) segments."""
    trail = _filled(n)
    assert len(trail) == n
    assert len(list(trail.segments())) == max(n - 1, 0)


def test_segments_are_consecutive_in_insertion_order():
    trail = _filled(5)
    pairs = list(trail.segments())
    for i, (start, end) in enumerate(pairs):
        assert start == trail[i]
        assert end == trail[i + 1]


def test_segments_are_lazy():
    """segments() returns an iterator, not a materialized list."""
    trail = _filled(3)
    segs = trail.segments()
    assert iter(segs) is segs
    assert next(segs) == ((0.0, 0.0), (1.0, 1.0))


def test_iteration_and_last():
    trail = _filled(4)
    assert list(trail) == [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0), (3.0, 9.0)]
    assert trail.last == (3.0, 9.0)


def test_points_is_a_copy():
    trail = _filled(2)
    pts = trail.points()
    pts.append((99.0, 99.0))
    assert len(trail) == 2


def test_duplicate_points_are_kept():
    trail = Trail()
    trail.append((1.0, 1.0))
    trail.append((1.0, 1.0))
    assert len(trail) == 2
    assert list(trail.segments()) == [((1.0, 1.0), (1.0, 1.0))]


def test_initial_points():
    trail = Trail([(0.0, 0.0), (1.0, 0.0)])
    assert len(trail) == 2
    trail.append((2.0, 0.0))
    assert trail[-1] == (2.0, 0.0)
