import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from antenna.geometry import segment_intersection


def test_crossing_diagonals():
    assert segment_intersection((0, 0), (4, 4), (0, 4), (4, 0)) == (2, 2)


def test_parallel_segments():
    assert segment_intersection((0, 0), (1, 0), (5, 5), (6, 6)) is None
    assert segment_intersection((0, 0), (4, 0), (0, 2), (4, 2)) is None


def test_collinear_overlap_not_reported():
    assert segment_intersection((0, 0), (4, 0), (2, 0), (6, 0)) is None


def test_lines_cross_outside_segments():
    assert segment_intersection((0, 0), (1, 1), (0, 4), (4, 0)) is None


def test_shared_endpoint_counts():
    assert segment_intersection((0, 0), (2, 2), (2, 2), (4, 0)) == (2, 2)


def test_swapping_segments_gives_same_point():
    a = ((0, 0), (4, 4))
    b = ((0, 4), (4, 0))
    assert segment_intersection(*a, *b) == segment_intersection(*b, *a)
    assert segment_intersection(a[1], a[0], b[1], b[0]) == (2, 2)


def test_truncates_toward_zero():
    # crossing at (1.5, 0.5)
    assert segment_intersection((0, 0), (3, 1), (0, 1), (3, 0)) == (1, 0)
    # crossing at (-1.5, -0.5)
    assert segment_intersection((-3, -1), (0, 0), (-3, 0), (0, -1)) == (-1, 0)


def test_exact_integer_crossing_not_truncated_low():
    assert segment_intersection((26, 13), (1, 15), (12, 17), (12, 14)) == (12, 14)
    assert segment_intersection((12, 17), (12, 14), (26, 13), (1, 15)) == (12, 14)
    assert segment_intersection((22, 15), (11, 15), (7, 30), (25, 1)) == (16, 15)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (((0, 0), (4, 4)), ((0, 4), (4, 0)), (2, 2)),
        (((26, 13), (1, 15)), ((12, 17), (12, 14)), (12, 14)),
        (((22, 15), (11, 15)), ((7, 30), (25, 1)), (16, 15)),
        (((0, 0), (3, 1)), ((0, 1), (3, 0)), (1, 0)),
    ],
)
def test_same_point_for_every_argument_order(a, b, expected):
    for s, t in ((a, b), (b, a)):
        for s_pts in (s, s[::-1]):
            for t_pts in (t, t[::-1]):
                assert segment_intersection(*s_pts, *t_pts) == expected
