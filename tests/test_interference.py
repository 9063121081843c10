import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from antenna import AntennaGraph
from analysis.interference import is_aligned, project_interference, projected_points


def _graph(points):
    g = AntennaGraph()
    for freq, x, y in points:
        g.add_vertex(freq, x, y)
    return g


def test_horizontal_pair():
    g = _graph([("A", 2, 2), ("A", 4, 2)])
    assert project_interference(g, 10, 10) == {(0, 2), (6, 2)}


def test_projected_points():
    g = _graph([("A", 2, 2), ("A", 4, 2)])
    v, u = list(g)
    assert projected_points(u, v) == ((0, 2), (6, 2))
    assert projected_points(v, u) == ((6, 2), (0, 2))


@pytest.mark.parametrize(
    "dx, dy, expected",
    [
        (0, 3, True),
        (4, 0, True),
        (-2, 2, True),
        (2, -1, True),
        (1, 2, True),
        (-3, 1, True),
        (1, -3, True),
        (1, 5, False),
        (2, 3, False),
    ],
)
def test_alignment_rules(dx, dy, expected):
    assert is_aligned(dx, dy) is expected


def test_unaligned_pair_projects_nothing():
    g = _graph([("A", 0, 0), ("A", 1, 5)])
    assert project_interference(g, 20, 20) == set()


def test_out_of_grid_points_dropped():
    g = _graph([("A", 2, 2), ("A", 4, 2)])
    assert project_interference(g, 5, 5) == {(0, 2)}


def test_occupied_cells_not_marked():
    g = _graph([("A", 2, 2), ("A", 4, 2), ("B", 6, 2)])
    assert project_interference(g, 10, 10) == {(0, 2)}


def test_different_frequencies_do_not_interfere():
    g = _graph([("A", 2, 2), ("B", 4, 2)])
    assert project_interference(g, 10, 10) == set()


def test_independent_of_edges():
    g = _graph([("A", 1, 1), ("A", 2, 2)])
    assert g.num_edges == 0
    assert project_interference(g, 5, 5) == {(0, 0), (3, 3)}
