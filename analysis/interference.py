"""Interference cells projected from aligned antenna pairs.

Two antennas of the same frequency are *aligned* when the offset between
them lies on one of a few fixed slopes (horizontal, vertical, diagonal,
1:2 and 1:3 in either axis).  Each aligned pair projects the offset once
beyond both endpoints; the resulting cells that fall on the grid and hold
no antenna are interference cells.

Projection depends on positions only, not on the edges of the graph.
"""

from __future__ import annotations

from typing import Set, Tuple

from antenna.geometry import Point
from antenna.graph_utils import Antenna, AntennaGraph

__all__ = ["is_aligned", "projected_points", "project_interference"]


def is_aligned(dx: int, dy: int) -> bool:
    """Return ``True`` if the offset ``(dx, dy)`` is on an interfering slope."""
    ax, ay = abs(dx), abs(dy)
    return (
        dx == 0
        or dy == 0
        or ax == ay
        or ax == 2 * ay
        or 2 * ax == ay
        or ax == 3 * ay
        or 3 * ax == ay
    )


def projected_points(u: Antenna, v: Antenna) -> Tuple[Point, Point]:
    """Points one spacing beyond ``v`` and beyond ``u`` on the line ``v-u``."""
    dx = u.x - v.x
    dy = u.y - v.y
    return (v.x - dx, v.y - dy), (u.x + dx, u.y + dy)


def project_interference(graph: AntennaGraph, rows: int, cols: int) -> Set[Point]:
    """Return the interference cells of ``graph`` on a ``rows`` x ``cols`` grid.

    Every ordered pair of distinct same-frequency antennas is examined.  A
    cell produced by several pairs is reported once.
    """
    occupied = {v.pos for v in graph}
    marked: Set[Point] = set()
    for freq in graph.frequencies():
        members = graph.by_frequency(freq)
        for v in members:
            for u in members:
                if u is v or not is_aligned(u.x - v.x, u.y - v.y):
                    continue
                for x, y in projected_points(u, v):
                    if 0 <= x < cols and 0 <= y < rows and (x, y) not in occupied:
                        marked.add((x, y))
    return marked
