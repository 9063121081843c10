"""Text rendering of antenna maps and graphs."""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from analysis.interference import project_interference
from antenna.graph_utils import EMPTY_CELL, Antenna, AntennaGraph

__all__ = [
    "INTERFERENCE_CELL",
    "format_antenna",
    "format_path",
    "render_grid",
    "render_map",
    "describe_graph",
]

INTERFERENCE_CELL = "#"


def format_antenna(v: Antenna) -> str:
    return f"{v.freq}({v.x},{v.y})"


def format_path(path: Iterable[Antenna]) -> str:
    return " -> ".join(format_antenna(v) for v in path)


def render_grid(graph: AntennaGraph, rows: int, cols: int) -> np.ndarray:
    """Return a ``(rows, cols)`` character grid with antennas and interference.

    Antennas outside the grid are left out.
    """
    grid = np.full((rows, cols), EMPTY_CELL, dtype="<U1")
    for v in graph:
        if 0 <= v.x < cols and 0 <= v.y < rows:
            grid[v.y, v.x] = v.freq
    for x, y in project_interference(graph, rows, cols):
        grid[y, x] = INTERFERENCE_CELL
    return grid


def render_map(graph: AntennaGraph, rows: int, cols: int) -> str:
    grid = render_grid(graph, rows, cols)
    return "\n".join("".join(row) for row in grid)


def describe_graph(graph: AntennaGraph, title: Optional[str] = None) -> str:
    """List every antenna with its neighbours in traversal order."""
    lines = [title or f"Graph ({graph.num_vertices} antennas):"]
    for v in graph:
        nbrs = graph.neighbors(v)
        links = "  ".join(format_antenna(u) for u in nbrs) if nbrs else "no connections"
        lines.append(f"Antenna {format_antenna(v)} -> {links}")
    return "\n".join(lines)
