"""Enumeration of every simple path between two antennas.

Same-frequency antennas form a clique, so the number of simple paths grows
combinatorially with the size of the frequency class.  The search is a
backtracking depth-first walk: the visited markers of the path in progress
are shared by all branches that extend it, and a vertex is unmarked again
when its branch is exhausted so it can appear in other paths.
"""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional
import logging

from antenna.errors import FrequencyMismatch, VertexNotFound
from antenna.graph_utils import Antenna, AntennaGraph

__all__ = ["PathResult", "iter_paths", "find_all_paths"]

logger = logging.getLogger(__name__)

Path = List[Antenna]


class PathResult(NamedTuple):
    paths: List[Path]
    count: int


def _check_endpoints(graph: AntennaGraph, source: Optional[Antenna], dest: Optional[Antenna]) -> None:
    missing = []
    if not graph.contains(source):
        missing.append("source")
    if not graph.contains(dest):
        missing.append("destination")
    if missing:
        raise VertexNotFound(missing)
    if source.freq != dest.freq:
        raise FrequencyMismatch(source, dest)


def iter_paths(graph: AntennaGraph, source: Optional[Antenna], dest: Optional[Antenna]) -> Iterator[Path]:
    """Lazily yield every simple path from ``source`` to ``dest``.

    Preconditions are checked before the first path is produced.  Each
    yielded list is a fresh copy; the caller may keep or modify it.
    """
    _check_endpoints(graph, source, dest)
    return _walk(graph, source, dest)


def _walk(graph: AntennaGraph, source: Antenna, dest: Antenna) -> Iterator[Path]:
    graph.reset_visited()
    if source is dest:
        yield [source]
        return

    path: Path = [source]
    source.visited = True
    # One neighbour iterator per vertex on the current path.
    stack = [iter(graph.neighbors(source))]
    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            path.pop().visited = False
            continue
        if nxt.visited:
            continue
        if nxt is dest:
            yield path + [nxt]
            continue
        nxt.visited = True
        path.append(nxt)
        stack.append(iter(graph.neighbors(nxt)))


def find_all_paths(graph: AntennaGraph, source: Optional[Antenna], dest: Optional[Antenna]) -> PathResult:
    """Return all simple paths from ``source`` to ``dest`` and their count.

    Raises :class:`VertexNotFound` if either endpoint is missing and
    :class:`FrequencyMismatch` if they have different frequencies.  Finding
    no path is a normal result with ``count == 0``.
    """
    paths = list(iter_paths(graph, source, dest))
    logger.debug(
        "found %d paths between (%d,%d) and (%d,%d)",
        len(paths), source.x, source.y, dest.x, dest.y,
    )
    return PathResult(paths=paths, count=len(paths))
