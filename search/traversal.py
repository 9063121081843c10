from __future__ import annotations

from collections import deque
from typing import Iterator, List, Optional
import logging

from antenna.errors import InvalidStart
from antenna.graph_utils import Antenna, AntennaGraph

__all__ = ["depth_first", "breadth_first"]

logger = logging.getLogger(__name__)


def _check_start(graph: AntennaGraph, start: Optional[Antenna]) -> Antenna:
    if start is None:
        raise InvalidStart("traversal needs a start antenna")
    if not graph.contains(start):
        raise InvalidStart(f"{start!r} is not part of the graph")
    return start


def depth_first(graph: AntennaGraph, start: Optional[Antenna]) -> List[Antenna]:
    """Return the antennas reachable from ``start`` in depth-first order.

    Neighbours are descended into in the graph's fixed adjacency order.  An
    explicit stack of neighbour iterators replaces recursion but yields the
    same visitation order a recursive walk would.
    """
    start = _check_start(graph, start)
    graph.reset_visited()

    order: List[Antenna] = [start]
    start.visited = True
    stack: List[Iterator[Antenna]] = [iter(graph.neighbors(start))]
    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            continue
        if nxt.visited:
            continue
        nxt.visited = True
        order.append(nxt)
        stack.append(iter(graph.neighbors(nxt)))

    logger.debug("dfs from (%d,%d) visited %d antennas", start.x, start.y, len(order))
    return order


def breadth_first(graph: AntennaGraph, start: Optional[Antenna]) -> List[Antenna]:
    """Return the antennas reachable from ``start`` in breadth-first order.

    Antennas are marked when enqueued, so none is queued twice.
    """
    start = _check_start(graph, start)
    graph.reset_visited()

    order: List[Antenna] = []
    start.visited = True
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        order.append(cur)
        for nbr in graph.neighbors(cur):
            if not nbr.visited:
                nbr.visited = True
                queue.append(nbr)

    logger.debug("bfs from (%d,%d) visited %d antennas", start.x, start.y, len(order))
    return order
