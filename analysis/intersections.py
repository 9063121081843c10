"""Crossings between the links of two frequency classes.

Every same-frequency edge is treated as a straight segment between its two
antennas.  :class:`FrequencyIntersectionFinder` tests each segment of one
frequency against each segment of another and reports the distinct integer
points where they cross, keeping the first edge pair found for each point.

Edges are enumerated lower handle first (see
:meth:`antenna.graph_utils.AntennaGraph.edges`), so each undirected edge is
considered once and the report is reproducible between runs.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple
import logging

from antenna.geometry import Point, segment_intersection
from antenna.graph_utils import Antenna, AntennaGraph

__all__ = ["Crossing", "FrequencyIntersectionFinder", "find_intersections"]

logger = logging.getLogger(__name__)

Segment = Tuple[Antenna, Antenna]


class Crossing(NamedTuple):
    """A crossing point and the first pair of segments found to produce it."""

    x: int
    y: int
    a1: Antenna
    a2: Antenna
    b1: Antenna
    b2: Antenna

    @property
    def pos(self) -> Point:
        return (self.x, self.y)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def frequency_segments(graph: AntennaGraph, freq: str) -> List[Segment]:
    """Return the edges whose two endpoints both have frequency ``freq``."""

    return [(u, v) for u, v in graph.edges() if u.freq == freq and v.freq == freq]


# ---------------------------------------------------------------------------
# Main finder class
# ---------------------------------------------------------------------------


class FrequencyIntersectionFinder:
    """Find crossings between the segments of two frequency classes."""

    def __init__(self, graph: AntennaGraph):
        self.graph = graph

    # ------------------------------------------------------------------
    def find(self, freq_a: str, freq_b: str) -> List[Crossing]:
        """Return one :class:`Crossing` per distinct crossing coordinate."""

        segs_a = frequency_segments(self.graph, freq_a)
        segs_b = frequency_segments(self.graph, freq_b)

        found: Dict[Point, Crossing] = {}
        for a1, a2 in segs_a:
            for b1, b2 in segs_b:
                pt = segment_intersection(a1.pos, a2.pos, b1.pos, b2.pos)
                if pt is None or pt in found:
                    continue
                found[pt] = Crossing(pt[0], pt[1], a1, a2, b1, b2)

        logger.debug(
            "%d crossings between %s (%d segments) and %s (%d segments)",
            len(found), freq_a, len(segs_a), freq_b, len(segs_b),
        )
        return list(found.values())

    # ------------------------------------------------------------------
    def count(self, freq_a: str, freq_b: str) -> int:
        return len(self.find(freq_a, freq_b))


def find_intersections(graph: AntennaGraph, freq_a: str, freq_b: str) -> List[Crossing]:
    """Shortcut for ``FrequencyIntersectionFinder(graph).find(freq_a, freq_b)``."""

    return FrequencyIntersectionFinder(graph).find(freq_a, freq_b)
