"""Antenna graph store.

Antennas live in an arena indexed by stable integer handles (their insertion
index).  Connectivity is kept in a :class:`networkx.Graph` keyed by those
handles, so adjacency is a set of indices rather than a web of references.
Only antennas sharing a frequency may be connected; the map loader connects
every such pair, which turns each frequency class into a clique.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx

from .errors import DuplicateAntenna, FrequencyMismatch, VertexNotFound

__all__ = ["EMPTY_CELL", "Antenna", "AntennaGraph"]

logger = logging.getLogger(__name__)

# Symbol used by stored maps for a cell without an antenna.
EMPTY_CELL = "."


@dataclass(eq=False)
class Antenna:
    """A vertex of the graph: one antenna on the grid.

    ``visited`` is transient state owned by whichever traversal or path
    search is running; it is reset at the start of every such call.
    """

    handle: int
    freq: str
    x: int
    y: int
    visited: bool = False

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)


class AntennaGraph:
    """Undirected graph of antennas connected by frequency."""

    def __init__(self) -> None:
        self._vertices: List[Antenna] = []
        self._by_pos: Dict[Tuple[int, int], Antenna] = {}
        self._adj = nx.Graph()

    @classmethod
    def create(cls) -> "AntennaGraph":
        return cls()

    # ------------------------------------------------------------------
    # Vertices
    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Antenna]:
        return iter(self._vertices)

    def add_vertex(self, freq: str, x: int, y: int) -> Antenna:
        if not isinstance(freq, str) or len(freq) != 1 or freq == EMPTY_CELL or freq.isspace():
            raise ValueError(f"invalid frequency symbol: {freq!r}")
        x, y = int(x), int(y)
        existing = self._by_pos.get((x, y))
        if existing is not None:
            raise DuplicateAntenna(existing, freq)
        v = Antenna(handle=len(self._vertices), freq=freq, x=x, y=y)
        self._vertices.append(v)
        self._by_pos[(x, y)] = v
        self._adj.add_node(v.handle, freq=freq, x=x, y=y)
        return v

    def contains(self, v: Optional[Antenna]) -> bool:
        """Return ``True`` if ``v`` is an antenna owned by this graph."""
        if not isinstance(v, Antenna):
            return False
        return 0 <= v.handle < len(self._vertices) and self._vertices[v.handle] is v

    def find_vertex(self, x: int, y: int) -> Optional[Antenna]:
        """Return the antenna at exactly ``(x, y)`` or ``None``."""
        return self._by_pos.get((x, y))

    def frequencies(self) -> List[str]:
        """Frequency symbols present in the graph, in first-seen order."""
        seen: Dict[str, None] = {}
        for v in self._vertices:
            seen.setdefault(v.freq, None)
        return list(seen)

    def by_frequency(self, freq: str) -> List[Antenna]:
        return [v for v in self._vertices if v.freq == freq]

    # ------------------------------------------------------------------
    # Edges
    def add_edge(self, u: Antenna, v: Antenna) -> bool:
        """Connect ``u`` and ``v`` in both directions.

        Returns ``True`` when a new edge was inserted and ``False`` when the
        edge already existed (or ``u`` is ``v``), which is not an error.
        Raises :class:`FrequencyMismatch` for antennas of different
        frequencies.
        """
        missing = [role for role, w in (("source", u), ("destination", v)) if not self.contains(w)]
        if missing:
            raise VertexNotFound(missing)
        if u.freq != v.freq:
            raise FrequencyMismatch(u, v)
        if u is v or self._adj.has_edge(u.handle, v.handle):
            return False
        self._adj.add_edge(u.handle, v.handle)
        return True

    def has_edge(self, u: Antenna, v: Antenna) -> bool:
        if not (self.contains(u) and self.contains(v)):
            return False
        return self._adj.has_edge(u.handle, v.handle)

    def neighbors(self, v: Antenna) -> List[Antenna]:
        """Adjacent antennas, most recently connected first.

        Traversals rely on this order being fixed for reproducible output.
        """
        if not self.contains(v):
            raise VertexNotFound(position=getattr(v, "pos", None))
        return [self._vertices[h] for h in reversed(list(self._adj.adj[v.handle]))]

    def degree(self, v: Antenna) -> int:
        if not self.contains(v):
            raise VertexNotFound(position=getattr(v, "pos", None))
        return self._adj.degree(v.handle)

    @property
    def num_edges(self) -> int:
        return self._adj.number_of_edges()

    def edges(self) -> Iterator[Tuple[Antenna, Antenna]]:
        """Yield every undirected edge once, lower handle first."""
        for u in self._vertices:
            for h in self._adj.adj[u.handle]:
                if h > u.handle:
                    yield u, self._vertices[h]

    # ------------------------------------------------------------------
    def reset_visited(self) -> None:
        for v in self._vertices:
            v.visited = False

    def destroy(self) -> None:
        """Release every antenna and edge; the graph is empty afterwards."""
        logger.debug("destroying graph with %d antennas", len(self._vertices))
        self._vertices.clear()
        self._by_pos.clear()
        self._adj.clear()

    def to_networkx(self) -> nx.Graph:
        """Copy of the connectivity with ``freq``, ``x`` and ``y`` node attributes."""
        return self._adj.copy()
