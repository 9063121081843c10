"""Loading antenna maps from disk and turning them into graphs.

Two storage formats are understood:

* text: a header line ``"<rows> <cols>"`` followed by ``rows`` grid lines;
* binary (``.bin``): two little-endian 32-bit integers ``rows`` and ``cols``
  followed by ``rows * cols`` bytes in row-major order.

In both, ``.`` marks an empty cell and any other character is an antenna
whose frequency is that character.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

from antenna.errors import MapFormatError
from antenna.graph_utils import EMPTY_CELL, AntennaGraph

__all__ = [
    "DEFAULT_MAP",
    "MapData",
    "parse_text_map",
    "parse_binary_map",
    "read_map",
    "write_map",
    "write_default_map",
    "graph_from_map",
    "connect_frequencies",
    "load_map",
]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_HEADER_DTYPE = np.dtype("<i4")

# fmt: off
DEFAULT_MAP: Tuple[str, ...] = (
    "............",
    "............",
    "............",
    ".......0....",
    "....0.......",
    "......A.....",
    ".........0..",
    ".....0......",
    "........A...",
    "............",
    ".......A....",
    "............",
)
# fmt: on


class MapData(NamedTuple):
    rows: int
    cols: int
    cells: np.ndarray  # (rows, cols) array of one-character strings


def _grid_from_lines(lines: Sequence[str], rows: int, cols: int) -> np.ndarray:
    if rows < 0 or cols < 0:
        raise MapFormatError(f"invalid map dimensions {rows}x{cols}")
    if len(lines) < rows:
        raise MapFormatError(f"expected {rows} map lines, found {len(lines)}")
    cells = np.full((rows, cols), EMPTY_CELL, dtype="<U1")
    for y in range(rows):
        line = lines[y]
        if len(line) < cols:
            raise MapFormatError(f"map line {y} has {len(line)} cells, expected {cols}")
        for x, ch in enumerate(line[:cols]):
            if ch.isspace():
                raise MapFormatError(f"blank cell at ({x},{y})")
            cells[y, x] = ch
    return cells


def parse_text_map(text: str) -> MapData:
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        raise MapFormatError("empty map file")
    header = lines[0].split()
    try:
        rows, cols = (int(tok) for tok in header)
    except ValueError as exc:
        raise MapFormatError(f"bad map header: {lines[0]!r}") from exc
    cells = _grid_from_lines(lines[1:], rows, cols)
    return MapData(rows, cols, cells)


def parse_binary_map(raw: bytes) -> MapData:
    if len(raw) < 2 * _HEADER_DTYPE.itemsize:
        raise MapFormatError("binary map shorter than its header")
    rows, cols = (int(n) for n in np.frombuffer(raw, dtype=_HEADER_DTYPE, count=2))
    if rows < 0 or cols < 0:
        raise MapFormatError(f"invalid map dimensions {rows}x{cols}")
    start = 2 * _HEADER_DTYPE.itemsize
    body = raw[start:start + rows * cols]
    if len(body) != rows * cols:
        raise MapFormatError(f"binary map truncated: expected {rows * cols} cells, found {len(body)}")
    try:
        text = body.decode("ascii")
    except UnicodeDecodeError as exc:
        raise MapFormatError("binary map contains non-ASCII cells") from exc
    lines = [text[y * cols:(y + 1) * cols] for y in range(rows)]
    return MapData(rows, cols, _grid_from_lines(lines, rows, cols))


def read_map(path: PathLike) -> MapData:
    """Read a map file, choosing the format from the file suffix."""
    path = Path(path)
    if path.suffix == ".bin":
        return parse_binary_map(path.read_bytes())
    return parse_text_map(path.read_text(encoding="utf-8"))


def write_map(path: PathLike, grid: Sequence[str]) -> None:
    """Write ``grid`` (one string per row) in the format implied by ``path``."""
    path = Path(path)
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(line) != cols for line in grid):
        raise MapFormatError("map rows must all have the same length")
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".bin":
        header = np.array([rows, cols], dtype=_HEADER_DTYPE).tobytes()
        path.write_bytes(header + "".join(grid).encode("ascii"))
    else:
        path.write_text(f"{rows} {cols}\n" + "\n".join(grid) + "\n", encoding="utf-8")


def write_default_map(path: PathLike) -> None:
    write_map(path, DEFAULT_MAP)
    logger.info("wrote default map to %s", path)


def connect_frequencies(graph: AntennaGraph) -> int:
    """Connect every pair of same-frequency antennas; return edges added."""
    added = 0
    classes = {freq: graph.by_frequency(freq) for freq in graph.frequencies()}
    for v in graph:
        for u in classes[v.freq]:
            if u is not v and graph.add_edge(v, u):
                added += 1
    return added


def graph_from_map(data: MapData) -> AntennaGraph:
    graph = AntennaGraph.create()
    for y in range(data.rows):
        for x in range(data.cols):
            cell = str(data.cells[y, x])
            if cell != EMPTY_CELL:
                graph.add_vertex(cell, x, y)
    added = connect_frequencies(graph)
    logger.debug(
        "built graph from %dx%d map: %d antennas, %d edges",
        data.rows, data.cols, graph.num_vertices, added,
    )
    return graph


def load_map(path: PathLike, create_default: bool = True) -> Tuple[AntennaGraph, MapData]:
    """Load the map at ``path`` and build its antenna graph.

    When the file does not exist and ``create_default`` is set, the default
    map is written there first.
    """
    path = Path(path)
    if not path.exists():
        if not create_default:
            raise FileNotFoundError(f"map file not found: {path}")
        write_default_map(path)
    data = read_map(path)
    return graph_from_map(data), data
