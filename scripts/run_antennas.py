"""Run the antenna graph queries described by a JSON configuration.

The script loads (or creates) an antenna map, prints the antenna graph and
the rendered map with its interference cells, then runs a depth-first and a
breadth-first traversal, enumerates all paths between two antennas and
reports crossings between frequency classes.  Coordinates that do not
resolve to an antenna are reported and the remaining queries still run.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Tuple

import structlog

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from antenna.errors import AntennaError
from antenna.graph_utils import Antenna, AntennaGraph
from antenna.log_config import ENGINE_LOGGERS, configure_logging
from analysis.intersections import find_intersections
from maps.config import QueryConfig, load_config
from maps.loader import load_map
from maps.render import describe_graph, format_antenna, format_path, render_map
from search.paths import find_all_paths
from search.traversal import breadth_first, depth_first

log = structlog.get_logger(__name__)


def _lookup(graph: AntennaGraph, coord: Optional[Tuple[int, int]]) -> Optional[Antenna]:
    if coord is None:
        return None
    return graph.find_vertex(*coord)


def run_traversals(graph: AntennaGraph, queries: QueryConfig) -> None:
    for title, coord, walk in (
        ("Depth-first search", queries.dfs_start, depth_first),
        ("Breadth-first search", queries.bfs_start, breadth_first),
    ):
        if coord is None:
            continue
        start = _lookup(graph, coord)
        if start is None:
            log.warning("traversal start not found", query=title, x=coord[0], y=coord[1])
            continue
        print(f"\n=== {title} ===")
        for v in walk(graph, start):
            print(f"Visiting: {format_antenna(v)}")


def run_paths(graph: AntennaGraph, queries: QueryConfig) -> None:
    if queries.path_source is None and queries.path_destination is None:
        return
    source = _lookup(graph, queries.path_source)
    dest = _lookup(graph, queries.path_destination)
    try:
        result = find_all_paths(graph, source, dest)
    except AntennaError as exc:
        print(f"\nCould not find paths: {exc}")
        return
    print(f"\n=== Paths between {format_antenna(source)} and {format_antenna(dest)} ===")
    if result.count == 0:
        print("No path found between the antennas")
        return
    for i, path in enumerate(result.paths, start=1):
        print(f"Path {i}: {format_path(path)}")
    print(f"Total paths found: {result.count}")


def run_intersections(graph: AntennaGraph, queries: QueryConfig) -> None:
    for freq_a, freq_b in queries.intersections:
        crossings = find_intersections(graph, freq_a, freq_b)
        print(f"\n=== Intersections between frequencies {freq_a} and {freq_b} ===")
        if not crossings:
            print(f"No intersection found between frequencies {freq_a} and {freq_b}")
            continue
        for c in crossings:
            print(
                f"Line {format_antenna(c.a1)}-{format_antenna(c.a2)} with "
                f"{format_antenna(c.b1)}-{format_antenna(c.b2)} at ({c.x},{c.y})"
            )
        print(f"Total intersections: {len(crossings)}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=str, required=True, help="Path to JSON configuration")
    parser.add_argument("--map", type=str, default=None, help="Override the map file from the config")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    args = parser.parse_args(argv)

    configure_logging(
        verbose=args.verbose,
        log_json=args.log_json,
        loggers=(*ENGINE_LOGGERS, __name__),
    )

    map_cfg, queries = load_config(args.config)
    if args.map is not None:
        map_cfg = map_cfg._replace(path=args.map)

    try:
        graph, data = load_map(map_cfg.path, create_default=map_cfg.create_default)
    except (OSError, AntennaError) as exc:
        log.error("could not load map", path=map_cfg.path, error=str(exc))
        print("Error loading map")
        return 1

    rows = map_cfg.rows if map_cfg.rows is not None else data.rows
    cols = map_cfg.cols if map_cfg.cols is not None else data.cols

    print("\n=== Graph ===")
    print(describe_graph(graph))
    print("\n=== Map ===")
    print(render_map(graph, rows, cols))

    run_traversals(graph, queries)
    run_paths(graph, queries)
    run_intersections(graph, queries)

    graph.destroy()
    return 0


if __name__ == "__main__":
    sys.exit(main())
