"""Map storage, rendering and configuration around the antenna graph."""

from .config import MapConfig, QueryConfig, parse_config, load_config
from .loader import (
    DEFAULT_MAP,
    MapData,
    read_map,
    write_map,
    write_default_map,
    graph_from_map,
    connect_frequencies,
    load_map,
)
from .render import format_antenna, format_path, render_map, describe_graph

__all__ = [
    "MapConfig",
    "QueryConfig",
    "parse_config",
    "load_config",
    "DEFAULT_MAP",
    "MapData",
    "read_map",
    "write_map",
    "write_default_map",
    "graph_from_map",
    "connect_frequencies",
    "load_map",
    "format_antenna",
    "format_path",
    "render_map",
    "describe_graph",
]
