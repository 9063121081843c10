"""Configuration for map loading and the demonstration queries."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

__all__ = ["MapConfig", "QueryConfig", "parse_config", "load_config"]

Coord = Tuple[int, int]


class MapConfig(NamedTuple):
    path: str = "data/mapa.bin"
    rows: Optional[int] = None
    cols: Optional[int] = None
    create_default: bool = True


@dataclass
class QueryConfig:
    """Coordinates and frequency pairs the driver queries."""

    dfs_start: Optional[Coord] = None
    bfs_start: Optional[Coord] = None
    path_source: Optional[Coord] = None
    path_destination: Optional[Coord] = None
    intersections: List[Tuple[str, str]] = field(default_factory=list)


def _coord(value: Any, name: str) -> Optional[Coord]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be an [x, y] pair, got {value!r}")
    return int(value[0]), int(value[1])


def _freq_pair(value: Any) -> Tuple[str, str]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"frequency pair must hold two symbols, got {value!r}")
    a, b = value
    if not (isinstance(a, str) and isinstance(b, str) and len(a) == 1 and len(b) == 1):
        raise ValueError(f"frequency pair must hold two symbols, got {value!r}")
    return a, b


def parse_config(data: Dict[str, Any]) -> Tuple[MapConfig, QueryConfig]:
    map_cfg = MapConfig(**data.get("map", {}))
    q = data.get("queries", {})
    queries = QueryConfig(
        dfs_start=_coord(q.get("dfs_start"), "dfs_start"),
        bfs_start=_coord(q.get("bfs_start"), "bfs_start"),
        path_source=_coord(q.get("path_source"), "path_source"),
        path_destination=_coord(q.get("path_destination"), "path_destination"),
        intersections=[_freq_pair(p) for p in q.get("intersections", [])],
    )
    return map_cfg, queries


def load_config(path: Union[str, Path]) -> Tuple[MapConfig, QueryConfig]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_config(data)
