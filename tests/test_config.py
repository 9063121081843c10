import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import json

import pytest

from maps.config import MapConfig, QueryConfig, load_config, parse_config


def test_demo_config_loads():
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    map_cfg, queries = load_config(os.path.join(root, "configs", "demo.json"))
    assert map_cfg == MapConfig(path="data/mapa.bin", rows=12, cols=12, create_default=True)
    assert queries.dfs_start == (5, 7)
    assert queries.bfs_start == (8, 8)
    assert queries.path_source == (4, 4)
    assert queries.path_destination == (7, 3)
    assert queries.intersections == [("A", "0")]


def test_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({}))
    map_cfg, queries = load_config(path)
    assert map_cfg.rows is None and map_cfg.create_default
    assert queries == QueryConfig()


@pytest.mark.parametrize(
    "queries",
    [
        {"dfs_start": [1, 2, 3]},
        {"intersections": [["AB", "C"]]},
        {"intersections": [["A"]]},
        {"intersections": ["AB"]},
        {"intersections": [["A", "B", "C"]]},
        {"dfs_start": 5},
        {"path_source": "12"},
    ],
)
def test_invalid_queries(queries):
    with pytest.raises(ValueError):
        parse_config({"queries": queries})


def test_unknown_map_key():
    with pytest.raises(TypeError):
        parse_config({"map": {"colour": "red"}})


def test_invalid_pair_message():
    with pytest.raises(ValueError, match="frequency pair must hold two symbols"):
        parse_config({"queries": {"intersections": [["A"]]}})
