import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import json
import logging

import pytest

from antenna.log_config import ENGINE_LOGGERS, configure_logging
from scripts.run_antennas import main


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    for name in (*ENGINE_LOGGERS, "scripts.run_antennas"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def _config(tmp_path, **queries):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"map": {"path": str(tmp_path / "mapa.bin")}, "queries": queries}))
    return str(path)


def test_demo_run(tmp_path, capsys):
    cfg = _config(
        tmp_path,
        dfs_start=[5, 7],
        bfs_start=[8, 8],
        path_source=[4, 4],
        path_destination=[7, 3],
        intersections=[["A", "0"]],
    )
    assert main(["--config", cfg]) == 0
    out = capsys.readouterr().out
    assert "Graph (7 antennas):" in out
    assert "=== Depth-first search ===" in out
    assert "Visiting: 0(5,7)" in out
    assert "=== Breadth-first search ===" in out
    assert "Total paths found: 5" in out
    assert "=== Intersections between frequencies A and 0 ===" in out
    assert (tmp_path / "mapa.bin").exists()


def test_missing_endpoint_is_reported(tmp_path, capsys):
    cfg = _config(tmp_path, path_source=[0, 0], path_destination=[7, 3])
    assert main(["--config", cfg]) == 0
    out = capsys.readouterr().out
    assert "Could not find paths: source antenna does not exist in the map" in out


def test_map_override_and_load_failure(tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_text("not a map\n")
    cfg = _config(tmp_path)
    assert main(["--config", cfg, "--map", str(bad)]) == 1
    assert "Error loading map" in capsys.readouterr().out


def test_configure_logging_levels():
    configure_logging(verbose=True)
    assert logging.getLogger("search").level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING
    configure_logging(verbose=False, log_json=True)
    assert logging.getLogger("search").level == logging.WARNING


def test_verbose_run_enables_driver_logger(tmp_path, capsys):
    cfg = _config(tmp_path)
    assert main(["--config", cfg, "--verbose"]) == 0
    assert logging.getLogger("scripts.run_antennas").level == logging.DEBUG
    assert logging.getLogger("maps").level == logging.DEBUG
    capsys.readouterr()


def test_configure_logging_only_touches_listed_loggers():
    logging.getLogger("scripts.run_antennas").setLevel(logging.NOTSET)
    configure_logging(verbose=True)
    assert logging.getLogger("scripts.run_antennas").level == logging.NOTSET
    configure_logging(verbose=True, loggers=("scripts.run_antennas",))
    assert logging.getLogger("scripts.run_antennas").level == logging.DEBUG
