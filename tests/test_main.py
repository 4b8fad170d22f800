from pathlib import Path

import pytest

from graph import UnreachableError
from main import DEFAULT_CONFIG, graph_from_config, load_config, run


ROOT = Path(__file__).resolve().parent.parent


def test_default_graph_prints_success(capsys):
    assert run([]) == 0
    out = capsys.readouterr().out
    assert "| ✨ It works! Answer is 6 ✅ |" in out
    assert "Path: start -> b -> a -> fin" in out


def test_failure_banner_still_exits_cleanly(capsys):
    assert run(["--expected", "5"]) == 0
    out = capsys.readouterr().out
    assert "🚧 Oh, shieeet, answer is 6 instead of 5 ❌" in out


def test_yaml_config(capsys):
    assert run(["--config", str(ROOT / "example_graph.yaml")]) == 0
    out = capsys.readouterr().out
    assert "Answer is 8" in out
    assert "start -> a -> d -> finish" in out


def test_unreachable_query_propagates():
    with pytest.raises(UnreachableError):
        run(["--start", "fin", "--finish", "start"])


def test_config_round_trip(tmp_path):
    import yaml

    path = tmp_path / "graph.yaml"
    path.write_text(yaml.safe_dump(DEFAULT_CONFIG), encoding="utf-8")
    config = load_config(path)
    assert graph_from_config(config).shortest_path_cost("start", "fin") == 6


def test_benchmark_flag(capsys):
    assert run(["--benchmark", "0.01"]) == 0
    out = capsys.readouterr().out
    assert "Best of" in out or "Warning:" in out
