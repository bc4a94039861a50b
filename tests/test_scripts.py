import importlib.util
import json
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "scripts"


def _load(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def run_heuristic():
    return _load("run_heuristic")


@pytest.fixture(scope="module")
def compare_heuristics():
    return _load("compare_heuristics")


@pytest.mark.parametrize("speed,delay,expected", [
    (None, None, 0.0),
    (50, None, 0.5),
    (100, None, 0.0),
    (1, None, 0.99),
    (50, 0.2, 0.2),
])
def test_step_delay(run_heuristic, speed, delay, expected):
    assert run_heuristic.step_delay(speed, delay) == pytest.approx(expected)


def test_run_heuristic_writes_steps_and_result(run_heuristic, tmp_path):
    out = tmp_path / "run.jsonl"
    code = run_heuristic.main(
        ["--strategy", "convex-hull", "--points", "8", "--seed", "3", "--output", str(out)]
    )
    assert code == 0
    records = [json.loads(line) for line in out.read_text().splitlines()]
    assert [r["type"] for r in records[:-1]] == ["step"] * (len(records) - 1)
    result = records[-1]
    assert result["type"] == "result"
    assert result["status"] == "complete"
    assert result["tour"][0] == result["tour"][-1]
    assert len(result["tour"]) == 9


def test_run_heuristic_reads_coordinates(run_heuristic, tmp_path):
    coords = tmp_path / "points.json"
    coords.write_text(json.dumps([[0, 0], [4, 0], [4, 3], [0, 3]]))
    out = tmp_path / "run.jsonl"
    run_heuristic.main(
        ["--strategy", "nearest-neighbor", "--coordinates", str(coords), "--start-index", "0", "--output", str(out)]
    )
    result = json.loads(out.read_text().splitlines()[-1])
    assert result["cost"] == pytest.approx(14.0)


def test_compare_heuristics_summary(compare_heuristics):
    df = compare_heuristics.normalise_cost(
        compare_heuristics.run_instances([6, 9], 2, ["nearest-neighbor", "convex-hull"], seed=4)
    )
    assert len(df) == 8
    assert (df["norm_cost"] >= 1.0).all()
    assert df.groupby("instance")["norm_cost"].min().eq(1.0).all()
    summary = compare_heuristics.summarise(df)
    assert set(summary.index.get_level_values("strategy")) == {"nearest-neighbor", "convex-hull"}
