import csv

import pandas as pd
import pytest

from npuzzle.domains.puzzles import get_puzzle
from npuzzle.domains.puzzlen import NPuzzle, is_solvable
from npuzzle.experiments import plot, runner
from npuzzle.experiments.common import choose_dim, generate_instances
from npuzzle.experiments.visualize_path import save_frames
from npuzzle.heuristics.selector import Heuristic


class _Args:
    def __init__(self, **kw):
        self.__dict__.update(kw)


def test_choose_dim():
    assert choose_dim(_Args(n=None, domain="p8")) == 3
    assert choose_dim(_Args(n=None, domain="p15")) == 4
    assert choose_dim(_Args(n=5, domain="p8")) == 5


def test_generate_instances():
    insts = generate_instances(3, [4, 8], 3, start_seed=10)
    assert len(insts) == 6
    assert [i.depth for i in insts] == [4, 4, 4, 8, 8, 8]
    assert all(is_solvable(i.state, 3) for i in insts)
    assert insts == generate_instances(3, [4, 8], 3, start_seed=10)


def test_runner_writes_csv(tmp_path):
    out = tmp_path / "res" / "run.csv"
    rows = runner.run(3, [4], 2, [Heuristic.MANHATTAN, Heuristic.LINEAR_CONFLICT], out,
                      include_unsolvable=True)
    assert rows == 8
    with out.open(newline="") as f:
        data = list(csv.DictReader(f))
    assert len(data) == 8
    assert set(data[0]) == set(runner.HEADER)
    solved = [r for r in data if r["solvable"] == "1"]
    unsolved = [r for r in data if r["solvable"] == "0"]
    assert all(r["termination"] == "ok" and int(r["g"]) <= 4 for r in solved)
    assert all(r["termination"] == "unsolvable" and r["expanded"] == "0" for r in unsolved)


def test_runner_main(tmp_path, capsys):
    out = tmp_path / "main.csv"
    runner.main(["--depths", "3", "--per_depth", "1", "--heuristics", "4", "5", "--out", str(out)])
    assert out.exists()
    assert "Wrote" in capsys.readouterr().out


def test_plot_aggregate():
    df = pd.DataFrame({
        "heuristic": ["manhattan"] * 3 + ["linear_conflict"],
        "depth": [4, 4, 8, 4],
        "expanded": [2, 4, 10, 1],
    })
    agg = plot.aggregate(df, "expanded")
    row = agg[(agg["heuristic"] == "manhattan") & (agg["depth"] == 4)].iloc[0]
    assert row["mean"] == pytest.approx(3.0)
    assert row["sem"] == pytest.approx(1.0)
    single = agg[agg["heuristic"] == "linear_conflict"].iloc[0]
    assert single["sem"] == 0.0


def test_plot_main(tmp_path):
    csv_path = tmp_path / "run.csv"
    runner.run(3, [4, 6], 2, [Heuristic.MANHATTAN, Heuristic.MISPLACED_TILE], csv_path)
    plot.main([str(csv_path), "--save", str(tmp_path / "plots")])
    assert (tmp_path / "plots" / "run_combined.png").exists()


def test_save_frames(tmp_path):
    p = NPuzzle(get_puzzle("easy").tiles)
    r = p.solve(Heuristic.MANHATTAN)
    frames = save_frames(r.path, p.dim, tmp_path / "frames")
    assert [f.name for f in frames] == ["step_000.png", "step_001.png", "step_002.png"]
    assert all(f.exists() for f in frames)
