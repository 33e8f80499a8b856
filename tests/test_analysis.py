from __future__ import annotations

import csv
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from dropfour.scripts.selfplay import TRACE_COLUMNS
from dropfour_analysis.__main__ import main as analysis_main
from dropfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from dropfour_analysis.metrics.summarize import depth_summary, outcome_table, value_by_ply
from dropfour_analysis.plots import plot_nodes_by_depth, plot_outcomes, plot_value_by_ply

ROWS = [
    # game 0: depth 2 (FIRST) loses to depth 4 (SECOND) after a two-ply opening
    [0, 2, 4, 0, "FIRST", 0, 4, 0, 0, 0, 0, "SECOND", "loss"],
    [0, 2, 4, 1, "SECOND", 0, 4, 0, 0, 0, 0, "SECOND", "win"],
    [0, 2, 4, 2, "FIRST", 2, 3, 3, 50, 4, 1, "SECOND", "loss"],
    [0, 2, 4, 3, "SECOND", 4, 5, 10, 900, 80, 12, "SECOND", "win"],
    # game 1: depth 4 (FIRST) draws with depth 2 (SECOND)
    [1, 4, 2, 0, "FIRST", 4, 4, 5, 1000, 90, 15, "DRAW", "draw"],
    [1, 4, 2, 1, "SECOND", 2, 4, -2, 40, 3, 1, "DRAW", "draw"],
]


@pytest.fixture
def trace_csv(tmp_path) -> Path:
    path = tmp_path / "selfplay_20260101_000000.csv"
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(TRACE_COLUMNS)
        w.writerows(ROWS)
    return path


def test_load_results(trace_csv):
    df = load_results(LoadSpec(csv_path=trace_csv))
    assert len(df) == 6
    assert df["nodes"].dtype.kind in "if"


def test_load_results_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))


def test_load_results_missing_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("game,ply\n0,0\n")
    with pytest.raises(ValueError):
        load_results(LoadSpec(csv_path=path))


def test_latest_file_is_picked(tmp_path, trace_csv):
    newer = tmp_path / "selfplay_20270101_000000.csv"
    newer.write_text(trace_csv.read_text())
    assert load_latest_from_dir(tmp_path) == newer


def test_depth_summary_skips_opening_moves(trace_csv):
    df = load_results(LoadSpec(csv_path=trace_csv))
    out = depth_summary(df)
    assert out["depth"].tolist() == [2, 4]
    assert out["moves"].tolist() == [2, 2]
    assert out["avg_nodes"].tolist() == [45.0, 950.0]
    assert out["max_nodes"].tolist() == [50, 1000]


def test_outcome_table_counts_each_side(trace_csv):
    df = load_results(LoadSpec(csv_path=trace_csv))
    out = outcome_table(df)
    assert out["depth"].tolist() == [2, 4]
    assert out["games"].tolist() == [2, 2]
    assert out["wins"].tolist() == [0, 1]
    assert out["draws"].tolist() == [1, 1]
    assert out["losses"].tolist() == [1, 0]
    assert out["ppg"].tolist() == [0.25, 0.75]


def test_value_by_ply(trace_csv):
    df = load_results(LoadSpec(csv_path=trace_csv))
    out = value_by_ply(df)
    assert out["ply"].tolist() == [0, 1, 2, 3]
    assert out["count"].tolist() == [1, 1, 1, 1]
    assert out["mean"].tolist() == [5.0, -2.0, 3.0, 10.0]


def test_plots_are_written(trace_csv, tmp_path):
    df = load_results(LoadSpec(csv_path=trace_csv))
    outdir = tmp_path / "figs"

    paths = [
        plot_nodes_by_depth(depth_summary(df), outdir, show=False),
        plot_value_by_ply(value_by_ply(df), outdir, show=False),
        plot_outcomes(outcome_table(df), outdir, show=False),
    ]
    for p in paths:
        assert p is not None and p.exists()


def test_cli_end_to_end(trace_csv, tmp_path, capsys):
    outdir = tmp_path / "out"
    assert analysis_main(["analyze", "--csv", str(trace_csv), "--outdir", str(outdir)]) == 0
    assert (outdir / "nodes_by_depth.png").exists()
    assert (outdir / "hist_nodes.png").exists()
    assert "Results by depth" in capsys.readouterr().out
