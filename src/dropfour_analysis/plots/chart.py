from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    written: list[Path] = []

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")

        out = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if out is not None:
            written.append(out)
    return written


def plot_nodes_by_depth(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """`summary` is the output of depth_summary()."""
    if summary.empty or "avg_nodes" not in summary.columns:
        return None

    fig = plt.figure()
    plt.plot(summary["depth"], summary["avg_nodes"], marker="o", label="mean")
    if "max_nodes" in summary.columns:
        plt.plot(summary["depth"], summary["max_nodes"], marker="x", linestyle="--", label="max")
    plt.yscale("log")
    plt.title("Search nodes per move")
    plt.xlabel("depth")
    plt.ylabel("nodes")
    plt.legend()

    return _finish(fig, outdir, "nodes_by_depth.png", show=show)


def plot_value_by_ply(by_ply: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """`by_ply` is the output of value_by_ply()."""
    if by_ply.empty:
        return None

    fig = plt.figure(figsize=(10, 5))
    plt.plot(by_ply["ply"], by_ply["mean"], label="mean")
    plt.fill_between(by_ply["ply"], by_ply["min"], by_ply["max"], alpha=0.2, label="min/max")
    plt.title("Search value by ply (mover's side)")
    plt.xlabel("ply")
    plt.ylabel("value")
    plt.legend()

    return _finish(fig, outdir, "value_by_ply.png", show=show)


def plot_outcomes(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """`table` is the output of outcome_table()."""
    if table.empty:
        return None

    fig = plt.figure()
    labels = table["depth"].astype(str)
    bottom = pd.Series(0, index=table.index, dtype=float)
    for col in ("wins", "draws", "losses"):
        plt.bar(labels, table[col].astype(float), bottom=bottom, label=col)
        bottom = bottom + table[col].astype(float)
    plt.title("Results by search depth")
    plt.xlabel("depth")
    plt.ylabel("games")
    plt.legend()

    return _finish(fig, outdir, "outcomes_by_depth.png", show=show)
