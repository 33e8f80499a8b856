from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import depth_summary, numeric_summary, outcome_table, value_by_ply
from ..plots.chart import plot_histograms, plot_nodes_by_depth, plot_outcomes, plot_value_by_ply


DEFAULT_NUMERIC_PLOTS = [
    "nodes",
    "cutoffs",
    "time_ms",
    "value",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour-analysis", description="Analyze dropfour self-play CSV traces.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a trace CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_*.csv")
    ap.add_argument("--pattern", type=str, default="selfplay_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--no-hists", action="store_true", help="Disable histogram generation")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Games: {df['game'].nunique():,}")

    by_depth = depth_summary(df)
    print("\n=== Search cost by depth ===")
    print(by_depth.to_string(index=False))

    results = outcome_table(df)
    print("\n=== Results by depth ===")
    print(results.to_string(index=False))

    by_ply = value_by_ply(df)

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    if not args.no_hists:
        plot_histograms(df, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)

    plot_nodes_by_depth(by_depth, outdir, show=args.show)
    plot_value_by_ply(by_ply, outdir, show=args.show)
    plot_outcomes(results, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
