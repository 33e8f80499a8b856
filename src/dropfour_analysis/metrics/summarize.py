from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def searched_moves(df: pd.DataFrame) -> pd.DataFrame:
    """Rows produced by a search (scripted opening moves have depth 0)."""
    _require_cols(df, ["depth"])
    return df[df["depth"].fillna(0) > 0].copy()


def depth_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Search cost per depth: nodes, cutoffs and time per move."""
    _require_cols(df, ["depth", "nodes"])
    moves = searched_moves(df)

    agg = {"moves": ("nodes", "size"), "avg_nodes": ("nodes", "mean"), "median_nodes": ("nodes", "median"), "max_nodes": ("nodes", "max")}
    if "cutoffs" in moves.columns:
        agg["avg_cutoffs"] = ("cutoffs", "mean")
    if "time_ms" in moves.columns:
        agg["avg_time_ms"] = ("time_ms", "mean")

    out = moves.groupby("depth").agg(**agg).reset_index()
    out["depth"] = out["depth"].astype(int)
    return out.sort_values("depth").reset_index(drop=True)


def outcome_table(df: pd.DataFrame) -> pd.DataFrame:
    """Wins, draws and losses per search depth, counting each game once per side."""
    _require_cols(df, ["game", "first_depth", "second_depth", "outcome"])
    games = df.drop_duplicates("game")[["game", "first_depth", "second_depth", "outcome"]]

    first = pd.DataFrame({
        "depth": games["first_depth"],
        "win": games["outcome"] == "FIRST",
        "loss": games["outcome"] == "SECOND",
    })
    second = pd.DataFrame({
        "depth": games["second_depth"],
        "win": games["outcome"] == "SECOND",
        "loss": games["outcome"] == "FIRST",
    })
    sides = pd.concat([first, second], ignore_index=True)
    sides["draw"] = ~(sides["win"] | sides["loss"])

    out = sides.groupby("depth").agg(
        games=("win", "size"),
        wins=("win", "sum"),
        draws=("draw", "sum"),
        losses=("loss", "sum"),
    ).reset_index()
    out["depth"] = out["depth"].astype(int)
    out["points"] = out["wins"] + 0.5 * out["draws"]
    out["ppg"] = out["points"] / out["games"]
    return out.sort_values("depth").reset_index(drop=True)


def value_by_ply(df: pd.DataFrame) -> pd.DataFrame:
    """Search values by ply. Values are from the mover's side."""
    _require_cols(df, ["ply", "value", "depth"])
    moves = searched_moves(df)
    out = moves.groupby("ply")["value"].agg(["count", "mean", "min", "max"]).reset_index()
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
