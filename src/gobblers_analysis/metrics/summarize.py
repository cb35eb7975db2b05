from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal["strength_wilson_lcb", "ppg", "points", "avg_ms_per_move"]

TIER_ORDER = ["easy", "medium", "hard", "hardest"]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def standings_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = df.copy()
    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games]

    # lower is better only for speed
    ascending = cfg.metric == "avg_ms_per_move"
    out = out.sort_values(cfg.metric, ascending=ascending)

    cols = ["name", "games", "wins", "draws", "losses", "ppg", "strength_wilson_lcb", "avg_ms_per_move", "avg_nodes_per_move"]
    out = out[[c for c in cols if c in out.columns]].reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def _perspective(games: pd.DataFrame, side: str) -> pd.DataFrame:
    me, opp = ("tier_x", "tier_o") if side == "X" else ("tier_o", "tier_x")
    score = games["outcome"].map({side: 1.0, "D": 0.5}).fillna(0.0)
    return pd.DataFrame({
        "tier": games[me].to_numpy(),
        "opponent": games[opp].to_numpy(),
        "side": side,
        "score": score.to_numpy(),
    })


def long_scores(games: pd.DataFrame) -> pd.DataFrame:
    """One row per (game, participant) with score 1 / 0.5 / 0."""
    _require_cols(games, ["tier_x", "tier_o", "outcome"])
    return pd.concat([_perspective(games, "X"), _perspective(games, "O")], ignore_index=True)


def _tier_sort(labels) -> list[str]:
    known = [t for t in TIER_ORDER if t in set(labels)]
    return known + sorted(set(labels) - set(known))


def head_to_head(games: pd.DataFrame) -> pd.DataFrame:
    """Mean score of the row tier against the column tier."""
    scores = long_scores(games)
    matrix = scores.pivot_table(index="tier", columns="opponent", values="score", aggfunc="mean")
    order = _tier_sort(list(matrix.index) + list(matrix.columns))
    return matrix.reindex(index=order, columns=order)


def side_advantage(games: pd.DataFrame) -> pd.DataFrame:
    """Mean score per tier when moving first (X) vs second (O)."""
    scores = long_scores(games)
    table = scores.pivot_table(index="tier", columns="side", values="score", aggfunc="mean")
    return table.reindex(index=_tier_sort(table.index))


def game_length_summary(games: pd.DataFrame) -> pd.DataFrame:
    _require_cols(games, ["tier_x", "tier_o", "plies"])
    g = games.copy()
    g["pairing"] = g.apply(lambda r: " v ".join(_tier_sort([r["tier_x"], r["tier_o"]])), axis=1)
    return g.groupby("pairing")["plies"].describe()[["count", "mean", "min", "max"]]
