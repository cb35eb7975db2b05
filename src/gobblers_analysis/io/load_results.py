from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


STANDINGS_NUMERIC = [
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_nodes_per_move",
]

GAMES_REQUIRED = ("tier_x", "tier_o", "outcome", "plies")


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = ("name",)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def _read(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")
    return df


def load_standings(csv_path: Path) -> pd.DataFrame:
    df = _read(LoadSpec(csv_path=csv_path, required_cols=("name",)))
    df = _coerce_numeric(df, STANDINGS_NUMERIC)
    df["name"] = df["name"].astype(str)
    return df[df["name"].str.len() > 0].copy()


def load_games(csv_path: Path) -> pd.DataFrame:
    df = _read(LoadSpec(csv_path=csv_path, required_cols=GAMES_REQUIRED))
    df = _coerce_numeric(df, ["plies", "capped"])
    df["outcome"] = df["outcome"].astype(str).str.upper()
    return df


def load_latest_from_dir(results_dir: Path, pattern: str) -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
