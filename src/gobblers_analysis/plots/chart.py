from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Optional[Path]:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_metric_bar(df: pd.DataFrame, outdir: Path, metric: str = "ppg", *, show: bool) -> Optional[Path]:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    rows = df[["name", metric]].dropna()
    fig = plt.figure(figsize=(7, 4))
    plt.bar(rows["name"].astype(str), rows[metric].astype(float))
    plt.title(f"{metric} by tier")
    plt.xlabel("tier")
    plt.ylabel(metric)
    return _finish(fig, outdir, f"bar_{metric}.png", show=show)


def plot_head_to_head(matrix: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    """Heatmap of row-tier score against column tier (0 = always lost, 1 = always won)."""
    if matrix.empty:
        return None

    fig, ax = plt.subplots(figsize=(5, 4))
    im = ax.imshow(matrix.to_numpy(dtype=float), vmin=0.0, vmax=1.0, cmap="RdYlGn")
    ax.set_xticks(range(len(matrix.columns)), labels=[str(c) for c in matrix.columns])
    ax.set_yticks(range(len(matrix.index)), labels=[str(i) for i in matrix.index])
    ax.set_xlabel("opponent")
    ax.set_ylabel("tier")
    ax.set_title("Head-to-head score")

    for i in range(matrix.shape[0]):
        for j in range(matrix.shape[1]):
            v = matrix.iat[i, j]
            if pd.notna(v):
                ax.text(j, i, f"{v:.2f}", ha="center", va="center", fontsize=8)

    fig.colorbar(im, ax=ax)
    return _finish(fig, outdir, "head_to_head.png", show=show)


def plot_game_lengths(games: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    if "plies" not in games.columns or games["plies"].dropna().empty:
        return None

    fig = plt.figure()
    plt.hist(games["plies"].dropna(), bins=30)
    plt.title("Game length")
    plt.xlabel("plies")
    plt.ylabel("games")
    return _finish(fig, outdir, "hist_plies.png", show=show)
