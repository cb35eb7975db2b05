from __future__ import annotations

import math

from .ladder_types import Agg


def ppg(a: Agg) -> float:
    """Points per game: win 1, draw 0.5, loss 0."""
    return a.points / a.games if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return a.time_ms / a.moves if a.moves else 0.0


def avg_nodes_per_move(a: Agg) -> float:
    return a.nodes / a.moves if a.moves else 0.0


def wilson_lcb(p: float, n: int, z: float) -> float:
    """Lower edge of the Wilson score interval for rate p over n games."""
    if n <= 0:
        return 0.0
    p = min(1.0, max(0.0, p))
    zz = z * z / n
    mid = p + zz / 2.0
    spread = z * math.sqrt(p * (1.0 - p) / n + zz / (4.0 * n))
    return max(0.0, (mid - spread) / (1.0 + zz))


def strength_score(a: Agg, z: float) -> float:
    return wilson_lcb(ppg(a), a.games, z)


def record(a: Agg) -> str:
    return f"{a.wins}-{a.draws}-{a.losses}"
