from __future__ import annotations

import argparse
import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Dict, List, Sequence

from gobblers.ai.pick import agent_for
from gobblers.config import Difficulty, parse_difficulty

from .ladder_format import A, hr, term_width
from .ladder_play import MAX_PLIES, add_result, add_stats, chunked, run_pairings_batch
from .ladder_scoring import avg_ms_per_move, avg_nodes_per_move, ppg, record, strength_score
from .ladder_types import Agg, GameRecord, Team

logger = logging.getLogger(__name__)

STANDINGS_COLS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes", "avg_nodes_per_move",
]

GAMES_COLS = ["tier_x", "tier_o", "outcome", "plies", "capped"]


@dataclass
class LadderResult:
    agg: Dict[str, Agg]
    games: List[GameRecord] = field(default_factory=list)


def default_teams(tiers: Sequence[Difficulty] = tuple(Difficulty)) -> List[Team]:
    return [Team(name=t.value, make=partial(agent_for, t)) for t in tiers]


def run_ladder(
    teams: List[Team],
    games_per_pair: int = 10,
    seed: int = 1234,
    max_workers: int | None = None,
    batch_pairings: int = 1,
    opening_plies: int = 2,
    max_plies: int = MAX_PLIES,
) -> LadderResult:
    """Round-robin between every pair of teams, colours alternating."""
    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}
    result = LadderResult(agg=agg)

    pair_items = []
    for i in range(len(teams)):
        for j in range(i + 1, len(teams)):
            a_team, b_team = teams[i], teams[j]
            base_seed = seed + i * 10_000 + j * 100
            pair_items.append((a_team.name, b_team.name, a_team.make, b_team.make, base_seed))

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    logger.info("Ladder: %d teams, %d pairings, %d games/pair", len(teams), len(pair_items), games_per_pair)

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        futures = [
            ex.submit(run_pairings_batch, (chunk, games_per_pair, opening_plies, max_plies))
            for chunk in chunked(pair_items, batch_pairings)
        ]
        for fut in as_completed(futures):
            for (a_name, b_name, a_is_x, outcome, stats, record) in fut.result():
                add_result(agg[a_name], agg[b_name], outcome, a_is_x=a_is_x)
                add_stats(agg[a_name], stats["X" if a_is_x else "O"])
                add_stats(agg[b_name], stats["O" if a_is_x else "X"])
                result.games.append(record)

    return result


def print_standings(result: LadderResult, z: float) -> None:
    w = term_width(100)
    rows = sorted(result.agg.items(), key=lambda kv: strength_score(kv[1], z), reverse=True)

    print("\n" + A.bold("=== Ladder standings ==="))
    print(A.dim(hr("═", w)))
    print(A.dim(f"{'rk':>3}  {'tier':<10}{'strength':>10}{'ppg':>7}{'g':>5}{'W-D-L':>10}{'ms/mv':>9}{'nodes/mv':>10}"))
    print(A.dim(hr("─", w)))
    for i, (name, a) in enumerate(rows, start=1):
        p = ppg(a)
        p_txt = A.by_ppg(f"{p:7.3f}", p)
        wdl = record(a)
        print(
            f"{i:>3}  {name:<10}{strength_score(a, z):>10.4f}{p_txt}{a.games:>5}{wdl:>10}"
            f"{avg_ms_per_move(a):>9.1f}{avg_nodes_per_move(a):>10.1f}"
        )
    print(A.dim(hr("─", w)))

    capped = sum(1 for g in result.games if g.capped)
    if capped:
        print(A.yellow(f"{capped} of {len(result.games)} games hit the ply cap and were scored as draws."))


def export_csvs(result: LadderResult, outdir: Path, z: float) -> tuple[Path, Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    standings_path = outdir / f"ladder_standings_{ts}.csv"
    games_path = outdir / f"ladder_games_{ts}.csv"

    with open(standings_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(STANDINGS_COLS)
        for name, a in result.agg.items():
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.nodes, round(avg_nodes_per_move(a), 3),
            ])

    with open(games_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(GAMES_COLS)
        for g in result.games:
            w.writerow([g.tier_x, g.tier_o, g.outcome, g.plies, int(g.capped)])

    return standings_path, games_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gobblers-ladder", description="Play the difficulty tiers against each other.")
    ap.add_argument("--tiers", type=str, default=",".join(d.value for d in Difficulty), help="Comma-separated tiers")
    ap.add_argument("--games", type=int, default=10, help="Games per pairing (colours alternate)")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--opening-plies", type=int, default=2, help="Random plies before the tiers take over")
    ap.add_argument("--max-plies", type=int, default=MAX_PLIES, help="Ply cap; capped games count as draws")
    ap.add_argument("--z", type=float, default=1.28, help="z for the Wilson lower bound")
    ap.add_argument("--outdir", type=str, default="data/results")
    ap.add_argument("--no-export", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    tiers = [parse_difficulty(t) for t in args.tiers.split(",") if t.strip()]
    teams = default_teams(tiers)

    print(A.bold(f"Ladder: {', '.join(t.name for t in teams)}"))
    print(A.dim(hr("═", term_width(100))))

    result = run_ladder(
        teams,
        games_per_pair=args.games,
        seed=args.seed,
        max_workers=args.workers,
        opening_plies=args.opening_plies,
        max_plies=args.max_plies,
    )
    print_standings(result, args.z)

    if not args.no_export:
        standings_path, games_path = export_csvs(result, Path(args.outdir), args.z)
        print(f"Wrote CSV: {standings_path}")
        print(f"Wrote CSV: {games_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
