from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import load_games, load_latest_from_dir, load_standings
from ..metrics.summarize import SummaryConfig, game_length_summary, head_to_head, side_advantage, standings_table
from ..plots.chart import plot_game_lengths, plot_head_to_head, plot_metric_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Gobblet Gobblers difficulty ladder CSVs.")
    ap.add_argument("--standings", type=str, default=None, help="Standings CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--games", type=str, default=None, help="Per-game CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing ladder_*.csv")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--metric", type=str, default="strength_wilson_lcb", help="Ranking metric (strength_wilson_lcb, ppg, points, avg_ms_per_move)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out tiers with fewer than this many games")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    results_dir = Path(args.results_dir)
    standings_path = Path(args.standings) if args.standings else load_latest_from_dir(results_dir, "ladder_standings_*.csv")
    games_path = Path(args.games) if args.games else load_latest_from_dir(results_dir, "ladder_games_*.csv")

    standings = load_standings(standings_path)
    games = load_games(games_path)

    print(f"\nLoaded: {standings_path}")
    print(f"Loaded: {games_path}  ({len(games):,} games)")

    cfg = SummaryConfig(metric=args.metric, min_games=args.min_games)  # type: ignore[arg-type]

    print("\n=== Standings ===")
    print(standings_table(standings, cfg).to_string(index=False))

    matrix = head_to_head(games)
    print("\n=== Head-to-head (row tier score vs column tier) ===")
    print(matrix.round(3).to_string())

    print("\n=== Score by side (X moves first) ===")
    print(side_advantage(games).round(3).to_string())

    print("\n=== Game length by pairing ===")
    print(game_length_summary(games).round(1).to_string())

    if not args.no_plots:
        outdir = Path(args.outdir)
        created = [
            plot_metric_bar(standings, outdir, metric="ppg", show=args.show),
            plot_head_to_head(matrix, outdir, show=args.show),
            plot_game_lengths(games, outdir, show=args.show),
        ]
        if not args.show:
            print(f"\nSaved {sum(p is not None for p in created)} figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
