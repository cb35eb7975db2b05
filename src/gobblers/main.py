from __future__ import annotations

import argparse
import logging

from gobblers.config import Difficulty, GameConfig
from gobblers.game.controller import run_game
from gobblers.game.session import GameSession
from gobblers.ui.menu import run_menu


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gobblers",
        description="Play Gobblet Gobblers in the terminal. With no flags an interactive menu is shown.",
    )
    ap.add_argument("--mode", type=str, default=None, help="1p (vs bot) or 2p (two humans)")
    ap.add_argument(
        "--difficulty",
        type=str,
        default=None,
        help=f"Bot tier: {', '.join(d.value for d in Difficulty)} (super = hardest)",
    )
    ap.add_argument("--player", type=str, default=None, help="Who starts: X/O, P1/P2 or first/second")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the bot's random choices")
    ap.add_argument("--no-delay", action="store_true", help="Skip the bot 'thinking' pause")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    params = {"mode": args.mode, "difficulty": args.difficulty, "player": args.player}
    if not any(params.values()):
        run_menu(seed=args.seed)
        return 0

    try:
        cfg = GameConfig.from_params(params)
    except ValueError as e:
        ap.error(str(e))

    run_game(GameSession(cfg, seed=args.seed), show_thinking=not args.no_delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
