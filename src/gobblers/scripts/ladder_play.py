from __future__ import annotations

import logging
import random
from typing import Dict, List, Tuple

from gobblers.core.board import Board
from gobblers.core.movegen import generate_moves
from gobblers.core.rules import check_winner
from gobblers.game.actions import apply_move
from gobblers.game.state import GameState
from gobblers.types import other

from .ladder_types import Agg, GameRecord

logger = logging.getLogger(__name__)

MAX_PLIES = 120  # pieces can shuffle forever; call it a draw


def seed_agent(agent, seed: int) -> None:
    if hasattr(agent, "rng"):
        agent.rng.seed(seed)


def play_headless(
    agent_x,
    agent_o,
    seed_base: int = 0,
    opening_plies: int = 2,
    max_plies: int = MAX_PLIES,
) -> Tuple[str, Dict[str, Dict[str, int]], int, bool]:
    """
    Headless game loop.
    Returns (outcome, per-side stats, plies played, capped) where outcome is
    "X", "O" or "D". A game that reaches max_plies is scored as a draw.
    """
    state = GameState(board=Board(), current="X", last_status="")
    stats = {
        "X": {"moves": 0, "time_ms": 0, "nodes": 0},
        "O": {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    # deterministic seeds per game for reproducibility
    seed_agent(agent_x, seed_base + 101)
    seed_agent(agent_o, seed_base + 202)

    plies = 0

    # random opening so deterministic tiers don't replay one game
    rng = random.Random(seed_base)
    for _ in range(opening_plies):
        moves = generate_moves(state.board, state.current)
        if not moves:
            break
        apply_move(state.board, rng.choice(moves), state.current)
        state.current = other(state.current)
        plies += 1

    while True:
        w = check_winner(state.board)
        if w is not None:
            return w, stats, plies, False
        if not generate_moves(state.board, state.current):
            return "D", stats, plies, False
        if plies >= max_plies:
            return "D", stats, plies, True

        agent = agent_x if state.current == "X" else agent_o
        move = agent.choose_move(state)

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))

        apply_move(state.board, move, state.current)
        state.current = other(state.current)
        plies += 1


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    """
    outcome is "X", "O", or "D" for the game.
    a_is_x says whether team A played as X.
    """
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "X" and a_is_x) or (outcome == "O" and not a_is_x)
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_stats(agg: Agg, side: Dict[str, int]) -> None:
    agg.moves += side["moves"]
    agg.time_ms += side["time_ms"]
    agg.nodes += side["nodes"]


def run_pairings_batch(args) -> List[Tuple[str, str, bool, str, dict, GameRecord]]:
    """
    Worker entry point: play every game for a batch of pairings in one process.
    Colours alternate so each tier plays both X and O.
    """
    (batch_items, games_per_pair, opening_plies, max_plies) = args
    out = []
    for (a_name, b_name, a_make, b_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            a_is_x = g % 2 == 0
            if a_is_x:
                x, o = a_make(), b_make()
                x_name, o_name = a_name, b_name
            else:
                x, o = b_make(), a_make()
                x_name, o_name = b_name, a_name
            outcome, stats, plies, capped = play_headless(
                x, o, seed_base=base_seed + g, opening_plies=opening_plies, max_plies=max_plies,
            )
            logger.debug("%s vs %s -> %s in %d plies", x_name, o_name, outcome, plies)
            out.append((a_name, b_name, a_is_x, outcome, stats, GameRecord(x_name, o_name, outcome, plies, capped)))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
