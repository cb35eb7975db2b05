from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Optional

from gobblers.core.board import Board
from gobblers.core.movegen import generate_moves
from gobblers.core.rules import has_winner
from gobblers.game.actions import apply_move, undo_move
from gobblers.game.state import GameState
from gobblers.types import Move, Player, other

logger = logging.getLogger(__name__)


def find_winning_move(board: Board, player: Player) -> Optional[Move]:
    """First generated move after which some line is complete."""
    for m in generate_moves(board, player):
        apply_move(board, m, player)
        win = has_winner(board)
        undo_move(board, m, player)
        if win:
            return m
    return None


def find_blocking_move(board: Board, player: Player) -> Optional[Move]:
    """
    If the opponent could win next ply, return the first of our moves that
    leaves them without a winning reply. Single-ply only: forks are not seen.
    """
    opp = other(player)
    if find_winning_move(board, opp) is None:
        return None

    for m in generate_moves(board, player):
        apply_move(board, m, player)
        still_wins = find_winning_move(board, opp)
        undo_move(board, m, player)
        if still_wins is None:
            return m
    return None


@dataclass
class TacticalAgent:
    """
    Cheap one-ply tactics:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate win
      3) Otherwise a random legal move

    Used for both the medium and the hard tier.
    """
    name: str = "Tactical"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        t0 = time.perf_counter()
        board = state.board
        me = state.current

        moves = generate_moves(board, me)
        if not moves:
            raise ValueError("No valid moves.")

        reason = "win"
        m = find_winning_move(board, me)
        if m is None:
            reason = "block"
            m = find_blocking_move(board, me)
        if m is None:
            reason = "random"
            m = self.rng.choice(moves)

        self.last_info = {
            "depth": 1,
            "nodes": len(moves),
            "reason": reason,
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        logger.debug("%s picked %s (%s)", self.name, m, reason)
        return m
