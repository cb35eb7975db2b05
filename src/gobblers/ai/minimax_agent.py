from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from math import inf
from typing import Optional

from gobblers.config import MINIMAX_DEPTH
from gobblers.core.board import Board
from gobblers.core.movegen import generate_moves
from gobblers.core.rules import check_winner
from gobblers.game.actions import apply_move, undo_move
from gobblers.game.state import GameState
from gobblers.types import Move, Player, other

logger = logging.getLogger(__name__)

WIN_SCORE = 100


@dataclass
class MinimaxAgent:
    """
    Depth-bounded alpha-beta search over the live board.

    Scores are from the bot's side: a win found at ply d is worth 100 - d,
    a loss -100 + d, and an unresolved horizon 0. There is no static
    evaluation, so quiet positions all look equal.
    """
    name: str = "Minimax AI"
    depth: int = MINIMAX_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def choose_move(self, state: GameState) -> Move:
        move = self.pick_best_move(state.board, state.current)
        if move is None:
            raise ValueError("No valid moves.")
        return move

    def pick_best_move(self, board: Board, bot: Player) -> Optional[Move]:
        human = other(bot)
        self._nodes = 0
        self._cutoffs = 0
        start = time.perf_counter()

        best_score = -inf
        best_move: Optional[Move] = None

        for m in generate_moves(board, bot):
            apply_move(board, m, bot)
            score = self.minimax(board, 1, False, bot, human, -inf, inf, self.depth)
            undo_move(board, m, bot)

            # strict: first move found keeps ties
            if score > best_score:
                best_score = score
                best_move = m

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": best_score if best_move is not None else None,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "minimax bot=%s move=%s eval=%s nodes=%d cutoffs=%d",
            bot, best_move, self.last_info["eval"], self._nodes, self._cutoffs,
        )
        return best_move

    def minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        bot: Player,
        human: Player,
        alpha: float,
        beta: float,
        depth_limit: int,
    ) -> float:
        self._nodes += 1

        w = check_winner(board)
        if w == bot:
            return WIN_SCORE - depth
        if w == human:
            return -WIN_SCORE + depth
        if depth >= depth_limit:
            return 0

        to_play = bot if is_maximizing else human
        moves = generate_moves(board, to_play)
        if not moves:
            return 0

        best = -inf if is_maximizing else inf
        for m in moves:
            apply_move(board, m, to_play)
            score = self.minimax(board, depth + 1, not is_maximizing, bot, human, alpha, beta, depth_limit)
            undo_move(board, m, to_play)

            if is_maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)

            if beta <= alpha:
                self._cutoffs += 1
                break

        return best


def pick_best_move(board: Board, bot: Player, depth_limit: int = MINIMAX_DEPTH) -> Optional[Move]:
    return MinimaxAgent(depth=depth_limit).pick_best_move(board, bot)
