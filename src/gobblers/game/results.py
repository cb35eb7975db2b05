from __future__ import annotations
from typing import List, Optional, Tuple

from gobblers.core.board import Board
from gobblers.core.movegen import has_moves
from gobblers.core.rules import check_winner_with_line
from gobblers.types import Outcome, Player


def winner_with_line(board: Board) -> Optional[Tuple[Player, List[int]]]:
    return check_winner_with_line(board)


def draw(board: Board, to_move: Player) -> bool:
    """No line on the board and the side to move is stuck."""
    return check_winner_with_line(board) is None and not has_moves(board, to_move)


def outcome(board: Board, to_move: Player) -> Outcome:
    """Classify the position with `to_move` as the side about to play."""
    w = check_winner_with_line(board)
    if w is not None:
        return "x_wins" if w[0] == "X" else "o_wins"
    if draw(board, to_move):
        return "draw"
    return "in_progress"
