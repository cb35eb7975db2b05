"""Board fixtures shared by the test modules."""

from gobblers.core.board import Board
from gobblers.types import Piece

ZERO = {"small": 0, "medium": 0, "large": 0}

# X O X / X O O / O X X: no line for either side
DRAW_PATTERN = "XOXXOOOXX"


def p(owner, size="small"):
    return Piece(owner, size)


def locked_board(empty_last=False, x_hand=None, o_hand=None):
    """
    Every cell holds a large piece in DRAW_PATTERN, so nothing can move.
    With empty_last the last cell is left open. Hands default to empty;
    sizes missing from x_hand/o_hand count as zero.
    """
    cells = range(8) if empty_last else range(9)
    stacks = {i: [Piece(DRAW_PATTERN[i], "large")] for i in cells}
    return Board.from_stacks(
        stacks,
        pieces_left={"X": dict(ZERO, **(x_hand or {})), "O": dict(ZERO, **(o_hand or {}))},
    )
