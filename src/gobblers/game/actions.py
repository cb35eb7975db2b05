from __future__ import annotations
from gobblers.core.board import Board
from gobblers.types import Move, Piece, Place, Player


def apply_move(board: Board, move: Move, player: Player) -> None:
    """
    Mutate the board for one move. No legality check here: callers
    only pass moves from generate_moves() or moves vetted by can_place().
    """
    if isinstance(move, Place):
        board.push(move.cell, Piece(player, move.size))
        board.pieces_left.decrement(player, move.size)
    else:
        piece = board.pop(move.source)
        board.push(move.dest, piece)


def undo_move(board: Board, move: Move, player: Player) -> None:
    """Exact inverse of apply_move(); calls must nest LIFO."""
    if isinstance(move, Place):
        board.pop(move.cell)
        board.pieces_left.increment(player, move.size)
    else:
        piece = board.pop(move.dest)
        board.push(move.source, piece)
