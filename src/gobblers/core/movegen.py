from __future__ import annotations
from typing import List

from gobblers.config import CELLS
from gobblers.core.board import Board
from gobblers.core.rules import can_place
from gobblers.types import SIZES, Move, Place, Player, Relocate


def generate_moves(board: Board, player: Player) -> List[Move]:
    """
    All legal moves for `player`, placements first (small -> large, cell 0 -> 8),
    then relocations (source 0 -> 8, destination 0 -> 8).
    Callers that take the first qualifying move rely on this order.
    """
    moves: List[Move] = []

    for size in SIZES:
        if board.pieces_left.remaining(player, size) <= 0:
            continue
        for cell in range(CELLS):
            if can_place(board, cell, player, size):
                moves.append(Place(cell, size))

    for source in range(CELLS):
        top = board.top(source)
        if top is None or top.owner != player:
            continue
        for dest in range(CELLS):
            if dest != source and can_place(board, dest, player, top.size, is_relocation=True):
                moves.append(Relocate(source, dest))

    return moves


def has_moves(board: Board, player: Player) -> bool:
    return bool(generate_moves(board, player))
