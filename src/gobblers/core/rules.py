from __future__ import annotations
from typing import List, Optional, Set, Tuple

from gobblers.config import WIN_LINES
from gobblers.core.board import Board
from gobblers.types import SIZE_RANK, Player, Size


def can_place(board: Board, cell: int, player: Player, size: Size, is_relocation: bool = False) -> bool:
    """
    A piece may land on an empty cell or strictly cover a smaller one.
    Placements also need a piece of that size in hand; relocations never touch inventory.
    """
    top = board.top(cell)
    top_rank = top.rank if top is not None else -1
    if SIZE_RANK[size] <= top_rank:
        return False
    if not is_relocation and board.pieces_left.remaining(player, size) <= 0:
        return False
    return True


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[int]]]:
    tops = board.tops()
    for a, b, c in WIN_LINES:
        pa, pb, pc = tops[a], tops[b], tops[c]
        if pa and pb and pc and pa.owner == pb.owner == pc.owner:
            return pa.owner, [a, b, c]
    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def has_winner(board: Board) -> bool:
    return check_winner_with_line(board) is not None


def line_owners(board: Board) -> Set[Player]:
    """Owners of every completed line (more than one only after an uncovering relocation)."""
    tops = board.tops()
    owners: Set[Player] = set()
    for a, b, c in WIN_LINES:
        pa, pb, pc = tops[a], tops[b], tops[c]
        if pa and pb and pc and pa.owner == pb.owner == pc.owner:
            owners.add(pa.owner)
    return owners
