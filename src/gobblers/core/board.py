# src/gobblers/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from gobblers.config import CELLS, PIECES_PER_SIZE
from gobblers.types import SIZES, Cell, Piece, Player, Size


def _full_counts() -> Dict[Player, Dict[Size, int]]:
    return {p: {s: PIECES_PER_SIZE for s in SIZES} for p in ("X", "O")}


@dataclass(slots=True)
class Inventory:
    """Pieces each player still holds off the board."""
    counts: Dict[Player, Dict[Size, int]] = field(default_factory=_full_counts)

    def remaining(self, player: Player, size: Size) -> int:
        return self.counts[player][size]

    def total(self, player: Player) -> int:
        return sum(self.counts[player].values())

    def decrement(self, player: Player, size: Size) -> None:
        if self.counts[player][size] <= 0:
            raise ValueError(f"No {size} pieces left for {player}.")
        self.counts[player][size] -= 1

    def increment(self, player: Player, size: Size) -> None:
        if self.counts[player][size] >= PIECES_PER_SIZE:
            raise ValueError(f"{player} already holds every {size} piece.")
        self.counts[player][size] += 1

    def copy(self) -> "Inventory":
        return Inventory({p: dict(sizes) for p, sizes in self.counts.items()})

    def as_dict(self) -> Dict[Player, Dict[Size, int]]:
        return {p: dict(sizes) for p, sizes in self.counts.items()}


@dataclass(slots=True)
class Board:
    stacks: List[List[Piece]] = field(default_factory=list)
    pieces_left: Inventory = field(default_factory=Inventory)

    def __post_init__(self) -> None:
        if not self.stacks:
            self.stacks = [[] for _ in range(CELLS)]
        if len(self.stacks) != CELLS:
            raise ValueError(f"Board needs {CELLS} stacks, got {len(self.stacks)}.")

    @classmethod
    def from_stacks(
        cls,
        stacks: Dict[int, Iterable[Piece]],
        pieces_left: Optional[Dict[Player, Dict[Size, int]]] = None,
    ) -> "Board":
        """
        Build a board from {cell: [bottom, ..., top]}.
        Inventory defaults to full counts minus whatever is on the board.
        """
        b = cls()
        for cell, pieces in stacks.items():
            b.stacks[cell] = list(pieces)
        if pieces_left is not None:
            b.pieces_left = Inventory({p: dict(sizes) for p, sizes in pieces_left.items()})
        else:
            for stack in b.stacks:
                for piece in stack:
                    b.pieces_left.decrement(piece.owner, piece.size)
        return b

    def _check_cell(self, cell: int) -> None:
        if cell < 0 or cell >= CELLS:
            raise ValueError(f"Cell {cell} out of range.")

    def copy(self) -> "Board":
        return Board([stack[:] for stack in self.stacks], self.pieces_left.copy())

    def top(self, cell: int) -> Cell:
        self._check_cell(cell)
        stack = self.stacks[cell]
        return stack[-1] if stack else None

    def tops(self) -> List[Cell]:
        return [stack[-1] if stack else None for stack in self.stacks]

    def push(self, cell: int, piece: Piece) -> None:
        self._check_cell(cell)
        self.stacks[cell].append(piece)

    def pop(self, cell: int) -> Piece:
        self._check_cell(cell)
        if not self.stacks[cell]:
            raise ValueError(f"Cannot pop: cell {cell} is empty.")
        return self.stacks[cell].pop()

    def is_empty(self) -> bool:
        return not any(self.stacks)
