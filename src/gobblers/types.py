# src/gobblers/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Union

Player = Literal["X", "O"]
Size = Literal["small", "medium", "large"]
Outcome = Literal["in_progress", "x_wins", "o_wins", "draw"]

SIZES: tuple[Size, ...] = ("small", "medium", "large")
SIZE_RANK: dict[str, int] = {s: i for i, s in enumerate(SIZES)}


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


@dataclass(frozen=True, slots=True)
class Piece:
    owner: Player
    size: Size

    @property
    def rank(self) -> int:
        return SIZE_RANK[self.size]


Cell = Optional[Piece]


@dataclass(frozen=True, slots=True)
class Place:
    """Put a fresh piece of `size` from the mover's inventory on `cell`."""
    cell: int
    size: Size


@dataclass(frozen=True, slots=True)
class Relocate:
    """Move the top piece of `source` onto `dest`."""
    source: int
    dest: int


Move = Union[Place, Relocate]
