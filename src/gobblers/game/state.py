from __future__ import annotations
from dataclasses import dataclass

from gobblers.core.board import Board
from gobblers.types import Player


@dataclass(slots=True)
class GameState:
    board: Board
    current: Player
    last_status: str = "Player X starts."
