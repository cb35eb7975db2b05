from __future__ import annotations
from typing import Protocol

from gobblers.game.state import GameState
from gobblers.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
