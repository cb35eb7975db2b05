from __future__ import annotations
import random
from dataclasses import dataclass, field

from gobblers.core.movegen import generate_moves
from gobblers.game.state import GameState
from gobblers.types import Move


@dataclass
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        moves = generate_moves(state.board, state.current)
        if not moves:
            raise ValueError("No valid moves.")
        self.last_info = {"depth": 0, "nodes": 0, "time_ms": 1, "reason": "random"}
        return self.rng.choice(moves)
