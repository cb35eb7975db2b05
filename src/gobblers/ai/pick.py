from __future__ import annotations

import random
from typing import Optional

from gobblers.ai.base import Agent
from gobblers.ai.minimax_agent import MinimaxAgent
from gobblers.ai.random_agent import RandomAgent
from gobblers.ai.tactical_agent import TacticalAgent
from gobblers.config import MINIMAX_DEPTH, Difficulty, parse_difficulty


def agent_for(difficulty: Difficulty | str, seed: Optional[int] = None) -> Agent:
    """
    Map a difficulty tier to its move-selection strategy.

      easy    -> uniformly random legal move
      medium  -> win, else block, else random
      hard    -> same as medium
      hardest -> alpha-beta minimax, depth 4
    """
    tier = parse_difficulty(difficulty)
    rng = random.Random(seed)

    if tier is Difficulty.EASY:
        return RandomAgent(name="Easy", rng=rng)
    if tier is Difficulty.MEDIUM:
        return TacticalAgent(name="Medium", rng=rng)
    if tier is Difficulty.HARD:
        return TacticalAgent(name="Hard", rng=rng)
    return MinimaxAgent(name="Hardest", depth=MINIMAX_DEPTH)
