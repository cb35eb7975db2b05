# src/gobblers/config.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from gobblers.types import Player

CELLS = 9
SIDE = 3
PIECES_PER_SIZE = 2

# rows, columns, diagonals (scan order matters: first completed line wins)
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “Bot thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # lets the human see their own move before the reply

# AI defaults
MINIMAX_DEPTH = 4

# Human in single-player mode always plays X
BOT_PLAYER: Player = "O"


class Mode(str, Enum):
    SINGLE = "single"
    TWO_PLAYER = "two_player"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    HARDEST = "hardest"


_MODE_ALIASES = {
    "1p": Mode.SINGLE, "single": Mode.SINGLE, "bot": Mode.SINGLE,
    "2p": Mode.TWO_PLAYER, "two_player": Mode.TWO_PLAYER, "two-player": Mode.TWO_PLAYER,
}

_DIFFICULTY_ALIASES = {
    "easy": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
    "hardest": Difficulty.HARDEST,
    "super": Difficulty.HARDEST,
}

_PLAYER_ALIASES: dict[str, Player] = {
    "x": "X", "p1": "X", "first": "X",
    "o": "O", "p2": "O", "second": "O",
}


def parse_mode(raw: str | Mode) -> Mode:
    if isinstance(raw, Mode):
        return raw
    try:
        return _MODE_ALIASES[raw.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown mode {raw!r}. Use 1p or 2p.") from None


def parse_difficulty(raw: str | Difficulty) -> Difficulty:
    if isinstance(raw, Difficulty):
        return raw
    try:
        return _DIFFICULTY_ALIASES[raw.strip().lower()]
    except KeyError:
        choices = ", ".join(d.value for d in Difficulty)
        raise ValueError(f"Unknown difficulty {raw!r}. Use one of: {choices}.") from None


def parse_player(raw: str) -> Player:
    try:
        return _PLAYER_ALIASES[raw.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown player {raw!r}. Use X/O, P1/P2 or first/second.") from None


@dataclass
class GameConfig:
    starting_player: Player = "X"
    mode: Mode = Mode.TWO_PLAYER
    difficulty: Difficulty = Difficulty.EASY

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "GameConfig":
        """
        Build a config from page-style parameters (mode, difficulty, player).
        Missing keys keep their defaults; unknown keys are ignored.
        """
        cfg = cls()
        for key, value in params.items():
            if value is None or value == "":
                continue
            if key == "mode":
                cfg.mode = parse_mode(value)
            elif key == "difficulty":
                cfg.difficulty = parse_difficulty(value)
            elif key == "player":
                cfg.starting_player = parse_player(value)
        return cfg
