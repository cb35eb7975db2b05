from __future__ import annotations
from gobblers.config import USE_COLOR
from gobblers.types import Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PLAYER_COLORS: dict[Player, str] = {"X": FG_RED, "O": FG_YELLOW}


def c(s: str, *codes: str) -> str:
    if not USE_COLOR or not codes:
        return s
    return f"{''.join(codes)}{s}{RESET}"


def for_player(s: str, owner: Player) -> str:
    return c(s, PLAYER_COLORS[owner])
