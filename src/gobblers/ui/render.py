from __future__ import annotations
from typing import Iterable, Optional, Set

from gobblers.config import CLEAR_SCREEN, SIDE
from gobblers.game.session import Snapshot
from gobblers.types import SIZES, Cell
from gobblers.ui.colors import BOLD, DIM, FG_CYAN, FG_GRAY, REVERSE, RESET, c, for_player

# small / medium / large, three columns wide
_SHAPES = {"small": " {} ", "medium": "({})", "large": "[{}]"}


def _piece(cell: Cell, index: int) -> str:
    if cell is None:
        return c(f" {index + 1} ", FG_GRAY)
    glyph = cell.owner.lower() if cell.size == "small" else cell.owner
    return for_player(_SHAPES[cell.size].format(glyph), cell.owner)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(snap: Snapshot, status: str = "", highlight: Optional[Iterable[int]] = None) -> None:
    clear_screen()

    hl: Set[int] = set(highlight) if highlight else set()

    print(c("GOBBLET GOBBLERS", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for r in range(SIDE):
        parts = []
        for col in range(SIDE):
            i = r * SIDE + col
            p = _piece(snap.tops[i], i)
            if i in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        print(" | " + " | ".join(parts) + " |")
        if r < SIDE - 1:
            print(c(" " + "-" * 19, DIM))

    print()
    for player in ("X", "O"):
        counts = "  ".join(f"{s[0].upper()}{snap.pieces_left[player][s]}" for s in SIZES)
        marker = "▶" if player == snap.current else " "
        print(f" {marker} {player} in hand: {counts}")

    print(c("   s5 = small on cell 5, 3>7 = move top piece, q = quit", DIM))
