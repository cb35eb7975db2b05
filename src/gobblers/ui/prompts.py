from __future__ import annotations
import re
from typing import Optional

from gobblers.config import CELLS
from gobblers.types import Move, Place, Relocate, Size

_SIZE_LETTERS: dict[str, Size] = {"s": "small", "m": "medium", "l": "large"}

_PLACE_RE = re.compile(r"^(small|medium|large|[sml])\s*([0-9]+)$")
_RELOCATE_RE = re.compile(r"^([0-9]+)\s*(?:>|-|to)\s*([0-9]+)$")


def _cell(raw: str) -> int:
    n = int(raw)
    if n < 1 or n > CELLS:
        raise ValueError(f"Cell must be between 1 and {CELLS}.")
    return n - 1


def parse_move(raw: str) -> Optional[Move]:
    """
    Cells are numbered 1-9, row by row.
      s5 / m 5 / large 9  -> place a piece from hand
      3>7 / 3-7 / 3 to 7  -> move your top piece from 3 to 7
      q                   -> quit (returns None)
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None

    m = _PLACE_RE.match(s)
    if m:
        size = _SIZE_LETTERS[m.group(1)[0]]
        return Place(_cell(m.group(2)), size)

    m = _RELOCATE_RE.match(s)
    if m:
        source, dest = _cell(m.group(1)), _cell(m.group(2))
        if source == dest:
            raise ValueError("Pick a different destination cell.")
        return Relocate(source, dest)

    raise ValueError("Invalid input. Try s5, m1, l9, 3>7 or q.")


def format_move(move: Move) -> str:
    if isinstance(move, Place):
        return f"{move.size[0]}{move.cell + 1}"
    return f"{move.source + 1}>{move.dest + 1}"
