from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field


def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("TERM", "") in ("", "dumb"):
        return False
    return sys.stdout.isatty()


@dataclass
class Style:
    """ANSI styling for ladder output; plain text when stdout is not a terminal."""
    enabled: bool = field(default_factory=_color_enabled)

    def paint(self, s: str, code: str) -> str:
        return f"\x1b[{code}m{s}\x1b[0m" if self.enabled else s

    def bold(self, s: str) -> str:
        return self.paint(s, "1")

    def dim(self, s: str) -> str:
        return self.paint(s, "2")

    def yellow(self, s: str) -> str:
        return self.paint(s, "33")

    def by_ppg(self, s: str, value: float) -> str:
        if value >= 0.75:
            return self.paint(s, "32")
        if value >= 0.5:
            return self.paint(s, "33")
        return self.paint(s, "31")


A = Style()


def term_width(default: int = 100) -> int:
    return shutil.get_terminal_size(fallback=(default, 24)).columns


def hr(char: str = "─", width: int | None = None) -> str:
    return char * max(10, width or term_width())
