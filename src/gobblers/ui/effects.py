from __future__ import annotations
import itertools
import sys
import time
from typing import TextIO

from gobblers.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

_FRAMES = "|/-\\"


def ai_thinking(
    label: str = "Bot is thinking",
    delay: float = AI_THINK_DELAY_SEC,
    out: TextIO | None = None,
) -> None:
    """
    Pause before the bot's reply so the human's own move stays on screen
    for a moment. Cosmetic only: the move is chosen after the pause.
    """
    if delay <= 0:
        return
    if not AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    out = out or sys.stdout
    deadline = time.monotonic() + delay
    for frame in itertools.cycle(_FRAMES):
        if time.monotonic() >= deadline:
            break
        out.write(f"\r{label}... {frame}")
        out.flush()
        time.sleep(0.08)
    out.write("\r" + " " * (len(label) + 6) + "\r")
    out.flush()
