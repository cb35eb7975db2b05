from __future__ import annotations

from typing import Optional

from gobblers.game.session import GameSession, Phase
from gobblers.types import Outcome
from gobblers.ui.effects import ai_thinking
from gobblers.ui.prompts import format_move, parse_move
from gobblers.ui.render import render

_OUTCOME_TEXT = {
    "x_wins": "Player X wins!",
    "o_wins": "Player O wins!",
    "draw": "Draw game: no legal moves left.",
}


def _bot_status(session: GameSession, move_txt: str) -> str:
    agent = session.agent
    info = getattr(agent, "last_info", None) or {}
    bits = [f"Bot ({agent.name}) played {move_txt}"]
    if "reason" in info:
        bits.append(str(info["reason"]))
    if "nodes" in info and info.get("nodes"):
        bits.append(f"nodes={info['nodes']}")
    if "cutoffs" in info:
        bits.append(f"cut={info['cutoffs']}")
    if "eval" in info:
        bits.append(f"eval={info['eval']}")
    if "time_ms" in info:
        bits.append(f"{info['time_ms']}ms")
    return " | ".join(bits)


def run_game(session: GameSession, show_thinking: bool = True) -> Optional[Outcome]:
    """
    Interactive terminal loop over one session.
    Returns the final outcome, or None if the player quit.
    """
    status = session.state.last_status

    while True:
        snap = session.snapshot()

        if snap.phase is Phase.TERMINAL:
            render(snap, _OUTCOME_TEXT[snap.outcome], highlight=snap.winning_line)
            return snap.outcome

        render(snap, status)

        if snap.phase is Phase.AWAITING_BOT:
            if show_thinking:
                ai_thinking(f"{session.agent.name} bot")
            res = session.request_bot_move()
            status = _bot_status(session, format_move(res.move)) if res.move is not None else res.reason
            continue

        raw = input(f"Player {snap.current} move: ")
        try:
            move = parse_move(raw)
        except ValueError as e:
            status = str(e)
            continue

        if move is None:
            render(snap, "Game quit.")
            return None

        res = session.attempt_human_move(move)
        if res.accepted:
            status = f"Player {res.player} played {format_move(move)} | Next: Player {session.current}"
        else:
            status = f"{res.reason} ({format_move(move)})"
