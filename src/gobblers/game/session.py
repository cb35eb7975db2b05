"""
One game of Gobblet Gobblers: board, inventory, turn and outcome.

The session is the only owner of its board. Bot search mutates that same
board through apply/undo pairs, so a session must not be driven from two
threads at once; run separate sessions for separate games.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from gobblers.ai.base import Agent
from gobblers.ai.pick import agent_for
from gobblers.config import (
    BOT_PLAYER,
    CELLS,
    Difficulty,
    GameConfig,
    Mode,
    parse_difficulty,
    parse_mode,
    parse_player,
)
from gobblers.core.board import Board
from gobblers.core.rules import can_place
from gobblers.game.actions import apply_move
from gobblers.game.results import outcome as position_outcome
from gobblers.game.results import winner_with_line
from gobblers.game.state import GameState
from gobblers.types import SIZES, Cell, Move, Outcome, Place, Player, Relocate, Size, other

logger = logging.getLogger(__name__)


def _is_cell(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < CELLS


class Phase(str, Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_BOT = "awaiting_bot"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    move: Optional[Move] = None
    player: Optional[Player] = None
    reason: str = ""
    outcome: Outcome = "in_progress"


@dataclass(frozen=True)
class Snapshot:
    """What a UI needs to draw the game; never exposes covered pieces."""
    tops: Tuple[Cell, ...]
    pieces_left: Dict[Player, Dict[Size, int]]
    current: Player
    outcome: Outcome
    phase: Phase
    winning_line: Optional[Tuple[int, ...]] = None


class GameSession:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        self._seed = seed
        cfg = config or GameConfig()
        self.initialize_game(cfg.starting_player, cfg.mode, cfg.difficulty)

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def initialize_game(
        self,
        starting_player: str = "X",
        mode: Mode | str = Mode.TWO_PLAYER,
        difficulty: Difficulty | str = Difficulty.EASY,
    ) -> None:
        self.config = GameConfig(
            starting_player=parse_player(starting_player),
            mode=parse_mode(mode),
            difficulty=parse_difficulty(difficulty),
        )
        self._agent: Agent = agent_for(self.config.difficulty, seed=self._seed)
        self._start()

    def reset_game(self) -> None:
        logger.info("Resetting game")
        self._start()

    def _start(self) -> None:
        start = self.config.starting_player
        self.state = GameState(board=Board(), current=start, last_status=f"Player {start} starts.")
        self._outcome: Outcome = "in_progress"
        self._winning_line: Optional[Tuple[int, ...]] = None
        self._phase = self._phase_for(start)
        logger.info(
            "New game: mode=%s difficulty=%s start=%s",
            self.config.mode.value, self.config.difficulty.value, start,
        )

    # -----------------------------
    # Configuration changes mid-session
    # -----------------------------
    def set_mode(self, mode: Mode | str) -> None:
        self.config.mode = parse_mode(mode)
        if self._phase is not Phase.TERMINAL:
            self._phase = self._phase_for(self.state.current)

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        self.config.difficulty = parse_difficulty(difficulty)
        self._agent = agent_for(self.config.difficulty, seed=self._seed)

    # -----------------------------
    # Queries
    # -----------------------------
    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current(self) -> Player:
        return self.state.current

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def agent(self) -> Agent:
        return self._agent

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tops=tuple(self.board.tops()),
            pieces_left=self.board.pieces_left.as_dict(),
            current=self.current,
            outcome=self._outcome,
            phase=self._phase,
            winning_line=self._winning_line,
        )

    def is_legal(self, move: Move, player: Player) -> bool:
        """False for anything that is not a playable Place or Relocate, never an exception."""
        if isinstance(move, Place):
            if move.size not in SIZES or not _is_cell(move.cell):
                return False
            return can_place(self.board, move.cell, player, move.size)

        if not isinstance(move, Relocate):
            return False
        if not (_is_cell(move.source) and _is_cell(move.dest)) or move.source == move.dest:
            return False
        piece = self.board.top(move.source)
        if piece is None or piece.owner != player:
            return False
        return can_place(self.board, move.dest, player, piece.size, is_relocation=True)

    # -----------------------------
    # Moves
    # -----------------------------
    def attempt_human_move(self, move: Move) -> MoveResult:
        player = self.current
        if self._phase is Phase.TERMINAL:
            return self._reject(move, player, "Game is over.")
        if self._phase is Phase.AWAITING_BOT:
            return self._reject(move, player, "Waiting for the bot to move.")
        if not self.is_legal(move, player):
            return self._reject(move, player, "Illegal move.")

        apply_move(self.board, move, player)
        return self._after_move(move, player)

    def request_bot_move(self) -> MoveResult:
        player = self.current
        if self._phase is not Phase.AWAITING_BOT:
            return self._reject(None, player, "Not the bot's turn.")

        move = self._agent.choose_move(self.state)
        apply_move(self.board, move, player)
        return self._after_move(move, player)

    def _reject(self, move: Optional[Move], player: Player, reason: str) -> MoveResult:
        logger.debug("Rejected %s for %s: %s", move, player, reason)
        self.state.last_status = reason
        return MoveResult(False, move, player, reason, self._outcome)

    def _after_move(self, move: Move, player: Player) -> MoveResult:
        nxt = other(player)
        result = position_outcome(self.board, nxt)

        if result in ("x_wins", "o_wins"):
            winner, line = winner_with_line(self.board)
            self._finish(result, tuple(line))
            self.state.last_status = f"Player {winner} wins!"
            return MoveResult(True, move, player, self.state.last_status, self._outcome)

        self.state.current = nxt
        if result == "draw":
            self._finish("draw", None)
            self.state.last_status = "Draw game."
            return MoveResult(True, move, player, self.state.last_status, self._outcome)

        self._phase = self._phase_for(nxt)
        self.state.last_status = f"Player {self.state.current}'s turn."
        logger.debug("%s played %s", player, move)
        return MoveResult(True, move, player, "", self._outcome)

    def _finish(self, outcome: Outcome, line: Optional[Tuple[int, ...]]) -> None:
        self._outcome = outcome
        self._winning_line = line
        self._phase = Phase.TERMINAL
        logger.info("Game over: %s", outcome)

    def _phase_for(self, to_move: Player) -> Phase:
        if self.config.mode is Mode.SINGLE and to_move == BOT_PLAYER:
            return Phase.AWAITING_BOT
        return Phase.AWAITING_HUMAN
