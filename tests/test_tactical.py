"""Tests for the one-ply win/block heuristics and the tier dispatcher."""

import pytest

from gobblers.ai.minimax_agent import MinimaxAgent
from gobblers.ai.pick import agent_for
from gobblers.ai.random_agent import RandomAgent
from gobblers.ai.tactical_agent import TacticalAgent, find_blocking_move, find_winning_move
from gobblers.config import Difficulty
from gobblers.core.board import Board
from gobblers.core.movegen import generate_moves
from gobblers.core.rules import check_winner
from gobblers.game.actions import apply_move
from gobblers.game.state import GameState
from gobblers.types import Place

from helpers import locked_board, p


def _o_threat():
    """O shows medium pieces on 0 and 1; cell 2 is open."""
    return Board.from_stacks({0: [p("O", "medium")], 1: [p("O", "medium")]})


def test_find_winning_move_first_in_order():
    board = Board.from_stacks({0: [p("X", "medium")], 1: [p("X", "medium")]})
    before = board.copy()

    assert find_winning_move(board, "X") == Place(2, "small")
    assert board == before


def test_find_winning_move_none():
    board = Board.from_stacks({0: [p("X", "medium")]})
    assert find_winning_move(board, "X") is None


def test_find_blocking_move_needs_a_threat():
    assert find_blocking_move(Board(), "X") is None


def test_find_blocking_move():
    """
    Anything X puts on cell 2 short of a large piece gets covered, so the
    first real block is covering one of O's mediums with a large piece.
    """
    board = _o_threat()
    before = board.copy()

    block = find_blocking_move(board, "X")

    assert block == Place(0, "large")
    assert board == before

    apply_move(board, block, "X")
    assert find_winning_move(board, "O") is None


def test_tactical_prefers_win_over_block():
    board = Board.from_stacks({
        0: [p("O", "medium")], 1: [p("O", "medium")],
        6: [p("X", "medium")], 7: [p("X", "medium")],
    })
    agent = TacticalAgent()

    move = agent.choose_move(GameState(board=board, current="X"))

    assert agent.last_info["reason"] == "win"
    apply_move(board, move, "X")
    assert check_winner(board) == "X"


def test_tactical_blocks():
    board = _o_threat()
    agent = TacticalAgent()

    move = agent.choose_move(GameState(board=board, current="X"))

    assert agent.last_info["reason"] == "block"
    assert move == Place(0, "large")


def test_tactical_random_fallback_is_legal():
    board = Board.from_stacks({4: [p("O", "small")]})
    agent = TacticalAgent()
    agent.rng.seed(7)

    move = agent.choose_move(GameState(board=board, current="X"))

    assert agent.last_info["reason"] == "random"
    assert move in generate_moves(board, "X")


def test_random_agent_legal_and_seeded():
    board = Board()
    a = RandomAgent()
    b = RandomAgent()
    a.rng.seed(3)
    b.rng.seed(3)

    m1 = a.choose_move(GameState(board=board, current="O"))
    m2 = b.choose_move(GameState(board=board, current="O"))

    assert m1 == m2
    assert m1 in generate_moves(board, "O")


@pytest.mark.parametrize("agent", [RandomAgent(), TacticalAgent()])
def test_agents_refuse_when_stuck(agent):
    with pytest.raises(ValueError):
        agent.choose_move(GameState(board=locked_board(), current="X"))


def test_dispatcher_tiers():
    assert isinstance(agent_for(Difficulty.EASY), RandomAgent)
    assert isinstance(agent_for("medium"), TacticalAgent)
    assert isinstance(agent_for("hard"), TacticalAgent)
    assert isinstance(agent_for("hardest"), MinimaxAgent)
    assert isinstance(agent_for("super"), MinimaxAgent)

    with pytest.raises(ValueError):
        agent_for("impossible")


@pytest.mark.parametrize("tier", ["medium", "hard"])
def test_medium_and_hard_play_the_same(tier):
    """Both tiers take the win, else block."""
    agent = agent_for(tier, seed=1)
    move = agent.choose_move(GameState(board=_o_threat(), current="X"))
    assert move == Place(0, "large")
