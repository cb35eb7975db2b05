"""Tests for the depth-bounded alpha-beta search."""

from math import inf

from gobblers.ai.minimax_agent import MinimaxAgent, pick_best_move
from gobblers.core.board import Board
from gobblers.core.movegen import generate_moves
from gobblers.core.rules import check_winner
from gobblers.game.actions import apply_move, undo_move
from gobblers.game.state import GameState
from gobblers.types import Place, Relocate

from helpers import locked_board, p


def test_no_moves_no_pick():
    board = locked_board()
    assert generate_moves(board, "O") == []
    assert pick_best_move(board, "O") is None


def test_terminal_scores():
    """Faster wins score higher; losses are softened by depth."""
    agent = MinimaxAgent()

    won = Board.from_stacks({0: [p("O")], 1: [p("O")], 2: [p("O", "large")]})
    assert agent.minimax(won, 1, False, "O", "X", -inf, inf, 4) == 99
    assert agent.minimax(won, 3, True, "O", "X", -inf, inf, 4) == 97

    lost = Board.from_stacks({0: [p("X")], 4: [p("X")], 8: [p("X", "large")]})
    assert agent.minimax(lost, 2, True, "O", "X", -inf, inf, 4) == -98

    quiet = Board.from_stacks({4: [p("X")]})
    assert agent.minimax(quiet, 4, True, "O", "X", -inf, inf, 4) == 0


def test_takes_immediate_win():
    board = Board.from_stacks({
        0: [p("O", "medium")], 1: [p("O", "medium")],
        3: [p("X", "small")], 4: [p("X", "small")],
    })
    before = board.copy()
    agent = MinimaxAgent()

    move = agent.pick_best_move(board, "O")

    assert board == before
    assert agent.last_info["eval"] == 99
    apply_move(board, move, "O")
    assert check_winner(board) == "O"


def test_choose_move_uses_side_to_move():
    board = Board.from_stacks({6: [p("X", "large")], 7: [p("X", "large")]})
    agent = MinimaxAgent()

    move = agent.choose_move(GameState(board=board, current="X"))

    apply_move(board, move, "X")
    assert check_winner(board) == "X"


def _endgame():
    """
    Eight large pieces locked in place, cell 8 open, one small piece in
    each hand. Few enough moves to check the search by brute force.
    """
    return locked_board(empty_last=True, x_hand={"small": 1}, o_hand={"small": 1})


def test_picks_a_maximal_first_found_move():
    """The chosen move scores the best one-ply evaluation; ties keep the first."""
    board = _endgame()
    agent = MinimaxAgent()
    moves = generate_moves(board, "O")
    assert moves[0] == Place(8, "small")
    assert Relocate(1, 8) in moves

    scores = []
    for m in moves:
        apply_move(board, m, "O")
        scores.append(agent.minimax(board, 1, False, "O", "X", -inf, inf, 4))
        undo_move(board, m, "O")

    best = max(scores)
    expected = moves[scores.index(best)]

    before = board.copy()
    assert agent.pick_best_move(board, "O") == expected
    assert agent.last_info["eval"] == best
    assert board == before


def test_blocks_an_immediate_loss():
    """X threatens the top row; whatever O does, X must not win next ply."""
    board = Board.from_stacks({
        0: [p("X", "large")], 1: [p("X", "large")],
        4: [p("O", "small")],
    })
    agent = MinimaxAgent()

    move = agent.pick_best_move(board, "O")

    apply_move(board, move, "O")
    for reply in generate_moves(board, "X"):
        apply_move(board, reply, "X")
        assert check_winner(board) != "X"
        undo_move(board, reply, "X")


def test_search_stats_recorded():
    agent = MinimaxAgent(depth=2)
    agent.pick_best_move(Board.from_stacks({4: [p("X", "large")]}), "O")

    info = agent.last_info
    assert info["depth"] == 2
    assert info["nodes"] > 0
    assert info["cutoffs"] >= 0
    assert info["time_ms"] >= 1
