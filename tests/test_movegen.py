"""Tests for move generation and the apply/undo pair."""

import random

import pytest

from gobblers.core.board import Board
from gobblers.core.movegen import generate_moves, has_moves
from gobblers.core.rules import has_winner
from gobblers.game.actions import apply_move, undo_move
from gobblers.game.results import draw, outcome
from gobblers.types import Place, Relocate, other

from helpers import ZERO, locked_board, p


def test_opening_moves():
    """27 placements and nothing to relocate on an empty board."""
    moves = generate_moves(Board(), "X")

    assert len(moves) == 27
    assert all(isinstance(m, Place) for m in moves)
    assert moves[0] == Place(0, "small")
    assert moves[8] == Place(8, "small")
    assert moves[9] == Place(0, "medium")
    assert moves[-1] == Place(8, "large")


def test_placements_come_before_relocations():
    board = Board.from_stacks({4: [p("X", "small")]})
    moves = generate_moves(board, "X")

    relocations = [m for m in moves if isinstance(m, Relocate)]
    first_relocation = moves.index(relocations[0])

    assert all(isinstance(m, Place) for m in moves[:first_relocation])
    assert relocations == [Relocate(4, d) for d in range(9) if d != 4]
    assert Place(4, "small") not in moves
    assert Place(4, "medium") in moves


def test_only_own_top_pieces_relocate():
    board = Board.from_stacks({0: [p("X", "small"), p("O", "medium")]})

    assert not any(isinstance(m, Relocate) for m in generate_moves(board, "X"))
    o_relocations = [m for m in generate_moves(board, "O") if isinstance(m, Relocate)]
    assert {m.source for m in o_relocations} == {0}


def test_no_placement_without_inventory():
    hand = dict(ZERO, medium=1)
    board = Board.from_stacks({}, pieces_left={"X": hand, "O": dict(ZERO)})

    moves = generate_moves(board, "X")

    assert moves == [Place(c, "medium") for c in range(9)]


def test_locked_board_is_a_draw():
    """Every cell topped by a large piece, no line, nothing in hand."""
    board = locked_board()

    assert not has_winner(board)
    assert generate_moves(board, "X") == []
    assert generate_moves(board, "O") == []
    assert has_moves(board, "X") is False
    assert draw(board, "X")
    assert outcome(board, "X") == "draw"


def test_outcome_in_progress_and_win():
    board = Board()
    assert outcome(board, "X") == "in_progress"

    board = Board.from_stacks({2: [p("O")], 4: [p("O")], 6: [p("O", "large")]})
    assert outcome(board, "X") == "o_wins"
    assert not draw(board, "X")


def test_place_and_undo():
    """Small X piece in the centre."""
    board = Board()
    before = board.copy()

    apply_move(board, Place(4, "small"), "X")
    assert board.top(4) == p("X", "small")
    assert board.pieces_left.remaining("X", "small") == 1
    assert not has_winner(board)

    undo_move(board, Place(4, "small"), "X")
    assert board == before


def test_relocate_carries_the_piece():
    board = Board.from_stacks({0: [p("O", "large")], 5: [p("X", "small")]})
    before = board.copy()
    piece = board.top(0)

    apply_move(board, Relocate(0, 5), "O")
    assert board.top(0) is None
    assert board.top(5) is piece
    assert board.stacks[5] == [p("X", "small"), p("O", "large")]
    assert board.pieces_left == before.pieces_left

    undo_move(board, Relocate(0, 5), "O")
    assert board == before


def test_undo_without_apply_fails_loudly():
    with pytest.raises(ValueError):
        undo_move(Board(), Place(3, "small"), "X")


def _assert_stacks_increasing(board):
    for stack in board.stacks:
        ranks = [piece.rank for piece in stack]
        assert ranks == sorted(set(ranks))


@pytest.mark.parametrize("seed", range(15))
def test_random_playout_invariants(seed):
    """
    Along random games: stacks stay strictly increasing, the generator never
    offers an illegal shape of move, and every apply/undo pair is an identity.
    """
    rng = random.Random(seed)
    board = Board()
    player = "X"

    for _ in range(40):
        _assert_stacks_increasing(board)
        moves = generate_moves(board, player)
        if not moves:
            break

        for m in moves:
            if isinstance(m, Relocate):
                assert m.source != m.dest
            else:
                assert board.pieces_left.remaining(player, m.size) > 0

            before = board.copy()
            apply_move(board, m, player)
            undo_move(board, m, player)
            assert board == before

        apply_move(board, rng.choice(moves), player)
        if has_winner(board):
            break
        player = other(player)

    _assert_stacks_increasing(board)
