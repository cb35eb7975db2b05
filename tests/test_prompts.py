"""Tests for terminal move parsing and formatting."""

import pytest

from gobblers.types import Place, Relocate
from gobblers.ui.prompts import format_move, parse_move


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("s5", Place(4, "small")),
        ("M 1", Place(0, "medium")),
        ("large9", Place(8, "large")),
        ("  l3 ", Place(2, "large")),
        ("3>7", Relocate(2, 6)),
        ("3-7", Relocate(2, 6)),
        ("1 to 9", Relocate(0, 8)),
    ],
)
def test_parse_move(raw, expected):
    assert parse_move(raw) == expected


@pytest.mark.parametrize("raw", ["q", "QUIT", "exit"])
def test_parse_quit(raw):
    assert parse_move(raw) is None


@pytest.mark.parametrize(
    "raw, message",
    [
        ("s0", "Cell must be between 1 and 9."),
        ("l10", "Cell must be between 1 and 9."),
        ("4>4", "Pick a different destination cell."),
        ("x5", "Invalid input"),
        ("", "Invalid input"),
    ],
)
def test_parse_errors(raw, message):
    with pytest.raises(ValueError, match=message):
        parse_move(raw)


def test_format_move():
    assert format_move(Place(4, "small")) == "s5"
    assert format_move(Place(0, "large")) == "l1"
    assert format_move(Relocate(2, 6)) == "3>7"
