"""Tests for mode/difficulty/player parsing and GameConfig."""

import pytest

from gobblers.config import (
    WIN_LINES,
    Difficulty,
    GameConfig,
    Mode,
    parse_difficulty,
    parse_mode,
    parse_player,
)


def test_win_lines_scan_order():
    assert len(WIN_LINES) == 8
    assert WIN_LINES[0] == (0, 1, 2)
    assert WIN_LINES[3] == (0, 3, 6)
    assert WIN_LINES[-1] == (2, 4, 6)


@pytest.mark.parametrize(
    "raw, expected",
    [("1p", Mode.SINGLE), ("2P", Mode.TWO_PLAYER), ("single", Mode.SINGLE), (Mode.SINGLE, Mode.SINGLE)],
)
def test_parse_mode(raw, expected):
    assert parse_mode(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("easy", Difficulty.EASY),
        (" Medium ", Difficulty.MEDIUM),
        ("hard", Difficulty.HARD),
        ("super", Difficulty.HARDEST),
        ("hardest", Difficulty.HARDEST),
    ],
)
def test_parse_difficulty(raw, expected):
    assert parse_difficulty(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [("x", "X"), ("P1", "X"), ("first", "X"), ("o", "O"), ("p2", "O"), (" Second ", "O")],
)
def test_parse_player(raw, expected):
    assert parse_player(raw) == expected


@pytest.mark.parametrize(
    "fn, raw",
    [(parse_mode, "3p"), (parse_difficulty, "insane"), (parse_player, "Z")],
)
def test_parse_rejects_unknown(fn, raw):
    with pytest.raises(ValueError, match="Unknown"):
        fn(raw)


def test_config_defaults():
    cfg = GameConfig()
    assert cfg.starting_player == "X"
    assert cfg.mode is Mode.TWO_PLAYER
    assert cfg.difficulty is Difficulty.EASY


def test_config_from_params():
    cfg = GameConfig.from_params({"mode": "1p", "difficulty": "super", "player": "P2", "theme": "dark"})
    assert cfg.mode is Mode.SINGLE
    assert cfg.difficulty is Difficulty.HARDEST
    assert cfg.starting_player == "O"


def test_config_from_params_skips_blanks():
    cfg = GameConfig.from_params({"mode": "", "difficulty": None})
    assert cfg == GameConfig()


def test_config_from_params_bad_value():
    with pytest.raises(ValueError):
        GameConfig.from_params({"difficulty": "impossible"})


def test_config_from_params_first_second():
    assert GameConfig.from_params({"player": "second"}).starting_player == "O"
    assert GameConfig.from_params({"player": "first"}).starting_player == "X"
