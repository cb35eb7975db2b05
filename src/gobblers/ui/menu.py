from __future__ import annotations

import time

from gobblers.config import Difficulty, GameConfig, Mode
from gobblers.game.controller import run_game
from gobblers.game.session import GameSession

_DIFFICULTY_CHOICES = {
    "1": Difficulty.EASY,
    "2": Difficulty.MEDIUM,
    "3": Difficulty.HARD,
    "4": Difficulty.HARDEST,
}


def _ask_difficulty() -> Difficulty:
    print("\nSelect difficulty:")
    print("1) Easy (random)")
    print("2) Medium (win / block)")
    print("3) Hard (win / block)")
    print("4) Hardest (minimax)")
    choice = input("Choice: ").strip()
    if choice not in _DIFFICULTY_CHOICES:
        print("Invalid choice. Defaulting to Easy.")
    return _DIFFICULTY_CHOICES.get(choice, Difficulty.EASY)


def _ask_starting_player() -> str:
    choice = input("Who starts? [X/O] (X): ").strip().upper()
    return "O" if choice == "O" else "X"


def run_menu(seed: int | None = None) -> None:
    print("Select mode:")
    print("1) Human vs Human")
    print("2) Human vs Bot")
    print("3) Run difficulty ladder (bot vs bot)")

    choice = input("Choice: ").strip()

    if choice == "2":
        cfg = GameConfig(
            starting_player=_ask_starting_player(),
            mode=Mode.SINGLE,
            difficulty=_ask_difficulty(),
        )
        print(f"\nStarting game: You (X) vs {cfg.difficulty.value} bot (O)")
        print("Game will start in 2 seconds...\n")
        time.sleep(2)
        run_game(GameSession(cfg, seed=seed))
        return

    if choice == "3":
        print("\nStarting difficulty ladder...\n")
        from gobblers.scripts.ladder_main import main as ladder_main
        ladder_main([])
        return

    if choice != "1":
        print("\nInvalid choice. Defaulting to Human vs Human.\n")
        time.sleep(2)

    cfg = GameConfig(starting_player=_ask_starting_player(), mode=Mode.TWO_PLAYER)
    run_game(GameSession(cfg, seed=seed))
