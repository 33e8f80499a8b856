from __future__ import annotations

import time
from typing import Callable

from dropfour.ai.negamax_agent import NegamaxAgent
from dropfour.config import MAX_DEPTH, MIN_DEPTH
from dropfour.game.controller import run_game
from dropfour.game.state import GameState
from dropfour.ui.human import HumanAgent
from dropfour.ui.prompts import ask_int

MODES = {
    "1": "human-ai",
    "2": "ai-ai",
    "3": "human-human",
}


def ask_depth(read: Callable[[str], str] = input) -> int:
    return ask_int(
        f"Enter the depth for minimax with α/β pruning ({MIN_DEPTH}-{MAX_DEPTH}, 10 recommended): ",
        MIN_DEPTH,
        MAX_DEPTH,
        read,
    )


def ask_mode(read: Callable[[str], str] = input) -> str:
    print("Select mode:")
    print("1) Human vs AI")
    print("2) AI vs AI")
    print("3) Human vs Human")

    choice = read("Choice: ").strip()
    if choice not in MODES:
        print("\nInvalid choice. Defaulting to Human vs AI.\n")
        return "human-ai"
    return MODES[choice]


def run_menu(mode: str, depth: int, show_thinking: bool = True) -> GameState:
    if mode == "ai-ai":
        p1 = NegamaxAgent(name=f"Negamax d{depth}", depth=depth)
        p2 = NegamaxAgent(name=f"Negamax d{depth}", depth=depth)
    elif mode == "human-human":
        p1 = HumanAgent()
        p2 = HumanAgent()
    else:
        p1 = HumanAgent()
        p2 = NegamaxAgent(name=f"Negamax d{depth}", depth=depth)

    print(f"\nStarting game: {p1.name} vs {p2.name}")
    if show_thinking:
        time.sleep(1)
    return run_game(p1, p2, show_thinking=show_thinking)
