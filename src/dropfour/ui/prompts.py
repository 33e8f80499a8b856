from __future__ import annotations
from typing import Callable, Optional

from dropfour.config import COLS
from dropfour.types import Column


def parse_int(raw: str, lower: int, upper: int) -> int:
    s = raw.strip()
    if not s.isdigit():
        raise ValueError("Invalid input! Try again.")
    n = int(s)
    if not lower <= n <= upper:
        raise ValueError("Out of range! Try again.")
    return n


def parse_move(raw: str, cols: int = COLS) -> Optional[Column]:
    """Column number 1..cols, or None when the player wants to quit."""
    if raw.strip().lower() in {"q", "quit", "exit"}:
        return None
    return Column(parse_int(raw, 1, cols))


def ask_int(message: str, lower: int, upper: int, read: Callable[[str], str] = input) -> int:
    """Keep asking until the answer is a whole number in [lower, upper]."""
    while True:
        try:
            return parse_int(read(message), lower, upper)
        except ValueError as e:
            print(e)
