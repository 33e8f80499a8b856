from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from dropfour.core.board import Board
from dropfour.types import Column
from dropfour.ui.prompts import parse_move


@dataclass
class HumanAgent:
    """Moves typed at the terminal. `ask` returns None when the player quits."""

    name: str = "Human"
    read: Callable[[str], str] = field(default=input, repr=False)

    def ask(self, board: Board) -> Optional[Column]:
        raw = self.read(f"Player {board.current_turn} column: ")
        return parse_move(raw, board.cols)
