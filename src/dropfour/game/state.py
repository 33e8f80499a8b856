from __future__ import annotations
from dataclasses import dataclass, field

from dropfour.core.board import Board
from dropfour.types import Piece


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    last_status: str = ""

    @property
    def current(self) -> Piece:
        return self.board.current_turn
