from __future__ import annotations
from typing import Protocol

from dropfour.game.state import GameState
from dropfour.types import Column


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Column:
        ...
