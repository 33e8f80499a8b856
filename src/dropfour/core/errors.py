from __future__ import annotations

from dropfour.types import Column


class InsertionError(ValueError):
    """A rejected insertion. The board is left exactly as it was."""


class FilledSlotError(InsertionError):
    def __init__(self, column: Column) -> None:
        super().__init__("That slot is full! Try again!")
        self.column = column


class GameFinishedError(InsertionError):
    def __init__(self) -> None:
        super().__init__("The game is already over.")
