# src/dropfour/types.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Optional, Union


class Piece(Enum):
    FIRST = 1
    SECOND = -1

    @property
    def sign(self) -> int:
        """+1 for FIRST, -1 for SECOND. Scores are always from FIRST's side."""
        return self.value

    @property
    def complement(self) -> "Piece":
        return Piece.SECOND if self is Piece.FIRST else Piece.FIRST

    @property
    def glyph(self) -> str:
        return "■" if self is Piece.FIRST else "●"

    def __str__(self) -> str:
        return self.glyph


Cell = Optional[Piece]
Column = NewType("Column", int)   # column number 1..7


@dataclass(frozen=True, slots=True)
class Winner:
    piece: Piece

    def __str__(self) -> str:
        return f"Winner is: {self.piece}"


@dataclass(frozen=True, slots=True)
class Draw:
    def __str__(self) -> str:
        return "The game was a draw"


Outcome = Union[Winner, Draw]
