
# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from dropfour.config import ROWS, COLS, MAX_GAME_SCORE
from dropfour.core import scoring
from dropfour.core.errors import FilledSlotError, GameFinishedError
from dropfour.types import Cell, Column, Draw, Outcome, Piece, Winner


def _center_order(cols: int) -> Tuple[Column, ...]:
    center = cols // 2
    order = [center]
    for d in range(1, center + 1):
        order += [center - d, center + d]
    return tuple(Column(c + 1) for c in order if 0 <= c < cols)


# 4, 3, 5, 2, 6, 1, 7: center columns first so the search prunes earlier
MOVE_ORDER: Tuple[Column, ...] = _center_order(COLS)


@dataclass(slots=True)
class Board:
    """
    The 6x7 grid, whose turn it is, and the outcome once the game is over.

    Row 0 is the top, row 5 the floor. Columns are numbered 1..7 outside
    this class and 0..6 in `grid`.
    """

    grid: List[List[Cell]] = field(default_factory=list)
    current_turn: Piece = Piece.FIRST
    outcome: Optional[Outcome] = None

    rows = ROWS
    cols = COLS

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, lines: Iterable[str], current_turn: Piece = Piece.FIRST) -> "Board":
        """
        Build a board from 6 strings of 7 characters, top row first.
        'X' or '■' is FIRST, 'O' or '●' is SECOND, anything else is empty.
        """
        glyphs = {"X": Piece.FIRST, "■": Piece.FIRST, "O": Piece.SECOND, "●": Piece.SECOND}
        grid = [[glyphs.get(ch) for ch in line] for line in lines]
        if len(grid) != cls.rows or any(len(row) != cls.cols for row in grid):
            raise ValueError(f"Expected {cls.rows} rows of {cls.cols} cells.")

        for r in range(cls.rows - 1):
            for c in range(cls.cols):
                if grid[r][c] is not None and grid[r + 1][c] is None:
                    raise ValueError(f"Floating piece at row {r}, column {c + 1}.")

        b = cls(grid=grid, current_turn=current_turn)
        b.update_outcome()
        return b

    def copy(self) -> "Board":
        return Board(
            grid=[row[:] for row in self.grid],
            current_turn=self.current_turn,
            outcome=self.outcome,
        )

    def is_slot_empty(self, col: int) -> bool:
        """True when the 0-based column still has room."""
        return self.grid[0][col] is None

    def is_full(self) -> bool:
        return not any(self.is_slot_empty(c) for c in range(self.cols))

    def valid_moves(self) -> List[Column]:
        return [m for m in MOVE_ORDER if self.is_slot_empty(m - 1)]

    def insert(self, column: Column) -> int:
        """
        Drop the current player's piece into `column` (1..7).

        Returns the row the piece landed on. Raises GameFinishedError once the
        game is over and FilledSlotError when the column has no room; in both
        cases nothing changes. The turn passes to the other piece unless this
        move ended the game. A column outside 1..7 raises ValueError.
        """
        if not 1 <= column <= self.cols:
            raise ValueError("Column out of range.")

        if self.outcome is not None:
            raise GameFinishedError()

        c = int(column) - 1
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = self.current_turn
                self.update_outcome()
                if self.outcome is None:
                    self.current_turn = self.current_turn.complement
                return r

        raise FilledSlotError(column)

    def update_outcome(self) -> None:
        if self.outcome is not None:
            return

        if self.is_full():
            self.outcome = Draw()

        # A completed line beats the draw set above
        total = self.total_score()
        if total == MAX_GAME_SCORE:
            self.outcome = Winner(Piece.FIRST)
        elif total == -MAX_GAME_SCORE:
            self.outcome = Winner(Piece.SECOND)

    def score(self, x: int, y: int, dx: int, dy: int) -> int:
        return scoring.line_score(self, x, y, dx, dy)

    def total_score(self) -> int:
        return scoring.total_score(self)

    def __str__(self) -> str:
        lines = [" " + " ".join(str(i + 1) for i in range(self.cols))]
        for row in self.grid:
            lines.append("|" + "".join(f"{p if p is not None else ' '}|" for p in row))
        lines.append("=" * (2 * self.cols + 1))
        return "\n".join(lines)
