from __future__ import annotations
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import Board
from dropfour.core.scoring import LINES
from dropfour.types import Piece

Coord = Tuple[int, int]  # (row, col)


def winning_line(board: Board) -> Optional[Tuple[Piece, List[Coord]]]:
    """First completed line in evaluation order, for highlighting."""
    g = board.grid
    for x, y, dx, dy in LINES:
        coords = [(y + i * dy, x + i * dx) for i in range(CONNECT_N)]
        p = g[coords[0][0]][coords[0][1]]
        if p is not None and all(g[r][c] is p for r, c in coords[1:]):
            return p, coords
    return None
