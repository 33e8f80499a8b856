from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from dropfour.config import COLS, CONNECT_N, MAX_GAME_SCORE, ROWS
from dropfour.types import Cell, Piece, Winner

if TYPE_CHECKING:
    from dropfour.core.board import Board

Line = Tuple[int, int, int, int]  # (x, y, dx, dy); x is the column, y the row


def _all_lines() -> Tuple[Line, ...]:
    lines: List[Line] = []

    # Horizontal
    for y in range(ROWS):
        for x in range(COLS - 3):
            lines.append((x, y, 1, 0))

    # Vertical
    for y in range(ROWS - 3):
        for x in range(COLS):
            lines.append((x, y, 0, 1))

    # Diagonal down-right
    for y in range(ROWS - 3):
        for x in range(COLS - 3):
            lines.append((x, y, 1, 1))

    # Diagonal up-right
    for y in range(3, ROWS):
        for x in range(COLS - 3):
            lines.append((x, y, 1, -1))

    return tuple(lines)


# 24 horizontal + 21 vertical + 12 + 12 diagonal, in evaluation order
LINES: Tuple[Line, ...] = _all_lines()


def _winner_score(board: "Board") -> int | None:
    if isinstance(board.outcome, Winner):
        return MAX_GAME_SCORE * board.outcome.piece.sign
    return None


def _count_line(grid: List[List[Cell]], x: int, y: int, dx: int, dy: int) -> int:
    first = 0
    second = 0
    for _ in range(CONNECT_N):
        p = grid[y][x]
        if p is Piece.FIRST:
            first += 1
        elif p is Piece.SECOND:
            second += 1
        x += dx
        y += dy

    if first == CONNECT_N:
        return MAX_GAME_SCORE
    if second == CONNECT_N:
        return -MAX_GAME_SCORE
    return first - second


def line_score(board: "Board", x: int, y: int, dx: int, dy: int) -> int:
    """
    Score of the 4-cell line starting at column x, row y and stepping (dx, dy).

    Once the board has a winner every line reports that winner's sentinel,
    whatever cells were asked for. A line that starts or ends off the grid
    raises ValueError.
    """
    end_x = x + (CONNECT_N - 1) * dx
    end_y = y + (CONNECT_N - 1) * dy
    if not (0 <= x < COLS and 0 <= end_x < COLS and 0 <= y < ROWS and 0 <= end_y < ROWS):
        raise ValueError("Line runs off the board.")

    won = _winner_score(board)
    if won is not None:
        return won
    return _count_line(board.grid, x, y, dx, dy)


def total_score(board: "Board") -> int:
    """
    Static evaluation from FIRST's point of view.

    Returns +/-MAX_GAME_SCORE as soon as any line is complete, otherwise the
    sum of (first - second) over every line on the board.
    """
    won = _winner_score(board)
    if won is not None:
        return won

    grid = board.grid
    total = 0
    for x, y, dx, dy in LINES:
        s = _count_line(grid, x, y, dx, dy)
        if s == MAX_GAME_SCORE or s == -MAX_GAME_SCORE:
            return s
        total += s
    return total
