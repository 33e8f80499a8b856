from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from dropfour.config import CLEAR_SCREEN
from dropfour.core.board import Board
from dropfour.ui.colors import c, paint_cell, BOLD, DIM, FG_CYAN

Coord = Tuple[int, int]


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_status(board: Board) -> str:
    """Turn line, plus the outcome line once the game is over."""
    lines = [f"Turn: {board.current_turn}"]
    if board.outcome is not None:
        lines.append(str(board.outcome))
    return "\n".join(lines)


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    hl: Set[Coord] = set(highlight) if highlight else set()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(" " + " ".join(str(i + 1) for i in range(board.cols)))
    for r in range(board.rows):
        cells = [paint_cell(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        print("|" + "|".join(cells) + "|")
    print("=" * (2 * board.cols + 1))

    print(format_status(board))
    if board.outcome is None:
        print(c(f"Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
