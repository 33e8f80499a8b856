from __future__ import annotations

from dropfour.config import USE_COLOR
from dropfour.types import Cell, Piece

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; marks the winning line

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"

# FIRST plays yellow, SECOND plays red
PIECE_COLORS = {Piece.FIRST: FG_YELLOW, Piece.SECOND: FG_RED}


def c(s: str, code: str) -> str:
    if not USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def paint_cell(cell: Cell, highlight: bool = False) -> str:
    if cell is None:
        return " "
    s = c(cell.glyph, PIECE_COLORS[cell])
    if highlight and USE_COLOR:
        s = f"{REVERSE}{s}{RESET}"
    return s
