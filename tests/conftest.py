from __future__ import annotations

from typing import Callable

import pytest

from dropfour.core.board import Board

# Fills all 42 cells with no four in a row; the final grid alternates pairs
# of columns (XXOOXXO / OOXXOOX) row by row.
DRAW_SEQUENCE = (
    [3, 1, 1, 1, 1, 1, 1, 3, 3, 3, 3, 3]
    + [4, 2, 2, 2, 2, 2, 2, 4, 4, 4, 4, 4]
    + [7, 5, 5, 5, 5, 5, 5, 6, 6, 6, 6, 6, 6, 7, 7, 7, 7, 7]
)


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def play() -> Callable[..., Board]:
    """Board after inserting the given columns in order, starting empty."""

    def _play(*cols: int) -> Board:
        b = Board()
        for col in cols:
            b.insert(col)
        return b

    return _play


@pytest.fixture
def drawn_board(play) -> Board:
    return play(*DRAW_SEQUENCE)
