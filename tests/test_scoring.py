from __future__ import annotations

import random

import pytest

from dropfour.config import MAX_GAME_SCORE
from dropfour.core import scoring
from dropfour.core.board import Board
from dropfour.core.rules import winning_line
from dropfour.types import Piece, Winner


def test_there_are_69_lines():
    kinds = [(dx, dy) for _, _, dx, dy in scoring.LINES]
    assert len(scoring.LINES) == 69
    assert kinds.count((1, 0)) == 24
    assert kinds.count((0, 1)) == 21
    assert kinds.count((1, 1)) == 12
    assert kinds.count((1, -1)) == 12


def test_empty_board_scores_zero(board):
    assert board.total_score() == 0
    assert all(board.score(x, y, dx, dy) == 0 for x, y, dx, dy in scoring.LINES)


@pytest.mark.parametrize(
    "col, expected",
    [
        (4, 7),  # 4 horizontal + 1 vertical + 2 diagonal
        (3, 5),
        (5, 5),
        (1, 3),
        (7, 3),
    ],
)
def test_single_first_piece_counts_every_line_through_it(play, col, expected):
    assert play(col).total_score() == expected


def test_scores_are_from_first_point_of_view(play):
    # SECOND stacked on the center outweighs FIRST's single piece
    assert play(4, 4).total_score() == -3


def test_line_score_counts_each_piece(play):
    b = play(1, 1, 2)
    # bottom row from column 1: two FIRST pieces
    assert b.score(0, 5, 1, 0) == 2
    # row above: one SECOND piece
    assert b.score(0, 4, 1, 0) == -1


@pytest.mark.parametrize(
    "line",
    [
        (0, 5, -1, 0),   # wraps left from column 1
        (4, 5, 1, 0),    # runs past column 7
        (0, 3, 0, 1),    # runs below the floor
        (0, 2, 0, -1),   # ends above the top row
        (6, 0, 1, 1),
        (-1, 5, 1, 0),
        (0, 6, 1, 0),
    ],
)
def test_line_off_the_board_raises_value_error(play, line):
    b = play(7)
    with pytest.raises(ValueError, match="Line runs off the board."):
        b.score(*line)


def test_line_off_the_board_raises_even_after_a_win(play):
    b = play(4, 1, 4, 1, 4, 1, 4)
    assert b.score(6, 5, -1, 0) == MAX_GAME_SCORE
    with pytest.raises(ValueError):
        b.score(0, 5, -1, 0)


def test_lines_touching_every_edge_are_accepted(play):
    b = play(7, 1)
    assert b.score(3, 5, 1, 0) == 1    # columns 4-7 on the floor
    assert b.score(0, 5, 1, 0) == -1   # columns 1-4 on the floor
    assert b.score(6, 2, 0, 1) == 1    # column 7, rows 2-5
    assert b.score(0, 5, 1, -1) == -1  # up-right diagonal from the floor corner


def test_complete_line_returns_sentinel():
    b = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "OOO....",
        "XXXX...",
    ])
    assert b.outcome == Winner(Piece.FIRST)
    assert scoring._count_line(b.grid, 0, 5, 1, 0) == MAX_GAME_SCORE
    assert b.total_score() == MAX_GAME_SCORE


def test_second_line_returns_negative_sentinel(play):
    b = play(1, 2, 1, 2, 1, 2, 7, 2)
    assert b.total_score() == -MAX_GAME_SCORE


def test_winner_overrides_every_line(play):
    b = play(4, 1, 4, 1, 4, 1, 4)
    assert b.outcome == Winner(Piece.FIRST)
    # the empty top-right corner still reports the winner
    assert b.score(3, 0, 1, 0) == MAX_GAME_SCORE
    assert all(b.score(x, y, dx, dy) == MAX_GAME_SCORE for x, y, dx, dy in scoring.LINES)


def test_draw_does_not_override_lines(drawn_board):
    total = drawn_board.total_score()
    assert abs(total) <= 69 * 4
    assert total == sum(drawn_board.score(x, y, dx, dy) for x, y, dx, dy in scoring.LINES)


@pytest.mark.parametrize("seed", range(20))
def test_random_positions_stay_within_heuristic_range(seed):
    rng = random.Random(seed)
    b = Board()
    while b.outcome is None:
        b.insert(rng.choice(b.valid_moves()))
        total = b.total_score()
        if isinstance(b.outcome, Winner):
            assert total == MAX_GAME_SCORE * b.outcome.piece.sign
            assert winning_line(b)[0] is b.outcome.piece
        else:
            assert abs(total) <= 69 * 4
            assert winning_line(b) is None


def test_winning_line_coordinates(play):
    b = play(1, 1, 2, 2, 3, 3, 4)
    piece, coords = winning_line(b)
    assert piece is Piece.FIRST
    assert coords == [(5, 0), (5, 1), (5, 2), (5, 3)]


def test_winning_line_none_without_winner(play):
    assert winning_line(play(4, 4, 3)) is None
