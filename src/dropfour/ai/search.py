"""
Negamax with alpha-beta pruning.

Every node works on its own copy of the board, so branches never share
state. Candidates are tried in the board's fixed center-first order.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from dropfour.config import MAX_GAME_SCORE
from dropfour.core.board import Board
from dropfour.types import Column

logger = logging.getLogger(__name__)

# Returned at leaves, where there is no move to recommend
NO_MOVE = Column(1)


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0
    depth: int = 0
    value: int = 0
    column: Column = NO_MOVE
    time_ms: int = 0

    def reset(self) -> None:
        self.nodes = 0
        self.cutoffs = 0
        self.depth = 0
        self.value = 0
        self.column = NO_MOVE
        self.time_ms = 0


def negamax(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    color: int,
    stats: Optional[SearchStats] = None,
) -> Tuple[int, Column]:
    """
    Returns (value, best column) from the point of view of the side with
    sign `color` (+1 for FIRST, -1 for SECOND).

    The best column starts as the first candidate and is only replaced by a
    candidate whose value strictly raises alpha.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0 or board.outcome is not None:
        return board.total_score() * color, NO_MOVE

    moves = board.valid_moves()
    value = -MAX_GAME_SCORE + 1
    best_move = moves[0]

    for m in moves:
        child = board.copy()
        child.insert(m)
        child_value, _ = negamax(child, depth - 1, -beta, -alpha, -color, stats)
        value = max(value, -child_value)

        if value > alpha:
            alpha = value
            best_move = m

        if alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break

    return value, best_move


def search(board: Board, depth: int, stats: Optional[SearchStats] = None) -> Tuple[int, Column]:
    """Full-window root search for the side to move. Resets `stats` first."""
    if stats is None:
        stats = SearchStats()
    stats.reset()

    start = time.perf_counter()
    value, column = negamax(
        board,
        depth,
        -MAX_GAME_SCORE,
        MAX_GAME_SCORE,
        board.current_turn.sign,
        stats,
    )
    elapsed = time.perf_counter() - start

    stats.depth = depth
    stats.value = value
    stats.column = column
    stats.time_ms = int(elapsed * 1000)

    logger.debug(
        "negamax depth=%d value=%d column=%d nodes=%d cutoffs=%d time_ms=%d",
        depth, value, column, stats.nodes, stats.cutoffs, stats.time_ms,
    )
    return value, column
