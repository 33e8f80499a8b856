from __future__ import annotations

from dataclasses import dataclass, field

from dropfour.ai.search import SearchStats, search
from dropfour.config import DEFAULT_DEPTH, MAX_DEPTH, MIN_DEPTH
from dropfour.game.state import GameState
from dropfour.types import Column


@dataclass(slots=True)
class NegamaxAgent:
    name: str = "Negamax AI"
    depth: int = DEFAULT_DEPTH
    stats: SearchStats = field(default_factory=SearchStats)

    # Stats of the last search, for the status line and self-play traces
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            raise ValueError(f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}.")

    def choose_move(self, state: GameState) -> Column:
        board = state.board
        if board.outcome is not None:
            raise ValueError("No valid moves.")

        value, column = search(board, self.depth, self.stats)

        self.last_info = {
            "depth": self.depth,
            "nodes": self.stats.nodes,
            "cutoffs": self.stats.cutoffs,
            "eval": value,
            "move_col": int(column),
            "time_ms": max(1, self.stats.time_ms),
        }
        return column
