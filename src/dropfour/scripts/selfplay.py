from __future__ import annotations

import argparse
import csv
import itertools
import logging
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from dropfour.ai.negamax_agent import NegamaxAgent
from dropfour.config import COLS, RESULTS_DIR
from dropfour.game.state import GameState
from dropfour.types import Column, Piece, Winner

logger = logging.getLogger(__name__)

TRACE_COLUMNS = [
    "game", "first_depth", "second_depth",
    "ply", "piece", "depth", "column",
    "value", "nodes", "cutoffs", "time_ms",
    "outcome", "result",
]


@dataclass(frozen=True)
class MoveRecord:
    ply: int
    piece: Piece
    depth: int  # 0 for scripted opening moves
    column: Column
    value: int = 0
    nodes: int = 0
    cutoffs: int = 0
    time_ms: int = 0


@dataclass
class GameRecord:
    game: int
    first_depth: int
    second_depth: int
    outcome: str = ""  # "FIRST", "SECOND" or "DRAW"
    moves: List[MoveRecord] = field(default_factory=list)

    def result_for(self, piece: Piece) -> str:
        if self.outcome == "DRAW":
            return "draw"
        return "win" if self.outcome == piece.name else "loss"


def _outcome_label(state: GameState) -> str:
    outcome = state.board.outcome
    if isinstance(outcome, Winner):
        return outcome.piece.name
    return "DRAW"


def play_headless(
    agent_first: NegamaxAgent,
    agent_second: NegamaxAgent,
    opening: Sequence[Column] = (),
    game: int = 0,
) -> GameRecord:
    """
    Headless game loop. `opening` columns are played first, then the two
    agents alternate until the board reports an outcome.
    """
    state = GameState()
    record = GameRecord(game=game, first_depth=agent_first.depth, second_depth=agent_second.depth)
    ply = 0

    for col in opening:
        if state.board.outcome is not None:
            break
        record.moves.append(MoveRecord(ply=ply, piece=state.current, depth=0, column=col))
        state.board.insert(col)
        ply += 1

    while state.board.outcome is None:
        agent = agent_first if state.current is Piece.FIRST else agent_second
        move = agent.choose_move(state)

        info = agent.last_info
        record.moves.append(
            MoveRecord(
                ply=ply,
                piece=state.current,
                depth=agent.depth,
                column=move,
                value=int(info.get("eval", 0)),
                nodes=int(info.get("nodes", 0)),
                cutoffs=int(info.get("cutoffs", 0)),
                time_ms=int(info.get("time_ms", 0)),
            )
        )
        state.board.insert(move)
        ply += 1

    record.outcome = _outcome_label(state)
    return record


def openings(count: int, seed: int = 0) -> List[Tuple[Column, ...]]:
    """`count` distinct two-ply openings in a seeded order; the empty opening when count is 0."""
    if count <= 0:
        return [()]
    pairs = [(Column(a), Column(b)) for a in range(1, COLS + 1) for b in range(1, COLS + 1)]
    random.Random(seed).shuffle(pairs)
    return pairs[:count]


def write_trace_csv(records: Sequence[GameRecord], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(TRACE_COLUMNS)
        for rec in records:
            for m in rec.moves:
                w.writerow([
                    rec.game, rec.first_depth, rec.second_depth,
                    m.ply, m.piece.name, m.depth, int(m.column),
                    m.value, m.nodes, m.cutoffs, m.time_ms,
                    rec.outcome, rec.result_for(m.piece),
                ])
    return out_path


def run_selfplay(depths: Sequence[int], games: int, seed: int = 0) -> List[GameRecord]:
    records: List[GameRecord] = []
    game = 0
    for d_first, d_second in itertools.product(depths, repeat=2):
        for opening in openings(games, seed):
            first = NegamaxAgent(name=f"Negamax d{d_first}", depth=d_first)
            second = NegamaxAgent(name=f"Negamax d{d_second}", depth=d_second)
            rec = play_headless(first, second, opening=opening, game=game)
            logger.info(
                "game %d: d%d vs d%d opening=%s -> %s in %d plies",
                game, d_first, d_second, list(opening), rec.outcome, len(rec.moves),
            )
            records.append(rec)
            game += 1
    return records


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour.scripts.selfplay", description="Play negamax agents against each other and write a per-move CSV trace.")
    ap.add_argument("--depths", type=int, nargs="+", default=[2, 4, 6], help="Search depths to pair up")
    ap.add_argument("--games", type=int, default=3, help="Distinct two-ply openings per pairing (0 = empty board only)")
    ap.add_argument("--seed", type=int, default=0, help="Seed for opening selection")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Where selfplay_*.csv is written")
    ap.add_argument("--log-level", type=str, default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    records = run_selfplay(args.depths, args.games, args.seed)

    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = write_trace_csv(records, Path(args.results_dir) / f"selfplay_{ts}.csv")

    tally = {"FIRST": 0, "SECOND": 0, "DRAW": 0}
    for rec in records:
        tally[rec.outcome] += 1
    print(f"Games: {len(records)}  FIRST: {tally['FIRST']}  SECOND: {tally['SECOND']}  DRAW: {tally['DRAW']}")
    print(f"Wrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
