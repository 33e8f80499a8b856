from __future__ import annotations

from dropfour.ai.negamax_agent import NegamaxAgent
from dropfour.game.controller import run_game
from dropfour.types import Piece
from dropfour.ui.human import HumanAgent


def _reader(*answers: str):
    it = iter(answers)
    return lambda _prompt="": next(it)


def _humans(*answers: str):
    read = _reader(*answers)
    return HumanAgent(read=read), HumanAgent(read=read)


def test_human_then_ai_then_quit():
    human = HumanAgent(read=_reader("4", "q"))
    state = run_game(human, NegamaxAgent(depth=2), show_thinking=False)

    pieces = [p for row in state.board.grid for p in row if p is not None]
    assert len(pieces) == 2
    assert state.board.grid[5][3] is Piece.FIRST
    assert state.last_status == "Game quit."
    assert state.board.current_turn is Piece.FIRST


def test_bad_input_and_full_column_are_reported(capsys):
    first, second = _humans("9", "1", "1", "1", "1", "1", "1", "1", "2", "q")
    state = run_game(first, second, show_thinking=False)

    out = capsys.readouterr().out
    assert "Out of range! Try again." in out
    assert "That slot is full! Try again!" in out

    assert all(state.board.grid[r][0] is not None for r in range(6))
    # the rejected drop did not use up FIRST's turn
    assert state.board.grid[5][1] is Piece.FIRST


def test_human_game_to_a_win(capsys):
    first, second = _humans("4", "1", "4", "1", "4", "1", "4")
    state = run_game(first, second, show_thinking=False)

    assert state.board.outcome is not None
    assert "Winner is: ■" in capsys.readouterr().out


def test_ai_status_shows_value_and_node_counter(capsys):
    human = HumanAgent(read=_reader("4", "q"))
    run_game(human, NegamaxAgent(name="Bot", depth=2), show_thinking=False)
    out = capsys.readouterr().out
    assert "COUNTER:" in out
    assert "Bot:" in out


def test_thinking_pause_is_skipped_with_zero_delay():
    human = HumanAgent(read=_reader("4", "q"))
    state = run_game(human, NegamaxAgent(depth=2), show_thinking=True, think_delay_sec=0)
    assert state.last_status == "Game quit."
