from __future__ import annotations

from dropfour.ai.base import Agent
from dropfour.config import AI_THINK_DELAY_SEC
from dropfour.core.board import Board
from dropfour.core.rules import winning_line
from dropfour.game.state import GameState
from dropfour.types import Piece
from dropfour.ui.effects import ai_thinking
from dropfour.ui.human import HumanAgent
from dropfour.ui.render import render


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_first: Agent, agent_second: Agent) -> str:
    """
    Prepend a persistent header showing who plays which piece.
    """
    first_name = _agent_name(agent_first, "Player 1")
    second_name = _agent_name(agent_second, "Player 2")

    header = f"{Piece.FIRST}: {first_name} | {Piece.SECOND}: {second_name}"
    if status:
        return f"{header}\n{status}"
    return header


def _search_status(agent: Agent, fallback: str) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return fallback
    return (
        f"{_agent_name(agent, 'AI')}: {info.get('eval')}, {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"COUNTER: {info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(
    agent_first: Agent | HumanAgent,
    agent_second: Agent | HumanAgent,
    show_thinking: bool = True,
    think_delay_sec: float = AI_THINK_DELAY_SEC,
) -> GameState:
    """
    Play one game to the end (or until a human quits) and return the final state.
    """
    state = GameState(board=Board(), last_status=f"Player {Piece.FIRST} starts.")

    def show(highlight=None) -> None:
        render(
            state.board,
            _status_with_agents(state.last_status, agent_first, agent_second),
            highlight=highlight,
        )

    while True:
        board = state.board

        if board.outcome is not None:
            res = winning_line(board)
            show(res[1] if res else None)
            return state

        show()

        current = state.current
        current_agent = agent_first if current is Piece.FIRST else agent_second

        try:
            if isinstance(current_agent, HumanAgent):
                move = current_agent.ask(board)
                if move is None:
                    state.last_status = "Game quit."
                    show()
                    return state

                state.last_status = f"Player {current} chose {move}"

            else:
                move = current_agent.choose_move(state)
                state.last_status = _search_status(
                    current_agent, f"{_agent_name(current_agent, 'AI')} chose {move}"
                )
                if show_thinking:
                    show()
                    ai_thinking(_agent_name(current_agent, "AI"), think_delay_sec)

            board.insert(move)

        except ValueError as e:
            # bad input or a full column; the board is unchanged, ask again
            state.last_status = str(e)
