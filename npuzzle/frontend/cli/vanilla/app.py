"""Vanilla terminal frontend using plain print and input.

Laid out like a classic console program: one tab separated row per line
for every examined board.
"""

from __future__ import annotations

from typing import Any

from npuzzle.backend.engine.graphsearch import Result
from npuzzle.backend.engine.searchnode import Node
from npuzzle.backend.models.board import Board
from npuzzle.frontend.cli.session import SessionConfig, SessionIO, run_session


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> str:
    return board.format() + "\n"


def _show_step(step: int, node: Node[Any], target: Board) -> None:
    print(f"step {step}")
    print(f"depth {node.depth}")
    print(_render_board(node.state))


def _show_result(result: Result) -> None:
    print(f"Total Steps: {result.steps}")
    print("Success." if result.success else "Failed.")


# -- public entry point -------------------------------------------------------


def run(config: SessionConfig) -> Result:
    """Run one search session on stdin/stdout."""
    io = SessionIO(
        ask=input,
        say=print,
        show_step=_show_step,
        show_result=_show_result,
    )
    return run_session(config, io)
