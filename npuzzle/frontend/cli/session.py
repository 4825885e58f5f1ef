"""The console session shared by every CLI frontend.

A session collects the start board, the target board and a strategy
(prompting for whatever the command line left out), runs the solver and
hands every examined node and the final result to the frontend for
display.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from npuzzle.backend.engine.gamegenerator import GameGenerator
from npuzzle.backend.engine.gamesolver import Solver, Strategy
from npuzzle.backend.engine.graphsearch import Result
from npuzzle.backend.engine.searchnode import Node
from npuzzle.backend.models.board import Board
from npuzzle.frontend.cli.input_handler import Ask, read_board, read_int

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Everything the command line can preset; ``None`` means ask."""

    size: int = 3
    strategy: Strategy | None = None
    start: Board | None = None
    target: Board | None = None
    max_depth: int | None = None
    scramble: int | None = None
    seed: int | None = None
    quiet: bool = False


@dataclass
class SessionIO:
    ask: Ask
    say: Callable[[str], None]
    show_step: Callable[[int, Node[Any], Board], None]
    show_result: Callable[[Result], None]


def _choose_strategy(io: SessionIO) -> Strategy | None:
    io.say("The search method implemented: ")
    for strategy in Strategy:
        io.say(f"{strategy.number}. {strategy.label}")
    number = read_int(io.ask, f"Please select the search method [1-{len(Strategy)}]: ")
    try:
        return Strategy.from_number(number)
    except ValueError:
        logger.warning("unsupported strategy number %d", number)
        return None


def run_session(config: SessionConfig, io: SessionIO) -> Result:
    target = config.target
    start = config.start

    if config.scramble is not None:
        if target is None:
            target = Board.solved(config.size)
        start = GameGenerator.generate(target, config.scramble, random.Random(config.seed))
        io.say("Start board:")
        io.say(start.format())

    if start is None:
        io.say("Please input the start board:")
        start = read_board(io.ask, config.size)
    if target is None:
        io.say("Please input the target board:")
        target = read_board(io.ask, config.size)

    strategy = config.strategy or _choose_strategy(io)
    if strategy is None:
        io.say("Error: Unsupported option!")
        result = Result()
        io.show_result(result)
        return result

    max_depth = config.max_depth
    if strategy is Strategy.DFS and max_depth is None:
        max_depth = read_int(io.ask, "Please input the max depth: ")

    def show(step: int, node: Node[Any]) -> None:
        io.show_step(step, node, target)

    result = Solver.solve(
        start, target, strategy, max_depth, None if config.quiet else show
    )
    io.show_result(result)
    return result
