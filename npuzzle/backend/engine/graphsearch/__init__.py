from npuzzle.backend.engine.graphsearch.frontier import Frontier
from npuzzle.backend.engine.graphsearch.result import Outcome, Result
from npuzzle.backend.engine.graphsearch.search import (
    Evaluator,
    StepListener,
    a_star,
    best_first,
    bfs,
    dfs,
    expand,
    is_new_on_path,
    log_step,
)

__all__ = [
    "Evaluator",
    "Frontier",
    "Outcome",
    "Result",
    "StepListener",
    "a_star",
    "best_first",
    "bfs",
    "dfs",
    "expand",
    "is_new_on_path",
    "log_step",
]
