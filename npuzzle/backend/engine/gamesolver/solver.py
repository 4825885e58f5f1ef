"""N-puzzle solver: the graph searches bound to ``Board``."""

from __future__ import annotations

from enum import StrEnum

from npuzzle.backend.engine.graphsearch import (
    Result,
    StepListener,
    a_star,
    best_first,
    bfs,
    dfs,
)
from npuzzle.backend.engine.searchnode import Node
from npuzzle.backend.models.board import DIRECTIONS, Board, Direction


class Strategy(StrEnum):
    BFS = "bfs"
    DFS = "dfs"
    BEST_FIRST = "best-first"
    A_STAR = "a-star"

    @property
    def number(self) -> int:
        """Position in the console menu (1-based)."""
        return list(Strategy).index(self) + 1

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_number(cls, number: int) -> Strategy:
        members = list(cls)
        if not 1 <= number <= len(members):
            raise ValueError(f"Unsupported option: {number}")
        return members[number - 1]


_LABELS = {
    Strategy.BFS: "Breadth First Search",
    Strategy.DFS: "Depth First Search",
    Strategy.BEST_FIRST: "Best First Search",
    Strategy.A_STAR: "A* Search",
}


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def bfs(start: Board, target: Board, on_step: StepListener | None = None) -> Result:
        return bfs(start, target, on_step)

    @staticmethod
    def dfs(
        start: Board,
        target: Board,
        max_depth: int,
        on_step: StepListener | None = None,
    ) -> Result:
        return dfs(start, target, max_depth, on_step)

    @staticmethod
    def best_first(
        start: Board, target: Board, on_step: StepListener | None = None
    ) -> Result:
        """Greedy search on depth plus misplaced cells."""

        def evaluate(node: Node[Board]) -> int:
            return node.depth + target.hamming_distance(node.state)

        return best_first(start, target, evaluate, on_step)

    @staticmethod
    def a_star(start: Board, target: Board, on_step: StepListener | None = None) -> Result:
        """Optimal search on depth plus Manhattan distance."""

        def g(node: Node[Board]) -> int:
            return node.depth

        def h(node: Node[Board]) -> int:
            return target.manhattan_distance(node.state)

        return a_star(start, target, g, h, on_step)

    @staticmethod
    def solve(
        start: Board,
        target: Board,
        strategy: Strategy,
        max_depth: int | None = None,
        on_step: StepListener | None = None,
    ) -> Result:
        """Run *strategy* from *start* to *target*."""
        if start.size != target.size:
            raise ValueError(
                f"Start is {start.size}×{start.size} but target is "
                f"{target.size}×{target.size}."
            )
        if strategy is Strategy.BFS:
            return Solver.bfs(start, target, on_step)
        if strategy is Strategy.DFS:
            if max_depth is None:
                raise ValueError("Depth first search needs a max depth.")
            return Solver.dfs(start, target, max_depth, on_step)
        if strategy is Strategy.BEST_FIRST:
            return Solver.best_first(start, target, on_step)
        return Solver.a_star(start, target, on_step)

    @staticmethod
    def moves(path: list[Board]) -> list[Direction]:
        """Translate consecutive boards into the directions the blank took."""
        moves: list[Direction] = []
        for before, after in zip(path, path[1:]):
            for direction in DIRECTIONS:
                probe = before.copy()
                if probe.move_blank(direction) and probe == after:
                    moves.append(direction)
                    break
            else:
                raise ValueError("Consecutive boards are not one move apart.")
        return moves
