"""Generates start boards that are reachable from a given target."""

from __future__ import annotations

import random

from npuzzle.backend.models.board import DIRECTIONS, Board, Direction

_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class GameGenerator:
    """Creates start boards by walking the blank away from a target."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board, moves: int, rng: random.Random | None = None
    ) -> list[Direction]:
        """Scramble *board* in-place using *moves* random blank moves.

        Never undoes the previous move. Returns the directions taken.
        """
        rng = rng or random.Random()
        taken: list[Direction] = []
        for _ in range(moves):
            candidates = [
                d for d in DIRECTIONS if board.copy().move_blank(d)
            ]
            if not candidates:
                break
            if taken and len(candidates) > 1:
                back = _OPPOSITE[taken[-1]]
                if back in candidates:
                    candidates.remove(back)
            direction = rng.choice(candidates)
            board.move_blank(direction)
            taken.append(direction)
        return taken

    @staticmethod
    def generate(
        target: Board, moves: int, rng: random.Random | None = None
    ) -> Board:
        """Return a copy of *target* scrambled by *moves* blank moves."""
        board = target.copy()
        GameGenerator.scramble(board, moves, rng)
        return board
