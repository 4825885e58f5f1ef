from npuzzle.backend.models.board import DIRECTIONS, Board, Direction

__all__ = ["DIRECTIONS", "Board", "Direction"]
