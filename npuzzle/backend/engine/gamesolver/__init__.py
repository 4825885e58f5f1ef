from npuzzle.backend.engine.gamesolver.solver import Solver, Strategy

__all__ = ["Solver", "Strategy"]
