"""Sliding tile puzzle search: BFS, bounded DFS, greedy best-first and A*."""

__version__ = "0.1.0"
