from npuzzle.backend.engine.searchnode.node import Node, SearchState, SearchTree

__all__ = ["Node", "SearchState", "SearchTree"]
