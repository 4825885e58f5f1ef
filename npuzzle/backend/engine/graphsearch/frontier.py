"""Priority frontier with in-place cost revision.

Entries live in a binary heap; revising a node's cost marks its old entry
as removed and pushes a fresh one (lazy deletion). A side index maps every
state to all of its open nodes so the searches can look duplicates up
without scanning the heap.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Generic

from npuzzle.backend.engine.searchnode import Node
from npuzzle.backend.engine.searchnode.node import S

_REMOVED: Any = object()


class Frontier(Generic[S]):
    """Min-queue on ``node.cost``; among equal costs the newest entry wins."""

    def __init__(self) -> None:
        self._heap: list[list[Any]] = []
        self._entries: dict[int, list[Any]] = {}
        self._by_state: dict[S, dict[int, Node[S]]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, node: Node[S]) -> bool:
        return node.index in self._entries

    def _insert(self, node: Node[S]) -> None:
        entry = [node.cost, -next(self._counter), node]
        self._entries[node.index] = entry
        heapq.heappush(self._heap, entry)

    def push(self, node: Node[S]) -> None:
        """Insert *node*; it must already belong to a ``SearchTree``."""
        if node.index is None:
            raise ValueError("node has no arena index")
        self._insert(node)
        self._by_state.setdefault(node.state, {})[node.index] = node

    def update(self, node: Node[S], cost: int) -> None:
        """Give an open *node* a new cost and reorder it."""
        entry = self._entries.pop(node.index)
        entry[-1] = _REMOVED
        node.cost = cost
        self._insert(node)

    def find(self, state: S) -> Node[S] | None:
        """Open node holding *state* that would be popped first, if any."""
        nodes = self._by_state.get(state)
        if not nodes:
            return None
        return min(nodes.values(), key=lambda node: self._entries[node.index][:2])

    def pop(self) -> Node[S]:
        while self._heap:
            node = heapq.heappop(self._heap)[-1]
            if node is _REMOVED:
                continue
            del self._entries[node.index]
            nodes = self._by_state[node.state]
            del nodes[node.index]
            if not nodes:
                del self._by_state[node.state]
            return node
        raise KeyError("pop from an empty frontier")
