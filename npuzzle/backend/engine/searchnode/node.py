"""Search nodes and the per-search node arena."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Protocol, TypeVar


class SearchState(Protocol):
    """What the engine needs from a state: value equality, hashing, successors."""

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...

    def copy(self) -> SearchState: ...

    def expand(self) -> Iterator[SearchState]: ...


S = TypeVar("S", bound=SearchState)


class Node(Generic[S]):
    """Wraps one state with the bookkeeping a search needs.

    ``parent`` is the arena index of the generating node, not a reference
    to it; the owning ``SearchTree`` resolves it.
    """

    __slots__ = ("state", "depth", "cost", "parent", "index")

    def __init__(self, state: S) -> None:
        self.state = state
        self.depth: int = 0
        self.cost: int = 0
        self.parent: int | None = None
        self.index: int | None = None

    @classmethod
    def from_state(cls, state: S) -> Node[S]:
        """Wrap a private copy of *state*."""
        return cls(state.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __repr__(self) -> str:
        return (
            f"Node(index={self.index}, depth={self.depth}, cost={self.cost}, "
            f"parent={self.parent})"
        )

    def expand(self) -> list[Node[S]]:
        """Wrap every successor state in a fresh, unparented node."""
        return [Node(child) for child in self.state.expand()]


class SearchTree(Generic[S]):
    """Arena owning every node one search call keeps.

    Nodes address their parent by index, so walking an ancestor chain never
    needs a back-reference between node objects.
    """

    def __init__(self) -> None:
        self._nodes: list[Node[S]] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, node: Node[S]) -> Node[S]:
        node.index = len(self._nodes)
        self._nodes.append(node)
        return node

    def parent_of(self, node: Node[S]) -> Node[S] | None:
        if node.parent is None or not 0 <= node.parent < len(self._nodes):
            return None
        return self._nodes[node.parent]

    def ancestors(self, node: Node[S]) -> Iterator[Node[S]]:
        parent = self.parent_of(node)
        while parent is not None:
            yield parent
            parent = self.parent_of(parent)

    def path_to(self, node: Node[S]) -> list[S]:
        """States from the root down to *node*."""
        path = [node.state]
        path.extend(ancestor.state for ancestor in self.ancestors(node))
        path.reverse()
        return path
