"""Search node and node arena tests."""

from __future__ import annotations

from npuzzle.backend.engine.searchnode import Node, SearchTree
from npuzzle.backend.models.board import Board, Direction

CENTER = [1, 2, 3, 4, 0, 5, 6, 7, 8]


def test_new_node_defaults() -> None:
    for node in (Node(Board.from_flat(3, CENTER)), Node.from_state(Board.from_flat(3, CENTER))):
        assert node.depth == 0
        assert node.cost == 0
        assert node.parent is None
        assert node.index is None


def test_from_state_keeps_a_private_copy() -> None:
    board = Board.from_flat(3, CENTER)
    node = Node.from_state(board)
    board.move_blank(Direction.UP)
    assert node.state.grid == CENTER


def test_node_takes_ownership() -> None:
    board = Board.from_flat(3, CENTER)
    assert Node(board).state is board


def test_equality_delegates_to_state() -> None:
    a = Node(Board.from_flat(3, CENTER))
    b = Node(Board.from_flat(3, CENTER))
    b.depth = 7
    b.cost = 12
    assert a == b
    assert hash(a) == hash(b)
    assert a != Node(Board.solved(3))


def test_expand_returns_unparented_nodes() -> None:
    node = Node(Board.from_flat(3, CENTER))
    node.depth = 3
    children = node.expand()
    assert len(children) == 4
    for child in children:
        assert child.parent is None
        assert child.depth == 0
        assert child.cost == 0


# -- arena --------------------------------------------------------------------


def _chain(tree: SearchTree[Board], *directions: Direction) -> list[Node[Board]]:
    board = Board.from_flat(3, CENTER)
    nodes = [tree.add(Node(board.copy()))]
    for direction in directions:
        board.move_blank(direction)
        child = Node(board.copy())
        child.parent = nodes[-1].index
        child.depth = nodes[-1].depth + 1
        nodes.append(tree.add(child))
    return nodes


def test_add_assigns_stable_indices() -> None:
    tree: SearchTree[Board] = SearchTree()
    nodes = _chain(tree, Direction.UP, Direction.LEFT)
    assert [n.index for n in nodes] == [0, 1, 2]
    assert len(tree) == 3


def test_parent_and_ancestors() -> None:
    tree: SearchTree[Board] = SearchTree()
    root, mid, leaf = _chain(tree, Direction.UP, Direction.LEFT)
    assert tree.parent_of(root) is None
    assert tree.parent_of(leaf) is mid
    assert list(tree.ancestors(leaf)) == [mid, root]


def test_parent_of_unknown_index_is_none() -> None:
    tree: SearchTree[Board] = SearchTree()
    orphan = Node(Board.solved(3))
    orphan.parent = 5
    assert tree.parent_of(orphan) is None


def test_path_runs_from_root_to_node() -> None:
    tree: SearchTree[Board] = SearchTree()
    root, mid, leaf = _chain(tree, Direction.UP, Direction.LEFT)
    assert tree.path_to(leaf) == [root.state, mid.state, leaf.state]
    assert tree.path_to(root) == [root.state]
