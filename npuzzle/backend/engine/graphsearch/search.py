"""Graph search over any state type that can expand itself.

Every search wraps the start state in a root node, pops nodes from its
frontier one at a time, counts each popped node as a step and stops as
soon as a node equal to the target turns up. Children are filtered
against their own ancestor chain only, so one state can still be reached
again along a different path.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from npuzzle.backend.engine.graphsearch.frontier import Frontier
from npuzzle.backend.engine.graphsearch.result import Outcome, Result
from npuzzle.backend.engine.searchnode import Node, SearchTree
from npuzzle.backend.engine.searchnode.node import S

logger = logging.getLogger(__name__)

StepListener = Callable[[int, Node[Any]], None]
Evaluator = Callable[[Node[S]], int]


def log_step(step: int, node: Node[Any]) -> None:
    logger.debug("step %d depth %d\n%s", step, node.depth, node.state)


# -- shared helpers -----------------------------------------------------------


def is_new_on_path(tree: SearchTree[S], child: Node[S]) -> bool:
    """True unless *child* repeats a state on its own way back to the root."""
    return all(child != ancestor for ancestor in tree.ancestors(child))


def expand(tree: SearchTree[S], node: Node[S]) -> list[Node[S]]:
    """Children of *node*, linked to it, minus those that close a loop."""
    children: list[Node[S]] = []
    for child in node.expand():
        child.parent = node.index
        child.depth = node.depth + 1
        if is_new_on_path(tree, child):
            children.append(child)
    return children


def _finish(
    name: str,
    tree: SearchTree[S],
    steps: int,
    node: Node[S] | None = None,
) -> Result:
    if node is None:
        logger.info("%s: failed after %d steps (%d nodes)", name, steps, len(tree))
        return Result(Outcome.FAILED, steps)
    logger.info(
        "%s: reached target at depth %d after %d steps (%d nodes)",
        name, node.depth, steps, len(tree),
    )
    return Result(Outcome.SUCCESS, steps, node, tree.path_to(node))


def _start(name: str, start: S) -> tuple[SearchTree[S], Node[S]]:
    logger.info("%s: starting", name)
    tree: SearchTree[S] = SearchTree()
    return tree, tree.add(Node.from_state(start))


# -- uninformed ---------------------------------------------------------------


def bfs(start: S, target: S, on_step: StepListener | None = None) -> Result:
    """Breadth-first search.

    Children are checked against the target as soon as they are generated,
    under the step of the node that produced them.
    """
    on_step = on_step or log_step
    if start == target:
        return Result(Outcome.SUCCESS, 0)

    tree, root = _start("bfs", start)
    open_nodes: deque[Node[S]] = deque([root])
    steps = 0

    while open_nodes:
        node = open_nodes.popleft()
        steps += 1
        on_step(steps, node)
        if node.state == target:
            return _finish("bfs", tree, steps, node)

        for child in expand(tree, node):
            tree.add(child)
            on_step(steps, child)
            if child.state == target:
                return _finish("bfs", tree, steps, child)
            open_nodes.append(child)

    return _finish("bfs", tree, steps)


def dfs(
    start: S,
    target: S,
    max_depth: int,
    on_step: StepListener | None = None,
) -> Result:
    """Depth-first search that never expands a node at *max_depth*.

    Children landing exactly on the bound are checked in place and dropped.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    on_step = on_step or log_step
    if start == target:
        return Result(Outcome.SUCCESS, 0)

    tree, root = _start("dfs", start)
    open_nodes: list[Node[S]] = [root]
    steps = 0

    while open_nodes:
        node = open_nodes.pop()
        steps += 1
        on_step(steps, node)
        if node.state == target:
            return _finish("dfs", tree, steps, node)

        if node.depth >= max_depth:
            continue
        children = expand(tree, node)
        for child in children:
            tree.add(child)
        # reversed so the first generated child is popped first
        for child in reversed(children):
            if child.depth != max_depth:
                open_nodes.append(child)
                continue
            on_step(steps, child)
            if child.state == target:
                return _finish("dfs", tree, steps, child)

    return _finish("dfs", tree, steps)


# -- informed -----------------------------------------------------------------


def _priority_search(
    name: str,
    start: S,
    target: S,
    priority: Evaluator[S],
    improves: Callable[[Node[S], Node[S]], bool],
    on_step: StepListener | None,
) -> Result:
    """Shared loop of best-first and A*.

    *priority* gives a fresh child its recorded cost. *improves(child, old)*
    decides whether the child is a better way to reach a state that is
    already open or closed; if so the old node is re-linked and re-costed
    (and reopened when it was closed) instead of adding the child. Only the
    revised node itself is touched; children it already has keep their old
    depth and cost until they are generated again.
    """
    on_step = on_step or log_step
    if start == target:
        return Result(Outcome.SUCCESS, 0)

    tree, root = _start(name, start)
    open_nodes: Frontier[S] = Frontier()
    open_nodes.push(root)
    closed: dict[S, Node[S]] = {}
    steps = 0

    while open_nodes:
        node = open_nodes.pop()
        closed[node.state] = node
        steps += 1
        on_step(steps, node)
        if node.state == target:
            return _finish(name, tree, steps, node)

        for child in expand(tree, node):
            child.cost = priority(child)

            old = open_nodes.find(child.state)
            if old is not None and improves(child, old):
                old.parent = child.parent
                old.depth = child.depth
                open_nodes.update(old, child.cost)
                continue

            old = closed.get(child.state)
            if old is not None and improves(child, old):
                del closed[child.state]
                old.parent = child.parent
                old.depth = child.depth
                old.cost = child.cost
                open_nodes.push(old)
                continue

            tree.add(child)
            open_nodes.push(child)

    return _finish(name, tree, steps)


def best_first(
    start: S,
    target: S,
    evaluator: Evaluator[S],
    on_step: StepListener | None = None,
) -> Result:
    """Greedy best-first search ordered by ``evaluator(node)``.

    No optimality guarantee; the evaluator need not be admissible.
    """
    return _priority_search(
        "best-first",
        start,
        target,
        priority=evaluator,
        improves=lambda child, old: child.cost < old.cost,
        on_step=on_step,
    )


def a_star(
    start: S,
    target: S,
    g: Evaluator[S],
    h: Evaluator[S],
    on_step: StepListener | None = None,
) -> Result:
    """A* search ordered by ``g + h``.

    Duplicates are compared on ``g`` alone, which keeps the result optimal
    for an admissible *h*.
    """
    return _priority_search(
        "a-star",
        start,
        target,
        priority=lambda node: g(node) + h(node),
        improves=lambda child, old: g(child) < g(old),
        on_step=on_step,
    )
