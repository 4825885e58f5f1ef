"""Outcome of one search call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from npuzzle.backend.engine.searchnode import Node


class Outcome(IntEnum):
    SUCCESS = 0
    FAILED = 1


@dataclass(frozen=True)
class Result:
    """Success flag plus the number of examined nodes.

    ``node`` is the node that matched the target and ``path`` the states
    leading to it from the start; both are empty when the search failed or
    short-circuited on ``start == target``.
    """

    outcome: Outcome = Outcome.FAILED
    steps: int = 0
    node: Node[Any] | None = None
    path: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @property
    def depth(self) -> int | None:
        """Moves from start to target, or None on failure."""
        if not self.success:
            return None
        return self.node.depth if self.node is not None else 0
