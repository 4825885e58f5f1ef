"""Board model for the N-puzzle search."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

# BKDR hash parameters
HASH_SEED = 131
HASH_MODULUS = 0x7FFFFFFF


class Direction(StrEnum):
    """Direction the *blank* slides in."""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


DIRECTIONS: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
)


@dataclass(eq=False)
class Board:
    """Represents one puzzle configuration.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank. The grid is expected to be a permutation of ``0..size*size-1``;
    that is never checked here.
    """

    size: int
    grid: list[int]
    blank_index: int = -1
    hashcode: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.blank_index < 0:
            self.blank_index = self.locate(0)
        self.hashcode = self._hash(self.grid)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(size=size, grid=list(flat))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        return cls.from_flat(len(rows), [v for row in rows for v in row])

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        return cls(size=size, grid=list(range(1, size * size)) + [0])

    def copy(self) -> Board:
        return Board(size=self.size, grid=self.grid[:], blank_index=self.blank_index)

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.hashcode == other.hashcode and self.grid == other.grid

    def __hash__(self) -> int:
        return self.hashcode

    @staticmethod
    def _hash(grid: list[int]) -> int:
        h = 0
        for tile in grid:
            h = (h * HASH_SEED + tile) % HASH_MODULUS
        return h

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> list[list[int]]:
        """Row view of the grid, for rendering."""
        n = self.size
        return [self.grid[r * n : (r + 1) * n] for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.grid[row * self.size + col]

    def is_tile_correct(self, index: int, target: Board) -> bool:
        """Check if the tile at *index* already sits where *target* has it."""
        return self.grid[index] == target.grid[index]

    def locate(self, tile: int) -> int:
        """Return the index of *tile*, or ``len(grid)`` if it is missing.

        A missing tile only happens on malformed input. The sentinel is
        fed into the heuristics as is and skews their result.
        """
        try:
            return self.grid.index(tile)
        except ValueError:
            return len(self.grid)

    def format(self) -> str:
        """Tab separated rows, one line per row."""
        return "\n".join("\t".join(str(v) for v in row) for row in self.tiles)

    # -- moves ----------------------------------------------------------------

    def _target_index(self, direction: Direction) -> int | None:
        n = self.size
        bi = self.blank_index
        if bi >= len(self.grid):
            # no blank on the board
            return None
        if direction is Direction.LEFT:
            return bi - 1 if bi % n != 0 else None
        if direction is Direction.UP:
            return bi - n if bi >= n else None
        if direction is Direction.RIGHT:
            return bi + 1 if bi % n != n - 1 else None
        if direction is Direction.DOWN:
            return bi + n if bi < n * n - n else None
        return None

    def move_blank(self, direction: Direction) -> bool:
        """Slide the blank one cell in *direction*.

        Returns False, leaving the board untouched, when the blank already
        sits on that edge.
        """
        nxt = self._target_index(direction)
        if nxt is None:
            return False
        bi = self.blank_index
        self.grid[bi], self.grid[nxt] = self.grid[nxt], self.grid[bi]
        self.blank_index = nxt
        self.hashcode = self._hash(self.grid)
        return True

    def expand(self) -> Iterator[Board]:
        """Yield one moved copy per applicable direction, in ``DIRECTIONS`` order."""
        for direction in DIRECTIONS:
            if self._target_index(direction) is None:
                continue
            child = self.copy()
            child.move_blank(direction)
            yield child

    # -- heuristics -----------------------------------------------------------

    def hamming_distance(self, other: Board) -> int:
        """Number of cells whose tile differs from *other* (blank included)."""
        return sum(1 for a, b in zip(self.grid, other.grid) if a != b)

    def manhattan_distance(self, other: Board) -> int:
        """Sum of row and column offsets of every tile to its cell in *other*.

        The blank is skipped, which keeps the estimate admissible.
        """
        n = self.size
        missing = len(other.grid)
        positions: dict[int, int] = {}
        for i, tile in enumerate(other.grid):
            positions.setdefault(tile, i)
        dist = 0
        for i, tile in enumerate(self.grid):
            if tile == 0:
                continue
            j = positions.get(tile, missing)
            dist += abs(i % n - j % n) + abs(i // n - j // n)
        return dist
