"""Board model tests: equality, moves, successors and heuristics."""

from __future__ import annotations

import pytest

from npuzzle.backend.models.board import (
    DIRECTIONS,
    HASH_MODULUS,
    Board,
    Direction,
)

GOAL = [1, 2, 3, 4, 5, 6, 7, 8, 0]
CENTER = [1, 2, 3, 4, 0, 5, 6, 7, 8]

_INVERSE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


# -- helpers ------------------------------------------------------------------


def _with_blank_at(size: int, index: int) -> Board:
    grid = list(range(1, size * size))
    grid.insert(index, 0)
    return Board.from_flat(size, grid)


def _kind(size: int, index: int) -> str:
    r, c = divmod(index, size)
    on_row_edge = r in (0, size - 1)
    on_col_edge = c in (0, size - 1)
    if on_row_edge and on_col_edge:
        return "corner"
    if on_row_edge or on_col_edge:
        return "edge"
    return "interior"


_EXPECTED_CHILDREN = {"corner": 2, "edge": 3, "interior": 4}

_CELLS = [
    (size, index)
    for size in (2, 3, 4, 5)
    for index in range(size * size)
]


# -- construction -------------------------------------------------------------


def test_from_flat_rejects_wrong_tile_count() -> None:
    with pytest.raises(ValueError, match="Expected 9 tiles"):
        Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0])


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, CENTER)
    assert board.blank_index == 4
    assert board.tiles == [[1, 2, 3], [4, 0, 5], [6, 7, 8]]
    assert board.get_tile(1, 2) == 5


def test_from_rows_matches_from_flat() -> None:
    rows = [[1, 2, 3], [4, 0, 5], [6, 7, 8]]
    assert Board.from_rows(rows) == Board.from_flat(3, CENTER)


def test_solved_board() -> None:
    assert Board.solved(3).grid == GOAL
    assert Board.solved(2).grid == [1, 2, 3, 0]


def test_format_is_tab_separated_rows() -> None:
    assert Board.from_flat(3, GOAL).format() == "1\t2\t3\n4\t5\t6\n7\t8\t0"


# -- equality and hashing -----------------------------------------------------


def test_equality_is_reflexive_symmetric_transitive() -> None:
    a = Board.from_flat(3, CENTER)
    b = a.copy()
    c = Board.from_flat(3, [1, 2, 3, 4, 5, 0, 6, 7, 8])
    assert c.move_blank(Direction.LEFT)

    assert a == a
    assert a == b and b == a
    assert b == c and a == c
    assert hash(a) == hash(b) == hash(c)


def test_different_grids_are_not_equal() -> None:
    assert Board.from_flat(3, CENTER) != Board.from_flat(3, GOAL)


def test_hash_stays_in_range() -> None:
    board = Board.from_flat(4, list(range(15, -1, -1)))
    assert 0 <= board.hashcode < HASH_MODULUS


def test_copy_is_independent() -> None:
    board = Board.from_flat(3, CENTER)
    clone = board.copy()
    clone.move_blank(Direction.UP)
    assert board.grid == CENTER
    assert clone != board


def test_boards_work_as_dict_keys() -> None:
    seen = {Board.from_flat(3, CENTER): "center"}
    assert seen[Board.from_flat(3, CENTER)] == "center"


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    "grid, blocked",
    [
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], (Direction.LEFT, Direction.UP)),
        ([1, 2, 0, 3, 4, 5, 6, 7, 8], (Direction.RIGHT, Direction.UP)),
        ([1, 2, 3, 4, 5, 6, 0, 7, 8], (Direction.LEFT, Direction.DOWN)),
        (GOAL, (Direction.RIGHT, Direction.DOWN)),
    ],
    ids=["top-left", "top-right", "bottom-left", "bottom-right"],
)
def test_move_towards_edge_is_rejected(grid: list[int], blocked: tuple[Direction, ...]) -> None:
    board = Board.from_flat(3, grid)
    before = (board.grid[:], board.blank_index, board.hashcode)
    for direction in blocked:
        assert not board.move_blank(direction)
        assert (board.grid, board.blank_index, board.hashcode) == before


def test_move_swaps_blank_with_neighbour() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.move_blank(Direction.RIGHT)
    assert board.grid == GOAL
    assert board.blank_index == 8
    assert board == Board.from_flat(3, GOAL)


@pytest.mark.parametrize("direction", DIRECTIONS, ids=lambda d: d.value)
def test_move_then_inverse_restores_board(direction: Direction) -> None:
    board = Board.from_flat(3, CENTER)
    original = (board.grid[:], board.blank_index, board.hashcode)
    assert board.move_blank(direction)
    assert board.hashcode != original[2] or board.grid != original[0]
    assert board.move_blank(_INVERSE[direction])
    assert (board.grid, board.blank_index, board.hashcode) == original


def test_board_without_blank_never_moves() -> None:
    board = Board.from_flat(2, [1, 2, 3, 3])
    assert board.blank_index == 4
    assert not any(board.move_blank(d) for d in DIRECTIONS)
    assert list(board.expand()) == []


# -- successors ---------------------------------------------------------------


@pytest.mark.parametrize(
    "size, index", _CELLS, ids=[f"{s}x{s}-{i}" for s, i in _CELLS]
)
def test_expand_child_count(size: int, index: int) -> None:
    board = _with_blank_at(size, index)
    children = list(board.expand())
    assert len(children) == _EXPECTED_CHILDREN[_kind(size, index)]


def test_expand_follows_direction_order() -> None:
    board = Board.from_flat(3, CENTER)
    children = [child.grid for child in board.expand()]
    assert children == [
        [1, 2, 3, 0, 4, 5, 6, 7, 8],  # left
        [1, 0, 3, 4, 2, 5, 6, 7, 8],  # up
        [1, 2, 3, 4, 5, 0, 6, 7, 8],  # right
        [1, 2, 3, 4, 7, 5, 6, 0, 8],  # down
    ]


def test_expand_is_lazy_and_leaves_parent_alone() -> None:
    board = Board.from_flat(3, CENTER)
    children = board.expand()
    assert iter(children) is children
    next(children)
    assert board.grid == CENTER


# -- heuristics ---------------------------------------------------------------


@pytest.mark.parametrize(
    "grid", [GOAL, CENTER, [8, 7, 6, 5, 4, 3, 2, 1, 0]], ids=["goal", "center", "reversed"]
)
def test_distances_to_self_are_zero(grid: list[int]) -> None:
    board = Board.from_flat(3, grid)
    assert board.hamming_distance(board) == 0
    assert board.manhattan_distance(board) == 0


def test_distances_for_one_move() -> None:
    start = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    goal = Board.from_flat(3, GOAL)
    assert start.hamming_distance(goal) == 2
    assert goal.manhattan_distance(start) == 1


def test_manhattan_distance_sums_tile_offsets() -> None:
    board = Board.from_flat(3, [8, 7, 6, 5, 4, 3, 2, 1, 0])
    goal = Board.from_flat(3, GOAL)
    # tile: (index here, index in goal)
    offsets = {8: (0, 7), 7: (1, 6), 6: (2, 5), 5: (3, 4), 4: (4, 3),
               3: (5, 2), 2: (6, 1), 1: (7, 0)}
    expected = sum(
        abs(i % 3 - j % 3) + abs(i // 3 - j // 3) for i, j in offsets.values()
    )
    assert board.manhattan_distance(goal) == expected
    assert goal.manhattan_distance(board) == expected


def test_locate_returns_length_for_missing_tile() -> None:
    board = Board.from_flat(3, [1, 1, 2, 3, 4, 5, 6, 7, 0])
    assert board.locate(0) == 8
    assert board.locate(8) == 9


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    goal = Board.from_flat(3, GOAL)
    assert board.is_tile_correct(0, goal)
    assert not board.is_tile_correct(7, goal)
