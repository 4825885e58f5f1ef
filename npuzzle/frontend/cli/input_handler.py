"""Line-oriented input parsing for the CLI frontends.

Boards are typed as whitespace separated integers, row-major. They may be
spread over several lines; reading continues until the board is full.
"""

from __future__ import annotations

from collections.abc import Callable

from npuzzle.backend.models.board import Board

Ask = Callable[[str], str]


def _ints(raw: str) -> list[int]:
    values: list[int] = []
    for token in raw.split():
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Not a tile number: {token!r}.") from None
    return values


def parse_board(raw: str, size: int) -> Board:
    """Parse ``"1 2 3 4 5 6 7 0 8"`` into a ``size``×``size`` board."""
    return Board.from_flat(size, _ints(raw))


def read_board(ask: Ask, size: int, prompt: str = "") -> Board:
    """Keep asking until ``size * size`` numbers have been typed."""
    values: list[int] = []
    while len(values) < size * size:
        try:
            line = ask(prompt if not values else "")
        except EOFError:
            break
        values.extend(_ints(line))
    return Board.from_flat(size, values)


def read_int(ask: Ask, prompt: str) -> int:
    raw = ask(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Not a number: {raw!r}.") from None
