"""Rich terminal frontend: board tables and a result panel.

Uses the ``rich`` library for styled output while sharing the same
session flow as the vanilla CLI. Tiles already in their target cell are
highlighted.
"""

from __future__ import annotations

from typing import Any

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.backend.engine.graphsearch import Result
from npuzzle.backend.engine.searchnode import Node
from npuzzle.backend.models.board import Board
from npuzzle.frontend.cli.session import SessionConfig, SessionIO, run_session

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, target: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.size + c, target):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- session screens ----------------------------------------------------------


def _show_step(step: int, node: Node[Any], target: Board) -> None:
    header = Text()
    header.append("step ", style="dim")
    header.append(str(step), style="bold yellow")
    header.append("    depth ", style="dim")
    header.append(str(node.depth), style="bold yellow")

    console.print(Group(header, _render_board(node.state, target)))


def _show_result(result: Result) -> None:
    stats = Text()
    stats.append("Total Steps: ", style="dim")
    stats.append(str(result.steps), style="bold yellow")
    if result.success and result.node is not None:
        stats.append("    Depth: ", style="dim")
        stats.append(str(result.depth), style="bold yellow")

    if result.success:
        verdict = Text("Success.", style="bold green")
        border = "bold green"
    else:
        verdict = Text("Failed.", style="bold red")
        border = "red"

    panel = Panel(
        Group(Align.center(stats), Align.center(verdict)),
        title="[bold]N - P U Z Z L E[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(panel)


# -- public entry point -------------------------------------------------------


def run(config: SessionConfig) -> Result:
    """Run one search session with Rich output."""
    io = SessionIO(
        ask=console.input,
        say=console.print,
        show_step=_show_step,
        show_result=_show_result,
    )
    return run_session(config, io)
