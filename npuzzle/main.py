"""N-puzzle search.

Usage::

    npuzzle                                   # prompt for everything
    npuzzle -a a-star --scramble 20           # A* from a scrambled goal
    npuzzle -f vanilla -a bfs \\
        --start "1 2 3 4 5 6 7 0 8" --target "1 2 3 4 5 6 7 8 0"
    npuzzle -a dfs -d 5 -q --scramble 4       # summary only
"""

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.backend.engine.gamesolver import Strategy
from npuzzle.backend.models.board import Board
from npuzzle.frontend.cli.input_handler import parse_board
from npuzzle.frontend.cli.session import SessionConfig


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(frontend: Frontend, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if frontend is Frontend.rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True), show_path=False
        )
        fmt = "%(message)s"
    else:
        handler = logging.StreamHandler()
        fmt = "%(asctime)s  %(levelname)s  %(name)s  %(message)s"
    logging.basicConfig(
        level=level, format=fmt, datefmt="%H:%M:%S", handlers=[handler], force=True
    )


def _board_option(raw: Optional[str], size: int, name: str) -> Optional[Board]:
    if raw is None:
        return None
    try:
        return parse_board(raw, size)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=name) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output style.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Board width N of an N×N puzzle (2-8).",
    ),
    strategy: Optional[Strategy] = typer.Option(
        None, "-a", "--strategy",
        help="Search strategy. Omit to choose from a menu.",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "-d", "--max-depth",
        min=0,
        help="Depth bound for dfs.",
    ),
    start: Optional[str] = typer.Option(
        None, "--start",
        help="Start board, row-major, e.g. \"1 2 3 4 5 6 7 0 8\".",
    ),
    target: Optional[str] = typer.Option(
        None, "--target",
        help="Target board, row-major.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Build the start board with this many random moves from the target.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only print the final result.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Search a sliding tile puzzle for a path from start to target."""
    _configure_logging(frontend, verbose)

    config = SessionConfig(
        size=size,
        strategy=strategy,
        start=_board_option(start, size, "--start"),
        target=_board_option(target, size, "--target"),
        max_depth=max_depth,
        scramble=scramble,
        seed=seed,
        quiet=quiet,
    )

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run(config)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except EOFError as exc:
        typer.echo("Error: input ended early.", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
