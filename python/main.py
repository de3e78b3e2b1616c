#!/usr/bin/env python3
"""8 Puzzle with an A* solver.

Usage::

    python main.py play                      # interactive Rich terminal
    python main.py shuffle --seed 7          # print a solvable board
    python main.py check 1 2 3 4 5 6 0 7 8   # solvability
    python main.py solve 1 2 3 4 5 6 0 7 8   # optimal path to goal
"""

import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.errors import InvalidBoardError  # noqa: E402

console = Console()


# -- helpers ------------------------------------------------------------------


def _parse_board(tiles: List[int]) -> Board:
    try:
        return Board.from_sequence(tiles)
    except InvalidBoardError as exc:
        console.print(f"[red]Invalid board:[/red] {exc}")
        raise typer.Exit(code=2) from exc


def _print_board(board: Board, title: str = "") -> None:
    from frontend.cli.rich.app import render_board

    if title:
        console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print(render_board(board))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """8 Puzzle with an A* solver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def play(
    delay: float = typer.Option(
        0.5, "-d", "--delay",
        min=0.0, envvar="EIGHT_PUZZLE_DELAY",
        help="Seconds between boards during solution playback.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible shuffles.",
    ),
) -> None:
    """Play in the Rich terminal."""
    from frontend.cli.rich.app import run

    run(delay=delay, seed=seed)


@app.command()
def shuffle(
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
) -> None:
    """Print a random solvable board."""
    board = GameGenerator.shuffle(random.Random(seed))
    _print_board(board)
    console.print(" ".join(map(str, board.tiles)))


@app.command()
def check(tiles: List[int] = typer.Argument(..., help="Nine tiles, 0 = blank.")) -> None:
    """Report whether a board can reach the goal."""
    board = _parse_board(tiles)
    if Solver.is_solvable(board):
        console.print("[green]Solvable.[/green]")
    else:
        console.print("[red]Not solvable.[/red]")
        raise typer.Exit(code=1)


@app.command()
def solve(tiles: List[int] = typer.Argument(..., help="Nine tiles, 0 = blank.")) -> None:
    """Print the optimal path from a board to the goal."""
    board = _parse_board(tiles)
    path = Solver.solve(board)
    if path is None:
        console.print("[red]No solution found.[/red]")
        raise typer.Exit(code=1)

    for i, (step, direction) in enumerate(zip(path, [None, *Solver.moves(path)])):
        _print_board(step, "Start" if direction is None else f"{i}. {direction.value}")
    console.print(f"[bold green]Solved in {len(path) - 1} moves.[/bold green]")


if __name__ == "__main__":
    app()
