"""Rich terminal frontend — coloured board, live clock, animated solver.

Uses the ``rich`` library for styled output. Tiles are moved with the
arrow keys / WASD or by pressing a tile's number; ``V`` runs A* and plays
the optimal path back one board at a time.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * 3 + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold yellow]{val}[/bold yellow]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw(game: GamePlay, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("1-8", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts: list = [Align.center(render_board(game.state.board))]
    if game.is_won:
        banner = Text("\n  ★ Puzzle Solved! ★", style="bold green")
        parts.append(Align.center(banner))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]8 Puzzle[/bold cyan]",
        border_style="bold green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    board = game.state.board
    if board.is_goal():
        return "[green]Already solved![/green]"
    hint = Solver.hint(board)
    if hint is None:
        return "[red]No solution found.[/red]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] moved [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay, delay: float) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    if not game.solve():
        return "[red]No solution found.[/red]"

    total = game.remaining
    while game.advance():
        step = total - game.remaining
        _draw(game, f"[bold cyan]Solving… move {step}/{total}[/bold cyan]")
        sys.stdout.flush()
        time.sleep(delay)

    return f"[bold green]Solved in {total} moves![/bold green]"


# -- game loop ----------------------------------------------------------------


def _handle(game: GamePlay, key: str, delay: float) -> str:
    if key in _DIRECTIONS:
        game.move(_DIRECTIONS[key])
    elif key.startswith("tile:"):
        tile = int(key.split(":", 1)[1])
        game.move_tile(game.state.board.tiles.index(tile))
    elif key == "shuffle":
        game.shuffle()
        return "[yellow]Shuffled![/yellow]"
    elif key == "hint":
        return _apply_hint(game)
    elif key == "solve":
        return _auto_solve(game, delay)
    return ""


def run(delay: float = 0.5, seed: int | None = None) -> None:
    """Launch the Rich frontend on a freshly shuffled board."""
    game = GamePlay(random.Random(seed))
    status = ""

    while True:
        _draw(game, status)

        # Short timeout so the clock keeps ticking.
        key = get_key_timeout(0.5)
        if key is None:
            continue
        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return

        status = _handle(game, key, delay)
        if game.is_won:
            game.state.pause()
            _draw(game, status)
            console.print(
                Align.center(Text("\n  Press R to shuffle, Q to quit.\n", style="dim"))
            )
            while True:
                key = get_key()
                if key == "quit":
                    return
                if key == "shuffle":
                    game.shuffle()
                    status = "[yellow]Shuffled![/yellow]"
                    break
