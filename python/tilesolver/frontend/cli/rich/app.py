"""Rich terminal frontend built from tables and panels.

Uses the ``rich`` library for styled output while sharing the input
reader and solver with the vanilla CLI.
"""

from __future__ import annotations

from typing import TextIO

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesolver.engine.heuristics import Heuristic
from tilesolver.engine.search import SearchResult, solve
from tilesolver.errors import TileSolverError
from tilesolver.frontend.cli.input_reader import TokenReader
from tilesolver.models.board import Board

console = Console()

_EXIT = 3


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.rows * board.cols - 1))
    table = Table(
        title=title,
        title_style="dim",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.current):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"[dim]{val:>{width}}[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(result: SearchResult) -> Text:
    stats = Text()
    if result.solvable:
        stats.append("  Minimum number of moves: ", style="dim")
        stats.append(str(result.moves), style="bold yellow")
    stats.append("    Total nodes created: ", style="dim")
    stats.append(str(result.nodes_created), style="bold yellow")
    stats.append(f"    ({result.heuristic.label})", style="dim")
    return stats


def show(result: SearchResult) -> None:
    """Print the solution path and counters for *result*."""
    if not result.solvable:
        body = Group(
            Align.center(Text("No solution possible", style="bold red")),
            Align.center(_stats(result)),
        )
        console.print(Panel(body, title="[bold red]Unsolvable[/bold red]", border_style="red"))
        return

    boards = [
        _render_board(board, "start" if i == 0 else f"move {i}")
        for i, board in enumerate(result.path)
    ]
    body = Group(Columns(boards, padding=(0, 2)), Text(""), _stats(result))
    console.print(
        Panel(
            body,
            title=f"[bold green]Solved in {result.moves} moves[/bold green]",
            border_style="bold green",
            padding=(1, 2),
        )
    )


# -- interactive loop ---------------------------------------------------------


def _draw_menu() -> None:
    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Manhattan    ")
    opts.append("2", style="bold yellow")
    opts.append("  Misplaced Tiles    ")
    opts.append("3", style="dim bold")
    opts.append("  Exit", style="dim")
    console.print(
        Panel(
            Align.center(opts),
            title="[bold]Choose a heuristic[/bold]",
            border_style="bright_blue",
        )
    )


def run(size: int, max_nodes: int | None = None, stream: TextIO | None = None) -> None:
    """Prompt for puzzles until the user picks Exit or input runs out."""
    reader = TokenReader(stream)
    while True:
        _draw_menu()
        try:
            choice = reader.next_int()
            if choice == _EXIT:
                return
            heuristic = Heuristic.from_selector(choice)

            console.print(f"[cyan]Enter the Initial State[/cyan] [dim]({size}×{size})[/dim]")
            initial = reader.read_grid(size)
            console.print(f"[cyan]Enter the Goal State[/cyan] [dim]({size}×{size})[/dim]")
            goal = reader.read_grid(size)

            with console.status("Searching…"):
                result = solve(initial, goal, heuristic, max_nodes=max_nodes)
        except EOFError:
            return
        except (TileSolverError, ValueError) as exc:
            console.print(f"[red]Invalid input:[/red] {exc}")
            continue

        show(result)
