"""Vanilla terminal frontend with no third-party dependencies.

Plain ``print`` output with a few ANSI colours, plus the interactive
"heuristic, initial state, goal state" loop.
"""

from __future__ import annotations

from typing import TextIO

from tilesolver.engine.heuristics import Heuristic
from tilesolver.engine.search import SearchResult, solve
from tilesolver.errors import TileSolverError
from tilesolver.frontend.cli.input_reader import TokenReader
from tilesolver.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_MENU = (
    "Enter the heuristic you want to use:\n"
    "1 - Manhattan\n"
    "2 - Misplaced Tiles\n"
    "3 - Exit"
)
_EXIT = 3


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.rows * board.cols - 1))
    cell_w = width + 2
    sep = "+" + (("-" * cell_w + "+") * board.cols)

    lines: list[str] = [sep]
    for r, row in enumerate(board.current):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {val:>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def show(result: SearchResult) -> None:
    """Print the solution path and counters for *result*."""
    if not result.solvable:
        print("No solution possible")
    else:
        for i, board in enumerate(result.path):
            label = "start" if i == 0 else f"move {i}"
            print(f"{_C}{label}{_R}")
            print(_render_board(board))
        print(f"Minimum number of moves = {result.moves}")
    print(f"Total nodes created = {result.nodes_created}")
    print()


# -- interactive loop ---------------------------------------------------------


def run(size: int, max_nodes: int | None = None, stream: TextIO | None = None) -> None:
    """Prompt for puzzles until the user picks Exit or input runs out."""
    reader = TokenReader(stream)
    while True:
        print(_MENU)
        try:
            choice = reader.next_int()
            if choice == _EXIT:
                return
            heuristic = Heuristic.from_selector(choice)

            print("Enter the Initial State:")
            initial = reader.read_grid(size)
            print("Enter the Goal State:")
            goal = reader.read_grid(size)

            result = solve(initial, goal, heuristic, max_nodes=max_nodes)
        except EOFError:
            return
        except (TileSolverError, ValueError) as exc:
            print(f"Invalid input: {exc}\n")
            continue

        show(result)
