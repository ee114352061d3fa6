"""Sliding-tile puzzle solver.

Usage::

    tilesolver                                   # interactive loop
    tilesolver -f rich                           # same, with Rich output
    tilesolver solve -i "1 2 3 4 5 6 7 0 8"      # solve towards the default goal
    tilesolver solve -i "2 1 3 4 5 6 7 8 0" -H misplaced
    tilesolver -s 4 random --seed 7              # scramble a 4×4 and solve it
"""

import importlib
from enum import StrEnum
from typing import NoReturn, Optional

import typer

from tilesolver.engine.generator import BoardGenerator
from tilesolver.engine.heuristics import Heuristic
from tilesolver.engine.search import Solver
from tilesolver.errors import TileSolverError
from tilesolver.frontend.cli.input_reader import parse_grid
from tilesolver.frontend.cli.log import configure_logging
from tilesolver.models.board import Board

DEFAULT_SIZE = 3
MIN_SIZE = 2
MAX_SIZE = 5
ENV_PREFIX = "TILESOLVER_"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "tilesolver.frontend.cli.vanilla.app",
    Frontend.rich: "tilesolver.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _frontend(ctx: typer.Context):
    return importlib.import_module(_RUNNERS[ctx.obj["frontend"]])


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=2)


def _solve_and_show(ctx: typer.Context, board: Board, heuristic: Heuristic) -> None:
    try:
        result = Solver(board, heuristic, max_nodes=ctx.obj["max_nodes"]).result()
    except TileSolverError as exc:
        _fail(exc)
    _frontend(ctx).show(result)
    if not result.solvable:
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar=f"{ENV_PREFIX}FRONTEND",
        help="Output style.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        envvar=f"{ENV_PREFIX}SIZE",
        help=f"Board side length ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    max_nodes: Optional[int] = typer.Option(
        None, "--max-nodes",
        min=2,
        envvar=f"{ENV_PREFIX}MAX_NODES",
        help="Abort a search after creating this many nodes.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        case_sensitive=False,
        envvar=f"{ENV_PREFIX}LOG_LEVEL",
        help="Logging verbosity (written to stderr).",
    ),
) -> None:
    """Solve sliding-tile puzzles with A*, detecting unsolvable boards."""
    configure_logging(log_level.value, use_rich=frontend is Frontend.rich)
    ctx.obj = {"frontend": frontend, "size": size, "max_nodes": max_nodes}

    if ctx.invoked_subcommand is None:
        _frontend(ctx).run(size=size, max_nodes=max_nodes)


@app.command()
def solve(
    ctx: typer.Context,
    initial: str = typer.Option(
        ..., "-i", "--initial",
        help='Initial tiles in row-major order, e.g. "1 2 3 4 5 6 7 0 8".',
    ),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal tiles in row-major order. Defaults to 1..N with the blank last.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.MANHATTAN, "-H", "--heuristic",
        envvar=f"{ENV_PREFIX}HEURISTIC",
        help="Heuristic guiding the search.",
    ),
) -> None:
    """Solve one puzzle. Exits with 1 when it has no solution."""
    size = ctx.obj["size"]
    try:
        start = parse_grid(initial, size)
        target = parse_grid(goal, size) if goal else BoardGenerator.solved(size)
    except TileSolverError as exc:
        _fail(exc)
    _solve_and_show(ctx, Board(current=start, goal=target), heuristic)


@app.command("random")
def random_board(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible scramble."),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=1, help="Number of random slides away from the goal."
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable", help="Swap two tiles after scrambling so no solution exists."
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.MANHATTAN, "-H", "--heuristic",
        envvar=f"{ENV_PREFIX}HEURISTIC",
        help="Heuristic guiding the search.",
    ),
) -> None:
    """Scramble the solved board and solve the result."""
    board = BoardGenerator.generate(ctx.obj["size"], steps=steps, seed=seed)
    if unsolvable:
        board = BoardGenerator.unsolvable(board)
    _solve_and_show(ctx, board, heuristic)


if __name__ == "__main__":
    app()
