"""Sliding-tile puzzle solver: A* search with twin-based unsolvability detection."""

from tilesolver.engine.generator import BoardGenerator
from tilesolver.engine.heuristics import Heuristic
from tilesolver.engine.scheduler import MinPriorityQueue
from tilesolver.engine.search import SearchResult, Solver, hint, solve
from tilesolver.errors import (
    EmptySchedulerError,
    InvalidBoardError,
    SearchLimitError,
    TileSolverError,
)
from tilesolver.models.board import Board, Direction

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardGenerator",
    "Direction",
    "EmptySchedulerError",
    "Heuristic",
    "InvalidBoardError",
    "MinPriorityQueue",
    "SearchLimitError",
    "SearchResult",
    "Solver",
    "TileSolverError",
    "hint",
    "solve",
]
