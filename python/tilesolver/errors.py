"""Exception types raised by the solver core."""

from __future__ import annotations


class TileSolverError(Exception):
    """Base class for every error raised by ``tilesolver``."""


class InvalidBoardError(TileSolverError, ValueError):
    """A board is missing, malformed, or cannot be searched."""


class EmptySchedulerError(TileSolverError, IndexError):
    """``dequeue`` was called on an empty priority queue."""


class SearchLimitError(TileSolverError, RuntimeError):
    """The search constructed more nodes than its budget allows."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Search exceeded the node budget of {limit}.")
        self.limit = limit
