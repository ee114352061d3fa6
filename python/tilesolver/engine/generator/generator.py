"""Generates puzzle boards by scrambling the solved layout."""

from __future__ import annotations

import random

from tilesolver.errors import InvalidBoardError
from tilesolver.models.board import Board, Grid


class BoardGenerator:
    """Creates puzzles by walking the blank away from the goal."""

    @staticmethod
    def solved(rows: int, cols: int | None = None) -> Grid:
        """Return the goal layout: tiles in order, blank bottom-right."""
        cols = rows if cols is None else cols
        if rows < 1 or cols < 1:
            raise InvalidBoardError(f"Cannot build a {rows}×{cols} grid.")
        flat = list(range(1, rows * cols)) + [0]
        return tuple(tuple(flat[r * cols : (r + 1) * cols]) for r in range(rows))

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *steps* random blank moves.

        The walk never undoes its previous move, so scrambles stay
        reachable from (and back to) *board*.
        """
        rng = rng or random.Random()
        previous: Board | None = None
        for _ in range(steps):
            options = [b for b in board.neighbors() if b != previous]
            if not options:
                options = board.neighbors()
            previous, board = board, rng.choice(options)
        return board

    @staticmethod
    def generate(
        rows: int,
        cols: int | None = None,
        steps: int | None = None,
        seed: int | None = None,
    ) -> Board:
        """Return a random *solvable* board that is not already solved."""
        goal = BoardGenerator.solved(rows, cols)
        start = Board(current=goal, goal=goal)
        if start.rows < 2 or start.cols < 2:
            raise InvalidBoardError(
                f"Cannot scramble a {start.rows}×{start.cols} board away from its goal."
            )
        if steps is None:
            steps = start.rows * start.cols * 4
        if steps < 1:
            raise InvalidBoardError("A scramble needs at least one step.")
        rng = random.Random(seed)

        board = BoardGenerator.scramble(start, steps, rng)
        while board.is_goal():
            board = BoardGenerator.scramble(start, steps, rng)
        return board

    @staticmethod
    def unsolvable(board: Board) -> Board:
        """Return a board of opposite parity to *board* (its twin)."""
        twin = board.twin()
        if twin is None:
            raise InvalidBoardError("The board has no adjacent tiles to swap.")
        return twin
