from __future__ import annotations

import logging

import pytest

from tilesolver.models.board import Board

GOAL_3x3 = ((1, 2, 3), (4, 5, 6), (7, 8, 0))


@pytest.fixture(autouse=True)
def _reset_tilesolver_logger():
    """Undo handlers installed by CLI runs so caplog sees every record."""
    yield
    logger = logging.getLogger("tilesolver")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def board3(flat: str, goal: tuple[tuple[int, ...], ...] = GOAL_3x3) -> Board:
    """Build a 3×3 board from a string such as ``"1 2 3 4 5 6 7 0 8"``."""
    values = [int(v) for v in flat.split()]
    return Board(
        current=tuple(tuple(values[r * 3 : (r + 1) * 3]) for r in range(3)),
        goal=goal,
    )
