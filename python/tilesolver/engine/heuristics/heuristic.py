"""Heuristic selection for the A* search."""

from __future__ import annotations

from enum import StrEnum

from tilesolver.models.board import Board


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    MISPLACED = "misplaced"

    @classmethod
    def from_selector(cls, selector: int) -> Heuristic:
        """Map the numeric menu choice (1 = Manhattan, 2 = misplaced tiles)."""
        try:
            return _SELECTORS[selector]
        except KeyError:
            raise ValueError(
                f"Unknown heuristic selector {selector!r}; expected 1 or 2."
            ) from None

    @property
    def selector(self) -> int:
        return _SELECTORS_BY_MEMBER[self]

    @property
    def label(self) -> str:
        return "Manhattan" if self is Heuristic.MANHATTAN else "Misplaced Tiles"

    def evaluate(self, board: Board) -> int:
        if self is Heuristic.MANHATTAN:
            return board.manhattan_distance()
        return board.misplaced_tiles()


_SELECTORS: dict[int, Heuristic] = {
    1: Heuristic.MANHATTAN,
    2: Heuristic.MISPLACED,
}
_SELECTORS_BY_MEMBER = {h: k for k, h in _SELECTORS.items()}
