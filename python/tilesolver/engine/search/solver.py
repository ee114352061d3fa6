"""A* search that decides solvability by racing a board against its twin.

Swapping two adjacent tiles flips the parity of a sliding puzzle, so of a
board and its twin exactly one can reach the goal.  Both start nodes go
into a single priority queue; whichever lineage pops a goal first settles
the question, and when it is the original board the same search has
already produced an optimal path.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tilesolver.engine.heuristics import Heuristic
from tilesolver.engine.scheduler import MinPriorityQueue
from tilesolver.errors import InvalidBoardError, SearchLimitError
from tilesolver.models.board import Board, Direction

logger = logging.getLogger(__name__)

UNSOLVED = -1


@dataclass(frozen=True, eq=False, slots=True)
class SearchNode:
    board: Board
    moves: int
    cost: int
    parent: SearchNode | None = None

    @property
    def priority(self) -> int:
        return self.moves + self.cost

    def __lt__(self, other: SearchNode) -> bool:
        return self.priority < other.priority

    def root(self) -> SearchNode:
        node = self
        while node.parent is not None:
            node = node.parent
        return node


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one solve."""

    solvable: bool
    moves: int
    path: tuple[Board, ...]
    nodes_created: int
    heuristic: Heuristic

    def directions(self) -> list[Direction]:
        """The path as tile moves, replayable with :meth:`Board.move`."""
        out: list[Direction] = []
        for prev, nxt in zip(self.path, self.path[1:]):
            direction = prev.direction_to(nxt)
            assert direction is not None, "consecutive path boards must be one move apart"
            out.append(direction)
        return out


class Solver:
    """Runs the twin-race A* search for *initial* on construction.

    Raises :class:`InvalidBoardError` if *initial* is ``None``, narrower
    than 2×2, or has no twin.  *max_nodes* caps the number of search nodes
    created; exceeding it raises :class:`SearchLimitError`.
    """

    def __init__(
        self,
        initial: Board | None,
        heuristic: Heuristic = Heuristic.MANHATTAN,
        *,
        max_nodes: int | None = None,
    ) -> None:
        if initial is None:
            raise InvalidBoardError("An initial board is required.")
        if initial.rows < 2 or initial.cols < 2:
            raise InvalidBoardError(
                f"A {initial.rows}×{initial.cols} board cannot be searched; "
                "both dimensions must be at least 2."
            )
        twin = initial.twin()
        if twin is None:
            raise InvalidBoardError(
                "The board has no two adjacent tiles to swap, so its "
                "solvability cannot be decided."
            )

        self.initial = initial
        self.heuristic = heuristic
        self.max_nodes = max_nodes
        self.nodes_created = 0
        self._best: SearchNode | None = None
        self._min_moves = UNSOLVED
        self._solved = False

        self._search(initial, twin)

    # -- search ---------------------------------------------------------------

    def _node(self, board: Board, moves: int, parent: SearchNode | None) -> SearchNode:
        if self.max_nodes is not None and self.nodes_created >= self.max_nodes:
            logger.warning(
                "Node budget of %d reached after %d nodes", self.max_nodes, self.nodes_created
            )
            raise SearchLimitError(self.max_nodes)
        self.nodes_created += 1
        return SearchNode(board, moves, self.heuristic.evaluate(board), parent)

    def _search(self, initial: Board, twin: Board) -> None:
        logger.debug(
            "Searching %d×%d board with %s heuristic",
            initial.rows, initial.cols, self.heuristic.value,
        )
        pq: MinPriorityQueue[SearchNode] = MinPriorityQueue()
        pq.enqueue(self._node(initial, 0, None))
        pq.enqueue(self._node(twin, 0, None))

        decided = False
        while not pq.is_empty():
            current = pq.dequeue()

            if current.board.is_goal():
                decided = True
                if current.root().board != initial:
                    logger.debug("Twin lineage reached the goal at depth %d", current.moves)
                    break
                self._solved = True
                if self._min_moves == UNSOLVED or current.moves < self._min_moves:
                    self._min_moves = current.moves
                    self._best = current
                continue

            if self._min_moves == UNSOLVED or current.priority < self._min_moves:
                previous = current.parent.board if current.parent is not None else None
                for board in current.board.neighbors():
                    if board != previous:
                        pq.enqueue(self._node(board, current.moves + 1, current))
            else:
                break

        if not decided:
            logger.warning(
                "Frontier exhausted after %d nodes without reaching either goal",
                self.nodes_created,
            )
        logger.debug(
            "Search finished: solvable=%s moves=%d nodes=%d",
            self._solved, self._min_moves, self.nodes_created,
        )

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solved

    def moves(self) -> int:
        """Minimum number of moves, or ``-1`` if the board is unsolvable."""
        return self._min_moves

    def solution(self) -> list[Board]:
        """Boards from the initial state to the goal; empty when unsolvable."""
        path: list[Board] = []
        node = self._best
        while node is not None:
            path.append(node.board)
            node = node.parent
        path.reverse()
        return path

    def result(self) -> SearchResult:
        return SearchResult(
            solvable=self._solved,
            moves=self._min_moves,
            path=tuple(self.solution()),
            nodes_created=self.nodes_created,
            heuristic=self.heuristic,
        )


# -- convenience API -----------------------------------------------------------


def solve(
    initial: Sequence[Sequence[int]],
    goal: Sequence[Sequence[int]],
    heuristic: Heuristic | int = Heuristic.MANHATTAN,
    *,
    max_nodes: int | None = None,
) -> SearchResult:
    """Solve *initial* towards *goal* and return the :class:`SearchResult`.

    *heuristic* may be a :class:`Heuristic` or its numeric selector.
    """
    if not isinstance(heuristic, Heuristic):
        heuristic = Heuristic.from_selector(heuristic)
    board = Board(current=initial, goal=goal)
    return Solver(board, heuristic, max_nodes=max_nodes).result()


def hint(board: Board, heuristic: Heuristic = Heuristic.MANHATTAN) -> Direction | None:
    """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
    if board.is_goal():
        return None
    result = Solver(board, heuristic).result()
    if not result.solvable:
        return None
    return result.directions()[0]
